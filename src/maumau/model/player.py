from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from maumau.constants import JACK
from maumau.errors import IllegalMoveError
from maumau.model.card import Card, Suit


@dataclass
class PlayerState:
    id: int
    strategy: object            # shared, stateless policy (see maumau.bots.base.Strategy)
    hand: List[Card] = field(default_factory=list)

    # Telemetry (for summaries)
    played: int = 0
    drawn: int = 0
    penalty: int = 0
    turns: int = 0

    @property
    def strategy_name(self) -> str:
        return getattr(self.strategy, "name", type(self.strategy).__name__)

    def add_card(self, c: Card) -> None:
        self.hand.append(c)

    def play(self, top: Card, asked: Suit, deck) -> Optional[Tuple[Card, Suit]]:
        """
        Ask the strategy for a move and take the chosen card out of the hand.
        The declared suit is dropped for anything but a jack.
        """
        move = self.strategy.choose(self.hand, top, asked, deck)
        if move is None:
            return None
        i, declared = move
        if not 0 <= i < len(self.hand):
            raise IllegalMoveError(f"hand index {i} out of range for {len(self.hand)} cards",
                                   top=top, asked=asked)
        c = self.hand.pop(i)
        self.played += 1
        if c.rank != JACK:
            return c, Suit.NONE
        return c, Suit.NONE if declared is None else declared

    def is_out(self) -> bool:
        return not self.hand

    def __str__(self) -> str:
        return "[" + " ".join(str(c) for c in self.hand) + "]"
