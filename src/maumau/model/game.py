# src/maumau/model/game.py
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from maumau.config import Config
from maumau.errors import ConservationError, DeckExhaustedError
from maumau.model.card import Card, Suit
from maumau.model.deck import Deck
from maumau.model.player import PlayerState
from maumau.utils.logging import EventLog


@dataclass
class GameState:
    cfg: Config
    rng: Any

    # Piles
    deck: Deck = field(default_factory=Deck)
    discard: List[Card] = field(default_factory=list)
    top: Optional[Card] = None
    asked: Suit = Suit.NONE

    # Players & turn
    players: List[PlayerState] = field(default_factory=list)
    current_player: int = 0
    direction: int = 1
    start_player: int = 0
    turn: int = 0
    recycles: int = 0

    # Logging
    log: EventLog = field(default_factory=EventLog)

    def emit(self, rec: Dict[str, Any]) -> None:
        self.log.emit(rec)

    @property
    def player(self) -> PlayerState:
        return self.players[self.current_player]

    # ----------------------------
    # Turn order
    # ----------------------------

    def advance(self) -> None:
        """Move to the next seat in the current direction."""
        n = len(self.players)
        self.current_player = (self.current_player + self.direction + n) % n

    def reverse(self) -> None:
        self.direction *= -1

    # ----------------------------
    # Cards
    # ----------------------------

    def draw_card(self) -> Card:
        """Front card of the deck, recycling the discard pile once the deck runs dry."""
        c = self.deck.draw()
        if c is not None:
            return c
        n = len(self.discard)
        self.deck.recycle(self.discard)
        self.recycles += 1
        self.emit({"a": "recycle", "t": self.turn, "n": n})
        c = self.deck.draw()
        if c is None:
            raise DeckExhaustedError("recycled deck came back empty")
        return c

    def give_card(self, pid: int) -> Card:
        c = self.draw_card()
        self.players[pid].add_card(c)
        return c

    def card_count(self) -> int:
        on_table = 1 if self.top is not None else 0
        return len(self.deck) + len(self.discard) + sum(len(p.hand) for p in self.players) + on_table

    def check_conservation(self) -> None:
        count = self.card_count()
        if count != self.cfg.total_cards:
            raise ConservationError(f"turn {self.turn}: {count} cards in play, expected {self.cfg.total_cards}")

    # ----------------------------
    # Debug rendering
    # ----------------------------

    def __str__(self) -> str:
        hands = " ".join(str(p) for p in self.players)
        return (f"-> {len(self.deck)} {len(self.discard)} {self.current_player} "
                f"{self.top} {int(self.asked)} {self.direction} {hands}")
