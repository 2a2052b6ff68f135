# src/maumau/model/deck.py
from __future__ import annotations
import random
from typing import Any, List, Optional

from maumau.constants import RANKS
from maumau.errors import DeckExhaustedError
from maumau.model.card import REAL_SUITS, Card


class Deck:
    """
    Face-down draw pile, consumed from the front.

    The deck never seeds its own randomness: pass any object with ``randrange``
    (a ``random.Random`` in tests); by default it draws from OS entropy.
    """

    def __init__(self, cards: Optional[List[Card]] = None, rng: Any = None) -> None:
        self._cards: List[Card] = list(cards) if cards else []
        self._front = 0         # cards before this index have been drawn
        self.rng = rng if rng is not None else random.SystemRandom()

    @classmethod
    def build(cls, decks: int = 1, rng: Any = None) -> "Deck":
        """Ranks 1..13 x the four suits, each card repeated ``decks`` times, unshuffled."""
        cards = [Card(rank, suit)
                 for rank in RANKS
                 for suit in REAL_SUITS
                 for _ in range(decks)]
        return cls(cards, rng)

    @property
    def cards(self) -> List[Card]:
        """Remaining cards, front first (a copy)."""
        return self._cards[self._front:]

    def __len__(self) -> int:
        return len(self._cards) - self._front

    def shuffle(self) -> None:
        # drop drawn cards, then Fisher-Yates in place over what is left
        if self._front:
            del self._cards[:self._front]
            self._front = 0
        cs = self._cards
        for i in range(len(cs) - 1, 0, -1):
            j = self.rng.randrange(i + 1)
            cs[i], cs[j] = cs[j], cs[i]

    def draw(self) -> Optional[Card]:
        """Front card, or None when the deck is empty."""
        if self._front >= len(self._cards):
            return None
        c = self._cards[self._front]
        self._front += 1
        return c

    def recycle(self, discard: List[Card]) -> None:
        """Turn the discard pile into the new deck and empty the pile."""
        if not discard:
            raise DeckExhaustedError(
                "deck is empty and there is nothing to recycle; "
                "too few cards for the configured players and hand size"
            )
        self._cards = list(discard)
        self._front = 0
        discard.clear()
        self.shuffle()
