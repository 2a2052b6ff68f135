# src/maumau/model/card.py
from dataclasses import dataclass
from enum import IntEnum


class Suit(IntEnum):
    # NONE means "no suit demanded"; never carried by a real card
    NONE = 0
    SPADES = 1
    HEARTS = 2
    DIAMONDS = 3
    CLUBS = 4


REAL_SUITS = (Suit.SPADES, Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS)


@dataclass(frozen=True)
class Card:
    rank: int
    suit: Suit

    def __post_init__(self) -> None:
        if not 1 <= self.rank <= 13:
            raise ValueError(f"rank must be 1..13, got {self.rank}")
        if self.suit not in REAL_SUITS:
            raise ValueError(f"card suit must be a real suit, got {self.suit!r}")

    def __str__(self) -> str:
        return f"{self.rank}/{int(self.suit)}"

    def __repr__(self) -> str:
        return str(self)
