"""
Shared builders for the test suite.
"""

from maumau.model.card import Card, Suit

SUIT_MAP = {'s': Suit.SPADES, 'h': Suit.HEARTS, 'd': Suit.DIAMONDS, 'c': Suit.CLUBS}
RANK_MAP = {'A': 1, 'J': 11, 'Q': 12, 'K': 13}


def c(code: str) -> Card:
    """Build a Card from a code like '7h', 'Js', '10d', 'As'."""
    rank, suit = code[:-1], code[-1]
    return Card(RANK_MAP.get(rank) or int(rank), SUIT_MAP[suit])


def cards(*codes: str):
    return [c(x) for x in codes]
