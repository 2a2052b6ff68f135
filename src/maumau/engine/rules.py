# src/maumau/engine/rules.py
"""
Play legality. ``is_valid_index`` is the only place the matching rule lives;
strategies use it to pick a card and the engine uses ``check_play`` to vet it.
"""
from __future__ import annotations
from typing import List, Sequence

from maumau.constants import JACK
from maumau.errors import IllegalMoveError
from maumau.model.card import REAL_SUITS, Card, Suit


def matches(c: Card, top: Card, asked: Suit) -> bool:
    if c.rank == JACK:
        return True
    if asked != Suit.NONE:
        return c.suit == asked
    return c.suit == top.suit or c.rank == top.rank


def is_valid_index(hand: Sequence[Card], i: int, top: Card, asked: Suit) -> bool:
    return 0 <= i < len(hand) and matches(hand[i], top, asked)


def valid_indexes(hand: Sequence[Card], top: Card, asked: Suit) -> List[int]:
    return [i for i in range(len(hand)) if is_valid_index(hand, i, top, asked)]


def check_play(played: Card, declared: Suit, top: Card, asked: Suit) -> None:
    """Raise IllegalMoveError unless ``played``/``declared`` is a legal answer to ``top``/``asked``."""
    if played.rank == JACK:
        if declared not in REAL_SUITS:
            raise IllegalMoveError("jack played without declaring a suit", played, declared, top, asked)
        return
    if declared != Suit.NONE:
        raise IllegalMoveError("suit declared on a card that is not a jack", played, declared, top, asked)
    if asked != Suit.NONE:
        if played.suit != asked:
            raise IllegalMoveError("card does not follow the asked suit", played, declared, top, asked)
        return
    if played.suit != top.suit and played.rank != top.rank:
        raise IllegalMoveError("card matches neither rank nor suit of the top card", played, declared, top, asked)
