# src/maumau/bots/reference.py
from __future__ import annotations
import random
from enum import Enum
from typing import Any, Dict, Optional, Sequence

from maumau.bots.base import NO_MOVE, Move, Strategy
from maumau.constants import JACK
from maumau.engine.rules import valid_indexes
from maumau.errors import ConfigError
from maumau.model.card import REAL_SUITS, Card, Suit


class RandomAI(Strategy):
    """Uniformly random legal card; declares a random suit with every play."""

    name = "random"

    def __init__(self, rng: Optional[Any] = None) -> None:
        self.rng = rng if rng is not None else random.SystemRandom()

    def choose(self, hand: Sequence[Card], top: Card, asked: Suit, deck) -> Move:
        idx = valid_indexes(hand, top, asked)
        if not idx:
            return NO_MOVE
        return self.rng.choice(idx), self.rng.choice(REAL_SUITS)


class GreedyFirstAI(Strategy):
    """Only ever looks at the first card in hand."""

    name = "first"

    def choose(self, hand: Sequence[Card], top: Card, asked: Suit, deck) -> Move:
        if not hand:
            return NO_MOVE
        c = hand[0]
        if c.rank == JACK:
            return 0, Suit.SPADES
        if asked != Suit.NONE:
            return (0, Suit.NONE) if c.suit == asked else NO_MOVE
        if c.rank == top.rank or c.suit == top.suit:
            return 0, Suit.NONE
        return NO_MOVE


class AlwaysDrawAI(Strategy):
    """Never plays; draws every turn."""

    name = "draw"

    def choose(self, hand: Sequence[Card], top: Card, asked: Suit, deck) -> Move:
        return NO_MOVE


# ----------------------------
# Closed set of strategies selectable from configuration
# ----------------------------

class StrategyKind(Enum):
    RANDOM = "random"
    FIRST = "first"
    DRAW = "draw"


_ALIASES: Dict[str, StrategyKind] = {
    "random": StrategyKind.RANDOM,
    "randomai": StrategyKind.RANDOM,
    "first": StrategyKind.FIRST,
    "greedy": StrategyKind.FIRST,
    "greedyfirst": StrategyKind.FIRST,
    "greedyfirstai": StrategyKind.FIRST,
    "onlyfirstai": StrategyKind.FIRST,
    "draw": StrategyKind.DRAW,
    "alwaysdraw": StrategyKind.DRAW,
    "alwaysdrawai": StrategyKind.DRAW,
    "onlybuyai": StrategyKind.DRAW,
}


def resolve_kind(name: str) -> StrategyKind:
    key = (name or "").strip().replace("_", "").replace("-", "").lower()
    try:
        return _ALIASES[key]
    except KeyError:
        known = ", ".join(k.value for k in StrategyKind)
        raise ConfigError(f"unknown strategy {name!r} (known: {known})") from None


def make_strategy(name: str, rng: Optional[Any] = None) -> Strategy:
    kind = resolve_kind(name)
    if kind is StrategyKind.RANDOM:
        return RandomAI(rng)
    if kind is StrategyKind.FIRST:
        return GreedyFirstAI()
    return AlwaysDrawAI()
