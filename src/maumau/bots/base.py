# src/maumau/bots/base.py
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Optional, Sequence, Tuple

from maumau.model.card import Card, Suit

# (hand index, declared suit); None means "no playable card, draw instead"
Move = Optional[Tuple[int, Suit]]
NO_MOVE: Move = None


class Strategy(ABC):
    """
    A stateless decision policy. One instance may be shared by every seat
    that uses it, so implementations must not keep per-game state.
    """

    name: str = "strategy"

    @abstractmethod
    def choose(self, hand: Sequence[Card], top: Card, asked: Suit, deck) -> Move:
        """
        Pick a card from ``hand`` to put on ``top``.

        ``asked`` is the suit demanded by the last jack (Suit.NONE otherwise).
        ``deck`` is the live draw pile, for policies that count remaining cards;
        it must not be mutated. The declared suit only matters for jacks and
        must then be a real suit.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
