# src/maumau/errors.py
from typing import Any


class MauMauError(Exception):
    """Base class for every fault the engine or harness can raise."""


class ConfigError(MauMauError, ValueError):
    pass


class IllegalMoveError(MauMauError):
    """A strategy returned a play that breaks the legality rule."""

    def __init__(self, reason: str, card: Any = None, declared: Any = None,
                 top: Any = None, asked: Any = None) -> None:
        self.reason = reason
        self.card = card
        self.declared = declared
        self.top = top
        self.asked = asked
        super().__init__(f"{reason}: card={card} declared={declared} top={top} asked={asked}")


class DeckExhaustedError(MauMauError):
    """A draw was needed but both the deck and the discard pile are empty."""


class ConservationError(MauMauError):
    pass


class StalledGameError(MauMauError):
    pass
