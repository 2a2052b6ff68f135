# src/maumau/engine/setup.py
from __future__ import annotations
import random
from typing import Any, List, Optional

from maumau.bots.reference import make_strategy
from maumau.config import Config
from maumau.model.deck import Deck
from maumau.model.game import GameState as Game
from maumau.model.player import PlayerState as Player
from maumau.utils.logging import EventLog


def setup(cfg: Config, rng: Optional[Any] = None, deck: Optional[Deck] = None) -> Game:
    """
    Fresh game: shuffled shoe, hands dealt one card at a time round the table,
    one card flipped as the opening top card.

    ``deck`` replaces the shuffled shoe (it is used as given, unshuffled) so tests
    can stack the cards.
    """
    cfg.validate()
    rng = rng if rng is not None else random.SystemRandom()

    if deck is None:
        deck = Deck.build(cfg.decks, rng)
        deck.shuffle()

    # Players (strategies are stateless; one instance per distinct name)
    strategies = {}
    players: List[Player] = []
    for pid, name in enumerate(cfg.ais):
        if name not in strategies:
            strategies[name] = make_strategy(name, rng)
        players.append(Player(id=pid, strategy=strategies[name]))

    g = Game(cfg=cfg, rng=rng, deck=deck, players=players,
             log=EventLog(enabled=cfg.debug, echo=cfg.debug))

    # First player
    if cfg.random_start:
        g.start_player = rng.randrange(len(players))
        g.log.trace("random_start")
    g.current_player = g.start_player
    g.direction = 1

    # Deal opening hands
    for _ in range(cfg.starting_cards):
        for p in g.players:
            p.add_card(g.draw_card())

    g.top = g.draw_card()

    g.emit({"a": "game_start", "starter": g.start_player, "top": str(g.top),
            "ais": [p.strategy_name for p in g.players]})
    for p in g.players:
        g.emit({"a": "deal", "p": p.id, "hand": [str(c) for c in p.hand]})
    return g
