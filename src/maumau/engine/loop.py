# src/maumau/engine/loop.py
from __future__ import annotations
import random
from typing import Any, Dict, List, Optional

from maumau.config import Config
from maumau.engine.setup import setup
from maumau.engine.turns import play_turn
from maumau.errors import MauMauError, StalledGameError
from maumau.io.summaries import (
    build_batch_rows,
    build_player_rows,
    summarize_batches,
    write_summaries,
)
from maumau.model.deck import Deck


def play_one(cfg: Config, rng: Optional[Any] = None, deck: Optional[Deck] = None) -> Dict[str, Any]:
    """Play a single game to the end and return its outcome record."""
    g = setup(cfg, rng, deck)
    if cfg.check_conservation:
        g.check_conservation()

    winner = None
    while winner is None:
        if cfg.turn_cap and g.turn >= cfg.turn_cap:
            raise StalledGameError(f"no winner after {g.turn} turns")
        winner = play_turn(g)
        if cfg.check_conservation:
            g.check_conservation()

    return {
        "winner": winner,
        "starter": g.start_player,
        "turns": g.turn,
        "recycles": g.recycles,
        "players": [{
            "strategy": p.strategy_name,
            "played": p.played,
            "drawn": p.drawn,
            "penalty": p.penalty,
            "turns": p.turns,
        } for p in g.players],
        "events": g.log.records,
    }


def run_batch(cfg: Config, rng: Optional[Any] = None, keep_outcomes: bool = True) -> Dict[str, Any]:
    """
    ``cfg.num_games`` independent games. A fault aborts the batch unless
    ``cfg.abort_on_fault`` is off, in which case the game is recorded as faulted
    and left out of the win counts. Per-game outcome records are only kept
    with ``keep_outcomes``.
    """
    rng = rng if rng is not None else random.SystemRandom()
    wins = [0] * cfg.players
    faults = 0
    outs: List[Dict[str, Any]] = []

    for _ in range(cfg.num_games):
        try:
            o = play_one(cfg, rng)
        except MauMauError as e:
            if cfg.abort_on_fault:
                raise
            faults += 1
            if keep_outcomes:
                outs.append({"winner": None, "fault": type(e).__name__, "message": str(e)})
            continue
        wins[o["winner"]] += 1
        if keep_outcomes:
            outs.append(o)

    return {"games": cfg.num_games - faults, "wins": wins, "faults": faults, "outcomes": outs}


def run_many(cfg: Config, rng: Optional[Any] = None) -> Dict[str, Any]:
    cfg.validate()
    rng = rng if rng is not None else random.SystemRandom()

    batches = []
    outs: List[Dict[str, Any]] = []
    for i in range(cfg.num_tests):
        b = run_batch(cfg, rng, keep_outcomes=bool(cfg.summaries_dir))
        outs.extend(b.pop("outcomes"))
        batches.append(b)
        if cfg.progress_every and (i + 1) % cfg.progress_every == 0:
            print(f"[progress] finished {i+1}/{cfg.num_tests} batches")

    wc: Dict[int, int] = {pid: 0 for pid in range(cfg.players)}
    for b in batches:
        for pid, w in enumerate(b["wins"]):
            wc[pid] += w

    batch_rows = build_batch_rows(batches)
    mean, std = summarize_batches(batch_rows)

    logs: List[str] = []
    if cfg.summaries_dir:
        player_rows = build_player_rows(outs, cfg.ais)
        logs = list(write_summaries(cfg, player_rows, batch_rows))
        print(f"[summaries] wrote {logs[0]} and {logs[1]}")

    return {
        "batches": len(batches),
        "games": sum(b["games"] for b in batches),
        "winner_counts": wc,
        "main_wins_mean": mean,
        "main_wins_std": std,
        "faults": sum(b["faults"] for b in batches),
        "logs": logs,
    }
