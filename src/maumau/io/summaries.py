# src/maumau/io/summaries.py
from __future__ import annotations
import os
from typing import Any, Dict, List, Sequence, Tuple
from collections import defaultdict
import pandas as pd

PLAYER_COLS = [
    "player_id", "ai", "games", "wins", "win_rate",
    "played", "drawn", "penalty", "turns",
]
BATCH_COLS = ["batch", "games", "main_wins", "faults"]


def build_player_rows(outs: List[Dict[str, Any]], ais: Sequence[str]) -> List[Dict[str, Any]]:
    """One row per seat, summed over every finished game in ``outs``."""
    P = defaultdict(lambda: {"games": 0, "wins": 0, "played": 0, "drawn": 0, "penalty": 0, "turns": 0})

    for o in outs:
        if o.get("fault"):
            continue
        winner = o.get("winner")
        for pid, pp in enumerate(o.get("players", [])):
            m = P[pid]
            m["games"] += 1
            m["wins"] += 1 if winner == pid else 0
            for k in ("played", "drawn", "penalty", "turns"):
                m[k] += int(pp.get(k, 0) or 0)

    rows: List[Dict[str, Any]] = []
    for pid, name in enumerate(ais):
        m = P[pid]
        games = m["games"]
        rows.append({
            "player_id": pid,
            "ai": name,
            **m,
            "win_rate": (m["wins"] / games) if games else None,
        })
    return rows


def build_batch_rows(batches: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [{
        "batch": i,
        "games": b["games"],
        "main_wins": b["wins"][0] if b["wins"] else 0,
        "faults": b["faults"],
    } for i, b in enumerate(batches)]


def summarize_batches(rows: List[Dict[str, Any]]) -> Tuple[float, float]:
    """Mean and population standard deviation of seat-0 wins per batch."""
    if not rows:
        return 0.0, 0.0
    s = pd.DataFrame(rows, columns=BATCH_COLS)["main_wins"].astype(float)
    return float(s.mean()), float(s.std(ddof=0))


def format_report(result: Dict[str, Any], ais: Sequence[str]) -> str:
    lines = [f"{result['main_wins_mean']}+-{result['main_wins_std']}"]
    for pid, name in enumerate(ais):
        lines.append(f"player {pid} ({name}): {result['winner_counts'].get(pid, 0)}")
    if result.get("faults"):
        lines.append(f"faulted games: {result['faults']}")
    return "\n".join(lines)


def write_summaries(cfg, player_rows: List[Dict[str, Any]],
                    batch_rows: List[Dict[str, Any]]) -> Tuple[str, str]:
    out_dir = cfg.summaries_dir or "summaries"
    os.makedirs(out_dir, exist_ok=True)
    tag = f"{'-'.join(cfg.ais)}_{cfg.num_tests}x{cfg.num_games}"
    players_path = os.path.join(out_dir, f"summary_players_{tag}.csv")
    batches_path = os.path.join(out_dir, f"summary_batches_{tag}.csv")

    dfp = pd.DataFrame(player_rows, columns=PLAYER_COLS) if player_rows else pd.DataFrame(columns=PLAYER_COLS)
    dfb = pd.DataFrame(batch_rows, columns=BATCH_COLS) if batch_rows else pd.DataFrame(columns=BATCH_COLS)

    dfp.to_csv(players_path, index=False)
    dfb.to_csv(batches_path, index=False)
    return players_path, batches_path
