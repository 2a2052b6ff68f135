"""
Tests for outcome aggregation and report formatting.
"""

import pytest

from maumau.io.summaries import (
    build_batch_rows,
    build_player_rows,
    format_report,
    summarize_batches,
)


def outcome(winner, *stats):
    return {
        "winner": winner,
        "players": [{"played": p, "drawn": d, "penalty": k, "turns": t} for p, d, k, t in stats],
    }


class TestPlayerRows:
    def test_sums_per_seat(self):
        outs = [
            outcome(0, (5, 2, 0, 7), (3, 4, 2, 7)),
            outcome(1, (2, 6, 2, 8), (6, 1, 0, 8)),
            outcome(1, (1, 1, 0, 3), (4, 0, 0, 3)),
        ]
        rows = build_player_rows(outs, ["random", "first"])
        assert rows[0]["ai"] == "random"
        assert rows[0]["games"] == 3
        assert rows[0]["wins"] == 1
        assert rows[1]["wins"] == 2
        assert rows[0]["played"] == 8
        assert rows[1]["penalty"] == 2
        assert rows[1]["win_rate"] == pytest.approx(2 / 3)

    def test_faulted_games_skipped(self):
        outs = [outcome(0, (5, 0, 0, 5), (0, 5, 0, 5)), {"winner": None, "fault": "DeckExhaustedError"}]
        rows = build_player_rows(outs, ["random", "draw"])
        assert rows[0]["games"] == 1
        assert rows[1]["games"] == 1

    def test_no_games(self):
        rows = build_player_rows([], ["random", "draw"])
        assert [r["games"] for r in rows] == [0, 0]
        assert rows[0]["win_rate"] is None


class TestBatches:
    def test_batch_rows_track_main_player(self):
        batches = [
            {"games": 10, "wins": [4, 6], "faults": 0},
            {"games": 9, "wins": [7, 2], "faults": 1},
        ]
        rows = build_batch_rows(batches)
        assert rows == [
            {"batch": 0, "games": 10, "main_wins": 4, "faults": 0},
            {"batch": 1, "games": 9, "main_wins": 7, "faults": 1},
        ]

    def test_mean_and_population_std(self):
        rows = [{"batch": i, "games": 10, "main_wins": w, "faults": 0} for i, w in enumerate([2, 4, 4, 4, 5, 5, 7, 9])]
        mean, std = summarize_batches(rows)
        assert mean == pytest.approx(5.0)
        assert std == pytest.approx(2.0)

    def test_empty(self):
        assert summarize_batches([]) == (0.0, 0.0)


class TestReport:
    def test_format(self):
        result = {"main_wins_mean": 51.5, "main_wins_std": 4.25, "winner_counts": {0: 103, 1: 97}, "faults": 0}
        assert format_report(result, ["randomAI", "onlyFirstAI"]).splitlines() == [
            "51.5+-4.25",
            "player 0 (randomAI): 103",
            "player 1 (onlyFirstAI): 97",
        ]

    def test_faults_reported(self):
        result = {"main_wins_mean": 0.0, "main_wins_std": 0.0, "winner_counts": {0: 0, 1: 0}, "faults": 4}
        assert format_report(result, ["a", "b"]).splitlines()[-1] == "faulted games: 4"
