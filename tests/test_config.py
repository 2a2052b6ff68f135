"""
Tests for the configuration object and command-line parsing.
"""

import dataclasses

import pytest

from maumau.config import Config, build_config_from_cli
from maumau.errors import ConfigError


class TestConfig:
    def test_defaults(self):
        cfg = Config()
        assert cfg.starting_cards == 5
        assert cfg.players == 2
        assert cfg.num_games == 100
        assert cfg.num_tests == 100
        assert cfg.random_start is True
        assert cfg.decks == 1
        assert cfg.total_cards == 52
        assert cfg.ace_rule == "skip"
        assert cfg.queen_two_players == "skip"
        assert cfg.validate() is cfg

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            Config().decks = 2

    def test_total_cards_scales_with_decks(self):
        assert Config(decks=3).total_cards == 156

    @pytest.mark.parametrize("kwargs,msg", [
        ({"ais": ("random",)}, "at least 2 players"),
        ({"ais": ("random", "psychicAI")}, "unknown strategy"),
        ({"decks": 0}, "decks"),
        ({"starting_cards": 0}, "starting_cards"),
        ({"ais": ("random",) * 11}, "shoe holds 52"),
        ({"ace_rule": "double"}, "ace_rule"),
        ({"queen_two_players": "reverse"}, "queen_two_players"),
        ({"num_tests": 0}, "num_games and num_tests"),
        ({"turn_cap": -1}, "turn_cap"),
    ])
    def test_validate_rejects(self, kwargs, msg):
        with pytest.raises(ConfigError, match=msg):
            Config(**kwargs).validate()

    def test_deal_that_fills_the_shoe(self):
        # 2 x 25 dealt + 1 turned up leaves one card in the deck
        Config(starting_cards=25).validate()
        with pytest.raises(ConfigError):
            Config(starting_cards=26).validate()


class TestCli:
    def test_defaults(self):
        cfg, args = build_config_from_cli([])
        assert cfg.ais == ("randomAI", "randomAI")
        assert cfg.random_start is True
        assert cfg.abort_on_fault is True
        assert cfg.summaries_dir is None

    def test_flags(self):
        cfg, _ = build_config_from_cli([
            "--ais", "randomAI, onlyFirstAI,onlyBuyAI",
            "--starting_cards", "7",
            "--num_games", "10",
            "--num_tests", "3",
            "--no-random_start",
            "--decks", "2",
            "--debug",
            "--ace_rule", "none",
            "--queen_two_players", "noop",
            "--turn_cap", "500",
            "--check_conservation",
            "--keep_going",
        ])
        assert cfg.ais == ("randomAI", "onlyFirstAI", "onlyBuyAI")
        assert cfg.players == 3
        assert cfg.starting_cards == 7
        assert (cfg.num_games, cfg.num_tests) == (10, 3)
        assert cfg.random_start is False
        assert cfg.decks == 2
        assert cfg.debug is True
        assert cfg.ace_rule == "none"
        assert cfg.queen_two_players == "noop"
        assert cfg.turn_cap == 500
        assert cfg.check_conservation is True
        assert cfg.abort_on_fault is False

    def test_bad_strategy_rejected(self):
        with pytest.raises(ConfigError):
            build_config_from_cli(["--ais", "randomAI,nopeAI"])

    def test_bad_rule_variant_exits(self):
        with pytest.raises(SystemExit):
            build_config_from_cli(["--ace_rule", "double"])
