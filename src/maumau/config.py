from dataclasses import dataclass
from typing import Optional, Tuple
import argparse

from maumau.constants import ACE_RULES, CARDS_PER_SHOE, QUEEN_TWO_PLAYER_RULES
from maumau.errors import ConfigError
from maumau.bots.reference import resolve_kind


@dataclass(frozen=True)
class Config:
    starting_cards: int = 5
    # one strategy name per seat; seat 0 is the player whose wins are tracked per batch
    ais: Tuple[str, ...] = ("random", "random")
    num_games: int = 100
    num_tests: int = 100
    random_start: bool = True
    decks: int = 1
    debug: bool = False

    # Rule variants
    ace_rule: str = "skip"
    queen_two_players: str = "skip"

    # Safety knobs
    turn_cap: int = 0             # 0 = unlimited
    check_conservation: bool = False
    abort_on_fault: bool = True

    # Progress printing / output
    progress_every: int = 0
    summaries_dir: Optional[str] = None

    @property
    def players(self) -> int:
        return len(self.ais)

    @property
    def total_cards(self) -> int:
        return CARDS_PER_SHOE * self.decks

    def validate(self) -> "Config":
        if self.players < 2:
            raise ConfigError(f"need at least 2 players, got {self.players}")
        for name in self.ais:
            resolve_kind(name)
        if self.decks < 1:
            raise ConfigError(f"decks must be >= 1, got {self.decks}")
        if self.starting_cards < 1:
            raise ConfigError(f"starting_cards must be >= 1, got {self.starting_cards}")
        # every hand dealt plus the opening top card
        needed = self.players * self.starting_cards + 1
        if needed > self.total_cards:
            raise ConfigError(
                f"{self.players} players x {self.starting_cards} cards needs {needed} cards, "
                f"shoe holds {self.total_cards}"
            )
        if self.ace_rule not in ACE_RULES:
            raise ConfigError(f"ace_rule must be one of {ACE_RULES}, got {self.ace_rule!r}")
        if self.queen_two_players not in QUEEN_TWO_PLAYER_RULES:
            raise ConfigError(
                f"queen_two_players must be one of {QUEEN_TWO_PLAYER_RULES}, got {self.queen_two_players!r}"
            )
        if self.num_games < 1 or self.num_tests < 1:
            raise ConfigError("num_games and num_tests must be >= 1")
        if self.turn_cap < 0:
            raise ConfigError("turn_cap must be >= 0")
        return self


def build_config_from_cli(argv=None):
    ap = argparse.ArgumentParser(description="Simulate Mau-Mau games between automated players.")
    ap.add_argument("--starting_cards", type=int, default=5, help="Cards each player starts with.")
    ap.add_argument("--num_games", type=int, default=100, help="Games played per test batch.")
    ap.add_argument("--num_tests", type=int, default=100, help="Number of test batches.")
    ap.add_argument("--ais", default="randomAI,randomAI",
                    help="Strategy per player separated by comma. The first player is the main one.")
    ap.add_argument("--random_start", action=argparse.BooleanOptionalAction, default=True,
                    help="Pick the starting player at random (otherwise the first player starts).")
    ap.add_argument("--decks", type=int, default=1, help="Number of card decks shuffled together.")
    ap.add_argument("--debug", action="store_true", help="Print the game state every turn.")

    ap.add_argument("--ace_rule", choices=ACE_RULES, default="skip")
    ap.add_argument("--queen_two_players", choices=QUEEN_TWO_PLAYER_RULES, default="skip")

    ap.add_argument("--turn_cap", type=int, default=0, help="Max turns per game (0 = unlimited)")
    ap.add_argument("--check_conservation", action="store_true",
                    help="Verify the total card count after every turn.")
    ap.add_argument("--keep_going", action="store_true",
                    help="Skip games that fault instead of aborting the run.")
    ap.add_argument("--progress_every", type=int, default=0)
    ap.add_argument("--summaries_dir", default=None, help="Write CSV summaries into this directory.")

    args = ap.parse_args(argv)

    cfg = Config(
        starting_cards=args.starting_cards,
        ais=tuple(a.strip() for a in args.ais.split(",") if a.strip()),
        num_games=args.num_games,
        num_tests=args.num_tests,
        random_start=args.random_start,
        decks=args.decks,
        debug=args.debug,
        ace_rule=args.ace_rule,
        queen_two_players=args.queen_two_players,
        turn_cap=args.turn_cap,
        check_conservation=args.check_conservation,
        abort_on_fault=not args.keep_going,
        progress_every=args.progress_every,
        summaries_dir=args.summaries_dir,
    )
    return cfg.validate(), args
