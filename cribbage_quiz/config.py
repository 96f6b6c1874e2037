"""
Configuration for a quiz session.
"""

import argparse
import random
from dataclasses import dataclass
from typing import Optional

from .engine.deck import Deck

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@dataclass
class GameConfig:
    """Configuration for a quiz session."""
    seed: Optional[int] = None        # Fixed seed for a repeatable sequence of hands
    log_level: str = "WARNING"
    history_path: Optional[str] = None  # Save the turn history here on exit
    show_help: bool = False           # Print the notation help before the first hand

    def make_deck(self) -> Deck:
        return Deck.standard_52(rng=random.Random(self.seed))

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "GameConfig":
        return cls(
            seed=args.seed,
            log_level=args.log_level,
            history_path=args.history,
            show_help=args.help_on_start,
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Guess the score of cribbage hands")
    parser.add_argument("--seed", type=int, help="Seed for a repeatable sequence of hands")
    parser.add_argument("--log-level", default="WARNING", choices=LOG_LEVELS,
                        help="Logging level for engine diagnostics")
    parser.add_argument("--history", type=str, help="Save the turn history as JSON on exit")
    parser.add_argument("--help-on-start", action="store_true",
                        help="Show the notation help before the first hand")
    return parser
