"""Application configuration built from command-line arguments."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass

from checkie.game.interfaces import GameMode

INTERFACES = ("console", "gui")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True, slots=True)
class AppConfig:
    """How to run a session: front end, game mode, randomness, logging."""

    interface: str = "console"
    mode: GameMode | None = None  # None: the front end asks
    seed: int | None = None
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.interface not in INTERFACES:
            raise ValueError(f"Unknown interface: {self.interface!r}")
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level!r}")

    @classmethod
    def from_args(cls, argv: list[str] | None = None) -> AppConfig:
        parser = build_parser()
        parsed = parser.parse_args(argv)
        mode = None
        if parsed.mode is not None:
            try:
                mode = GameMode.from_tag(parsed.mode)
            except ValueError as exc:
                parser.error(str(exc))
        return cls(
            interface=parsed.interface,
            mode=mode,
            seed=parsed.seed,
            log_level=parsed.log_level.upper(),
        )

    def make_rng(self) -> random.Random:
        """Random source for computer opponents (seeded when configured)."""
        return random.Random(self.seed)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="checkie", description="English draughts without kings."
    )
    parser.add_argument(
        "--interface",
        choices=INTERFACES,
        default="console",
        help="Front end to play with (default: console).",
    )
    parser.add_argument(
        "--mode",
        default=None,
        help="PvP for two players, PvC to play the computer (default: ask).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the computer's random choices.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging verbosity (default: WARNING).",
    )
    return parser
