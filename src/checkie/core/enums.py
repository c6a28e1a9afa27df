"""Core enumerations for the draughts domain."""

from __future__ import annotations

from enum import IntEnum


class Side(IntEnum):
    """One of the two competing sides.

    ``X`` starts on the bottom three rows and moves up the board (towards
    row 0); ``O`` starts on the top three rows and moves down.
    """

    X = 0
    O = 1

    @property
    def opposite(self) -> Side:
        return Side(1 - self.value)

    @property
    def forward(self) -> int:
        """Row delta of a single forward step."""
        return -1 if self is Side.X else 1

    @property
    def icon(self) -> str:
        return "x" if self is Side.X else "o"

    @property
    def color_name(self) -> str:
        """Colour used by the graphical board."""
        return "Green" if self is Side.X else "Red"

    @classmethod
    def from_icon(cls, icon: str) -> Side:
        for side in cls:
            if side.icon == icon:
                return side
        raise ValueError(f"Invalid side icon: {icon!r}")

    def __str__(self) -> str:
        return self.icon


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    X_WINS = 1
    O_WINS = 2

    @classmethod
    def win_for(cls, side: Side) -> GameResult:
        return cls.X_WINS if side is Side.X else cls.O_WINS

    @property
    def winner(self) -> Side | None:
        if self == GameResult.X_WINS:
            return Side.X
        if self == GameResult.O_WINS:
            return Side.O
        return None
