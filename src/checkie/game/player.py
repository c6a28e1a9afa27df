"""Player value object."""

from __future__ import annotations

from dataclasses import dataclass

from checkie.core.enums import Side
from checkie.game.interfaces import PlayerKind


@dataclass(frozen=True, slots=True)
class Player:
    """A game participant tagged with who supplies its moves.

    Human moves arrive through the controller's ``apply_move``; heuristic
    moves are produced by the controller itself (``play_computer_turn``).
    """

    side: Side
    kind: PlayerKind = PlayerKind.HUMAN
    name: str = ""

    @classmethod
    def human(cls, side: Side, name: str = "") -> Player:
        return cls(side, PlayerKind.HUMAN, name)

    @classmethod
    def heuristic(cls, side: Side, name: str = "Computer") -> Player:
        return cls(side, PlayerKind.HEURISTIC, name)

    @property
    def is_human(self) -> bool:
        return self.kind == PlayerKind.HUMAN

    @property
    def icon(self) -> str:
        return self.side.icon

    @property
    def display_name(self) -> str:
        return self.name or f"Player {self.side.icon}"
