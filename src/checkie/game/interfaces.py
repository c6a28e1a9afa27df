"""Enumerations and the abstract controller contract for the game layer.

Presentation layers (console, Qt window) depend on :class:`IGameController`,
not on the concrete controller.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum, IntEnum, auto
from typing import TYPE_CHECKING

from checkie.core.enums import Side

if TYPE_CHECKING:
    from checkie.core.board import Board
    from checkie.core.types import Square


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a draughts game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    AWAITING_CONTINUATION = auto()  # mover must pick one of several jumps
    GAME_OVER = auto()


class PlayerKind(IntEnum):
    """Who supplies a side's moves."""

    HUMAN = auto()
    HEURISTIC = auto()


class GameMode(Enum):
    """Session setup: two humans, or a human against the computer."""

    PVP = "PvP"
    PVC = "PvC"

    @classmethod
    def from_tag(cls, tag: str) -> GameMode:
        for mode in cls:
            if mode.value == tag:
                return mode
        raise ValueError(f"Unrecognized game mode: {tag!r}")

    def player_kinds(self) -> dict[Side, PlayerKind]:
        if self is GameMode.PVC:
            return {Side.X: PlayerKind.HUMAN, Side.O: PlayerKind.HEURISTIC}
        return {Side.X: PlayerKind.HUMAN, Side.O: PlayerKind.HUMAN}


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGameController(ABC):
    """Interface for the turn controller consumed by presentation layers."""

    @abstractmethod
    def apply_move(self, text: str) -> bool:
        """Apply move text such as ``'3a-4b'``.

        Raises:
            MoveFormatError: malformed or illegal move.
        """

    @abstractmethod
    def select_double_option(self, selection: int) -> None:
        """Resolve a pending continuation with a 1-based option number.

        Raises:
            SelectionRangeError: no such option.
        """

    @abstractmethod
    def swap_turn(self) -> bool:
        """Hand the turn to the other side. Returns True on success."""

    @abstractmethod
    def check_win(self, side: Side | None = None) -> bool:
        """Whether *side* (default: side to move) has won."""

    @property
    @abstractmethod
    def board_state(self) -> Board: ...

    @property
    @abstractmethod
    def current_side(self) -> Side: ...

    @property
    @abstractmethod
    def go_again(self) -> bool:
        """True while a continuation choice is owed."""

    @property
    @abstractmethod
    def double_jump_options(self) -> str | None: ...

    @property
    @abstractmethod
    def double_jump_locations(self) -> tuple[Square, ...] | None: ...

    @property
    @abstractmethod
    def double_jump_piece(self) -> Square | None: ...
