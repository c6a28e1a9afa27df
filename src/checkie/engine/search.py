"""Shared opponent protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from checkie.core.enums import Side
    from checkie.core.move import Move
    from checkie.core.position import Position


class IOpponent(Protocol):
    """Protocol for computer opponents used by the game layer."""

    @property
    def side(self) -> Side: ...

    def choose_move(self, position: Position) -> Move | None: ...

    def take_turn(self, position: Position) -> str | None: ...
