"""High-level rules: win detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from checkie.core.enums import GameResult, Side
from checkie.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from checkie.core.position import Position


class Rules:
    """Static rule-checker that operates on a :class:`Position`.

    There are no draws: a side loses when it has no pieces left or none of
    its pieces can step or jump.
    """

    @staticmethod
    def is_out_of_pieces(position: Position, side: Side) -> bool:
        return position.piece_count(side) == 0

    @staticmethod
    def is_blocked(position: Position, side: Side) -> bool:
        return not MoveGenerator(position.board).can_move(side)

    @staticmethod
    def has_won(position: Position, side: Side) -> bool:
        """Whether *side* has beaten its opponent."""
        opponent = side.opposite
        return Rules.is_out_of_pieces(position, opponent) or Rules.is_blocked(
            position, opponent
        )

    @staticmethod
    def game_result(position: Position, last_mover: Side) -> GameResult:
        """Result after *last_mover* has completed its turn."""
        if Rules.has_won(position, last_mover):
            return GameResult.win_for(last_mover)
        return GameResult.IN_PROGRESS
