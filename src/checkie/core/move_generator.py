"""Move validation and generation for forward-only draughts pieces."""

from __future__ import annotations

from typing import TYPE_CHECKING

from checkie.core.enums import Side
from checkie.core.move import Move
from checkie.core.types import Square

if TYPE_CHECKING:
    from checkie.core.board import Board


# Column deltas, forward-right examined before forward-left.  The order
# numbers the continuation options shown to players.
LATERAL_DIRS: tuple[int, ...] = (1, -1)


class MoveGenerator:
    """Answers move questions about a :class:`Board` for either side.

    Pieces only ever move forward (``Side.forward``), one diagonal step or a
    two-step diagonal jump over an adjacent enemy piece.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # ── Geometry ─────────────────────────────────────────────────────────

    def jump_landings(self, side: Side, sq: Square) -> list[Square]:
        """Landing squares of the jumps available to the piece on *sq*.

        A landing qualifies when it is on the board, the square jumped over
        holds an enemy piece, and the landing itself is empty.
        """
        board = self._board
        row, col = sq
        fwd = side.forward
        enemy = side.opposite
        landings: list[Square] = []
        for dc in LATERAL_DIRS:
            landing = (row + 2 * fwd, col + 2 * dc)
            if not board.in_bounds(landing):
                continue
            over = (row + fwd, col + dc)
            if board[over] is enemy and board.is_empty(landing):
                landings.append(landing)
        return landings

    def step_targets(self, side: Side, sq: Square) -> list[Square]:
        """Empty squares one diagonal step forward of *sq*."""
        board = self._board
        row, col = sq
        targets: list[Square] = []
        for dc in LATERAL_DIRS:
            target = (row + side.forward, col + dc)
            if board.in_bounds(target) and board.is_empty(target):
                targets.append(target)
        return targets

    # ── Legality ─────────────────────────────────────────────────────────

    def is_legal(self, side: Side, from_sq: Square, to_sq: Square) -> bool:
        """Whether *side* may move the piece on *from_sq* to *to_sq*."""
        board = self._board
        if not board.in_bounds(from_sq) or not board.in_bounds(to_sq):
            return False
        if board[from_sq] is not side:
            return False
        if from_sq == to_sq:
            return False
        if not board.is_empty(to_sq):
            return False

        d_row = to_sq[0] - from_sq[0]
        d_col = to_sq[1] - from_sq[1]
        # Direction applies to jumps as well as steps
        if d_row * side.forward <= 0:
            return False

        if abs(d_row) == 1 and abs(d_col) == 1:
            return True

        return to_sq in self.jump_landings(side, from_sq)

    def has_move(self, side: Side, sq: Square) -> bool:
        """Whether the piece on *sq* has any step or jump."""
        return bool(self.step_targets(side, sq) or self.jump_landings(side, sq))

    # ── Whole-board scans ────────────────────────────────────────────────

    def movable_pieces(self, side: Side) -> list[Square]:
        """Squares of *side*'s pieces that can act, in row-major order."""
        return [sq for sq in self._board.pieces(side) if self.has_move(side, sq)]

    def can_move(self, side: Side) -> bool:
        """Whether *side* has at least one legal move anywhere."""
        return any(self.has_move(side, sq) for sq in self._board.pieces(side))

    def generate_moves(self, side: Side) -> list[Move]:
        """Every legal move for *side*: jumps and steps, per piece."""
        moves: list[Move] = []
        for sq in self._board.pieces(side):
            for landing in self.jump_landings(side, sq):
                moves.append(Move(sq, landing))
            for target in self.step_targets(side, sq):
                moves.append(Move(sq, target))
        return moves
