"""Position — board plus live piece counters, with move and capture steps."""

from __future__ import annotations

from checkie.core.board import Board
from checkie.core.enums import Side
from checkie.core.types import Square


class Position:
    """Board and per-side piece counters.

    Counters start at the number of pieces each side has on *board* (12 for
    the standard opening) unless given explicitly, and only go down through
    :meth:`capture`.
    """

    __slots__ = ("board", "piece_counts")

    def __init__(
        self,
        board: Board | None = None,
        piece_counts: dict[Side, int] | None = None,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        if piece_counts is None:
            piece_counts = {side: self.board.count(side) for side in Side}
        self.piece_counts: dict[Side, int] = dict(piece_counts)

    def piece_count(self, side: Side) -> int:
        return self.piece_counts[side]

    # ── Board mutations ──────────────────────────────────────────────────

    def move_piece(self, side: Side, from_sq: Square, to_sq: Square) -> None:
        """Place *side*'s piece on *to_sq* and empty *from_sq*."""
        self.board[to_sq] = side
        self.board[from_sq] = None

    def capture(self, side: Side, from_sq: Square, to_sq: Square) -> Square:
        """Remove the enemy piece jumped by *side* going *from_sq* → *to_sq*.

        The piece must already stand on *to_sq* (see :meth:`move_piece`).
        The captured square is the diagonal neighbour of *from_sq* in the
        mover's forward direction, on the column side of *to_sq*.

        Returns:
            The square that was cleared.
        """
        row, col = from_sq
        d_col = 1 if to_sq[1] - col > 0 else -1
        captured = (row + side.forward, col + d_col)
        self.board[captured] = None
        self.piece_counts[side.opposite] -= 1
        return captured

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        return Position(self.board.copy(), self.piece_counts)

    def __repr__(self) -> str:
        counts = ", ".join(f"{side.icon}={n}" for side, n in self.piece_counts.items())
        return f"Position({counts})\n{self.board!r}"
