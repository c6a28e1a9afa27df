"""Board - piece placement on an 8x8 draughts board."""

from __future__ import annotations

from checkie.core.enums import Side
from checkie.core.types import BOARD_SIZE, Square, is_valid_square, square_name

PIECES_PER_SIDE = 12

_STARTING_ROWS: dict[Side, range] = {
    Side.O: range(0, 3),
    Side.X: range(5, 8),
}


class Board:
    """Mutable 8x8 grid; each cell holds a :class:`Side` or ``None``."""

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        self._cells: list[list[Side | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    @staticmethod
    def in_bounds(sq: Square) -> bool:
        return is_valid_square(sq)

    def __getitem__(self, sq: Square) -> Side | None:
        if not is_valid_square(sq):
            raise IndexError(f"Square off board: {sq!r}")
        return self._cells[sq[0]][sq[1]]

    def __setitem__(self, sq: Square, value: Side | None) -> None:
        if not is_valid_square(sq):
            raise IndexError(f"Square off board: {sq!r}")
        self._cells[sq[0]][sq[1]] = value

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    # -- Query helpers ------------------------------------------------------

    def pieces(self, side: Side) -> list[Square]:
        """Squares occupied by *side*, in row-major order."""
        return [
            (row, col)
            for row in range(BOARD_SIZE)
            for col in range(BOARD_SIZE)
            if self._cells[row][col] is side
        ]

    def count(self, side: Side) -> int:
        return sum(row.count(side) for row in self._cells)

    def rows(self) -> list[list[Side | None]]:
        """Row-major snapshot of the grid (a copy)."""
        return [row.copy() for row in self._cells]

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._cells = self.rows()
        return b

    def clear(self) -> None:
        self._cells = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard opening: 12 pieces per side on the dark cells."""
        b = cls()
        for side, rows in _STARTING_ROWS.items():
            for row in rows:
                for col in range(BOARD_SIZE):
                    if (row + col) % 2 == 1:
                        b[(row, col)] = side
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE):
            cells = [str(p) if p is not None else "_" for p in self._cells[row]]
            rank = square_name((row, 0))[0]
            rows.append(f"{rank} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
