"""Move text, continuation options and board layout strings.

Move text is exactly five characters, ``"<rank><file>-<rank><file>"``,
e.g. ``"3a-4b"``.  Board layouts list the eight rows from row 0 (rank 8)
down to row 7 (rank 1), separated by ``/``; each row has eight cells
written as ``_`` (empty), ``x`` or ``o``.
"""

from __future__ import annotations

from collections.abc import Iterable

from checkie.core.board import PIECES_PER_SIDE, Board
from checkie.core.enums import Side
from checkie.core.errors import MalformedMoveError
from checkie.core.move import Move
from checkie.core.types import BOARD_SIZE, Square, parse_square, square_name

MOVE_TEXT_LENGTH = 5
EMPTY_CELL = "_"

INITIAL_LAYOUT = (
    "_o_o_o_o/o_o_o_o_/_o_o_o_o/________/________/x_x_x_x_/_x_x_x_x/x_x_x_x_"
)
EMPTY_LAYOUT = "/".join([EMPTY_CELL * BOARD_SIZE] * BOARD_SIZE)


# ── Move text ────────────────────────────────────────────────────────────────


def parse_move(text: str) -> Move:
    """Parse move text such as ``'3a-4b'``.

    Raises:
        MalformedMoveError: wrong length, separator or square characters.
    """
    if len(text) != MOVE_TEXT_LENGTH or text[2] != "-":
        raise MalformedMoveError(f"Invalid move text: {text!r}")
    try:
        return Move(parse_square(text[:2]), parse_square(text[3:]))
    except ValueError:
        raise MalformedMoveError(f"Invalid move text: {text!r}") from None


def move_text(from_sq: Square, to_sq: Square) -> str:
    """Render a (source, destination) pair as move text."""
    return f"{square_name(from_sq)}-{square_name(to_sq)}"


def format_jump_options(landings: Iterable[Square]) -> str:
    """Numbered continuation choices, one ``Option N: 2f`` line each."""
    return "".join(
        f"Option {number}: {square_name(sq)}\n"
        for number, sq in enumerate(landings, start=1)
    )


# ── Board layouts ────────────────────────────────────────────────────────────


def board_from_layout(layout: str) -> Board:
    """Parse a ``/``-separated layout string into a :class:`Board`."""
    rows = layout.split("/")
    if len(rows) != BOARD_SIZE:
        raise ValueError(f"Invalid layout (must contain 8 rows): {layout!r}")
    board = Board()
    for row, text in enumerate(rows):
        if len(text) != BOARD_SIZE:
            raise ValueError(f"Invalid layout row width: {text!r}")
        for col, ch in enumerate(text):
            if ch == EMPTY_CELL:
                continue
            try:
                board[(row, col)] = Side.from_icon(ch)
            except ValueError:
                raise ValueError(f"Invalid layout character {ch!r}: {layout!r}") from None
    for side in Side:
        if board.count(side) > PIECES_PER_SIDE:
            raise ValueError(
                f"Invalid layout (more than {PIECES_PER_SIDE} {side.icon} pieces): {layout!r}"
            )
    return board


def board_to_layout(board: Board) -> str:
    """Serialise *board* to a layout string."""
    return "/".join(
        "".join(EMPTY_CELL if cell is None else cell.icon for cell in row)
        for row in board.rows()
    )
