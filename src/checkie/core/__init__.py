"""Core domain layer — pure draughts logic with zero external dependencies.

Quick start::

    from checkie.core import Position, MoveGenerator, Side, parse_move

    pos = Position()
    gen = MoveGenerator(pos.board)
    move = parse_move("3a-4b")
    assert gen.is_legal(Side.X, move.from_sq, move.to_sq)
"""

from checkie.core.board import PIECES_PER_SIDE, Board
from checkie.core.enums import GameResult, Side
from checkie.core.errors import (
    IllegalMoveError,
    MalformedMoveError,
    MoveFormatError,
    SelectionRangeError,
)
from checkie.core.move import Move
from checkie.core.move_generator import MoveGenerator
from checkie.core.notation import (
    INITIAL_LAYOUT,
    board_from_layout,
    board_to_layout,
    format_jump_options,
    move_text,
    parse_move,
)
from checkie.core.position import Position
from checkie.core.rules import Rules
from checkie.core.types import (
    Square,
    is_valid_square,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "GameResult",
    "Side",
    # Errors
    "IllegalMoveError",
    "MalformedMoveError",
    "MoveFormatError",
    "SelectionRangeError",
    # Types / helpers
    "Square",
    "is_valid_square",
    "parse_square",
    "square_name",
    # Domain objects
    "PIECES_PER_SIDE",
    "Board",
    "Move",
    "MoveGenerator",
    "Position",
    "Rules",
    # Notation
    "INITIAL_LAYOUT",
    "board_from_layout",
    "board_to_layout",
    "format_jump_options",
    "move_text",
    "parse_move",
]
