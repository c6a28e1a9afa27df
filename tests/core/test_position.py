"""Tests for Position — piece relocation, captures and counters."""

from checkie.core.board import Board
from checkie.core.enums import Side
from checkie.core.notation import board_from_layout
from checkie.core.position import Position
from checkie.core.types import A3, B4, B6, C3, C5, D4, D6, E5


class TestPositionInit:
    def test_standard_counts(self) -> None:
        pos = Position()
        assert pos.piece_count(Side.X) == 12
        assert pos.piece_count(Side.O) == 12
        assert pos.board == Board.initial()

    def test_counts_follow_board(self) -> None:
        board = board_from_layout(
            "________/________/________/__o_o___/________/__o_____/_x______/________"
        )
        pos = Position(board)
        assert pos.piece_count(Side.X) == 1
        assert pos.piece_count(Side.O) == 3

    def test_explicit_counts(self) -> None:
        pos = Position(Board(), {Side.X: 5, Side.O: 7})
        assert pos.piece_count(Side.X) == 5
        assert pos.piece_count(Side.O) == 7


class TestMovePiece:
    def test_relocates(self) -> None:
        pos = Position()
        pos.move_piece(Side.X, A3, B4)
        assert pos.board[B4] is Side.X
        assert pos.board[A3] is None
        assert pos.piece_count(Side.X) == 12


class TestCapture:
    def test_capture_forward_right(self) -> None:
        pos = Position(Board())
        pos.board[C3] = Side.X
        pos.board[D4] = Side.O
        pos.piece_counts = {Side.X: 1, Side.O: 1}
        pos.move_piece(Side.X, C3, E5)
        assert pos.capture(Side.X, C3, E5) == D4
        assert pos.board[D4] is None
        assert pos.piece_count(Side.O) == 0

    def test_capture_forward_left(self) -> None:
        pos = Position(Board())
        pos.board[(5, 4)] = Side.X
        pos.board[D4] = Side.O
        pos.piece_counts = {Side.X: 1, Side.O: 1}
        pos.move_piece(Side.X, (5, 4), C5)
        assert pos.capture(Side.X, (5, 4), C5) == D4
        assert pos.board[C5] is Side.X

    def test_o_captures_downwards(self) -> None:
        pos = Position(Board())
        pos.board[B6] = Side.O
        pos.board[(3, 2)] = Side.X
        pos.piece_counts = {Side.X: 1, Side.O: 1}
        pos.move_piece(Side.O, B6, D4)
        assert pos.capture(Side.O, B6, D4) == (3, 2)
        assert pos.piece_count(Side.X) == 0
        assert pos.piece_count(Side.O) == 1

    def test_capture_leaves_own_count(self) -> None:
        pos = Position(Board())
        pos.board[D6] = Side.O
        pos.board[(3, 4)] = Side.X
        pos.piece_counts = {Side.X: 1, Side.O: 1}
        pos.move_piece(Side.O, D6, (4, 5))
        pos.capture(Side.O, D6, (4, 5))
        assert pos.piece_counts == {Side.X: 0, Side.O: 1}


class TestCopy:
    def test_copy_is_independent(self) -> None:
        pos = Position()
        clone = pos.copy()
        clone.move_piece(Side.X, A3, B4)
        clone.piece_counts[Side.O] = 3
        assert pos.board[A3] is Side.X
        assert pos.piece_count(Side.O) == 12

    def test_repr_mentions_counts(self) -> None:
        assert "x=12" in repr(Position())
