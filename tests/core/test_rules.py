"""Tests for Rules — win detection."""

from checkie.core.board import Board
from checkie.core.enums import GameResult, Side
from checkie.core.notation import board_from_layout
from checkie.core.position import Position
from checkie.core.rules import Rules

# o on 1a has nowhere to go; x on 3c can still step.
BLOCKED_O = "________/________/________/________/________/__x_____/________/o_______"


class TestOutOfPieces:
    def test_opening(self) -> None:
        pos = Position()
        assert not Rules.is_out_of_pieces(pos, Side.X)
        assert not Rules.is_out_of_pieces(pos, Side.O)

    def test_counter_at_zero(self) -> None:
        pos = Position(Board.initial(), {Side.X: 12, Side.O: 0})
        assert Rules.is_out_of_pieces(pos, Side.O)
        assert Rules.has_won(pos, Side.X)


class TestBlocked:
    def test_opening_not_blocked(self) -> None:
        pos = Position()
        assert not Rules.is_blocked(pos, Side.X)
        assert not Rules.is_blocked(pos, Side.O)

    def test_piece_on_far_row(self) -> None:
        pos = Position(board_from_layout(BLOCKED_O))
        assert Rules.is_blocked(pos, Side.O)
        assert not Rules.is_blocked(pos, Side.X)

    def test_win_by_blocking(self) -> None:
        pos = Position(board_from_layout(BLOCKED_O))
        assert Rules.has_won(pos, Side.X)
        assert not Rules.has_won(pos, Side.O)


class TestGameResult:
    def test_in_progress(self) -> None:
        assert Rules.game_result(Position(), Side.X) == GameResult.IN_PROGRESS

    def test_win_for_last_mover(self) -> None:
        pos = Position(board_from_layout(BLOCKED_O))
        assert Rules.game_result(pos, Side.X) == GameResult.X_WINS
        assert GameResult.X_WINS.winner is Side.X

    def test_loser_moving_is_not_a_win(self) -> None:
        pos = Position(board_from_layout(BLOCKED_O))
        assert Rules.game_result(pos, Side.O) == GameResult.IN_PROGRESS

    def test_o_wins(self) -> None:
        pos = Position(Board.initial(), {Side.X: 0, Side.O: 3})
        assert Rules.game_result(pos, Side.O) == GameResult.O_WINS
