"""Tests for GameState — move application and the continuation protocol."""

import pytest

from checkie.core.enums import GameResult, Side
from checkie.core.move import Move
from checkie.core.types import A3, B2, B4, B6, D4, F6, H8
from checkie.game.interfaces import GamePhase
from checkie.game.state import GameState, PendingContinuation


# x on 1a jumps 2b, then is carried over 4d and 6f.
LONG_CHAIN_LAYOUT = "________/________/_____o__/________/___o____/________/_o______/x_______"

# Same opening chain, but from 5e both 6f and 6d can be jumped.
CHAIN_THEN_BRANCH_LAYOUT = (
    "________/________/___o_o__/________/___o____/________/_o______/x_______"
)


def _state(layout: str | None = None, side: Side = Side.X) -> GameState:
    gs = GameState()
    gs.setup(layout, side)
    return gs


class TestSetup:
    def test_defaults(self) -> None:
        gs = _state()
        assert gs.phase == GamePhase.AWAITING_MOVE
        assert gs.side_to_move == Side.X
        assert gs.result == GameResult.IN_PROGRESS
        assert gs.pending is None
        assert gs.ply_count == 0

    def test_not_started_before_setup(self) -> None:
        assert GameState().phase == GamePhase.NOT_STARTED

    def test_reset_clears_history(self) -> None:
        gs = _state()
        gs.apply_move(Move(A3, B4))
        gs.setup()
        assert gs.ply_count == 0
        assert gs.position.board[A3] is Side.X

    def test_custom_side_to_move(self) -> None:
        assert _state(side=Side.O).side_to_move == Side.O


class TestApplyMove:
    def test_step(self) -> None:
        gs = _state()
        record = gs.apply_move(Move(A3, B4))
        assert gs.position.board[B4] is Side.X
        assert gs.position.board[A3] is None
        assert record.captured == ()
        assert record.final_square == B4
        assert gs.pending is None

    def test_single_jump(self) -> None:
        layout = "________/________/________/________/________/__o_____/_x______/________"
        gs = _state(layout)
        record = gs.apply_move(Move(B2, D4))
        assert record.captured == ((5, 2),)
        assert record.chain == ()
        assert gs.position.piece_count(Side.O) == 0
        assert gs.pending is None

    def test_auto_chain(self, auto_chain_layout: str) -> None:
        gs = _state(auto_chain_layout)
        record = gs.apply_move(Move(B2, D4))
        assert record.captured == ((5, 2), (3, 4))
        assert record.chain == (F6,)
        assert record.final_square == F6
        assert gs.position.board[F6] is Side.X
        assert gs.position.board[D4] is None
        assert gs.position.piece_count(Side.O) == 0
        assert gs.phase == GamePhase.AWAITING_MOVE

    def test_two_options_pending(self, two_option_layout: str) -> None:
        gs = _state(two_option_layout)
        gs.apply_move(Move(B2, D4))
        assert gs.phase == GamePhase.AWAITING_CONTINUATION
        assert gs.has_pending
        assert gs.pending == PendingContinuation(
            D4, (F6, B6), "Option 1: 6f\nOption 2: 6b\n"
        )
        assert gs.position.piece_count(Side.O) == 2

    def test_auto_chain_of_two(self) -> None:
        gs = _state(LONG_CHAIN_LAYOUT)
        record = gs.apply_move(Move((7, 0), (5, 2)))
        assert record.chain == ((3, 4), (1, 6))
        assert record.captured == ((6, 1), (4, 3), (2, 5))
        assert record.final_square == (1, 6)
        assert gs.position.board[(1, 6)] is Side.X
        assert gs.position.board[(7, 0)] is None
        assert gs.position.piece_count(Side.O) == 0
        assert gs.pending is None

    def test_auto_chain_ends_in_choice(self) -> None:
        gs = _state(CHAIN_THEN_BRANCH_LAYOUT)
        record = gs.apply_move(Move((7, 0), (5, 2)))
        assert record.chain == ((3, 4),)
        assert gs.pending is not None
        assert gs.pending.piece == (3, 4)
        assert gs.pending.landings == ((1, 6), (1, 2))
        assert gs.position.board[(3, 4)] is Side.X
        assert gs.position.board[(5, 2)] is None
        assert gs.position.piece_count(Side.O) == 2

    def test_history_records_every_move(self) -> None:
        gs = _state()
        gs.apply_move(Move(A3, B4))
        assert [r.move for r in gs.move_history] == [Move(A3, B4)]
        assert gs.move_history[0].side == Side.X


class TestResolveContinuation:
    def test_pick_second_option(self, two_option_layout: str) -> None:
        gs = _state(two_option_layout)
        gs.apply_move(Move(B2, D4))
        record = gs.resolve_continuation(1)
        assert record.continuation
        assert record.move == Move(D4, B6)
        assert record.captured == ((3, 2),)
        assert gs.position.board[B6] is Side.X
        assert gs.position.board[(3, 4)] is Side.O
        assert gs.pending is None
        assert gs.phase == GamePhase.AWAITING_MOVE
        assert gs.ply_count == 2

    def test_no_further_chain_after_choice(self) -> None:
        # From 6f another capture over 7g would be possible; it is not taken.
        layout = "________/______o_/________/__o_o___/________/__o_____/_x______/________"
        gs = _state(layout)
        gs.apply_move(Move(B2, D4))
        gs.resolve_continuation(0)
        assert gs.position.board[F6] is Side.X
        assert gs.position.board[(1, 6)] is Side.O
        assert gs.position.board[H8] is None
        assert gs.pending is None

    def test_nothing_pending(self) -> None:
        with pytest.raises(RuntimeError):
            _state().resolve_continuation(0)


class TestQueries:
    def test_legal_moves_opening(self) -> None:
        assert len(_state().legal_moves()) == 7

    def test_winner_if_any(self, auto_chain_layout: str) -> None:
        gs = _state(auto_chain_layout)
        gs.apply_move(Move(B2, D4))
        assert gs.winner_if_any(Side.X) == GameResult.X_WINS
        assert gs.winner_if_any(Side.O) == GameResult.IN_PROGRESS

    def test_finish(self) -> None:
        gs = _state()
        gs.finish(GameResult.O_WINS)
        assert gs.is_game_over
        assert gs.result.winner is Side.O
