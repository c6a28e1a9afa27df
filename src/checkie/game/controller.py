"""GameController — the turn controller of a draughts game.

Coordinates: Players, GameState, MoveGenerator, the heuristic opponent.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable
from dataclasses import dataclass, field

from checkie.core.board import Board
from checkie.core.enums import GameResult, Side
from checkie.core.errors import IllegalMoveError, SelectionRangeError
from checkie.core.move_generator import MoveGenerator
from checkie.core.notation import parse_move
from checkie.core.types import Square
from checkie.engine.heuristic import HeuristicOpponent
from checkie.game.interfaces import GameMode, GamePhase, IGameController, PlayerKind
from checkie.game.player import Player
from checkie.game.state import GameState, MoveRecord, PendingContinuation

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, "GameState"], None]
ContinuationCallback = Callable[[PendingContinuation], None]
GameOverCallback = Callable[[GameResult], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_continuation: list[ContinuationCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Validates and applies moves, runs the chained-jump protocol, swaps
    turns and detects wins.

    Single-threaded: every call runs to completion before returning.  A
    rejected move raises before the board is touched.
    """

    __slots__ = ("_state", "_players", "_opponents", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self._players: dict[Side, Player] = {}
        self._opponents: dict[Side, HeuristicOpponent] = {}
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def board_state(self) -> Board:
        return self._state.position.board

    @property
    def current_side(self) -> Side:
        return self._state.side_to_move

    @property
    def current_player(self) -> Player | None:
        return self._players.get(self._state.side_to_move)

    def player(self, side: Side) -> Player | None:
        return self._players.get(side)

    def piece_count(self, side: Side) -> int:
        return self._state.position.piece_count(side)

    # Pending-continuation accessors

    @property
    def go_again(self) -> bool:
        return self._state.pending is not None

    @property
    def double_jump_options(self) -> str | None:
        pending = self._state.pending
        return pending.options_text if pending is not None else None

    @property
    def double_jump_locations(self) -> tuple[Square, ...] | None:
        pending = self._state.pending
        return pending.landings if pending is not None else None

    @property
    def double_jump_piece(self) -> Square | None:
        pending = self._state.pending
        return pending.piece if pending is not None else None

    # ── Session setup ────────────────────────────────────────────────────

    def new_game(
        self,
        mode: GameMode = GameMode.PVP,
        players: dict[Side, Player] | None = None,
        layout: str | None = None,
        side_to_move: Side = Side.X,
        rng: random.Random | None = None,
    ) -> None:
        """Set up a new game.

        Args:
            mode: Which sides are computer-controlled; ignored when
                *players* is given.
            players: Explicit player for each side.
            layout: Board layout string; the standard opening if omitted.
            side_to_move: Side that plays first.
            rng: Random source shared by heuristic opponents.
        """
        if players is None:
            players = {
                side: Player(side, kind) for side, kind in mode.player_kinds().items()
            }
        if set(players) != set(Side):
            raise ValueError("A game needs exactly one player per side")
        self._players = dict(players)
        self._opponents = {
            side: HeuristicOpponent(side, rng)
            for side, p in self._players.items()
            if p.kind == PlayerKind.HEURISTIC
        }

        self._state = GameState()
        self._state.setup(layout, side_to_move)
        _LOGGER.debug("New game: %s", {str(s): p.kind.name for s, p in players.items()})
        self._emit_phase(GamePhase.AWAITING_MOVE)

    # ── IGameController impl ─────────────────────────────────────────────

    def apply_move(self, text: str) -> bool:
        state = self._state
        move = parse_move(text)
        if state.is_game_over:
            raise IllegalMoveError("Game is over")
        if state.pending is not None:
            raise IllegalMoveError("A continuation jump must be selected first")

        side = state.side_to_move
        gen = MoveGenerator(state.position.board)
        if not gen.is_legal(side, move.from_sq, move.to_sq):
            raise IllegalMoveError(f"Illegal move for {side.icon}: {text!r}")

        record = state.apply_move(move)
        _LOGGER.debug("%s played %s, captured %s", side, move, list(record.captured))
        if record.chain:
            _LOGGER.debug("Auto-continued through %s", list(record.chain))
        self._emit_move(record)

        pending = state.pending
        if pending is not None:
            _LOGGER.info(
                "%s must choose a continuation from %s", side, list(pending.landings)
            )
            self._emit_phase(GamePhase.AWAITING_CONTINUATION)
            self._emit_continuation(pending)
        return True

    def select_double_option(self, selection: int) -> None:
        state = self._state
        pending = state.pending
        if pending is None:
            raise SelectionRangeError("No continuation jump is pending")
        if not 1 <= selection <= len(pending.landings):
            raise SelectionRangeError(
                f"Option {selection} out of range 1..{len(pending.landings)}"
            )

        record = state.resolve_continuation(selection - 1)
        _LOGGER.debug("%s continued with %s", record.side, record.move)
        self._emit_move(record)
        self._emit_phase(GamePhase.AWAITING_MOVE)

    def swap_turn(self) -> bool:
        if self._state.pending is not None:
            return False
        self._state.swap_turn()
        return True

    def check_win(self, side: Side | None = None) -> bool:
        state = self._state
        mover = side if side is not None else state.side_to_move
        result = state.winner_if_any(mover)
        if result == GameResult.IN_PROGRESS:
            return False
        if not state.is_game_over:
            state.finish(result)
            _LOGGER.info("Game over: %s", result.name)
            self._emit_game_over(result)
        return True

    # ── Computer turns ───────────────────────────────────────────────────

    def play_computer_turn(self) -> str | None:
        """Let the heuristic opponent on move play its whole turn.

        A pending continuation is resolved with the first option.

        Returns:
            The move text played, or ``None`` when the side to move is human
            or has no move.
        """
        opponent = self._opponents.get(self._state.side_to_move)
        if opponent is None or self._state.is_game_over:
            return None
        text = opponent.take_turn(self._state.position)
        if text is None:
            return None
        self.apply_move(text)
        if self.go_again:
            self.select_double_option(1)
        return text

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._state)

    def _emit_continuation(self, pending: PendingContinuation) -> None:
        for cb in self.events.on_continuation:
            cb(pending)

    def _emit_game_over(self, result: GameResult) -> None:
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(result)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
