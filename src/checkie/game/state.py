"""Game state machine — turn, phase, pending continuation and move history."""

from __future__ import annotations

from dataclasses import dataclass, field

from checkie.core.enums import GameResult, Side
from checkie.core.move import Move
from checkie.core.move_generator import MoveGenerator
from checkie.core.notation import board_from_layout, format_jump_options
from checkie.core.position import Position
from checkie.core.rules import Rules
from checkie.core.types import Square
from checkie.game.interfaces import GamePhase


@dataclass(frozen=True, slots=True)
class PendingContinuation:
    """A jump that ended with two further captures to choose from."""

    piece: Square
    landings: tuple[Square, ...]
    options_text: str

    @classmethod
    def for_landings(cls, piece: Square, landings: list[Square]) -> PendingContinuation:
        return cls(piece, tuple(landings), format_jump_options(landings))


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """A single entry in the move history.

    ``chain`` lists the landings reached by automatic continuation after the
    submitted move; ``continuation`` marks a record produced by picking a
    pending option.
    """

    side: Side
    move: Move
    captured: tuple[Square, ...] = ()
    chain: tuple[Square, ...] = ()
    continuation: bool = False

    @property
    def final_square(self) -> Square:
        return self.chain[-1] if self.chain else self.move.to_sq


@dataclass
class GameState:
    """Manages game lifecycle: turn, phase, result, move history.

    This is a pure data/logic class — no I/O, no UI.  Moves handed to
    :meth:`apply_move` must already have been validated.
    """

    position: Position = field(default_factory=Position, init=False)
    side_to_move: Side = field(default=Side.X, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    pending: PendingContinuation | None = field(default=None, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, layout: str | None = None, side_to_move: Side = Side.X) -> None:
        """Initialise (or reset) the game, optionally from a board layout."""
        board = board_from_layout(layout) if layout is not None else None
        self.position = Position(board)
        self.side_to_move = side_to_move
        self.phase = GamePhase.AWAITING_MOVE
        self.result = GameResult.IN_PROGRESS
        self.pending = None
        self.move_history.clear()

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: Move) -> MoveRecord:
        """Play a validated move for the side to move.

        A jump is followed automatically while exactly one further capture
        exists.  Two further captures leave a :class:`PendingContinuation`
        and the turn incomplete.
        """
        side = self.side_to_move
        position = self.position
        position.move_piece(side, move.from_sq, move.to_sq)
        if not move.is_jump:
            return self._record(MoveRecord(side, move))

        captured = [position.capture(side, move.from_sq, move.to_sq)]
        chain: list[Square] = []
        gen = MoveGenerator(position.board)
        sq = move.to_sq
        landings = gen.jump_landings(side, sq)
        while len(landings) == 1:
            landing = landings[0]
            position.move_piece(side, sq, landing)
            captured.append(position.capture(side, sq, landing))
            chain.append(landing)
            sq = landing
            landings = gen.jump_landings(side, sq)

        if landings:
            self.pending = PendingContinuation.for_landings(sq, landings)
            self.phase = GamePhase.AWAITING_CONTINUATION

        return self._record(MoveRecord(side, move, tuple(captured), tuple(chain)))

    def resolve_continuation(self, index: int) -> MoveRecord:
        """Jump to ``pending.landings[index]`` and clear the pending state.

        Captures available from the chosen landing are left alone.
        """
        pending = self.pending
        if pending is None:
            raise RuntimeError("No continuation pending")
        side = self.side_to_move
        landing = pending.landings[index]
        self.position.move_piece(side, pending.piece, landing)
        captured = self.position.capture(side, pending.piece, landing)
        self.pending = None
        self.phase = GamePhase.AWAITING_MOVE
        return self._record(
            MoveRecord(side, Move(pending.piece, landing), (captured,), continuation=True)
        )

    def swap_turn(self) -> None:
        self.side_to_move = self.side_to_move.opposite

    def finish(self, result: GameResult) -> None:
        self.result = result
        self.phase = GamePhase.GAME_OVER

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def has_pending(self) -> bool:
        return self.pending is not None

    @property
    def ply_count(self) -> int:
        """Number of history records (continuation choices included)."""
        return len(self.move_history)

    def winner_if_any(self, side: Side) -> GameResult:
        """Result as it would stand if *side* had just moved."""
        return Rules.game_result(self.position, side)

    def legal_moves(self) -> list[Move]:
        """Legal moves for the side to move."""
        return MoveGenerator(self.position.board).generate_moves(self.side_to_move)

    # ── Internal ─────────────────────────────────────────────────────────

    def _record(self, record: MoveRecord) -> MoveRecord:
        self.move_history.append(record)
        return record
