"""Text console front end."""

from __future__ import annotations

import logging
import random
from collections.abc import Callable
from typing import TYPE_CHECKING

from checkie.core.errors import MoveFormatError, SelectionRangeError
from checkie.core.types import BOARD_SIZE, FILES
from checkie.game.controller import GameController
from checkie.game.interfaces import GameMode, GamePhase

if TYPE_CHECKING:
    from checkie.config import AppConfig
    from checkie.core.board import Board

_LOGGER = logging.getLogger(__name__)

MOVE_HINT = "Choose a cell position of piece to be moved and the new position. e.g., 3a-4b"
BAD_MOVE = "The move command given has an incorrect format, try again."
OPTIONS_HINT = (
    "There are double jump options, please select one by typing its "
    "respective number. i.e. 1"
)
BAD_OPTION = "Selected double jump has an incorrect format, try again."
CHOOSE_OPPONENT = (
    "Begin Game. Enter 'P' if you want to play against another player; "
    "enter 'C' to play against computer. "
)
BAD_CHOICE = "Incorrect format, please try again:"


def render_board(board: Board) -> str:
    """Board as printed on the console, rank 8 at the top."""
    lines: list[str] = [""]
    for row, cells in enumerate(board.rows()):
        text = "".join(f" {'_' if c is None else c.icon} |" for c in cells)
        lines.append(f"{BOARD_SIZE - row} |{text}")
    lines.append("    " + "   ".join(FILES) + " ")
    lines.append("")
    return "\n".join(lines)


class TextConsole:
    """Plays a whole game through line-based input and output.

    Args:
        controller: Game controller, with or without a game set up.
        input_fn: Reads one line given a prompt (default :func:`input`).
        output_fn: Writes one line (default :func:`print`).
        rng: Random source for the computer when the opponent is chosen
            interactively.

    A controller without a game set up asks for the opponent first.
    """

    def __init__(
        self,
        controller: GameController,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
        rng: random.Random | None = None,
    ) -> None:
        self._controller = controller
        self._input = input_fn
        self._output = output_fn
        self._rng = rng

    @classmethod
    def from_config(cls, config: AppConfig) -> TextConsole:
        rng = config.make_rng()
        controller = GameController()
        if config.mode is not None:
            controller.new_game(config.mode, rng=rng)
        return cls(controller, rng=rng)

    @property
    def controller(self) -> GameController:
        return self._controller

    # ── Game loop ────────────────────────────────────────────────────────

    def run(self) -> int:
        """Play until one side wins. Returns a process exit code."""
        ctrl = self._controller
        try:
            if ctrl.state.phase == GamePhase.NOT_STARTED:
                ctrl.new_game(self.choose_opponent(), rng=self._rng)
            while True:
                self.print_board()
                player = ctrl.current_player
                if player is not None and not player.is_human:
                    text = ctrl.play_computer_turn()
                    self._output(f"Computer plays {text}")
                else:
                    self.display_turn()
                    self.user_move()
                if ctrl.check_win():
                    self.print_board()
                    self.display_results()
                    return 0
                ctrl.swap_turn()
        except EOFError:
            _LOGGER.info("Input closed, leaving the game")
            self._output("Goodbye.")
            return 1

    # ── Prompts ──────────────────────────────────────────────────────────

    def choose_opponent(self) -> GameMode:
        """Ask for a person or the computer until the answer is P or C."""
        while True:
            answer = self._input(CHOOSE_OPPONENT).strip()
            if answer.startswith("C"):
                return GameMode.PVC
            if answer.startswith("P"):
                return GameMode.PVP
            self._output(BAD_CHOICE)

    def print_board(self) -> None:
        self._output(render_board(self._controller.board_state))

    def display_turn(self) -> None:
        self._output(f"Player {self._controller.current_side.icon} - your turn.")
        self._output(MOVE_HINT)

    def user_move(self) -> None:
        """Read move text until one applies, then settle any continuation."""
        ctrl = self._controller
        while True:
            text = self._input("Your Move: ").strip()
            try:
                ctrl.apply_move(text)
                break
            except MoveFormatError as exc:
                _LOGGER.debug("Rejected move %r: %s", text, exc)
                self._output(BAD_MOVE)

        while ctrl.go_again:
            self._output(OPTIONS_HINT)
            self._output((ctrl.double_jump_options or "").rstrip("\n"))
            raw = self._input("Option: ").strip()
            try:
                ctrl.select_double_option(int(raw))
            except (ValueError, SelectionRangeError):
                self._output(BAD_OPTION)

    def display_results(self) -> None:
        winner = self._controller.state.result.winner
        icon = winner.icon if winner is not None else self._controller.current_side.icon
        self._output(f"Player {icon} Wins!")
