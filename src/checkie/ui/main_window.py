"""MainWindow — top-level window: opponent choice, board and end screen."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from checkie.core.errors import MoveFormatError, SelectionRangeError
from checkie.core.notation import move_text
from checkie.core.types import Square
from checkie.game.controller import GameController
from checkie.game.interfaces import GameMode
from checkie.ui.board.board_view import BoardView
from checkie.ui.console import BAD_MOVE, BAD_OPTION, MOVE_HINT, OPTIONS_HINT
from checkie.ui.styles.theme import WARNING_STYLE

if TYPE_CHECKING:
    from checkie.config import AppConfig

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window for Checkie.

    Pages, in order: opponent choice, game, game over.  Moves are typed in
    the text field or picked with two clicks on the board.
    """

    CHOICE_PAGE = 0
    GAME_PAGE = 1
    END_PAGE = 2

    def __init__(
        self,
        config: AppConfig | None = None,
        controller: GameController | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Checkie")
        self.setMinimumSize(560, 680)

        self._config = config
        self._controller = controller if controller is not None else GameController()
        self._selected: Square | None = None

        self._setup_ui()
        self._connect_signals()
        if config is not None and config.mode is not None:
            self.start_game(config.mode)

    # ── UI construction ──────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        self._stack = QStackedWidget()
        self._stack.addWidget(self._build_choice_page())
        self._stack.addWidget(self._build_game_page())
        self._stack.addWidget(self._build_end_page())
        self.setCentralWidget(self._stack)

    def _build_choice_page(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)
        layout.addStretch()
        prompt = QLabel("Choose your opponent:")
        prompt.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(prompt)

        buttons = QHBoxLayout()
        self._player_btn = QPushButton("Player")
        self._computer_btn = QPushButton("Computer")
        buttons.addWidget(self._player_btn)
        buttons.addWidget(self._computer_btn)
        layout.addLayout(buttons)
        layout.addStretch()
        return page

    def _build_game_page(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)

        self._turn_label = QLabel()
        self._turn_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._turn_label)

        self._board_view = BoardView()
        layout.addWidget(self._board_view, stretch=1)

        self._warning_label = QLabel()
        self._warning_label.setStyleSheet(WARNING_STYLE)
        layout.addWidget(self._warning_label)

        self._options_label = QLabel()
        layout.addWidget(self._options_label)

        self._directions_label = QLabel(MOVE_HINT)
        self._directions_label.setWordWrap(True)
        layout.addWidget(self._directions_label)

        entry = QHBoxLayout()
        self._move_edit = QLineEdit()
        self._move_edit.setMaxLength(5)
        self._move_edit.setPlaceholderText("3a-4b")
        self._submit_btn = QPushButton("Submit")
        entry.addWidget(self._move_edit, stretch=1)
        entry.addWidget(self._submit_btn)
        layout.addLayout(entry)

        options = QHBoxLayout()
        self._option_btns = (QPushButton("Option 1"), QPushButton("Option 2"))
        for btn in self._option_btns:
            btn.hide()
            options.addWidget(btn)
        layout.addLayout(options)
        return page

    def _build_end_page(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)

        title = QLabel("GAME OVER")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(title)

        self._winner_label = QLabel()
        self._winner_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._winner_label)

        self._end_board_view = BoardView()
        layout.addWidget(self._end_board_view, stretch=1)

        self._close_btn = QPushButton("Close")
        layout.addWidget(self._close_btn)
        return page

    def _connect_signals(self) -> None:
        self._player_btn.clicked.connect(lambda: self.start_game(GameMode.PVP))
        self._computer_btn.clicked.connect(lambda: self.start_game(GameMode.PVC))
        self._submit_btn.clicked.connect(lambda: self.handle_move())
        self._move_edit.returnPressed.connect(lambda: self.handle_move())
        self._board_view.square_clicked.connect(self._on_square_clicked)
        for number, btn in enumerate(self._option_btns, start=1):
            btn.clicked.connect(lambda _checked=False, n=number: self.select_option(n))
        self._close_btn.clicked.connect(self.close)

    # ── Accessors ────────────────────────────────────────────────────────

    @property
    def controller(self) -> GameController:
        return self._controller

    @property
    def current_page(self) -> int:
        return self._stack.currentIndex()

    @property
    def turn_status(self) -> str:
        return self._turn_label.text()

    @property
    def warning(self) -> str:
        return self._warning_label.text()

    @property
    def options_text(self) -> str:
        return self._options_label.text()

    @property
    def winner_text(self) -> str:
        return self._winner_label.text()

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    def option_buttons_visible(self) -> bool:
        return all(not btn.isHidden() for btn in self._option_btns)

    # ── Game flow ────────────────────────────────────────────────────────

    def start_game(self, mode: GameMode, layout: str | None = None) -> None:
        rng = self._config.make_rng() if self._config is not None else None
        self._controller.new_game(mode, layout=layout, rng=rng)
        _LOGGER.info("Started %s game", mode.value)
        self._selected = None
        self._warning_label.clear()
        self._stack.setCurrentIndex(self.GAME_PAGE)
        self.refresh()

    def handle_move(self, text: str | None = None) -> bool:
        """Submit *text* (or the text field) as the current player's move."""
        if text is None:
            text = self._move_edit.text()
        text = text.strip()
        try:
            self._controller.apply_move(text)
        except MoveFormatError as exc:
            _LOGGER.debug("Rejected move %r: %s", text, exc)
            self._warning_label.setText(BAD_MOVE)
            return False

        self._warning_label.clear()
        self._move_edit.clear()
        if self._controller.go_again:
            self._show_options()
            self.refresh()
            return True
        self.finish_turn()
        return True

    def select_option(self, number: int) -> bool:
        """Pick continuation *number* (1-based) for the pending jump."""
        try:
            self._controller.select_double_option(number)
        except SelectionRangeError as exc:
            _LOGGER.debug("Rejected option %d: %s", number, exc)
            self._warning_label.setText(BAD_OPTION)
            return False
        self._warning_label.clear()
        self._hide_options()
        self.finish_turn()
        return True

    def finish_turn(self) -> None:
        """Check for a win, pass the turn and let the computer reply."""
        ctrl = self._controller
        if ctrl.check_win():
            self.show_end()
            return
        ctrl.swap_turn()

        player = ctrl.current_player
        if player is not None and not player.is_human:
            text = ctrl.play_computer_turn()
            _LOGGER.info("Computer plays %s", text)
            if ctrl.check_win():
                self.show_end()
                return
            ctrl.swap_turn()
        self.refresh()

    def refresh(self) -> None:
        ctrl = self._controller
        self._turn_label.setText(f"{ctrl.current_side.color_name}s turn to move")
        scene = self._board_view.board_scene
        scene.set_board(ctrl.board_state)
        if self._selected is not None:
            scene.highlight_squares([self._selected], scene.theme.highlight_selected)
        locations = ctrl.double_jump_locations
        if locations:
            scene.highlight_squares(locations, scene.theme.highlight_target)

    def show_end(self) -> None:
        winner = self._controller.state.result.winner
        name = winner.color_name if winner is not None else "Nobody"
        self._winner_label.setText(f"{name} wins!")
        self._end_board_view.board_scene.set_board(self._controller.board_state)
        self._hide_options()
        self._stack.setCurrentIndex(self.END_PAGE)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _show_options(self) -> None:
        options = (self._controller.double_jump_options or "").rstrip("\n")
        self._options_label.setText(f"{OPTIONS_HINT}\n{options}")
        for btn in self._option_btns:
            btn.show()
        self._move_edit.setEnabled(False)
        self._submit_btn.setEnabled(False)

    def _hide_options(self) -> None:
        self._options_label.clear()
        for btn in self._option_btns:
            btn.hide()
        self._move_edit.setEnabled(True)
        self._submit_btn.setEnabled(True)

    def _on_square_clicked(self, row: int, col: int) -> None:
        ctrl = self._controller
        if ctrl.go_again or ctrl.state.is_game_over:
            return
        sq = (row, col)
        if self._selected is None:
            if ctrl.board_state[sq] is ctrl.current_side:
                self._selected = sq
                self.refresh()
            return
        origin, self._selected = self._selected, None
        if origin == sq:
            self.refresh()
            return
        if not self.handle_move(move_text(origin, sq)):
            self.refresh()
