"""BoardScene — QGraphicsScene that draws the draughts board and pieces."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtCore import QObject, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsEllipseItem,
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from checkie.core.enums import Side
from checkie.core.types import BOARD_SIZE, FILES, Square, is_valid_square
from checkie.ui.styles.theme import BoardTheme

if TYPE_CHECKING:
    from collections.abc import Iterable

    from checkie.core.board import Board


class BoardScene(QGraphicsScene):
    """Renders the board, rank/file labels, highlights, and pieces.

    Signals:
        square_clicked(int, int): row and column of a clicked square.
    """

    square_clicked = pyqtSignal(int, int)

    TILE = 60  # px per square
    MARGIN = 20  # px reserved for coordinate labels
    PIECE_RADIUS = 20

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._board: Board | None = None

        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._piece_items: dict[Square, QGraphicsEllipseItem] = {}
        self._piece_sides: dict[Square, Side] = {}
        self._highlight_items: list[QGraphicsRectItem] = []
        self._coord_items: list[QGraphicsSimpleTextItem] = []

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_board(self, board: Board) -> None:
        """Update the displayed board (full redraw of pieces)."""
        self._board = board
        self.clear_highlights()
        self._sync_pieces()

    def highlight_squares(self, squares: Iterable[Square], color: QColor) -> None:
        for sq in squares:
            rect = self._make_rect(sq, color)
            rect.setZValue(0.5)
            self._highlight_items.append(rect)

    def clear_highlights(self) -> None:
        for item in self._highlight_items:
            self.removeItem(item)
        self._highlight_items.clear()

    @property
    def theme(self) -> BoardTheme:
        return self._theme

    def piece_squares(self, side: Side) -> list[Square]:
        """Squares currently drawn with a *side* piece."""
        return sorted(sq for sq, s in self._piece_sides.items() if s is side)

    def square_at(self, x: float, y: float) -> Square | None:
        """Board square under scene coordinates, if any."""
        t = self.TILE
        col = int((x - self.MARGIN) // t)
        row = int((y - self.MARGIN) // t)
        sq = (row, col)
        return sq if is_valid_square(sq) else None

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        t = self.TILE
        m = self.MARGIN
        font = QFont("Helvetica Neue", 10)

        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                is_dark = (row + col) % 2 == 1
                color = self._theme.dark_square if is_dark else self._theme.light_square
                rect = self._make_rect((row, col), color)
                rect.setZValue(0)
                self._square_items[(row, col)] = rect

        for i in range(BOARD_SIZE):
            rank = QGraphicsSimpleTextItem(str(BOARD_SIZE - i))
            rank.setPos(4, m + i * t + t / 2 - 8)
            file = QGraphicsSimpleTextItem(FILES[i])
            file.setPos(m + i * t + t / 2 - 4, 2)
            for txt in (rank, file):
                txt.setFont(font)
                txt.setBrush(QBrush(self._theme.coord_text))
                self.addItem(txt)
                self._coord_items.append(txt)

        self.setSceneRect(0, 0, m + BOARD_SIZE * t, m + BOARD_SIZE * t)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the current board."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()
        self._piece_sides.clear()

        if self._board is None:
            return

        t = self.TILE
        r = self.PIECE_RADIUS
        for side in Side:
            for row, col in self._board.pieces(side):
                cx = self.MARGIN + col * t + t / 2
                cy = self.MARGIN + row * t + t / 2
                item = QGraphicsEllipseItem(cx - r, cy - r, 2 * r, 2 * r)
                item.setBrush(QBrush(self._theme.piece_color(side)))
                item.setPen(QPen(Qt.PenStyle.NoPen))
                item.setZValue(1)
                self.addItem(item)
                self._piece_items[(row, col)] = item
                self._piece_sides[(row, col)] = side

    # ── Mouse events ─────────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is None or event.button() != Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return
        pos = event.scenePos()
        sq = self.square_at(pos.x(), pos.y())
        if sq is not None:
            self.square_clicked.emit(sq[0], sq[1])
        event.accept()

    # ── Helpers ──────────────────────────────────────────────────────────

    def _make_rect(self, sq: Square, color: QColor) -> QGraphicsRectItem:
        t = self.TILE
        row, col = sq
        rect = QGraphicsRectItem(self.MARGIN + col * t, self.MARGIN + row * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        self.addItem(rect)
        return rect
