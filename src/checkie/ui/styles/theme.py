"""Visual theme constants and QSS styles for Checkie."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor

from checkie.core.enums import Side


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the draughts board."""

    light_square: QColor
    dark_square: QColor
    x_piece: QColor
    o_piece: QColor
    highlight_selected: QColor  # piece picked as move origin
    highlight_target: QColor  # pending continuation landings
    coord_text: QColor

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(255, 255, 255),
            dark_square=QColor(0, 0, 0),
            x_piece=QColor(0, 128, 0),  # green
            o_piece=QColor(255, 0, 0),  # red
            highlight_selected=QColor(255, 255, 0, 110),
            highlight_target=QColor(0, 160, 255, 110),
            coord_text=QColor(224, 224, 224),
        )

    def piece_color(self, side: Side) -> QColor:
        return self.x_piece if side is Side.X else self.o_piece


WARNING_STYLE = "color: #d03030;"

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
    font-family: "Helvetica Neue", sans-serif;
}

QLineEdit {
    background: #1e1e1e;
    color: #d4d4d4;
    border: 1px solid #3c3c3c;
    padding: 4px;
}

QPushButton {
    background: #3c3f41;
    color: #e0e0e0;
    border: 1px solid #555;
    border-radius: 4px;
    padding: 6px 12px;
}

QPushButton:hover {
    background: #4c5052;
}
"""
