"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

    from checkie.config import AppConfig

_LOGGER = logging.getLogger(__name__)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from checkie.ui.styles.theme import APP_STYLE

    app.setApplicationName("Checkie")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(config: AppConfig | None = None, argv: list[str] | None = None) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from checkie.ui.main_window import MainWindow

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow(config)
    window.show()
    _LOGGER.debug("Main window shown")

    return app.exec()
