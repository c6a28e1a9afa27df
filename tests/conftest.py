"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


def _is_ui_test(request: pytest.FixtureRequest) -> bool:
    return "ui" in Path(str(request.node.fspath)).parts


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QApplication for UI tests."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture(autouse=True)
def _cleanup_qt_widgets(
    request: pytest.FixtureRequest,
) -> Iterator[None]:
    """Ensure UI tests do not leak top-level widgets into the next test."""
    if not _is_ui_test(request):
        yield
        return

    app = request.getfixturevalue("qapp")
    yield

    for widget in list(app.topLevelWidgets()):
        widget.close()
    app.processEvents()


# ── Board layouts shared by several test modules ────────────────────────────

# x on 2b jumps 3c to 4d, then may take either 5e (landing 6f) or 5c
# (landing 6b).
TWO_OPTION_LAYOUT = (
    "________/________/________/__o_o___/________/__o_____/_x______/________"
)

# x on 2b jumps 3c to 4d, then must take 5e, landing on 6f: o is wiped out.
AUTO_CHAIN_LAYOUT = (
    "________/________/________/____o___/________/__o_____/_x______/________"
)


@pytest.fixture
def two_option_layout() -> str:
    return TWO_OPTION_LAYOUT


@pytest.fixture
def auto_chain_layout() -> str:
    return AUTO_CHAIN_LAYOUT
