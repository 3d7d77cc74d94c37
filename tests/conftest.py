"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator

import pytest

from minitchess.core.board import Board
from minitchess.core.notation import board_from_layout

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"

# White's only move (Kxd2) leaves Black without a single legal move.
STALEMATE_WIN_LAYOUT = "kp2P/pp2P/pp2P/pp2P/pp1pP/pp1PK"


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QCoreApplication for Qt worker tests."""
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


@pytest.fixture
def initial_board() -> Board:
    return Board.initial()


@pytest.fixture
def stalemate_win_board() -> Board:
    return board_from_layout(STALEMATE_WIN_LAYOUT)
