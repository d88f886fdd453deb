"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from statechess.core.board import Board
from statechess.core.types import Square
from statechess.game.controller import GameController

Snapshot = list[tuple[Square, int, Square | None]]


def _snapshot(board: Board) -> Snapshot:
    return [(sq, id(piece), piece.position) for sq, piece in board.occupied()]


@pytest.fixture
def snapshot() -> Callable[[Board], Snapshot]:
    """Square, piece identity and stored position for every piece."""
    return _snapshot


@pytest.fixture
def controller() -> GameController:
    """Controller with a fresh game in the reduced starting layout."""
    ctrl = GameController()
    ctrl.new_game()
    return ctrl


@pytest.fixture
def make_controller() -> Callable[[str | None], GameController]:
    """Factory for controllers started from a custom layout."""

    def _make(layout: str | None = None) -> GameController:
        ctrl = GameController()
        ctrl.new_game(layout)
        return ctrl

    return _make
