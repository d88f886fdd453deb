"""Tests for the text board renderer."""

import pytest

from statechess.core.board import Board
from statechess.core.notation import board_from_layout
from statechess.ui.render import render_board
from statechess.ui.settings import AppSettings


class TestRenderBoard:
    def test_initial_board_with_coordinates(self) -> None:
        text = render_board(Board.initial())
        lines = text.splitlines()
        assert lines[0] == "  A B C D E F G H"
        assert lines[1] == "8 r . . . k . . r 8"
        assert lines[2] == "7 p p p p p p p p 7"
        assert lines[7] == "2 P P P P P P P P 2"
        assert lines[8] == "1 R . . . K . . R 1"
        assert lines[-1] == "  A B C D E F G H"

    def test_without_coordinates(self) -> None:
        settings = AppSettings(show_coordinates=False)
        lines = render_board(board_from_layout("k7/2K5/8/8/8/8/8/R7"), settings).splitlines()
        assert len(lines) == 8
        assert lines[0] == "k . . . . . . ."
        assert lines[1] == ". . K . . . . ."
        assert lines[7] == "R . . . . . . ."

    def test_custom_empty_square(self) -> None:
        settings = AppSettings(show_coordinates=False, empty_square="-")
        lines = render_board(Board(), settings).splitlines()
        assert lines[0] == "- - - - - - - -"

    def test_unicode(self) -> None:
        settings = AppSettings(show_coordinates=False, use_unicode=True)
        lines = render_board(board_from_layout("k7/8/8/8/8/8/8/R3K3"), settings).splitlines()
        assert lines[0].startswith("♚")
        assert lines[7] == "♖ . . . ♔ . . ."


class TestAppSettings:
    def test_defaults(self) -> None:
        settings = AppSettings()
        assert settings.show_coordinates
        assert not settings.use_unicode
        assert settings.empty_square == "."
        assert settings.log_level == "WARNING"

    def test_log_level_normalised(self) -> None:
        assert AppSettings(log_level="debug").log_level == "DEBUG"

    def test_rejects_unknown_log_level(self) -> None:
        with pytest.raises(ValueError):
            AppSettings(log_level="LOUD")

    def test_rejects_wide_empty_square(self) -> None:
        with pytest.raises(ValueError):
            AppSettings(empty_square="..")
