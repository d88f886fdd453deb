"""Tests for the command-line entry point."""

from typer.testing import CliRunner

from statechess import __version__
from statechess.app import app

runner = CliRunner()


class TestVersion:
    def test_prints_version(self) -> None:
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestPlay:
    def test_plays_piped_game(self) -> None:
        result = runner.invoke(app, ["play"], input="move e2 e4\nmove e7 e5\nquit\n")
        assert result.exit_code == 0
        assert "New game initialized. White moves first." in result.output
        assert "white plays e2e4." in result.output
        assert "black plays e7e5." in result.output

    def test_checkmate_from_layout(self) -> None:
        result = runner.invoke(
            app,
            ["play", "--layout", "k7/2K5/8/8/8/8/8/1R6", "--no-coordinates"],
            input="move b1 a1\n",
        )
        assert result.exit_code == 0
        assert "checkmate by white" in result.output

    def test_bad_layout(self) -> None:
        result = runner.invoke(app, ["play", "--layout", "8/8"], input="quit\n")
        assert result.exit_code != 0

    def test_bad_log_level(self) -> None:
        result = runner.invoke(app, ["play", "--log-level", "LOUD"], input="quit\n")
        assert result.exit_code != 0
