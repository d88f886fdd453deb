"""Interactive console — reads command lines and drives a GameController."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from rich.console import Console

from statechess.core.rules import Rules
from statechess.game.commands import HELP_TEXT, parse_command
from statechess.game.controller import GameController
from statechess.game.interfaces import CommandKind, CommandResult, GamePhase
from statechess.game.state import GameState, MoveRecord
from statechess.ui.render import render_board
from statechess.ui.settings import AppSettings

_LOGGER = logging.getLogger(__name__)


class GameConsole:
    """Text front end for one :class:`GameController`.

    ``show``, ``moves``, ``help`` and ``quit`` are answered here; everything
    else goes to the controller.
    """

    def __init__(
        self,
        controller: GameController,
        settings: AppSettings | None = None,
        console: Console | None = None,
    ) -> None:
        self._controller = controller
        self._settings = settings or AppSettings()
        self._console = console or Console(highlight=False)
        controller.events.on_announce.append(self._say)
        controller.events.on_move.append(self._log_move)

    @property
    def controller(self) -> GameController:
        return self._controller

    def prompt(self) -> str:
        phase = self._controller.phase
        side = str(self._controller.side_to_move).upper()
        if phase.phase == GamePhase.CHECK:
            return f"[CHECK] {side} must respond > "
        if phase.phase == GamePhase.GAME_OVER:
            return "[END] > "
        return f"[Play] {side} to move > "

    def show(self) -> None:
        self._say(render_board(self._controller.board, self._settings))

    def handle_line(self, line: str) -> bool:
        """Process one input line. Returns ``False`` when the user quits."""
        if not line.strip():
            return True
        try:
            command = parse_command(line)
        except ValueError as exc:
            self._error(str(exc))
            return True

        if command.kind == CommandKind.QUIT:
            return False
        if command.kind == CommandKind.HELP:
            self._say(HELP_TEXT)
        elif command.kind == CommandKind.SHOW:
            self.show()
        elif command.kind == CommandKind.MOVES:
            self._list_moves()
        else:
            self._report(self._controller.execute(command))
        return True

    def run(self, lines: Iterable[str]) -> None:
        """Drive the game from *lines* until they run out or the user quits."""
        self._say("--- statechess ---")
        self._say("Type 'help' for commands, 'quit' or 'exit' to leave.")
        self._console.print(self.prompt(), end="", markup=False)
        for line in lines:
            if not self.handle_line(line):
                break
            self._console.print(self.prompt(), end="", markup=False)
        self._say("\n--- Game ended ---")

    # ── Internal helpers ─────────────────────────────────────────────────

    def _list_moves(self) -> None:
        if self._controller.state.is_game_over:
            self._error("The game is over. Use 'reset' to start a new one.")
            return
        moves = Rules.legal_moves(self._controller.board, self._controller.side_to_move)
        self._say(" ".join(str(m) for m in moves) or "No legal moves.")

    def _log_move(self, record: MoveRecord, state: GameState) -> None:
        suffix = "+" if record.was_check else ""
        _LOGGER.info("Ply %d: %s %s%s", state.ply_count, record.piece, record.move, suffix)

    def _report(self, result: CommandResult) -> None:
        if result.accepted:
            if result.message:
                self._say(result.message)
            return
        _LOGGER.debug("Command rejected (%s): %s", result.error, result.message)
        self._error(result.message)

    def _say(self, message: str) -> None:
        self._console.print(message, markup=False)

    def _error(self, message: str) -> None:
        self._console.print(message, style="bold red", markup=False)
