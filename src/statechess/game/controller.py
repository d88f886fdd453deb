"""GameController — the owner of the board and the phase machine.

Coordinates: GameState, Rules, the transition table.
Emits events via simple callbacks so the console / tests can subscribe.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field

from statechess.core.board import Board
from statechess.core.enums import Color, PieceType
from statechess.core.move import Move
from statechess.core.notation import board_from_layout
from statechess.core.rules import Rules
from statechess.game.commands import Command
from statechess.game.interfaces import (
    CommandKind,
    CommandResult,
    ErrorKind,
    GamePhase,
    Verdict,
)
from statechess.game.state import (
    GameState,
    MoveRecord,
    PhaseState,
    accepts,
    advance,
    transition,
)

_LOGGER = logging.getLogger(__name__)


def _validate_layout(layout: str) -> None:
    board = board_from_layout(layout)
    for color in Color:
        kings = board.pieces(color, PieceType.KING)
        if len(kings) != 1:
            raise ValueError(f"Layout needs exactly one {color} king: {layout!r}")


# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, GameState], None]
PhaseCallback = Callable[[PhaseState], None]
AnnounceCallback = Callable[[str], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)
    on_announce: list[AnnounceCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Runs one game: validates commands, applies moves, switches turns,
    drives phase transitions and notifies listeners.

    Rule knowledge stays in :class:`Rules`; the controller only turns the
    engine's answers into :class:`Verdict` values for the transition table.
    Each command holds the controller lock from validation to the final
    transition, so board, side to move and phase always change together.
    """

    __slots__ = ("_state", "_lock", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self._lock = threading.RLock()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def phase(self) -> PhaseState:
        return self._state.phase

    @property
    def board(self) -> Board:
        return self._state.board

    @property
    def side_to_move(self) -> Color:
        return self._state.side_to_move

    # ── Commands ─────────────────────────────────────────────────────────

    def new_game(self, layout: str | None = None) -> None:
        """Enter Setup with the reduced layout or a placement string.

        Only allowed before the first game and after a game has ended.

        Raises:
            ValueError: *layout* is not a valid placement string.
            RuntimeError: a game is still in progress.
        """
        if layout is not None:
            _validate_layout(layout)
        with self._lock:
            if self._state.phase.phase not in (GamePhase.SETUP, GamePhase.GAME_OVER):
                raise RuntimeError(f"Cannot start a new game in {self._state.phase}.")
            self._state.start_layout = layout
            self._enter(PhaseState.setup())

    def submit_move(self, move: Move) -> CommandResult:
        with self._lock:
            phase = self._state.phase
            if not accepts(phase, CommandKind.MOVE):
                return self._wrong_phase(CommandKind.MOVE)

            board = self._state.board
            mover = self._state.side_to_move
            if not Rules.is_legal(board, move.from_sq, move.to_sq, mover):
                _LOGGER.debug("Rejected illegal move %s for %s", move, mover)
                return CommandResult.rejected(
                    ErrorKind.ILLEGAL_MOVE, f"Illegal move {move} for {mover}."
                )

            piece = board[move.from_sq]
            captured = board.remove(move.to_sq)
            board.relocate(move.from_sq, move.to_sq)
            self._state.side_to_move = mover.opposite

            verdict = self._classify(mover.opposite)
            record = MoveRecord(
                move=move,
                color=mover,
                piece=str(piece),
                captured=str(captured) if captured is not None else None,
                verdict=verdict,
            )
            self._state.move_history.append(record)
            self._enter(transition(phase, CommandKind.MOVE, verdict))
            self._emit_move(record)
            return CommandResult.ok(f"{mover} plays {move}.")

    def resign(self) -> CommandResult:
        with self._lock:
            phase = self._state.phase
            if not accepts(phase, CommandKind.RESIGN):
                return self._wrong_phase(CommandKind.RESIGN)
            side = self._state.side_to_move
            self._enter(transition(phase, CommandKind.RESIGN))
            return CommandResult.ok(f"{side} resigns.")

    def request_check(self) -> CommandResult:
        """Ask the engine whether the side to move is in check."""
        with self._lock:
            phase = self._state.phase
            if not accepts(phase, CommandKind.CHECK):
                return self._wrong_phase(CommandKind.CHECK)
            side = self._state.side_to_move
            verdict = self._classify(side)
            new_phase = transition(phase, CommandKind.CHECK, verdict)
            if new_phase != phase:
                self._enter(new_phase)
            if verdict == Verdict.NORMAL:
                return CommandResult.ok(f"{side} is not in check.")
            return CommandResult.ok(f"{side} is in check.")

    def reset(self) -> CommandResult:
        with self._lock:
            phase = self._state.phase
            if not accepts(phase, CommandKind.RESET):
                return self._wrong_phase(CommandKind.RESET)
            self._enter(transition(phase, CommandKind.RESET))
            return CommandResult.ok("New game started.")

    def execute(self, command: Command) -> CommandResult:
        """Dispatch a parsed state-machine command."""
        if command.kind == CommandKind.MOVE and command.move is not None:
            return self.submit_move(command.move)
        if command.kind == CommandKind.RESIGN:
            return self.resign()
        if command.kind == CommandKind.CHECK:
            return self.request_check()
        if command.kind == CommandKind.RESET:
            return self.reset()
        return CommandResult.rejected(
            ErrorKind.MALFORMED, f"'{command.kind.name.lower()}' is not a game command."
        )

    # ── Internal helpers ─────────────────────────────────────────────────

    def _classify(self, color: Color) -> Verdict:
        board = self._state.board
        if Rules.is_checkmated(board, color):
            return Verdict.CHECKMATE
        if Rules.is_in_check(board, color):
            return Verdict.CHECK
        return Verdict.NORMAL

    def _enter(self, phase: PhaseState) -> None:
        """Switch to *phase*, run its entry action, then follow auto-transitions."""
        current: PhaseState | None = phase
        while current is not None:
            _LOGGER.debug("Phase %s -> %s", self._state.phase, current)
            self._state.phase = current
            self._run_entry_action(current)
            self._emit_phase(current)
            current = advance(current)

    def _run_entry_action(self, phase: PhaseState) -> None:
        if phase.phase == GamePhase.SETUP:
            layout = self._state.start_layout
            self._state.board = (
                board_from_layout(layout) if layout is not None else Board.initial()
            )
            self._state.side_to_move = Color.WHITE
            self._state.move_history.clear()
            _LOGGER.info("New game initialised, white moves first")
            self._emit_announce("New game initialized. White moves first.")
        elif phase.phase == GamePhase.CHECKMATE:
            winner = phase.side
            assert winner is not None
            _LOGGER.info("Checkmate, %s wins", winner)
            self._emit_announce(f"[CHECKMATE] {winner} wins. {winner.opposite} loses.")
        elif phase.phase == GamePhase.GAME_OVER:
            _LOGGER.info("Game over: %s", phase.reason)
            self._emit_announce(f"[END] Game over: {phase.reason}")

    def _wrong_phase(self, command: CommandKind) -> CommandResult:
        return CommandResult.rejected(
            ErrorKind.WRONG_PHASE,
            f"'{command.name.lower()}' is not allowed in {self._state.phase}.",
        )

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._state)

    def _emit_phase(self, phase: PhaseState) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)

    def _emit_announce(self, message: str) -> None:
        for cb in self.events.on_announce:
            cb(message)
