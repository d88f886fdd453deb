"""Game state machine — phase values, the transition table and game data.

Transitions are plain functions over immutable :class:`PhaseState`
values, so every edge of the machine can be exercised without a board or
a controller.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from statechess.core.board import Board
from statechess.core.enums import Color
from statechess.core.move import Move
from statechess.game.interfaces import CommandKind, GamePhase, Verdict

ACCEPTED_COMMANDS: dict[GamePhase, frozenset[CommandKind]] = {
    GamePhase.SETUP: frozenset(),
    GamePhase.NORMAL_PLAY: frozenset(
        {CommandKind.MOVE, CommandKind.RESIGN, CommandKind.CHECK}
    ),
    GamePhase.CHECK: frozenset({CommandKind.MOVE, CommandKind.RESIGN}),
    GamePhase.CHECKMATE: frozenset(),
    GamePhase.GAME_OVER: frozenset({CommandKind.RESET}),
}


@dataclass(frozen=True, slots=True)
class PhaseState:
    """Current phase plus the data that phase carries.

    ``side`` is the side to move in NormalPlay and Check, and the winner
    in Checkmate.  ``reason`` is only set in GameOver.
    """

    phase: GamePhase
    side: Color | None = None
    reason: str | None = None

    # ── Constructors ─────────────────────────────────────────────────────

    @classmethod
    def setup(cls) -> PhaseState:
        return cls(GamePhase.SETUP)

    @classmethod
    def normal_play(cls, side: Color) -> PhaseState:
        return cls(GamePhase.NORMAL_PLAY, side)

    @classmethod
    def check(cls, side: Color) -> PhaseState:
        return cls(GamePhase.CHECK, side)

    @classmethod
    def checkmate(cls, winner: Color) -> PhaseState:
        return cls(GamePhase.CHECKMATE, winner)

    @classmethod
    def game_over(cls, reason: str) -> PhaseState:
        return cls(GamePhase.GAME_OVER, reason=reason)

    def __str__(self) -> str:
        name = self.phase.name.replace("_", " ").title().replace(" ", "")
        if self.phase == GamePhase.GAME_OVER:
            return f"{name}({self.reason})"
        if self.side is not None:
            return f"{name}({self.side})"
        return name


def accepts(state: PhaseState, command: CommandKind) -> bool:
    """Whether *command* is valid in *state*'s phase."""
    return command in ACCEPTED_COMMANDS[state.phase]


def transition(
    state: PhaseState,
    command: CommandKind,
    verdict: Verdict | None = None,
) -> PhaseState:
    """Return the state reached by applying *command* with *verdict*.

    For ``MOVE`` the verdict classifies the opponent after the move; for
    ``CHECK`` it classifies the side to move.  Commands the phase does not
    accept, and moves without a verdict, leave *state* as it is.
    """
    if not accepts(state, command):
        return state

    if command == CommandKind.RESET:
        return PhaseState.setup()

    mover = state.side
    assert mover is not None

    if command == CommandKind.RESIGN:
        return PhaseState.game_over(f"resigned by {mover}")

    if command == CommandKind.MOVE:
        opponent = mover.opposite
        if verdict == Verdict.CHECKMATE:
            return PhaseState.checkmate(mover)
        if verdict == Verdict.CHECK:
            return PhaseState.check(opponent)
        if verdict == Verdict.NORMAL:
            return PhaseState.normal_play(opponent)
        return state

    if command == CommandKind.CHECK:
        if verdict == Verdict.CHECKMATE:
            return PhaseState.checkmate(mover.opposite)
        if verdict == Verdict.CHECK:
            return PhaseState.check(mover)
        return state

    return state


def advance(state: PhaseState) -> PhaseState | None:
    """Automatic successor of a transient phase, or ``None``."""
    if state.phase == GamePhase.SETUP:
        return PhaseState.normal_play(Color.WHITE)
    if state.phase == GamePhase.CHECKMATE:
        assert state.side is not None
        return PhaseState.game_over(f"checkmate by {state.side}")
    return None


# ── Game data ────────────────────────────────────────────────────────────────


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    color: Color
    piece: str
    captured: str | None = None
    verdict: Verdict = Verdict.NORMAL

    @property
    def was_check(self) -> bool:
        return self.verdict in (Verdict.CHECK, Verdict.CHECKMATE)


@dataclass
class GameState:
    """Board, side to move and phase: the complete state of one game.

    This is a pure data class; :class:`~statechess.game.controller.GameController`
    is the only writer.
    """

    board: Board = field(default_factory=Board)
    side_to_move: Color = Color.WHITE
    phase: PhaseState = field(default_factory=PhaseState.setup)
    move_history: list[MoveRecord] = field(default_factory=list)
    start_layout: str | None = None

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.phase.phase == GamePhase.GAME_OVER

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)
