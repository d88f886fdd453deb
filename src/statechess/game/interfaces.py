"""Enumerations and result types shared by the game layer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a game."""

    SETUP = auto()
    NORMAL_PLAY = auto()
    CHECK = auto()
    CHECKMATE = auto()
    GAME_OVER = auto()


class CommandKind(IntEnum):
    """Commands a player can issue.

    Only ``MOVE``, ``RESIGN``, ``RESET`` and ``CHECK`` reach the state
    machine; the rest are handled by the front end.
    """

    MOVE = auto()
    RESIGN = auto()
    RESET = auto()
    CHECK = auto()
    SHOW = auto()
    MOVES = auto()
    HELP = auto()
    QUIT = auto()


class Verdict(IntEnum):
    """Engine classification fed into a transition."""

    NORMAL = auto()
    CHECK = auto()
    CHECKMATE = auto()


class ErrorKind(IntEnum):
    """Why a command was turned down."""

    MALFORMED = auto()
    ILLEGAL_MOVE = auto()
    WRONG_PHASE = auto()


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Outcome of one command."""

    accepted: bool
    message: str = ""
    error: ErrorKind | None = None

    @classmethod
    def ok(cls, message: str = "") -> CommandResult:
        return cls(True, message)

    @classmethod
    def rejected(cls, error: ErrorKind, message: str) -> CommandResult:
        return cls(False, message, error)
