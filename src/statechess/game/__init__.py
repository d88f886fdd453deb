"""Game management layer — controller, phase machine, command reader.

Quick start::

    from statechess.game import GameController, parse_command

    ctrl = GameController()
    ctrl.new_game()
    ctrl.execute(parse_command("move e2 e4"))
"""

from statechess.game.commands import HELP_TEXT, Command, parse_command
from statechess.game.controller import GameController, GameEvents
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

__all__ = [
    # Interfaces
    "CommandKind",
    "CommandResult",
    "ErrorKind",
    "GamePhase",
    "Verdict",
    # State machine
    "PhaseState",
    "accepts",
    "advance",
    "transition",
    # Concrete
    "Command",
    "GameController",
    "GameEvents",
    "GameState",
    "HELP_TEXT",
    "MoveRecord",
    "parse_command",
]
