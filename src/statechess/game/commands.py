"""Command reader — turns a text line into a typed :class:`Command`."""

from __future__ import annotations

from dataclasses import dataclass

from statechess.core.move import Move
from statechess.game.interfaces import CommandKind

_KEYWORDS: dict[str, CommandKind] = {
    "move": CommandKind.MOVE,
    "resign": CommandKind.RESIGN,
    "reset": CommandKind.RESET,
    "check": CommandKind.CHECK,
    "show": CommandKind.SHOW,
    "moves": CommandKind.MOVES,
    "help": CommandKind.HELP,
    "quit": CommandKind.QUIT,
    "exit": CommandKind.QUIT,
}

HELP_TEXT = """\
Commands:
  move <from> <to>  play a move, e.g. 'move e2 e4'
  check             ask whether the side to move is in check
  resign            give up the game
  reset             start a new game (after the game is over)
  moves             list legal moves for the side to move
  show              print the board
  help              show this message
  quit / exit       leave"""


@dataclass(frozen=True, slots=True)
class Command:
    """A parsed player command."""

    kind: CommandKind
    move: Move | None = None


def parse_command(line: str) -> Command:
    """Parse one input line.

    Raises:
        ValueError: unknown keyword, wrong token count or bad square.
    """
    tokens = line.strip().lower().split()
    if not tokens:
        raise ValueError("Empty command")

    keyword, args = tokens[0], tokens[1:]
    kind = _KEYWORDS.get(keyword)
    if kind is None:
        raise ValueError(f"Unknown command: {keyword!r}. Type 'help'.")

    if kind == CommandKind.MOVE:
        if len(args) != 2:
            raise ValueError("Invalid move format. Use 'move e2 e4'.")
        return Command(kind, Move.parse(" ".join(args)))

    if args:
        raise ValueError(f"'{keyword}' takes no arguments")
    return Command(kind)
