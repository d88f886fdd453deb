"""Core domain layer — board, pieces and the rule engine.

Quick start::

    from statechess.core import Board, Color, Rules, parse_square

    board = Board.initial()
    Rules.is_legal(board, parse_square("e2"), parse_square("e4"), Color.WHITE)
"""

from statechess.core.board import Board
from statechess.core.enums import Color, PieceType
from statechess.core.move import Move
from statechess.core.notation import STARTING_LAYOUT, board_from_layout, board_to_layout
from statechess.core.piece import Piece
from statechess.core.rules import Rules
from statechess.core.types import (
    Square,
    is_valid_square,
    make_square,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "Square",
    "is_valid_square",
    "make_square",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "Piece",
    "Rules",
    # Notation
    "STARTING_LAYOUT",
    "board_from_layout",
    "board_to_layout",
]
