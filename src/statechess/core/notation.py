"""Piece-placement notation for reduced boards.

Uses the first field of FEN restricted to the pieces this package knows
(``K``, ``R``, ``P`` and their lowercase Black forms).  Ranks are listed
from 8 down to 1, which lines up with rows 0 to 7.
"""

from __future__ import annotations

from statechess.core.board import Board
from statechess.core.piece import Piece
from statechess.core.types import make_square

STARTING_LAYOUT = "r3k2r/pppppppp/8/8/8/8/PPPPPPPP/R3K2R"


def board_from_layout(layout: str) -> Board:
    """Parse a placement string into a :class:`Board`."""
    ranks = layout.strip().split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid layout (must contain 8 ranks): {layout!r}")
    board = Board()
    for row, rank_text in enumerate(ranks):
        col = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid layout digit {ch!r}: {layout!r}")
                col += step
            else:
                if col >= 8:
                    raise ValueError(f"Invalid layout rank width: {layout!r}")
                board.place(Piece.from_char(ch), make_square(row, col))
                col += 1
            if col > 8:
                raise ValueError(f"Invalid layout rank width: {layout!r}")
        if col != 8:
            raise ValueError(f"Invalid layout rank width: {layout!r}")
    return board


def board_to_layout(board: Board) -> str:
    """Serialise *board* to a placement string."""
    ranks: list[str] = []
    for row in board.rows():
        text = ""
        empty = 0
        for piece in row:
            if piece is None:
                empty += 1
                continue
            if empty:
                text += str(empty)
                empty = 0
            text += str(piece)
        if empty:
            text += str(empty)
        ranks.append(text)
    return "/".join(ranks)
