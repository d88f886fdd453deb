"""Move legality, check and checkmate detection.

All queries borrow the caller's board.  Simulated moves are undone before
a query returns, so the board and every piece's stored position look the
same afterwards as before.
"""

from __future__ import annotations

import logging

from statechess.core.board import Board
from statechess.core.enums import Color, PieceType
from statechess.core.move import Move
from statechess.core.piece import Piece
from statechess.core.types import Square, is_valid_square, make_square, parse_square

_LOGGER = logging.getLogger(__name__)

# Rows the pawns start on; double pushes are only allowed from here.
_PAWN_START_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}
# Row delta of a single pawn step.
_PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}


def _coerce_square(value: object) -> Square | None:
    """Accept a ``Square``/tuple or an algebraic name; ``None`` if malformed."""
    if isinstance(value, str):
        try:
            return parse_square(value)
        except ValueError:
            return None
    if not is_valid_square(value):
        return None
    row, col = value  # type: ignore[misc]
    return make_square(row, col)


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    # ── Public queries ───────────────────────────────────────────────────

    @staticmethod
    def is_legal(board: Board, from_sq: object, to_sq: object, color: Color) -> bool:
        """Whether *color* may move the piece on *from_sq* to *to_sq*.

        Malformed squares, an empty or enemy origin, a friendly destination,
        a pattern the piece cannot make and a move that leaves the mover's
        king attacked all yield ``False``.
        """
        src = _coerce_square(from_sq)
        dst = _coerce_square(to_sq)
        if src is None or dst is None or src == dst:
            return False

        mover = board[src]
        if mover is None or mover.color != color:
            return False

        target = board[dst]
        if target is not None and target.color == mover.color:
            return False

        if not Rules.is_pseudo_legal(board, mover, src, dst):
            return False

        return not Rules.leaves_king_in_check(board, src, dst)

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        """Whether any enemy piece attacks *color*'s king."""
        try:
            king_sq = board.king_square(color)
        except ValueError:
            _LOGGER.error("Check test on a board without a %s king", color)
            return False

        enemy = color.opposite
        for sq, piece in board.occupied():
            if piece.color != enemy:
                continue
            if Rules.is_pseudo_legal(board, piece, sq, king_sq):
                return True
        return False

    @staticmethod
    def is_checkmated(board: Board, color: Color) -> bool:
        """In check, and no move of *color* gets out of it."""
        if not Rules.is_in_check(board, color):
            return False

        own = [(sq, piece) for sq, piece in board.occupied() if piece.color == color]
        for from_sq, piece in own:
            for row in range(8):
                for col in range(8):
                    to_sq = make_square(row, col)
                    if to_sq == from_sq:
                        continue
                    if not Rules.is_pseudo_legal(board, piece, from_sq, to_sq):
                        continue
                    if not Rules.leaves_king_in_check(board, from_sq, to_sq):
                        return False
        return True

    @staticmethod
    def legal_moves(board: Board, color: Color) -> list[Move]:
        """Every legal move for *color*, origin squares in row-major order."""
        moves: list[Move] = []
        for from_sq in board.all_pieces(color):
            for row in range(8):
                for col in range(8):
                    to_sq = make_square(row, col)
                    if Rules.is_legal(board, from_sq, to_sq, color):
                        moves.append(Move(from_sq, to_sq))
        return moves

    # ── Movement patterns ────────────────────────────────────────────────

    @staticmethod
    def is_pseudo_legal(board: Board, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
        """Movement rules for *piece*, ignoring whether its own king is exposed."""
        if not is_valid_square(to_sq):
            return False
        target = board[to_sq]
        if target is not None and target.color == piece.color:
            return False

        dr = to_sq[0] - from_sq[0]
        dc = to_sq[1] - from_sq[1]
        if dr == 0 and dc == 0:
            return False

        if piece.piece_type == PieceType.KING:
            return max(abs(dr), abs(dc)) == 1

        if piece.piece_type == PieceType.ROOK:
            if dr != 0 and dc != 0:
                return False
            return Rules._path_clear(board, from_sq, to_sq)

        if piece.piece_type == PieceType.PAWN:
            step = _PAWN_DIRECTION[piece.color]
            if dc == 0 and target is None:
                if dr == step:
                    return True
                if dr == 2 * step and from_sq[0] == _PAWN_START_ROW[piece.color]:
                    return board.is_empty(make_square(from_sq[0] + step, from_sq[1]))
                return False
            # Diagonal capture only; target colour was checked above.
            return abs(dc) == 1 and dr == step and target is not None

        return False

    # ── Simulation ───────────────────────────────────────────────────────

    @staticmethod
    def leaves_king_in_check(board: Board, from_sq: Square, to_sq: Square) -> bool:
        """Play the move on *board*, test the mover's king, then undo it."""
        mover = board[from_sq]
        if mover is None:
            return False
        captured = board.relocate(from_sq, to_sq)
        try:
            return Rules.is_in_check(board, mover.color)
        finally:
            board.restore(from_sq, to_sq, captured)

    @staticmethod
    def _path_clear(board: Board, from_sq: Square, to_sq: Square) -> bool:
        """Every square strictly between the two squares is empty."""
        dr = _sign(to_sq[0] - from_sq[0])
        dc = _sign(to_sq[1] - from_sq[1])
        to_row, to_col = to_sq
        row, col = from_sq[0] + dr, from_sq[1] + dc
        while (row, col) != (to_row, to_col):
            if board[make_square(row, col)] is not None:
                return False
            row += dr
            col += dc
        return True
