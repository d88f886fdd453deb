"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator

from statechess.core.enums import Color, PieceType
from statechess.core.piece import Piece
from statechess.core.types import Square, make_square


class Board:
    """Mutable 8x8 grid of optional pieces, indexed by ``Square(row, col)``."""

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [[None] * 8 for _ in range(8)]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        row, col = sq
        return self._grid[row][col]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        row, col = sq
        self._grid[row][col] = piece

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    def rows(self) -> list[list[Piece | None]]:
        """Snapshot of the grid, row 0 (rank 8) first."""
        return [row.copy() for row in self._grid]

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """Yield ``(square, piece)`` for every occupied square, row-major."""
        for row in range(8):
            for col in range(8):
                piece = self._grid[row][col]
                if piece is not None:
                    yield make_square(row, col), piece

    def all_pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*."""
        return [sq for sq, piece in self.occupied() if piece.color == color]

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*."""
        return [
            sq
            for sq, piece in self.occupied()
            if piece.color == color and piece.piece_type == piece_type
        ]

    def king_square(self, color: Color) -> Square:
        """Return the king square for *color*."""
        kings = self.pieces(color, PieceType.KING)
        if not kings:
            raise ValueError(f"No {color.name} king on board")
        return kings[0]

    # -- Mutation -----------------------------------------------------------

    def place(self, piece: Piece, sq: Square) -> None:
        """Put *piece* on *sq*, replacing whatever stood there."""
        self[sq] = piece
        piece.position = sq

    def remove(self, sq: Square) -> Piece | None:
        """Take the piece off *sq* and return it."""
        piece = self[sq]
        self[sq] = None
        if piece is not None:
            piece.position = None
        return piece

    def relocate(self, from_sq: Square, to_sq: Square) -> Piece | None:
        """Move the piece on *from_sq* to *to_sq*; return the captured piece.

        The captured piece keeps its stored position so :meth:`restore`
        can put it back untouched.
        """
        mover = self[from_sq]
        if mover is None:
            raise ValueError(f"No piece on {from_sq}")
        captured = self[to_sq]
        self[to_sq] = mover
        self[from_sq] = None
        mover.position = to_sq
        return captured

    def restore(self, from_sq: Square, to_sq: Square, captured: Piece | None) -> None:
        """Undo :meth:`relocate`."""
        mover = self[to_sq]
        self[from_sq] = mover
        self[to_sq] = captured
        if mover is not None:
            mover.position = from_sq

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Reduced starting layout: kings, rooks and pawns only."""
        b = cls()
        for col in range(8):
            b.place(Piece(Color.WHITE, PieceType.PAWN), make_square(6, col))
            b.place(Piece(Color.BLACK, PieceType.PAWN), make_square(1, col))

        for col, pt in ((0, PieceType.ROOK), (4, PieceType.KING), (7, PieceType.ROOK)):
            b.place(Piece(Color.WHITE, pt), make_square(7, col))
            b.place(Piece(Color.BLACK, pt), make_square(0, col))
        return b
