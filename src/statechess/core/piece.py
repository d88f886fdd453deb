"""Piece record."""

from __future__ import annotations

from dataclasses import dataclass

from statechess.core.enums import Color, PieceType
from statechess.core.types import Square

# Symbol character ↔ (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "R": (Color.WHITE, PieceType.ROOK),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "r": (Color.BLACK, PieceType.ROOK),
    "k": (Color.BLACK, PieceType.KING),
}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.KING): "♚",
}

_SYMBOLS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(slots=True)
class Piece:
    """A piece on the board.

    ``position`` mirrors the board slot holding the piece; it is kept in
    sync by :class:`~statechess.core.board.Board` and is ``None`` while the
    piece is off the board.
    """

    color: Color
    piece_type: PieceType
    position: Square | None = None

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Board character (uppercase = white, lowercase = black)."""
        return _SYMBOLS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str, position: Square | None = None) -> Piece:
        """Create piece from its board character, e.g. 'R' → white rook."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype, position)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♜."""
        return _UNICODE[(self.color, self.piece_type)]
