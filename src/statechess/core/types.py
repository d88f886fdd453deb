"""Square type and coordinate helpers.

Board layout (matrix orientation, Black at the top):
    row 0 = rank 8, row 7 = rank 1
    col 0 = file a, col 7 = file h

    a8=(0, 0) ... h8=(0, 7)
    ...
    a1=(7, 0) ... h1=(7, 7)

White pawns advance toward row 0, Black pawns toward row 7.
"""

from __future__ import annotations

from typing import NamedTuple


class Square(NamedTuple):
    """Board coordinate as (row, col)."""

    row: int
    col: int

    def __str__(self) -> str:
        return square_name(self)


def make_square(row: int, col: int) -> Square:
    """Create square from row (0–7) and column (0–7)."""
    return Square(row, col)


def is_valid_square(sq: object) -> bool:
    """Whether *sq* is a (row, col) pair of ints inside the board."""
    try:
        row, col = sq  # type: ignore[misc]
    except (TypeError, ValueError):
        return False
    if not isinstance(row, int) or not isinstance(col, int):
        return False
    return 0 <= row < 8 and 0 <= col < 8


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. (7, 0) → 'a1', (0, 7) → 'h8'."""
    row, col = sq
    return chr(ord("a") + col) + str(8 - row)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e2' → (6, 4)."""
    text = name.strip().lower()
    if len(text) != 2 or text[0] not in "abcdefgh" or text[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    rank = int(text[1])
    return Square(7 - (rank - 1), ord(text[0]) - ord("a"))


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = (Square(0, c) for c in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Square(1, c) for c in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Square(2, c) for c in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Square(3, c) for c in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Square(4, c) for c in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Square(5, c) for c in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Square(6, c) for c in range(8))
A1, B1, C1, D1, E1, F1, G1, H1 = (Square(7, c) for c in range(8))
