"""Move value object (coordinate notation)."""

from __future__ import annotations

from dataclasses import dataclass

from statechess.core.types import Square, parse_square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single move."""

    from_sq: Square
    to_sq: Square

    # ── Display / parsing ────────────────────────────────────────────────

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"

    @classmethod
    def parse(cls, text: str) -> Move:
        """Parse ``"e2 e4"`` or ``"e2e4"`` into a move."""
        parts = text.split()
        if len(parts) == 1 and len(parts[0]) == 4:
            parts = [parts[0][:2], parts[0][2:]]
        if len(parts) != 2:
            raise ValueError(f"Invalid move format (expected 'e2 e4'): {text!r}")
        return cls(parse_square(parts[0]), parse_square(parts[1]))
