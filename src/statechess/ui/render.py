"""Plain-text board rendering."""

from __future__ import annotations

from statechess.core.board import Board
from statechess.ui.settings import AppSettings

_FILES = "  A B C D E F G H"


def render_board(board: Board, settings: AppSettings | None = None) -> str:
    """Render *board* as text, rank 8 at the top.

    Pieces use their board character (uppercase white, lowercase black)
    or their figurine when ``use_unicode`` is set.
    """
    settings = settings or AppSettings()
    lines: list[str] = []
    if settings.show_coordinates:
        lines.append(_FILES)
    for row_idx, row in enumerate(board.rows()):
        cells = []
        for piece in row:
            if piece is None:
                cells.append(settings.empty_square)
            elif settings.use_unicode:
                cells.append(piece.symbol)
            else:
                cells.append(str(piece))
        text = " ".join(cells)
        if settings.show_coordinates:
            rank = 8 - row_idx
            text = f"{rank} {text} {rank}"
        lines.append(text)
    if settings.show_coordinates:
        lines.append(_FILES)
    return "\n".join(lines)
