"""User-facing settings for the terminal front end."""

from __future__ import annotations

from dataclasses import dataclass

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Board
    show_coordinates: bool = True
    use_unicode: bool = False
    empty_square: str = "."

    # Diagnostics
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level!r}")
        if len(self.empty_square) != 1:
            raise ValueError("empty_square must be a single character")
