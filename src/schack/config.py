"""Application settings."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from schack.game.context import DEFAULT_CELL_SIZE

THEME_NAMES = ("Classic", "Marble", "Sea")


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Window
    window_title: str = "Schack"

    # Board
    cell_size: int = DEFAULT_CELL_SIZE
    board_theme: str = "Classic"
    show_coordinates: bool = False
    pieces_dir: Path | None = None

    # Game
    fen: str | None = None

    # Diagnostics
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")
        if self.board_theme not in THEME_NAMES:
            raise ValueError(f"Unknown board theme: {self.board_theme!r}")
