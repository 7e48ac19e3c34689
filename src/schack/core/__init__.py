"""Core domain layer — pure value types with zero external dependencies.

Quick start::

    from schack.core import pixel_to_square, square_to_label

    square_to_label(pixel_to_square(365, 590, 90))  # 'E2'
"""

from schack.core.coords import (
    GRID_SIZE,
    MalformedLabel,
    Square,
    SquareLabel,
    all_squares,
    label_to_square,
    pixel_to_square,
    square_origin,
    square_to_label,
)
from schack.core.enums import GameStatus, PieceKind, Side
from schack.core.piece import Piece

__all__ = [
    # Enums
    "GameStatus",
    "PieceKind",
    "Side",
    # Types / helpers
    "GRID_SIZE",
    "MalformedLabel",
    "Piece",
    "Square",
    "SquareLabel",
    "all_squares",
    "label_to_square",
    "pixel_to_square",
    "square_origin",
    "square_to_label",
]
