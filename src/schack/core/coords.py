"""Conversions between pixels, grid squares and algebraic labels.

Grid layout is top-down, the way the board is drawn::

    column 0..7  →  files A..H
    row    0..7  →  ranks 8..1

so ``Square(0, 0)`` is ``"A8"`` and ``Square(7, 7)`` is ``"H1"``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

GRID_SIZE = 8

SquareLabel: TypeAlias = str  # "A1".."H8"

_FILES = "ABCDEFGH"
_RANKS = "12345678"


class MalformedLabel(ValueError):
    """Raised when a string is not a valid upper-case square label."""


@dataclass(frozen=True, slots=True)
class Square:
    """A (column, row) grid cell, both coordinates in 0–7."""

    column: int
    row: int

    def __post_init__(self) -> None:
        if not (0 <= self.column < GRID_SIZE and 0 <= self.row < GRID_SIZE):
            raise ValueError(f"Square out of range: ({self.column}, {self.row})")

    @property
    def label(self) -> SquareLabel:
        return square_to_label(self)


def pixel_to_square(x: float, y: float, cell_size: float) -> Square:
    """Pixel position inside the board → grid square."""
    return Square(int(x // cell_size), int(y // cell_size))


def square_origin(square: Square, cell_size: float) -> tuple[float, float]:
    """Top-left pixel of *square*."""
    return square.column * cell_size, square.row * cell_size


def square_to_label(square: Square) -> SquareLabel:
    """``Square(4, 6)`` → ``'E2'``."""
    return _FILES[square.column] + str(GRID_SIZE - square.row)


def label_to_square(label: SquareLabel) -> Square:
    """``'E2'`` → ``Square(4, 6)``."""
    if (
        not isinstance(label, str)
        or len(label) != 2
        or label[0] not in _FILES
        or label[1] not in _RANKS
    ):
        raise MalformedLabel(f"Invalid square label: {label!r}")
    return Square(_FILES.index(label[0]), GRID_SIZE - int(label[1]))


def all_squares() -> list[Square]:
    """All 64 squares, row by row from the top-left."""
    return [Square(col, row) for row in range(GRID_SIZE) for col in range(GRID_SIZE)]
