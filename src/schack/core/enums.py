"""Core enumerations for the chess front-end."""

from __future__ import annotations

from enum import Enum, IntEnum


class Side(IntEnum):
    """The two players."""

    WHITE = 0
    BLACK = 1

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Chess piece kinds ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class GameStatus(Enum):
    """Overall game status as reported by the rules engine."""

    IN_PROGRESS = "in progress"
    CHECK = "check"
    CHECKMATE = "checkmate"
    STALEMATE = "stalemate"
    DRAW = "draw"

    @property
    def label(self) -> str:
        return self.value
