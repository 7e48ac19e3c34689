"""Abstract rules-engine interface consumed by the front-end.

The front-end never decides legality itself: it asks the engine for legal
destinations, submits moves and mirrors the engine's board.  Squares cross
this boundary as upper-case algebraic labels ("E2").
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TypeAlias

from schack.core.piece import Piece

if TYPE_CHECKING:
    from schack.core.coords import SquareLabel
    from schack.core.enums import GameStatus, Side

# 8 rows, rank 8 first; each row 8 cells, file A first.
BoardSnapshot: TypeAlias = list[list[Piece | None]]


class RulesEngine(ABC):
    """Interface for the authoritative game state."""

    @abstractmethod
    def current_side_to_move(self) -> Side: ...

    @abstractmethod
    def legal_destinations(self, from_label: SquareLabel) -> frozenset[SquareLabel]:
        """Labels reachable from *from_label*; empty if none or no piece."""

    @abstractmethod
    def submit_move(
        self, from_label: SquareLabel, to_label: SquareLabel
    ) -> GameStatus | None:
        """Play a move. Returns the resulting status, or ``None`` if rejected."""

    @abstractmethod
    def board_snapshot(self) -> BoardSnapshot:
        """Current board, top-down."""

    @abstractmethod
    def game_status(self) -> GameStatus: ...

    @abstractmethod
    def reset(self, fen: str | None = None) -> None:
        """Start over from the standard position or *fen*."""
