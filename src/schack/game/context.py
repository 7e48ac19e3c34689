"""FrontEndContext — the single owner of all mutable front-end state.

The input layer feeds button releases to :func:`handle_button_release`; the
renderer pulls the board, highlights and status text from the context on
every repaint.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto

from schack.core.coords import GRID_SIZE, SquareLabel, pixel_to_square
from schack.engine.interfaces import RulesEngine
from schack.game.display_board import DisplayBoard
from schack.game.selection import SelectionStateMachine

_LOGGER = logging.getLogger(__name__)

DEFAULT_CELL_SIZE = 90


class MouseButton(Enum):
    """Toolkit-independent mouse button."""

    LEFT = auto()
    RIGHT = auto()
    MIDDLE = auto()
    OTHER = auto()


@dataclass
class FrontEndContext:
    """Engine handle, display mirror and selection, owned together."""

    engine: RulesEngine
    board: DisplayBoard
    selection: SelectionStateMachine
    cell_size: int = DEFAULT_CELL_SIZE

    @classmethod
    def create(
        cls, engine: RulesEngine, *, cell_size: int = DEFAULT_CELL_SIZE
    ) -> FrontEndContext:
        """Build a context whose board mirrors *engine*'s current position."""
        if cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {cell_size}")
        board = DisplayBoard(engine.board_snapshot())
        return cls(engine, board, SelectionStateMachine(engine, board), cell_size)

    @property
    def board_pixels(self) -> int:
        return GRID_SIZE * self.cell_size

    def highlighted(self) -> frozenset[SquareLabel]:
        """Destination squares of the current selection."""
        return self.selection.destinations

    def status_text(self) -> str:
        """Live game status line, read from the engine on every call."""
        return f"Game is {self.engine.game_status().label}."

    def new_game(self, fen: str | None = None) -> None:
        """Restart the engine and resynchronise the mirror."""
        self.engine.reset(fen)
        self.board.rebuild(self.engine.board_snapshot())
        self.selection.reset()
        _LOGGER.info("New game started%s", f" from {fen}" if fen else "")


def handle_button_release(
    ctx: FrontEndContext, button: MouseButton, x: float, y: float
) -> bool:
    """Route a mouse release to the selection machine.

    Only the left button drives the interaction. Returns whether the click
    was processed.
    """
    if button is not MouseButton.LEFT:
        return False
    ctx.selection.handle_click(pixel_to_square(x, y, ctx.cell_size))
    return True
