"""Front-end game layer — display mirror, click state machine, context.

Quick start::

    from schack.engine import PythonChessEngine
    from schack.game import FrontEndContext, MouseButton, handle_button_release

    ctx = FrontEndContext.create(PythonChessEngine(), cell_size=90)
    handle_button_release(ctx, MouseButton.LEFT, 405, 585)  # E2
    handle_button_release(ctx, MouseButton.LEFT, 405, 405)  # E4
"""

from schack.game.context import (
    DEFAULT_CELL_SIZE,
    FrontEndContext,
    MouseButton,
    handle_button_release,
)
from schack.game.display_board import DisplayBoard
from schack.game.selection import (
    Idle,
    PieceSelected,
    SelectionState,
    SelectionStateMachine,
)

__all__ = [
    "DEFAULT_CELL_SIZE",
    "DisplayBoard",
    "FrontEndContext",
    "Idle",
    "MouseButton",
    "PieceSelected",
    "SelectionState",
    "SelectionStateMachine",
    "handle_button_release",
]
