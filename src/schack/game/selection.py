"""Click-to-move selection state machine.

Two clicks make a move: the first picks a piece of the side to move that has
at least one legal destination, the second picks one of those destinations.
Any second click, legal or not, ends the selection.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TypeAlias

from schack.core.coords import (
    MalformedLabel,
    Square,
    SquareLabel,
    label_to_square,
    square_to_label,
)
from schack.engine.interfaces import RulesEngine
from schack.game.display_board import DisplayBoard

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Idle:
    """Nothing selected."""


@dataclass(frozen=True, slots=True)
class PieceSelected:
    """A piece on *origin* is selected; *destinations* are its legal targets."""

    origin: Square
    destinations: frozenset[SquareLabel]

    def __post_init__(self) -> None:
        if not self.destinations:
            raise ValueError("PieceSelected requires at least one destination")


SelectionState: TypeAlias = Idle | PieceSelected

_IDLE = Idle()


class SelectionStateMachine:
    """Turns square clicks into engine moves and keeps the mirror current."""

    def __init__(self, engine: RulesEngine, board: DisplayBoard) -> None:
        self._engine = engine
        self._board = board
        self._state: SelectionState = _IDLE

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def state(self) -> SelectionState:
        return self._state

    @property
    def origin(self) -> Square | None:
        if isinstance(self._state, PieceSelected):
            return self._state.origin
        return None

    @property
    def destinations(self) -> frozenset[SquareLabel]:
        """Squares to highlight; empty while idle."""
        if isinstance(self._state, PieceSelected):
            return self._state.destinations
        return frozenset()

    # ── Input ────────────────────────────────────────────────────────────

    def handle_click(self, square: Square) -> None:
        label = square_to_label(square)
        _LOGGER.debug("cell: %s", label)
        if isinstance(self._state, PieceSelected):
            self._complete_move(self._state, label)
        else:
            self._try_select(square, label)

    def reset(self) -> None:
        """Drop any selection."""
        self._state = _IDLE

    # ── Transitions ──────────────────────────────────────────────────────

    def _try_select(self, square: Square, label: SquareLabel) -> None:
        destinations = self._engine.legal_destinations(label)
        if not destinations:
            return

        piece = self._board[square]
        if piece is None or piece.side != self._engine.current_side_to_move():
            _LOGGER.debug("Ignoring %s: not a piece of the side to move", label)
            return

        for dest in destinations:
            try:
                label_to_square(dest)
            except MalformedLabel:
                _LOGGER.error("Engine returned malformed destination %r", dest)
                raise

        self._state = PieceSelected(square, frozenset(destinations))
        _LOGGER.debug("Selected %s → %s", label, ", ".join(sorted(destinations)))

    def _complete_move(self, selected: PieceSelected, label: SquareLabel) -> None:
        self._state = _IDLE
        if label not in selected.destinations:
            _LOGGER.debug("Selection cancelled by click on %s", label)
            return

        origin = square_to_label(selected.origin)
        status = self._engine.submit_move(origin, label)
        if status is None:
            _LOGGER.warning("Engine rejected move %s-%s", origin, label)
            return

        self._board.rebuild(self._engine.board_snapshot())
        _LOGGER.debug("Moved %s-%s, game is %s", origin, label, status.label)
