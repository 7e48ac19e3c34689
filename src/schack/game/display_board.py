"""DisplayBoard — the front-end's mirror of the engine board."""

from __future__ import annotations

from collections.abc import Iterator

from schack.core.coords import GRID_SIZE, Square, SquareLabel, label_to_square
from schack.core.piece import Piece
from schack.engine.interfaces import BoardSnapshot


class DisplayBoard:
    """8×8 grid of ``Piece | None``, stored top-down (rank 8 first).

    The mirror is derived data: it is only ever replaced wholesale from an
    engine snapshot, never edited square by square.
    """

    __slots__ = ("_grid",)

    def __init__(self, snapshot: BoardSnapshot | None = None) -> None:
        self._grid: list[list[Piece | None]] = [
            [None] * GRID_SIZE for _ in range(GRID_SIZE)
        ]
        if snapshot is not None:
            self.rebuild(snapshot)

    def rebuild(self, snapshot: BoardSnapshot) -> None:
        """Replace the whole grid with *snapshot*."""
        if len(snapshot) != GRID_SIZE or any(len(r) != GRID_SIZE for r in snapshot):
            raise ValueError("Board snapshot must be 8x8")
        self._grid = [list(row) for row in snapshot]

    def __getitem__(self, key: Square | SquareLabel) -> Piece | None:
        square = label_to_square(key) if isinstance(key, str) else key
        return self._grid[square.row][square.column]

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """Yield ``(square, piece)`` for every non-empty cell."""
        for row, cells in enumerate(self._grid):
            for col, piece in enumerate(cells):
                if piece is not None:
                    yield Square(col, row), piece

    def rows(self) -> list[list[Piece | None]]:
        """Copy of the grid, top-down."""
        return [list(row) for row in self._grid]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DisplayBoard):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        lines = (
            "".join("." if p is None else str(p) for p in row) for row in self._grid
        )
        return "DisplayBoard(" + "/".join(lines) + ")"
