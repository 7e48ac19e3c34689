"""Tests for FrontEndContext and the button-release input boundary."""

import pytest

from schack.core.enums import PieceKind, Side
from schack.core.piece import Piece
from schack.engine.python_chess import PythonChessEngine
from schack.game.context import FrontEndContext, MouseButton, handle_button_release
from schack.game.selection import Idle, PieceSelected

CELL = 90


def _center(col: int, row: int) -> tuple[float, float]:
    return col * CELL + CELL / 2, row * CELL + CELL / 2


def _release(ctx: FrontEndContext, col: int, row: int, button=MouseButton.LEFT) -> bool:
    return handle_button_release(ctx, button, *_center(col, row))


@pytest.fixture
def ctx() -> FrontEndContext:
    return FrontEndContext.create(PythonChessEngine(), cell_size=CELL)


class TestCreate:
    def test_board_mirrors_engine(self, ctx: FrontEndContext) -> None:
        assert ctx.board["E2"] == Piece(Side.WHITE, PieceKind.PAWN)
        assert isinstance(ctx.selection.state, Idle)
        assert ctx.board_pixels == 720

    def test_rejects_bad_cell_size(self) -> None:
        with pytest.raises(ValueError):
            FrontEndContext.create(PythonChessEngine(), cell_size=0)


class TestScenarios:
    def test_e2_e4(self, ctx: FrontEndContext) -> None:
        assert _release(ctx, 4, 6)
        state = ctx.selection.state
        assert isinstance(state, PieceSelected)
        assert state.origin.label == "E2"
        assert {"E3", "E4"} <= ctx.highlighted()

        assert _release(ctx, 4, 4)
        assert isinstance(ctx.selection.state, Idle)
        assert ctx.highlighted() == frozenset()
        assert ctx.board["E2"] is None
        assert ctx.board["E4"] == Piece(Side.WHITE, PieceKind.PAWN)

    def test_e2_e5_cancels(self, ctx: FrontEndContext) -> None:
        _release(ctx, 4, 6)
        _release(ctx, 4, 3)
        assert isinstance(ctx.selection.state, Idle)
        assert ctx.board["E2"] == Piece(Side.WHITE, PieceKind.PAWN)
        assert ctx.board["E5"] is None

    def test_cell_edges(self, ctx: FrontEndContext) -> None:
        handle_button_release(ctx, MouseButton.LEFT, 360.0, 540.0)  # E2 top-left
        assert ctx.selection.origin is not None
        assert ctx.selection.origin.label == "E2"


class TestButtons:
    @pytest.mark.parametrize(
        "button", [MouseButton.RIGHT, MouseButton.MIDDLE, MouseButton.OTHER]
    )
    def test_non_left_is_noop(self, ctx: FrontEndContext, button: MouseButton) -> None:
        assert not _release(ctx, 4, 6, button)
        assert isinstance(ctx.selection.state, Idle)

    def test_right_click_does_not_cancel_selection(self, ctx: FrontEndContext) -> None:
        _release(ctx, 4, 6)
        _release(ctx, 0, 0, MouseButton.RIGHT)
        assert isinstance(ctx.selection.state, PieceSelected)


class TestStatusAndNewGame:
    def test_status_text_is_live(self, ctx: FrontEndContext) -> None:
        assert ctx.status_text() == "Game is in progress."
        ctx.engine.reset("4k3/8/8/8/8/8/4R3/4K3 b - - 0 1")
        assert ctx.status_text() == "Game is check."

    def test_new_game_resets_everything(self, ctx: FrontEndContext) -> None:
        _release(ctx, 4, 6)
        _release(ctx, 4, 4)
        _release(ctx, 4, 1)  # select E7
        ctx.new_game()
        assert isinstance(ctx.selection.state, Idle)
        assert ctx.board["E2"] == Piece(Side.WHITE, PieceKind.PAWN)
        assert ctx.board["E4"] is None

    def test_new_game_from_fen(self, ctx: FrontEndContext) -> None:
        ctx.new_game("4k3/8/8/8/8/8/8/4K3 w - - 0 1")
        assert len(list(ctx.board.occupied())) == 2
