"""Tests for Piece value object and enums."""

from schack.core.enums import GameStatus, PieceKind, Side
from schack.core.piece import Piece


def test_fen_letter_by_side() -> None:
    assert str(Piece(Side.WHITE, PieceKind.KNIGHT)) == "N"
    assert str(Piece(Side.BLACK, PieceKind.KNIGHT)) == "n"
    assert str(Piece(Side.BLACK, PieceKind.KING)) == "k"


def test_symbol_depends_on_kind_only() -> None:
    white = Piece(Side.WHITE, PieceKind.KNIGHT)
    black = Piece(Side.BLACK, PieceKind.KNIGHT)
    assert white.symbol == black.symbol == "♞"


def test_side_str() -> None:
    assert str(Side.WHITE) == "white"
    assert str(Side.BLACK) == "black"


def test_game_status_labels() -> None:
    assert GameStatus.IN_PROGRESS.label == "in progress"
    assert GameStatus.CHECKMATE.label == "checkmate"
