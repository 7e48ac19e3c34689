"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from schack.core.enums import PieceKind, Side

_FEN_LETTERS: dict[PieceKind, str] = {
    PieceKind.PAWN: "p",
    PieceKind.KNIGHT: "n",
    PieceKind.BISHOP: "b",
    PieceKind.ROOK: "r",
    PieceKind.QUEEN: "q",
    PieceKind.KING: "k",
}

# Solid glyphs for both sides; the sprite painter colours them.
_GLYPHS: dict[PieceKind, str] = {
    PieceKind.PAWN: "♟",
    PieceKind.KNIGHT: "♞",
    PieceKind.BISHOP: "♝",
    PieceKind.ROOK: "♜",
    PieceKind.QUEEN: "♛",
    PieceKind.KING: "♚",
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable (side, kind) pair occupying a square."""

    side: Side
    kind: PieceKind

    def __str__(self) -> str:
        """FEN letter (uppercase = white, lowercase = black)."""
        letter = _FEN_LETTERS[self.kind]
        return letter.upper() if self.side is Side.WHITE else letter

    @property
    def symbol(self) -> str:
        """Unicode glyph used when no sprite image is available."""
        return _GLYPHS[self.kind]
