"""Tests for the piece sprite table."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QImage

from schack.core.enums import PieceKind, Side
from schack.core.piece import Piece
from schack.ui.resources import glyph_pixmap, load_sprites, sprite_file_stem


def test_table_covers_every_piece() -> None:
    table = load_sprites(40)
    assert len(table) == 12
    for side in Side:
        for kind in PieceKind:
            pixmap = table[Piece(side, kind)]
            assert (pixmap.width(), pixmap.height()) == (40, 40)


def test_glyph_pixmap_is_a_token() -> None:
    image = glyph_pixmap(Piece(Side.BLACK, PieceKind.QUEEN), 48).toImage()
    assert image.pixelColor(24, 8).alpha() > 0
    assert image.pixelColor(0, 0).alpha() == 0


def test_sprite_file_stem() -> None:
    assert sprite_file_stem(Piece(Side.BLACK, PieceKind.KNIGHT)) == "black_knight"


def test_png_assets_are_used_and_missing_logged(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    image = QImage(10, 10, QImage.Format.Format_ARGB32)
    image.fill(Qt.GlobalColor.red)
    assert image.save(str(tmp_path / "white_king.png"))

    with caplog.at_level(logging.WARNING, logger="schack.ui.resources"):
        table = load_sprites(30, tmp_path)

    king = table[Piece(Side.WHITE, PieceKind.KING)].toImage()
    assert king.pixelColor(15, 15).red() == 255
    missing = caplog.records[0].args[1].split(", ")
    assert "black_king" in missing
    assert "white_king" not in missing
    assert len(missing) == 11


def test_no_directory_draws_glyphs_silently(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="schack.ui.resources"):
        table = load_sprites(20)
    assert len(table) == 12
    assert caplog.records == []
