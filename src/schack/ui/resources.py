"""Piece sprite table.

Sprites are built once per tile size, optionally from image files named
``<side>_<kind>.svg`` or ``<side>_<kind>.png`` (e.g. ``white_king.svg``).
Pieces without an image are painted from their Unicode glyph.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from PyQt6.QtCore import QRectF, Qt
from PyQt6.QtGui import QColor, QFont, QImage, QPainter, QPainterPath, QPen, QPixmap
from PyQt6.QtSvg import QSvgRenderer

from schack.core.enums import PieceKind, Side
from schack.core.piece import Piece

_LOGGER = logging.getLogger(__name__)

_MARGIN_RATIO = 0.03

_TOKEN_FILL: dict[Side, QColor] = {
    Side.WHITE: QColor(250, 250, 250),
    Side.BLACK: QColor(25, 25, 25),
}
_GLYPH_COLOR: dict[Side, QColor] = {
    Side.WHITE: QColor(25, 25, 25),
    Side.BLACK: QColor(235, 235, 235),
}

SpriteTable = dict[Piece, QPixmap]
_Painter = Callable[[QPainter, QRectF], None]


def sprite_file_stem(piece: Piece) -> str:
    """``white_king``-style base name for *piece*."""
    return f"{piece.side}_{piece.kind.name.lower()}"


def load_sprites(size: int, pieces_dir: Path | None = None) -> SpriteTable:
    """Build the (side, kind) → pixmap table for *size*-pixel tiles.

    Without *pieces_dir* every piece is drawn from its glyph.
    """
    table: SpriteTable = {}
    missing: list[str] = []
    for side in Side:
        for kind in PieceKind:
            piece = Piece(side, kind)
            pixmap = None if pieces_dir is None else _load_image(pieces_dir, piece, size)
            if pixmap is None:
                missing.append(sprite_file_stem(piece))
                pixmap = glyph_pixmap(piece, size)
            table[piece] = pixmap
    if missing and pieces_dir is not None:
        _LOGGER.warning(
            "No usable image in %s for %s; drawing glyphs instead",
            pieces_dir,
            ", ".join(missing),
        )
    return table


def _load_image(directory: Path, piece: Piece, size: int) -> QPixmap | None:
    stem = sprite_file_stem(piece)
    svg = directory / f"{stem}.svg"
    if svg.is_file():
        renderer = QSvgRenderer(str(svg))
        if renderer.isValid():
            return _render(size, lambda painter, target: renderer.render(painter, target))
        _LOGGER.warning("Invalid SVG asset: %s", svg)

    png = directory / f"{stem}.png"
    if png.is_file():
        pixmap = QPixmap(str(png))
        if not pixmap.isNull():
            return pixmap.scaled(
                size,
                size,
                Qt.AspectRatioMode.KeepAspectRatio,
                Qt.TransformationMode.SmoothTransformation,
            )
        _LOGGER.warning("Invalid image asset: %s", png)
    return None


def glyph_pixmap(piece: Piece, size: int) -> QPixmap:
    """Paint *piece* as a round token in its side's colour carrying its glyph."""

    def paint(painter: QPainter, target: QRectF) -> None:
        painter.setPen(QPen(_GLYPH_COLOR[piece.side], max(1.0, size / 30.0)))
        painter.setBrush(_TOKEN_FILL[piece.side])
        painter.drawEllipse(target.adjusted(4, 4, -4, -4))

        font = QFont()
        font.setPixelSize(max(1, int(target.height() * 0.6)))
        path = QPainterPath()
        path.addText(0.0, 0.0, font, piece.symbol)
        bounds = path.boundingRect()
        path.translate(
            target.center().x() - bounds.center().x(),
            target.center().y() - bounds.center().y(),
        )
        painter.fillPath(path, _GLYPH_COLOR[piece.side])

    return _render(size, paint)


def _render(size: int, paint: _Painter) -> QPixmap:
    image = QImage(size, size, QImage.Format.Format_ARGB32_Premultiplied)
    image.fill(Qt.GlobalColor.transparent)

    painter = QPainter(image)
    painter.setRenderHint(QPainter.RenderHint.Antialiasing)
    painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform)

    # Slight padding so pieces don't touch square edges
    margin = size * _MARGIN_RATIO
    paint(painter, QRectF(margin, margin, size - 2 * margin, size - 2 * margin))

    painter.end()
    return QPixmap.fromImage(image)
