"""BoardScene — QGraphicsScene that draws the board and routes clicks."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QPointF, QRectF, Qt
from PyQt6.QtGui import QBrush, QColor, QFont, QFontMetricsF, QPainter, QPen
from PyQt6.QtWidgets import (
    QGraphicsPixmapItem,
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from schack.core.coords import (
    GRID_SIZE,
    Square,
    all_squares,
    label_to_square,
    square_origin,
)
from schack.game.context import FrontEndContext, MouseButton, handle_button_release
from schack.ui.resources import SpriteTable
from schack.ui.styles.theme import BoardTheme

_QT_BUTTONS: dict[Qt.MouseButton, MouseButton] = {
    Qt.MouseButton.LeftButton: MouseButton.LEFT,
    Qt.MouseButton.RightButton: MouseButton.RIGHT,
    Qt.MouseButton.MiddleButton: MouseButton.MIDDLE,
}


class BoardScene(QGraphicsScene):
    """Renders the board mirror, highlights and game status of a context.

    Everything drawn is pulled from the :class:`FrontEndContext`; the scene
    keeps no game state of its own.
    """

    _STATUS_FONT_PX = 30
    _STATUS_PADDING = 8.0

    def __init__(
        self,
        ctx: FrontEndContext,
        sprites: SpriteTable,
        *,
        theme: BoardTheme | None = None,
        show_coordinates: bool = False,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._ctx = ctx
        self._sprites = sprites
        self._theme = theme or BoardTheme.classic()
        self._show_coordinates = show_coordinates

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []
        self._piece_items: dict[Square, QGraphicsPixmapItem] = {}
        self._highlight_items: list[QGraphicsRectItem] = []

        self._draw_board()
        self.refresh()

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def context(self) -> FrontEndContext:
        return self._ctx

    def refresh(self) -> None:
        """Redraw pieces and highlights from the context."""
        self._sync_pieces()
        self._sync_highlights()
        self.update()

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self.refresh()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        t = self._ctx.cell_size
        font = QFont()
        font.setPixelSize(max(9, t // 8))

        for sq in all_squares():
            x, y = square_origin(sq, t)
            is_light = (sq.column + sq.row) % 2 == 0
            color = self._theme.light_square if is_light else self._theme.dark_square
            rect = QGraphicsRectItem(x, y, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[sq] = rect

            coord_color = self._theme.coord_dark if is_light else self._theme.coord_light
            # Rank numbers (left edge)
            if sq.column == 0:
                self._add_coord(str(GRID_SIZE - sq.row), font, coord_color, x + 2, y + 1)
            # File letters (bottom edge)
            if sq.row == GRID_SIZE - 1:
                self._add_coord(
                    sq.label[0].lower(), font, coord_color, x + t - 12, y + t - 16
                )

        self.setSceneRect(0, 0, GRID_SIZE * t, GRID_SIZE * t)

    def _add_coord(
        self, text: str, font: QFont, color: QColor, x: float, y: float
    ) -> None:
        txt = QGraphicsSimpleTextItem(text)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setPos(x, y)
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    # ── Mirror synchronisation ───────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the display board."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        t = self._ctx.cell_size
        for sq, piece in self._ctx.board.occupied():
            item = QGraphicsPixmapItem(self._sprites[piece])
            x, y = square_origin(sq, t)
            item.setPos(x, y)
            item.setZValue(1)
            self.addItem(item)
            self._piece_items[sq] = item

    def _sync_highlights(self) -> None:
        for item in self._highlight_items:
            self.removeItem(item)
        self._highlight_items.clear()

        for label in sorted(self._ctx.highlighted()):
            self._highlight_items.append(
                self._make_highlight(label_to_square(label), self._theme.highlight_to)
            )

    def _make_highlight(self, sq: Square, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self._ctx.cell_size
        x, y = square_origin(sq, t)
        rect = QGraphicsRectItem(x, y, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect

    # ── Status overlay ───────────────────────────────────────────────────

    def drawForeground(self, painter: QPainter | None, rect: QRectF) -> None:
        """Paint the engine's game status centred on the board."""
        super().drawForeground(painter, rect)
        if painter is None:
            return
        text = self._ctx.status_text()
        font = QFont()
        font.setPixelSize(self._STATUS_FONT_PX)
        metrics = QFontMetricsF(font)
        width = metrics.horizontalAdvance(text)
        height = metrics.height()
        board = self.sceneRect()
        box = QRectF(
            board.center().x() - width / 2 - self._STATUS_PADDING,
            board.center().y() - height / 2,
            width + 2 * self._STATUS_PADDING,
            height,
        )
        painter.save()
        painter.fillRect(box, self._theme.status_background)
        painter.setFont(font)
        painter.setPen(self._theme.status_text)
        painter.drawText(box, Qt.AlignmentFlag.AlignCenter, text)
        painter.restore()

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        # Moves are made on release; accept the press so the release follows.
        if event is not None:
            event.accept()

    def mouseReleaseEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is None or not self._route_release(event.button(), event.scenePos()):
            return super().mouseReleaseEvent(event)
        event.accept()

    def _route_release(self, button: Qt.MouseButton, pos: QPointF) -> bool:
        """Feed a release at scene *pos* to the context; False if off the board."""
        if not self._on_board(pos):
            return False
        mapped = _QT_BUTTONS.get(button, MouseButton.OTHER)
        if handle_button_release(self._ctx, mapped, pos.x(), pos.y()):
            self.refresh()
        return True

    def _on_board(self, pos: QPointF) -> bool:
        size = GRID_SIZE * self._ctx.cell_size
        return 0 <= pos.x() < size and 0 <= pos.y() < size
