"""Visual theme constants and QSS styles for Schack."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    highlight_to: QColor  # legal move targets
    coord_light: QColor  # coordinate text on dark squares
    coord_dark: QColor  # coordinate text on light squares
    status_background: QColor
    status_text: QColor

    @classmethod
    def _two_tone(cls, light: QColor, dark: QColor, target: QColor) -> BoardTheme:
        return cls(
            light_square=light,
            dark_square=dark,
            highlight_to=target,
            coord_light=dark,
            coord_dark=light,
            status_background=QColor(255, 255, 255),
            status_text=QColor(0, 0, 0),
        )

    @classmethod
    def classic(cls) -> BoardTheme:
        # sand / ochre
        return cls._two_tone(
            QColor(228, 196, 108), QColor(188, 140, 76), QColor(0, 0, 0, 60)
        )

    @classmethod
    def marble(cls) -> BoardTheme:
        return cls._two_tone(
            QColor(232, 228, 220), QColor(150, 145, 140), QColor(40, 90, 160, 90)
        )

    @classmethod
    def sea(cls) -> BoardTheme:
        return cls._two_tone(
            QColor(208, 230, 238), QColor(70, 130, 160), QColor(250, 200, 60, 120)
        )

    @classmethod
    def named(cls, name: str) -> BoardTheme:
        """Look up a preset by its settings name."""
        presets = {
            "Classic": cls.classic,
            "Marble": cls.marble,
            "Sea": cls.sea,
        }
        try:
            return presets[name]()
        except KeyError:
            raise ValueError(f"Unknown board theme: {name!r}") from None


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #808080;
}

QMenuBar {
    background: #2b2b2b;
    color: #e0e0e0;
}
QMenuBar::item:selected {
    background: #3c3c3c;
}
QMenu {
    background: #2b2b2b;
    color: #e0e0e0;
    border: 1px solid #3c3c3c;
}
QMenu::item:selected {
    background: #264f78;
}
"""
