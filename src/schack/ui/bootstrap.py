"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from schack.config import AppSettings
from schack.engine.python_chess import PythonChessEngine
from schack.game.context import FrontEndContext

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)


def _configure_application(app: QApplication, settings: AppSettings) -> None:
    """Apply app-wide settings and theme."""
    from schack.ui.styles.theme import APP_STYLE

    app.setApplicationName(settings.window_title)
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def build_context(settings: AppSettings) -> FrontEndContext:
    """Create the engine and the front-end state around it."""
    engine = PythonChessEngine(settings.fen)
    _LOGGER.info("Starting position: %s", engine.fen())
    return FrontEndContext.create(engine, cell_size=settings.cell_size)


def run_application(settings: AppSettings, argv: list[str] | None = None) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from schack.ui.main_window import MainWindow

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app, settings)

    window = MainWindow(build_context(settings), settings)
    window.show()

    return app.exec()
