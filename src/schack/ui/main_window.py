"""MainWindow — top-level window holding the board."""

from __future__ import annotations

from PyQt6.QtGui import QAction, QActionGroup
from PyQt6.QtWidgets import QMainWindow

from schack.config import THEME_NAMES, AppSettings
from schack.game.context import FrontEndContext
from schack.ui.board.board_scene import BoardScene
from schack.ui.board.board_view import BoardView
from schack.ui.resources import load_sprites
from schack.ui.styles.theme import BoardTheme


class MainWindow(QMainWindow):
    """Main application window for Schack."""

    def __init__(self, ctx: FrontEndContext, settings: AppSettings) -> None:
        super().__init__()
        self._ctx = ctx
        self._settings = settings
        self.setWindowTitle(settings.window_title)

        self._scene = BoardScene(
            ctx,
            load_sprites(ctx.cell_size, settings.pieces_dir),
            theme=BoardTheme.named(settings.board_theme),
            show_coordinates=settings.show_coordinates,
            parent=self,
        )
        self._board_view = BoardView(self._scene)
        self.setCentralWidget(self._board_view)
        self._setup_menu()
        self.adjustSize()
        self.setFixedSize(self.sizeHint())

    @property
    def board_scene(self) -> BoardScene:
        return self._scene

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        if menu_bar is None:
            return
        game_menu = menu_bar.addMenu("&Game")
        if game_menu is None:
            return

        self._act_new = QAction("&New game", self)
        self._act_new.setShortcut("Ctrl+N")
        self._act_new.triggered.connect(self._on_new_game)
        game_menu.addAction(self._act_new)

        self._act_coords = QAction("Show &coordinates", self)
        self._act_coords.setCheckable(True)
        self._act_coords.setChecked(self._settings.show_coordinates)
        self._act_coords.toggled.connect(self._on_toggle_coordinates)
        game_menu.addAction(self._act_coords)

        theme_menu = game_menu.addMenu("&Theme")
        self._theme_group = QActionGroup(self)
        self._theme_actions: dict[str, QAction] = {}
        for name in THEME_NAMES:
            act = QAction(name, self)
            act.setCheckable(True)
            act.setChecked(name == self._settings.board_theme)
            act.triggered.connect(
                lambda _checked=False, n=name: self._on_theme(n)
            )
            self._theme_group.addAction(act)
            if theme_menu is not None:
                theme_menu.addAction(act)
            self._theme_actions[name] = act

        game_menu.addSeparator()
        self._act_quit = QAction("&Quit", self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        game_menu.addAction(self._act_quit)

    def _on_new_game(self) -> None:
        self._ctx.new_game(self._settings.fen)
        self._scene.refresh()

    def _on_theme(self, name: str) -> None:
        self._settings.board_theme = name
        self._scene.set_theme(BoardTheme.named(name))

    def _on_toggle_coordinates(self, checked: bool) -> None:
        self._settings.show_coordinates = checked
        self._scene.set_show_coordinates(checked)
