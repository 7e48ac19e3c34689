"""Tests for command-line parsing."""

from __future__ import annotations

from pathlib import Path

import pytest

from schack import app
from schack.config import AppSettings


def test_defaults() -> None:
    args = app.build_parser().parse_args([])
    settings = app.settings_from_args(args)
    assert settings == AppSettings()


def test_all_options(tmp_path: Path) -> None:
    fen = "4k3/8/8/8/8/8/8/4K3 w - - 0 1"
    args = app.build_parser().parse_args(
        [
            "--fen",
            fen,
            "--cell-size",
            "64",
            "--theme",
            "Sea",
            "--coordinates",
            "--pieces-dir",
            str(tmp_path),
            "--log-level",
            "DEBUG",
        ]
    )
    settings = app.settings_from_args(args)
    assert settings.fen == fen
    assert settings.cell_size == 64
    assert settings.board_theme == "Sea"
    assert settings.show_coordinates
    assert settings.pieces_dir == tmp_path
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    "argv",
    [
        ["--fen", "garbage"],
        ["--theme", "Neon"],
        ["--pieces-dir", "/definitely/not/here"],
        ["--cell-size", "0"],
    ],
)
def test_bad_arguments_exit(argv: list[str]) -> None:
    with pytest.raises(SystemExit):
        app.main(argv)


def test_main_runs_application(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: list[AppSettings] = []

    def fake_run(settings: AppSettings, argv: list[str] | None = None) -> int:
        seen.append(settings)
        return 0

    monkeypatch.setattr("schack.ui.bootstrap.run_application", fake_run)
    assert app.main(["--cell-size", "40"]) == 0
    assert seen[0].cell_size == 40


def test_settings_validation() -> None:
    with pytest.raises(ValueError):
        AppSettings(cell_size=-1)
    with pytest.raises(ValueError):
        AppSettings(board_theme="Neon")
