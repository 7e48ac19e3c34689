"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import chess

from schack.config import THEME_NAMES, AppSettings


def _fen(value: str) -> str:
    try:
        chess.Board(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid FEN: {exc}") from None
    return value


def _directory(value: str) -> Path:
    path = Path(value)
    if not path.is_dir():
        raise argparse.ArgumentTypeError(f"not a directory: {value}")
    return path


def build_parser() -> argparse.ArgumentParser:
    defaults = AppSettings()
    p = argparse.ArgumentParser(prog="schack", description="Play chess with the mouse.")
    p.add_argument("--fen", type=_fen, default=None, help="start from this position")
    p.add_argument(
        "--cell-size",
        type=int,
        default=defaults.cell_size,
        help="square size in pixels (default: %(default)s)",
    )
    p.add_argument("--theme", choices=THEME_NAMES, default=defaults.board_theme)
    p.add_argument(
        "--coordinates", action="store_true", help="show rank and file labels"
    )
    p.add_argument(
        "--pieces-dir",
        type=_directory,
        default=None,
        help="directory with <side>_<kind>.svg/.png piece images",
    )
    p.add_argument(
        "--log-level",
        default=defaults.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return p


def settings_from_args(args: argparse.Namespace) -> AppSettings:
    return AppSettings(
        cell_size=args.cell_size,
        board_theme=args.theme,
        show_coordinates=args.coordinates,
        pieces_dir=args.pieces_dir,
        fen=args.fen,
        log_level=args.log_level,
    )


def main(argv: list[str] | None = None) -> int:
    """Launch the Schack application."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.cell_size <= 0:
        parser.error("--cell-size must be positive")
    settings = settings_from_args(args)

    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    from schack.ui.bootstrap import run_application

    return run_application(settings, [sys.argv[0]])


if __name__ == "__main__":
    sys.exit(main())
