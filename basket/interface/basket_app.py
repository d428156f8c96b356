#!/usr/bin/env python3
"""
basket: terminal kanban board with five priority columns.

Tasks live in ~/basket-tasks.json (global) or ./.basket.json (local);
``t`` inside the board switches between the two.
"""

import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version as pkg_version
from typing import List, Optional

from basket.application import BoardState
from basket.config import get_log_file, get_log_level, get_user_theme
from basket.infrastructure.task_store import (
    JsonTaskRepository,
    TaskStoreError,
    global_tasks_path,
    local_tasks_path,
)

from .tui_app import cmd_tui
from .tui_themes import DEFAULT_THEME, THEMES

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger("basket")


def build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="basket",
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="store_true", help="Show version and exit")
    return parser


def configure_logging() -> None:
    """Route ``basket.*`` loggers away from the full-screen terminal."""
    level = getattr(logging, get_log_level(), logging.WARNING)
    handler: logging.Handler = logging.NullHandler()
    log_file = get_log_file()
    if log_file:
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            handler = logging.FileHandler(log_file, encoding="utf-8")
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
        except OSError as exc:
            print(f"basket: cannot open log file {log_file}: {exc}", file=sys.stderr)
    logger.addHandler(handler)
    logger.setLevel(level if isinstance(level, int) else logging.WARNING)
    logger.propagate = False


def resolve_theme() -> str:
    theme = get_user_theme()
    if theme and theme not in THEMES:
        logger.warning("unknown theme %r, using %s", theme, DEFAULT_THEME)
        return DEFAULT_THEME
    return theme or DEFAULT_THEME


def load_board() -> BoardState:
    return BoardState.from_disk(
        JsonTaskRepository(global_tasks_path()),
        JsonTaskRepository(local_tasks_path()),
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.version:
        try:
            print(pkg_version("basket"))
        except PackageNotFoundError:
            print("0.0.0")
        return 0
    configure_logging()
    try:
        state = load_board()
    except TaskStoreError as exc:
        logger.error("startup failed: %s", exc)
        print(f"basket: {exc}", file=sys.stderr)
        return 1
    return cmd_tui(state, theme=resolve_theme())


if __name__ == "__main__":
    sys.exit(main())
