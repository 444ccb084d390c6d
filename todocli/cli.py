"""
Todo CLI — Entry Point
=======================
Builds the storage backend, manager and command loop, then runs it.

Usage:
    # Interactive loop, todos kept in ~/Documents/todos.json
    python -m todocli

    # Session-only list, nothing written to disk
    python -m todocli --storage memory

    # Keep todos.json somewhere else and show diagnostics
    python -m todocli --data-dir ./data --log-level DEBUG
"""

from __future__ import annotations

import argparse

from todocli import __version__
from todocli.app import App
from todocli.config import AppConfig, config_from_args
from todocli.logging_setup import configure_logging
from todocli.manager import TodoManager
from todocli.storage.registry import get_cache, list_caches


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="todo-cli",
        description="Todo CLI — keep a personal todo list from the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Commands inside the loop:\n"
            "  add     add a todo (asks for the title)\n"
            "  list    show all todos\n"
            "  toggle  mark a todo done / not done (asks for its number)\n"
            "  delete  remove a todo (asks for its number)\n"
            "  exit    quit\n"
        ),
    )
    parser.add_argument("--storage", default="file", choices=list_caches(),
                        help="Storage backend (default: file)")
    parser.add_argument("--data-dir", default=None,
                        help="Directory for todos.json (default: your Documents folder)")
    parser.add_argument("--log-level", default="WARNING",
                        help="Diagnostic log level (default: WARNING)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def build_app(config: AppConfig) -> App:
    """Wire one backend, one manager and one App together."""
    cache = get_cache(config.storage, **config.cache_options())
    return App(manager=TodoManager(), cache=cache)


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    config = config_from_args(args)

    try:
        configure_logging(config.log_level)
    except ValueError as e:
        parser.error(str(e))

    build_app(config).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
