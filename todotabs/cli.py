"""Command-line front door for todotabs.

Parses CLI options, merges them with the persisted config, sets up file
logging, then dispatches into the interactive runtime.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import config
from .log import configure_logging
from .runtime import run_app
from .runtime.app import render_static, terminal_size
from .state import AppState
from .ui_theme import available_theme_names, resolve_theme

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="todotabs",
        description="Keep a Todo and a Done list in a tabbed terminal view.",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}). Saved as the new default.",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument(
        "--poll-ms",
        type=_positive_int,
        default=None,
        help="Key poll interval in milliseconds (default: config or 250).",
    )
    parser.add_argument("--log-file", type=Path, default=None, help="Write logs to this file.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log at DEBUG level.")
    parser.add_argument("--render", action="store_true", help="Print the starting view and exit.")
    parser.add_argument("--cols", type=_positive_int, default=None, help="Columns for --render output.")
    parser.add_argument("--rows", type=_positive_int, default=None, help="Rows for --render output.")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse arguments and run the app; returns the process exit code."""
    args = build_parser().parse_args(argv)

    level = "DEBUG" if args.verbose else config.load_log_level()
    log_file = args.log_file if args.log_file is not None else config.load_log_file()
    configure_logging(log_file, level)

    if args.theme is not None and not config.save_theme_name(args.theme):
        logger.warning("unknown theme %r, using default and keeping saved theme", args.theme)
    theme_name = args.theme if args.theme is not None else config.load_theme_name()

    if args.render:
        default_cols, default_rows = terminal_size()
        columns = args.cols if args.cols is not None else default_cols
        rows = args.rows if args.rows is not None else default_rows
        theme = resolve_theme(theme_name, no_color=args.no_color)
        sys.stdout.write(render_static(AppState.seeded(), columns, rows, theme))
        return 0

    poll_interval_ms = args.poll_ms if args.poll_ms is not None else config.load_poll_interval_ms()
    logger.debug("poll interval %d ms", poll_interval_ms)
    return run_app(theme_name, args.no_color, poll_interval_ms)


if __name__ == "__main__":
    raise SystemExit(main())
