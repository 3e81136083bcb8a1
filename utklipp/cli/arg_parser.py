"""Argument parsing for the utklipp CLI."""

import argparse
from pathlib import Path

from utklipp import __version__
from utklipp.core.constants import POLL_INTERVAL_SECONDS


def add_preferences_arg(parser: argparse.ArgumentParser) -> None:
    """Add --preferences argument to a parser."""
    parser.add_argument(
        "--preferences",
        type=Path,
        metavar="PATH",
        help="Preferences file (default: ~/.utklipp/preferences.json)",
    )


def _positive_float(value: str) -> float:
    number = float(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {value}")
    return number


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="utklipp",
        description="Clipboard history for the terminal",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Log file level (default: INFO)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Also log INFO to the console",
    )
    parser.add_argument(
        "--no-log-file",
        action="store_true",
        help="Don't write ~/.utklipp/logs/utklipp.log",
    )

    subparsers = parser.add_subparsers(dest="command")

    # Must follow add_subparsers, whose own None default would win for `command`
    parser.set_defaults(
        command="run",
        backend="system",
        interval=POLL_INTERVAL_SECONDS,
        preferences=None,
    )

    # run - watch the clipboard with an interactive prompt
    run_parser = subparsers.add_parser(
        "run",
        help="Watch the clipboard and pick entries interactively (default)",
    )
    run_parser.add_argument(
        "--backend",
        choices=["system", "memory"],
        default="system",
        help="Clipboard backend (default: system)",
    )
    run_parser.add_argument(
        "--interval",
        type=_positive_float,
        default=POLL_INTERVAL_SECONDS,
        help=f"Seconds between clipboard polls (default: {POLL_INTERVAL_SECONDS})",
    )
    add_preferences_arg(run_parser)

    # prefs - show or change saved preferences
    prefs_parser = subparsers.add_parser(
        "prefs",
        help="Show or change preferences",
    )
    prefs_subparsers = prefs_parser.add_subparsers(dest="prefs_command")

    show_parser = prefs_subparsers.add_parser("show", help="Print preferences")
    add_preferences_arg(show_parser)

    set_parser = prefs_subparsers.add_parser("set", help="Change and save preferences")
    set_parser.add_argument(
        "--max",
        dest="maximum_history_items",
        type=int,
        metavar="N",
        help="Maximum history items (5-100)",
    )
    set_parser.add_argument(
        "--lines",
        dest="item_line_limit",
        type=int,
        metavar="N",
        help="Lines shown per entry (1-20)",
    )
    add_preferences_arg(set_parser)

    return parser.parse_args(argv)
