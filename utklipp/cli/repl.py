"""Async REPL with prompt-toolkit for utklipp.

`utklipp run` starts the clipboard watcher as a background task and reads
commands at a prompt on the same event loop, so polls, restores and
preference changes never run at the same time:

    utklipp run
    +-- load preferences (defaults if none saved)
    +-- ClipboardApp (history, watcher, writer, router, presenter)
    +-- register Ctrl+V / Alt+1..9 on the prompt's key bindings
    +-- watcher task: prime, then poll every 0.5s
    +-- prompt loop until quit / Ctrl+D
"""

import argparse
import asyncio
import logging
import sys
from collections.abc import Callable

from dotenv import load_dotenv
from prompt_toolkit import PromptSession
from prompt_toolkit.application import run_in_terminal
from prompt_toolkit.patch_stdout import patch_stdout

from utklipp.cli import repl_commands
from utklipp.cli.app import ClipboardApp
from utklipp.cli.arg_parser import parse_args
from utklipp.cli.logging_setup import configure_logging
from utklipp.cli.prefs_commands import cmd_prefs_set, cmd_prefs_show
from utklipp.cli.repl_commands import CommandResult
from utklipp.cli.shortcuts import PromptToolkitShortcuts
from utklipp.clipboard.backend import create_backend
from utklipp.config.loader import load_preferences
from utklipp.core.constants import get_log_dir
from utklipp.core.errors import UtklippError
from utklipp.display.console import get_console
from utklipp.display.theme import DEFAULT_THEME

logger = logging.getLogger(__name__)

PROMPT = "utklipp> "


def _in_terminal(handler: Callable[[], object]) -> Callable[[], None]:
    """Run a key handler outside the prompt so its output doesn't garble it."""

    def run() -> None:
        run_in_terminal(handler)

    return run


async def run_repl(app: ClipboardApp) -> None:
    """Watch the clipboard and read commands until the user quits."""
    shortcuts = PromptToolkitShortcuts()
    app.register_shortcuts(shortcuts, wrap=_in_terminal)
    session: PromptSession[str] = PromptSession(key_bindings=shortcuts.key_bindings)

    app.console.print(
        "[bold]utklipp[/] watching the clipboard. "
        "Ctrl+V shows or hides history, 'help' lists commands."
    )
    app.watcher.start()
    try:
        with patch_stdout():
            while True:
                try:
                    line = await session.prompt_async(PROMPT)
                except KeyboardInterrupt:
                    continue
                except EOFError:
                    break

                output = repl_commands.dispatch(app, line)
                if output.result == CommandResult.QUIT:
                    break
                if output.message:
                    style = app.theme.error if output.result == CommandResult.ERROR else None
                    app.console.print(output.message, style=style, markup=False)
    finally:
        await app.watcher.stop()


def _run(args: argparse.Namespace) -> int:
    console = get_console()

    if args.command == "prefs":
        if args.prefs_command == "set":
            return cmd_prefs_set(
                console,
                args.preferences,
                maximum_history_items=args.maximum_history_items,
                item_line_limit=args.item_line_limit,
            )
        return cmd_prefs_show(console, args.preferences)

    preferences = load_preferences(args.preferences)
    logger.info("Starting clipboard watcher (backend=%s)", args.backend)
    app = ClipboardApp(
        create_backend(args.backend),
        preferences,
        preferences_path=args.preferences,
        console=console,
        interval=args.interval,
    )
    asyncio.run(run_repl(app))
    return 0


def main(argv: list[str] | None = None) -> None:
    """Entry point for the `utklipp` console script."""
    load_dotenv()
    args = parse_args(argv)

    configure_logging(
        None if args.no_log_file else get_log_dir(),
        level=getattr(logging, args.log_level),
        console_level=logging.INFO if args.verbose else logging.WARNING,
    )

    try:
        exit_code = _run(args)
    except UtklippError as e:
        get_console().print(f"Error: {e.message}", style=DEFAULT_THEME.error, markup=False)
        exit_code = 1
    except KeyboardInterrupt:
        exit_code = 130

    sys.exit(exit_code)
