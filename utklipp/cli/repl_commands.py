"""Commands typed at the utklipp prompt.

Commands:
    list             - Show the history (enables Alt+1..9)
    pick N           - Restore entry N (any position)
    prefs            - Show current preferences
    set max N        - Set maximum history items (5-100) and save
    set lines N      - Set item line limit (1-20) and save
    help             - Display help text
    quit             - Exit
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

from utklipp.core.errors import ConfigError

if TYPE_CHECKING:
    from utklipp.cli.app import ClipboardApp

HELP_TEXT = """\
Commands:
  list          Show the clipboard history (then Alt+1..9 restores a slot)
  pick N        Restore entry N
  prefs         Show preferences
  set max N     Set maximum history items (5-100)
  set lines N   Set lines shown per entry (1-20)
  help          Show this help
  quit          Exit

Keys:
  Ctrl+V        Show or hide the clipboard history
  Alt+1..9      Restore slot 1-9 while the history is shown"""

_SET_FIELDS = {
    "max": "maximum_history_items",
    "lines": "item_line_limit",
}


class CommandResult(Enum):
    """Result status of a command execution.

    Attributes:
        SUCCESS: Command completed.
        ERROR: Command failed; message says why.
        QUIT: User asked to exit.
    """

    SUCCESS = auto()
    ERROR = auto()
    QUIT = auto()


@dataclass
class CommandOutput:
    """Output from a command execution.

    Commands return structured output rather than printing; the prompt loop
    decides how to display it.
    """

    result: CommandResult
    message: str | None = None

    @classmethod
    def success(cls, message: str | None = None) -> CommandOutput:
        return cls(result=CommandResult.SUCCESS, message=message)

    @classmethod
    def error(cls, message: str) -> CommandOutput:
        return cls(result=CommandResult.ERROR, message=message)

    @classmethod
    def quit(cls) -> CommandOutput:
        return cls(result=CommandResult.QUIT)


def dispatch(app: ClipboardApp, line: str) -> CommandOutput:
    """Run one prompt line against `app`."""
    parts = line.split()
    if not parts:
        return CommandOutput.success()

    name, args = parts[0].lower(), parts[1:]
    if name in ("quit", "exit", "q"):
        return CommandOutput.quit()
    if name in ("list", "ls"):
        app.presenter.show()
        return CommandOutput.success()
    if name == "pick":
        return _cmd_pick(app, args)
    if name == "prefs":
        return CommandOutput.success(format_preferences(app))
    if name == "set":
        return _cmd_set(app, args)
    if name in ("help", "?"):
        return CommandOutput.success(HELP_TEXT)
    return CommandOutput.error(f"Unknown command: {name} (try 'help')")


def format_preferences(app: ClipboardApp) -> str:
    prefs = app.preferences
    return (
        f"maximum history items: {prefs.maximum_history_items}\n"
        f"item line limit:       {prefs.item_line_limit}\n"
        f"entries held:          {len(app.history)}"
    )


def _cmd_pick(app: ClipboardApp, args: list[str]) -> CommandOutput:
    if len(args) != 1:
        return CommandOutput.error("Usage: pick N")
    try:
        position = int(args[0])
    except ValueError:
        return CommandOutput.error(f"Not a number: {args[0]}")
    # Out-of-range positions are ignored, like a click on a stale list
    app.pick(position)
    return CommandOutput.success()


def _cmd_set(app: ClipboardApp, args: list[str]) -> CommandOutput:
    if len(args) != 2 or args[0] not in _SET_FIELDS:
        return CommandOutput.error("Usage: set max N | set lines N")
    try:
        value = int(args[1])
    except ValueError:
        return CommandOutput.error(f"Not a number: {args[1]}")

    try:
        app.update_preferences(**{_SET_FIELDS[args[0]]: value})
    except ConfigError as e:
        return CommandOutput.error(e.message)
    return CommandOutput.success("Preferences saved.\n" + format_preferences(app))
