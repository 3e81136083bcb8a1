"""`utklipp prefs` subcommands."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console

from utklipp.config.loader import load_preferences, save_preferences, with_changes
from utklipp.core.constants import get_preferences_path


def cmd_prefs_show(console: Console, path: Path | None = None) -> int:
    """Print the saved (or default) preferences."""
    prefs = load_preferences(path)
    console.print(f"[dim]{path or get_preferences_path()}[/]")
    console.print(f"maximum_history_items = {prefs.maximum_history_items}")
    console.print(f"item_line_limit       = {prefs.item_line_limit}")
    return 0


def cmd_prefs_set(
    console: Console,
    path: Path | None = None,
    *,
    maximum_history_items: int | None = None,
    item_line_limit: int | None = None,
) -> int:
    """Change and save preferences. Out-of-range values are rejected.

    Raises:
        ConfigError: If a value is out of range or the file can't be written.
    """
    changes = {}
    if maximum_history_items is not None:
        changes["maximum_history_items"] = maximum_history_items
    if item_line_limit is not None:
        changes["item_line_limit"] = item_line_limit
    if not changes:
        console.print("Nothing to change (use --max and/or --lines)", style="yellow")
        return 1

    current = load_preferences(path)
    new = with_changes(current, **changes)

    written = save_preferences(new, path)
    console.print(f"Saved {written}", style="green")
    return 0
