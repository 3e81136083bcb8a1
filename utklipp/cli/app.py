"""ClipboardApp - wires the history core to its collaborators.

One ClipboardApp owns one HistoryStore and the current Preferences. The
watcher, writer, router and presenter all share that store; nothing else
holds a reference that can mutate it.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from pathlib import Path

from rich.console import Console

from utklipp.cli.shortcuts import RESTORE_TRIGGER, digit_shortcut
from utklipp.clipboard.history import HistoryStore
from utklipp.clipboard.router import SelectionRouter
from utklipp.clipboard.types import HistoryEntry
from utklipp.clipboard.watcher import ClipboardWatcher
from utklipp.clipboard.writer import ClipboardWriter
from utklipp.config.loader import save_preferences, with_changes
from utklipp.config.schema import Preferences
from utklipp.core.constants import FAST_ACCESS_SLOTS, POLL_INTERVAL_SECONDS
from utklipp.core.interfaces import ClipboardBackend, ShortcutRegistry
from utklipp.display.console import get_console
from utklipp.display.history_view import HistoryPresenter
from utklipp.display.theme import DEFAULT_THEME, Theme

logger = logging.getLogger(__name__)


class ClipboardApp:
    """Clipboard history application state and actions."""

    def __init__(
        self,
        backend: ClipboardBackend,
        preferences: Preferences,
        *,
        preferences_path: Path | None = None,
        console: Console | None = None,
        interval: float = POLL_INTERVAL_SECONDS,
        theme: Theme = DEFAULT_THEME,
    ) -> None:
        """Initialize the application.

        Args:
            backend: Clipboard to watch and restore into
            preferences: Preferences loaded at start-up
            preferences_path: Where saves go (defaults to ~/.utklipp/preferences.json)
            console: Console for the history list
            interval: Seconds between clipboard polls
            theme: Styling for the history list
        """
        self._preferences = preferences
        self._preferences_path = preferences_path
        self.console = console or get_console()
        self.theme = theme

        self.history = HistoryStore(preferences.maximum_history_items)
        self.watcher = ClipboardWatcher(backend, self.history, interval)
        self.writer = ClipboardWriter(backend)
        self.presenter = HistoryPresenter(
            self.console,
            self.history,
            line_limit=lambda: self._preferences.item_line_limit,
            theme=theme,
        )
        self.router = SelectionRouter(self.history, self.writer, on_restored=self._on_restored)

    @property
    def preferences(self) -> Preferences:
        return self._preferences

    def save_preferences(self, new: Preferences) -> Path:
        """Persist `new`, then make it the current preferences.

        The history capacity follows immediately. If persisting fails, the
        current preferences and history are left as they were.

        Raises:
            ConfigError: If the preferences file can't be written.
        """
        path = save_preferences(new, self._preferences_path)
        self._preferences = new
        self.history.apply_preference_change(new.maximum_history_items)
        logger.info(
            "Preferences applied: max_items=%d line_limit=%d",
            new.maximum_history_items,
            new.item_line_limit,
        )
        return path

    def update_preferences(
        self,
        *,
        maximum_history_items: int | None = None,
        item_line_limit: int | None = None,
    ) -> Preferences:
        """Validate and save a change to one or both preferences.

        Raises:
            ConfigError: If a value is out of range or the save fails.
        """
        changes = {
            name: value
            for name, value in (
                ("maximum_history_items", maximum_history_items),
                ("item_line_limit", item_line_limit),
            )
            if value is not None
        }
        new = with_changes(self._preferences, **changes)
        self.save_preferences(new)
        return new

    def pick(self, position: int) -> HistoryEntry | None:
        """Restore the entry at 1-based `position` in the current view.

        Unlike digit shortcuts this reaches every entry, the same way a
        click on the list would.
        """
        view = self.history.current_view()
        if not 1 <= position <= len(view):
            return None
        return self.router.select_by_click(view[position - 1].id)

    def register_shortcuts(
        self,
        registry: ShortcutRegistry,
        wrap: Callable[[Callable[[], None]], Callable[[], None]] | None = None,
    ) -> None:
        """Bind the restore trigger (shows or hides the list) and the digit shortcuts.

        Digit shortcuts are only active while the history list is shown.

        Args:
            registry: Where to register the shortcuts
            wrap: Optional adapter applied to each handler (e.g. to run it
                outside the prompt's rendering)
        """
        adapt = wrap or (lambda handler: handler)
        registry.register_shortcut(RESTORE_TRIGGER, adapt(self.presenter.toggle))
        for digit in range(1, FAST_ACCESS_SLOTS + 1):
            registry.register_shortcut(
                digit_shortcut(digit),
                adapt(functools.partial(self.router.select_by_index, digit)),
                active=lambda: self.presenter.is_shown,
            )

    def _on_restored(self, entry: HistoryEntry) -> None:
        self.presenter.dismiss()
        self.console.print(
            f"Restored entry ({entry.line_count} line(s)) to the clipboard",
            style=self.theme.notice,
        )

