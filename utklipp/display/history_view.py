"""Terminal rendering of the clipboard history."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from rich.console import Console, Group, RenderableType
from rich.table import Table
from rich.text import Text

from utklipp.clipboard.history import HistoryStore
from utklipp.clipboard.types import HistoryEntry
from utklipp.core.constants import FAST_ACCESS_SLOTS
from utklipp.display.theme import DEFAULT_THEME, Theme

logger = logging.getLogger(__name__)


def render_history(
    entries: Sequence[HistoryEntry],
    line_limit: int,
    theme: Theme = DEFAULT_THEME,
) -> RenderableType:
    """Build a renderable for a history snapshot.

    The first FAST_ACCESS_SLOTS rows carry their shortcut number; each entry
    shows at most `line_limit` lines followed by its capture time.
    """
    title = Text(theme.title, style=theme.title_style)
    if not entries:
        return Group(title, Text(theme.empty_message, style=theme.empty))

    table = Table(show_header=False, box=None, pad_edge=False, padding=(0, 1, 1, 0))
    table.add_column("slot", justify="right", no_wrap=True)
    table.add_column("entry", overflow="fold")

    for position, entry in enumerate(entries, start=1):
        slot = Text(str(position), style=theme.slot) if position <= FAST_ACCESS_SLOTS else Text("")
        body = Text(entry.preview(line_limit), style=theme.text)
        body.append("\n")
        body.append(entry.created_at.strftime(theme.timestamp_format), style=theme.timestamp)
        table.add_row(slot, body)

    return Group(title, table)


class HistoryPresenter:
    """Shows and dismisses the history list on a console.

    Digit shortcuts are only live while the list is shown; `is_shown` is what
    the shortcut registry checks.
    """

    def __init__(
        self,
        console: Console,
        history: HistoryStore,
        line_limit: Callable[[], int],
        theme: Theme = DEFAULT_THEME,
    ) -> None:
        self._console = console
        self._history = history
        self._line_limit = line_limit
        self._theme = theme
        self._shown = False

    @property
    def is_shown(self) -> bool:
        return self._shown

    def show(self) -> None:
        self._console.print(render_history(
            self._history.current_view(), self._line_limit(), self._theme
        ))
        self._shown = True

    def dismiss(self) -> None:
        if self._shown:
            logger.debug("History dismissed")
        self._shown = False

    def toggle(self) -> None:
        if self._shown:
            self.dismiss()
        else:
            self.show()
