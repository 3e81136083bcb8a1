"""utklipp display system.

Renders history snapshots with Rich; never mutates the history.
"""

from utklipp.display.console import get_console
from utklipp.display.history_view import HistoryPresenter, render_history
from utklipp.display.theme import DEFAULT_THEME, Theme

__all__ = [
    "DEFAULT_THEME",
    "HistoryPresenter",
    "Theme",
    "get_console",
    "render_history",
]
