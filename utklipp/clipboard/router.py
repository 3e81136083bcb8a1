"""SelectionRouter - turns a click or digit shortcut into a restore."""
from __future__ import annotations

import logging
import uuid
from collections.abc import Callable

from utklipp.clipboard.history import HistoryStore
from utklipp.clipboard.types import HistoryEntry
from utklipp.clipboard.writer import ClipboardWriter
from utklipp.core.constants import FAST_ACCESS_SLOTS
from utklipp.core.errors import ClipboardAccessError

logger = logging.getLogger(__name__)


class SelectionRouter:
    """Maps user selections onto the history and restores the chosen entry.

    Selections that don't resolve to an entry (out-of-range index, id of an
    entry that has since been evicted) do nothing.
    """

    def __init__(
        self,
        history: HistoryStore,
        writer: ClipboardWriter,
        on_restored: Callable[[HistoryEntry], None] | None = None,
    ) -> None:
        """Initialize router.

        Args:
            history: Store to select from
            writer: Clipboard writer used for restores
            on_restored: Called after a successful restore (dismisses the
                presentation)
        """
        self._history = history
        self._writer = writer
        self._on_restored = on_restored

    def select_by_index(self, index: int) -> HistoryEntry | None:
        """Restore the entry in 1-based fast-access slot `index`."""
        view = self._history.current_view()
        if not 1 <= index <= min(FAST_ACCESS_SLOTS, len(view)):
            logger.debug("Ignoring selection of slot %d (%d entries)", index, len(view))
            return None
        return self._restore(view[index - 1])

    def select_by_click(self, entry_id: uuid.UUID) -> HistoryEntry | None:
        """Restore the entry with `entry_id` if it is still in the history."""
        entry = self._history.get(entry_id)
        if entry is None:
            logger.debug("Ignoring selection of unknown entry %s", entry_id)
            return None
        return self._restore(entry)

    def _restore(self, entry: HistoryEntry) -> HistoryEntry | None:
        try:
            self._writer.write(entry.text)
        except ClipboardAccessError as e:
            logger.warning("Could not restore entry %s: %s", entry.id, e.reason)
            return None

        if self._on_restored is not None:
            self._on_restored(entry)
        return entry
