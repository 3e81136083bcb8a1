"""HistoryStore - the bounded, deduplicated clipboard history."""
from __future__ import annotations

import logging
import threading
import uuid
from collections.abc import Callable
from datetime import datetime

from utklipp.clipboard.types import HistoryEntry
from utklipp.config.schema import DEFAULT_HISTORY_ITEMS

logger = logging.getLogger(__name__)


class HistoryStore:
    """Owns the ordered list of history entries, most recent first.

    Invariants after every operation:
        - no two entries have equal text
        - len(entries) <= max_items
        - entries are only ever prepended, then evicted from the tail

    Every operation takes the lock for its own duration only. Readers get a
    tuple from current_view(), so a later ingest never changes what they are
    iterating.
    """

    def __init__(
        self,
        max_items: int = DEFAULT_HISTORY_ITEMS,
        *,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize an empty history.

        Args:
            max_items: Capacity. Must be at least 1.
            clock: Source of capture timestamps (for testing)
        """
        _check_capacity(max_items)
        self._max_items = max_items
        self._clock = clock
        self._entries: list[HistoryEntry] = []
        self._texts: set[str] = set()
        self._lock = threading.RLock()

    @property
    def max_items(self) -> int:
        return self._max_items

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    # --- Core Operations ---

    def ingest(self, text: str) -> HistoryEntry | None:
        """Capture `text` as the newest entry.

        Empty text and text already present anywhere in the history are
        ignored; existing entries are never moved.

        Returns:
            The new entry, or None if nothing was added.
        """
        if not text:
            return None

        with self._lock:
            if text in self._texts:
                logger.debug("Ignoring duplicate clipboard text (%d chars)", len(text))
                return None

            entry = HistoryEntry.capture(text, now=self._clock())
            self._entries.insert(0, entry)
            self._texts.add(text)
            self._evict_to(self._max_items)

        logger.debug("Captured entry %s (%d chars)", entry.id, len(text))
        return entry

    def current_view(self) -> tuple[HistoryEntry, ...]:
        """Snapshot of the history, most recent first."""
        with self._lock:
            return tuple(self._entries)

    def apply_preference_change(self, new_max: int) -> None:
        """Set a new capacity, evicting from the tail right away if needed.

        Raises:
            ValueError: If new_max is less than 1.
        """
        _check_capacity(new_max)
        with self._lock:
            old_max = self._max_items
            self._max_items = new_max
            evicted = self._evict_to(new_max)

        if new_max != old_max:
            logger.info(
                "History capacity %d -> %d (%d evicted)", old_max, new_max, evicted
            )

    def get(self, entry_id: uuid.UUID) -> HistoryEntry | None:
        """Look up an entry by id."""
        with self._lock:
            for entry in self._entries:
                if entry.id == entry_id:
                    return entry
        return None

    # --- Internals ---

    def _evict_to(self, limit: int) -> int:
        """Drop tail entries until at most `limit` remain. Caller holds the lock."""
        evicted = 0
        while len(self._entries) > limit:
            dropped = self._entries.pop()
            self._texts.discard(dropped.text)
            evicted += 1
            logger.debug("Evicted entry %s", dropped.id)
        return evicted


def _check_capacity(value: int) -> None:
    if value < 1:
        raise ValueError(f"History capacity must be at least 1, got {value}")
