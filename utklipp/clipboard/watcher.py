"""ClipboardWatcher - polls the clipboard and feeds new text to the history.

The clipboard offers no push notification, so the watcher runs as a
recurring task on the event loop that owns the history. Each cycle is one
read and one token comparison; a read that fails is simply a cycle with no
change.
"""
from __future__ import annotations

import asyncio
import logging
from collections.abc import Hashable

from utklipp.clipboard.history import HistoryStore
from utklipp.clipboard.types import ClipboardSnapshot
from utklipp.core.constants import POLL_INTERVAL_SECONDS
from utklipp.core.errors import ClipboardAccessError
from utklipp.core.interfaces import ClipboardBackend

logger = logging.getLogger(__name__)

_UNSET = object()


class ClipboardWatcher:
    """Detects copy events by change token and forwards their text."""

    def __init__(
        self,
        backend: ClipboardBackend,
        history: HistoryStore,
        interval: float = POLL_INTERVAL_SECONDS,
    ) -> None:
        if interval <= 0:
            raise ValueError(f"Poll interval must be positive, got {interval}")
        self._backend = backend
        self._history = history
        self._interval = interval
        self._last_token: Hashable | object = _UNSET
        self._task: asyncio.Task[None] | None = None

    @property
    def last_token(self) -> Hashable | None:
        """Token of the last clipboard generation seen, or None before any read."""
        return None if self._last_token is _UNSET else self._last_token

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def prime(self) -> bool:
        """Record the current token without capturing its text.

        Returns:
            True if the clipboard could be read.
        """
        snapshot = self._read()
        if snapshot is None:
            return False
        self._last_token = snapshot.token
        return True

    def poll(self) -> bool:
        """Run one check synchronously.

        Returns:
            True if new text was forwarded to the history.
        """
        snapshot = self._read()
        if snapshot is None:
            return False
        return self._observe(snapshot)

    async def poll_async(self) -> bool:
        """Run one check, reading the clipboard on a worker thread.

        The history is only touched back on the calling loop.
        """
        snapshot = await asyncio.to_thread(self._read)
        if snapshot is None:
            return False
        return self._observe(snapshot)

    async def run(self) -> None:
        """Poll forever at the configured interval. Cancel to stop."""
        primed = await asyncio.to_thread(self.prime)
        logger.info(
            "Clipboard watcher started (interval=%.2fs, primed=%s)",
            self._interval,
            primed,
        )
        try:
            while True:
                await asyncio.sleep(self._interval)
                await self.poll_async()
        finally:
            logger.info("Clipboard watcher stopped")

    def start(self) -> asyncio.Task[None]:
        """Start run() as a background task on the running loop."""
        if self.running:
            assert self._task is not None
            return self._task
        self._task = asyncio.create_task(self.run(), name="clipboard-watcher")
        return self._task

    async def stop(self) -> None:
        """Cancel the background task and wait for it to finish."""
        task, self._task = self._task, None
        if task is None or task.done():
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass

    # --- Internals ---

    def _read(self) -> ClipboardSnapshot | None:
        try:
            return self._backend.read()
        except ClipboardAccessError as e:
            logger.debug("Clipboard unavailable this cycle: %s", e.reason)
            return None

    def _observe(self, snapshot: ClipboardSnapshot) -> bool:
        if snapshot.token == self._last_token:
            return False
        self._last_token = snapshot.token

        if not snapshot.text:
            return False

        self._history.ingest(snapshot.text)
        return True
