"""ClipboardWriter - puts a chosen entry back on the system clipboard."""
from __future__ import annotations

import logging

from utklipp.core.interfaces import ClipboardBackend

logger = logging.getLogger(__name__)


class ClipboardWriter:
    """Writes text to the clipboard.

    There is no "ignore next change" flag. The written text is already in the
    history, so when the watcher sees the new token, ingest drops it as a
    duplicate.
    """

    def __init__(self, backend: ClipboardBackend) -> None:
        self._backend = backend

    def write(self, text: str) -> None:
        """Replace the clipboard contents with `text`.

        Raises:
            ClipboardAccessError: If the backend cannot write.
        """
        self._backend.write_text(text)
        logger.debug("Restored %d chars to clipboard", len(text))
