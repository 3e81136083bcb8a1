"""System clipboard backends.

Both backends satisfy utklipp.core.interfaces.ClipboardBackend.
"""
from __future__ import annotations

import logging
import threading

import pyperclip

from utklipp.clipboard.types import ClipboardSnapshot
from utklipp.core.errors import ClipboardAccessError

logger = logging.getLogger(__name__)


class PyperclipBackend:
    """System clipboard through pyperclip.

    pyperclip exposes no change counter, so this backend keeps its own
    generation number. It advances when a read returns different text than
    the last read or write, and on every write.

    A read that overlaps a write may have pasted the text the write replaced.
    Such a read reports the written text instead.
    """

    def __init__(self) -> None:
        self._generation = 0
        self._writes = 0
        self._last_text: str | None = None
        self._lock = threading.Lock()

    def read(self) -> ClipboardSnapshot:
        with self._lock:
            writes_before = self._writes

        try:
            text = pyperclip.paste()
        except pyperclip.PyperclipException as e:
            raise ClipboardAccessError("read", str(e)) from e

        # Non-text payloads come back as an empty string
        text = text or None
        with self._lock:
            if self._writes != writes_before:
                logger.debug("Discarding clipboard read that overlapped a write")
                return ClipboardSnapshot(token=self._generation, text=self._last_text)
            if text != self._last_text:
                self._last_text = text
                self._generation += 1
            return ClipboardSnapshot(token=self._generation, text=text)

    def write_text(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            raise ClipboardAccessError("write", str(e)) from e

        with self._lock:
            self._last_text = text
            self._generation += 1
            self._writes += 1


class InMemoryClipboard:
    """Process-local clipboard with a change count.

    The count advances on every write, even when the text is unchanged,
    the way a pasteboard change count does.
    """

    def __init__(self, text: str | None = None) -> None:
        self._text = text
        self._change_count = 0
        self._lock = threading.Lock()

    def read(self) -> ClipboardSnapshot:
        with self._lock:
            return ClipboardSnapshot(token=self._change_count, text=self._text)

    def write_text(self, text: str) -> None:
        with self._lock:
            self._text = text
            self._change_count += 1

    def clear(self) -> None:
        """Empty the clipboard (a non-text copy looks the same)."""
        with self._lock:
            self._text = None
            self._change_count += 1


def create_backend(name: str) -> PyperclipBackend | InMemoryClipboard:
    """Build a backend by name ("system" or "memory")."""
    logger.debug("Using %s clipboard backend", name)
    if name == "system":
        return PyperclipBackend()
    if name == "memory":
        return InMemoryClipboard()
    raise ValueError(f"Unknown clipboard backend: {name!r}")
