"""Clipboard history: capture, dedup, eviction and restore."""
from utklipp.clipboard.backend import InMemoryClipboard, PyperclipBackend, create_backend
from utklipp.clipboard.history import HistoryStore
from utklipp.clipboard.router import SelectionRouter
from utklipp.clipboard.types import ClipboardSnapshot, HistoryEntry
from utklipp.clipboard.watcher import ClipboardWatcher
from utklipp.clipboard.writer import ClipboardWriter

__all__ = [
    "ClipboardSnapshot",
    "ClipboardWatcher",
    "ClipboardWriter",
    "HistoryEntry",
    "HistoryStore",
    "InMemoryClipboard",
    "PyperclipBackend",
    "SelectionRouter",
    "create_backend",
]
