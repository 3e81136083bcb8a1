"""Typed exception hierarchy for utklipp."""

from __future__ import annotations


class UtklippError(Exception):
    """Base class for all utklipp errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigError(UtklippError):
    """Raised for preference issues (invalid JSON, invalid values, unwritable file)."""


class LoadError(UtklippError):
    """Raised when a JSON file cannot be read or parsed."""

    pass


class ClipboardAccessError(UtklippError):
    """Raised when the system clipboard cannot be read or written.

    Reads that fail are transient by nature (another process may hold the
    clipboard); the watcher treats them as "no change this cycle".
    """

    def __init__(self, operation: str, reason: str) -> None:
        self.operation = operation
        self.reason = reason
        super().__init__(f"Clipboard {operation} failed: {reason}")
