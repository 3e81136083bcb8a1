"""Clipboard history types and dataclasses."""
from __future__ import annotations

import uuid
from collections.abc import Hashable
from dataclasses import dataclass, field
from datetime import datetime

ELLIPSIS = "…"


@dataclass(frozen=True)
class HistoryEntry:
    """One captured clipboard text.

    Equality and hashing go by `id` only. Dedup in the history store compares
    `text` directly.
    """

    id: uuid.UUID
    text: str = field(compare=False)
    created_at: datetime = field(compare=False)

    @classmethod
    def capture(cls, text: str, now: datetime | None = None) -> HistoryEntry:
        """Create an entry with a fresh id, stamped now (or at `now`)."""
        if not text:
            raise ValueError("History entries must have non-empty text")
        return cls(id=uuid.uuid4(), text=text, created_at=now or datetime.now())

    @property
    def line_count(self) -> int:
        return self.text.count("\n") + (0 if self.text.endswith("\n") else 1)

    def preview(self, line_limit: int) -> str:
        """First `line_limit` lines of the text, with an ellipsis if cut."""
        lines = self.text.splitlines()
        if len(lines) <= line_limit:
            return self.text.rstrip("\n")
        return "\n".join(lines[:line_limit]) + ELLIPSIS


@dataclass(frozen=True)
class ClipboardSnapshot:
    """Result of a single clipboard read.

    `token` changes whenever the clipboard contents change. `text` is None
    when the clipboard holds no text payload.
    """

    token: Hashable
    text: str | None
