"""The Console every utklipp component prints through."""

from __future__ import annotations

from functools import lru_cache

from rich.console import Console


@lru_cache(maxsize=1)
def get_console() -> Console:
    """Return the process-wide Console, built on first use."""
    # clipboard text goes out verbatim, no repr highlighting
    return Console(highlight=False, markup=True)
