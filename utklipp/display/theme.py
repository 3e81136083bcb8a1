"""Theme definitions for the history list."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """Visual theme configuration.

    All styling in one place for easy customization.
    """
    title: str = "Clipboard History"
    empty_message: str = "No clipboard history yet"

    # Text styles (Rich style strings)
    title_style: str = "bold"
    slot: str = "bold cyan"
    text: str = ""
    timestamp: str = "dim"
    empty: str = "dim"
    error: str = "bold red"
    notice: str = "green"

    # strftime pattern for capture times
    timestamp_format: str = "%Y-%m-%d %H:%M"


# Default theme instance
DEFAULT_THEME = Theme()
