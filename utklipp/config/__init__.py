"""Preference loading and validation."""

from utklipp.config.loader import load_preferences, save_preferences, with_changes
from utklipp.config.schema import (
    DEFAULT_HISTORY_ITEMS,
    DEFAULT_LINE_LIMIT,
    MAX_HISTORY_ITEMS,
    MAX_LINE_LIMIT,
    MIN_HISTORY_ITEMS,
    MIN_LINE_LIMIT,
    Preferences,
)

__all__ = [
    "DEFAULT_HISTORY_ITEMS",
    "DEFAULT_LINE_LIMIT",
    "MAX_HISTORY_ITEMS",
    "MAX_LINE_LIMIT",
    "MIN_HISTORY_ITEMS",
    "MIN_LINE_LIMIT",
    "Preferences",
    "load_preferences",
    "save_preferences",
    "with_changes",
]
