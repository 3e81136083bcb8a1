"""Pydantic model for utklipp preferences."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

MIN_HISTORY_ITEMS = 5
MAX_HISTORY_ITEMS = 100
DEFAULT_HISTORY_ITEMS = 20

MIN_LINE_LIMIT = 1
MAX_LINE_LIMIT = 20
DEFAULT_LINE_LIMIT = 10


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


class Preferences(BaseModel):
    """User preferences.

    Example preferences.json:
        {
            "maximum_history_items": 20,
            "item_line_limit": 10
        }

    Instances are frozen. A save replaces the whole object; nothing mutates a
    Preferences in place.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, strict=True)

    maximum_history_items: int = Field(
        default=DEFAULT_HISTORY_ITEMS,
        ge=MIN_HISTORY_ITEMS,
        le=MAX_HISTORY_ITEMS,
    )
    """Number of entries kept in history before the oldest is evicted."""

    item_line_limit: int = Field(
        default=DEFAULT_LINE_LIMIT,
        ge=MIN_LINE_LIMIT,
        le=MAX_LINE_LIMIT,
    )
    """Lines of each entry shown in the history list. Display only."""

    @classmethod
    def clamped(
        cls,
        maximum_history_items: int = DEFAULT_HISTORY_ITEMS,
        item_line_limit: int = DEFAULT_LINE_LIMIT,
    ) -> "Preferences":
        """Build preferences with out-of-range values pulled into range."""
        return cls(
            maximum_history_items=_clamp(
                maximum_history_items, MIN_HISTORY_ITEMS, MAX_HISTORY_ITEMS
            ),
            item_line_limit=_clamp(item_line_limit, MIN_LINE_LIMIT, MAX_LINE_LIMIT),
        )

    def replace(self, **changes: Any) -> "Preferences":
        """Return a validated copy with `changes` applied.

        Raises:
            pydantic.ValidationError: If a changed value is out of range.
        """
        return type(self).model_validate({**self.model_dump(), **changes})
