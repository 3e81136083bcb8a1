"""Keyboard shortcuts on prompt_toolkit key bindings.

Implements utklipp.core.interfaces.ShortcutRegistry. A key spec is a
whitespace-separated sequence of prompt_toolkit key names, e.g. "c-v" or
"escape 1" (Alt/Meta+1).
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from prompt_toolkit.filters import Condition, FilterOrBool
from prompt_toolkit.key_binding import KeyBindings, KeyPressEvent

logger = logging.getLogger(__name__)

# Shows the history list (Control+V)
RESTORE_TRIGGER = "c-v"


def digit_shortcut(digit: int) -> str:
    """Key spec for fast-access slot `digit` (Alt/Meta+digit)."""
    if not 1 <= digit <= 9:
        raise ValueError(f"Digit shortcuts cover 1-9, got {digit}")
    return f"escape {digit}"


def parse_key_spec(spec: str) -> tuple[str, ...]:
    """Split a key spec into prompt_toolkit key names.

    Raises:
        ValueError: If the spec is empty.
    """
    keys = tuple(spec.split())
    if not keys:
        raise ValueError("Empty shortcut spec")
    return keys


class PromptToolkitShortcuts:
    """ShortcutRegistry backed by a prompt_toolkit KeyBindings object.

    Pass `key_bindings` to a PromptSession so the bindings are live while the
    prompt is running. Registering a spec again replaces its handler.
    """

    def __init__(self, key_bindings: KeyBindings | None = None) -> None:
        self.key_bindings = key_bindings or KeyBindings()
        self._bound: dict[str, Callable[[KeyPressEvent], None]] = {}

    def register_shortcut(
        self,
        spec: str,
        handler: Callable[[], None],
        active: Callable[[], bool] | None = None,
    ) -> None:
        keys = parse_key_spec(spec)
        if spec in self._bound:
            self.unregister_shortcut(spec)

        key_filter: FilterOrBool = Condition(active) if active is not None else True

        def on_keys(event: KeyPressEvent) -> None:
            handler()

        self.key_bindings.add(*keys, filter=key_filter)(on_keys)
        self._bound[spec] = on_keys
        logger.debug("Registered shortcut %r", spec)

    def unregister_shortcut(self, spec: str) -> None:
        on_keys = self._bound.pop(spec, None)
        if on_keys is None:
            return
        self.key_bindings.remove(on_keys)
        logger.debug("Unregistered shortcut %r", spec)

    def registered(self) -> list[str]:
        """Specs currently bound, in registration order."""
        return list(self._bound)
