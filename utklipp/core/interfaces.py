"""Capability interfaces (protocols) for utklipp.

The history core never talks to the operating system directly. It goes
through these Protocols, so a backend only has to match the shape, not
inherit from anything.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from utklipp.clipboard.types import ClipboardSnapshot


class ClipboardBackend(Protocol):
    """Read/write access to a clipboard that exposes a change token.

    Example:
        class StaticClipboard:
            def read(self) -> ClipboardSnapshot:
                return ClipboardSnapshot(token=1, text="hello")

            def write_text(self, text: str) -> None:
                raise ClipboardAccessError("write", "read-only")
    """

    def read(self) -> ClipboardSnapshot:
        """Return the current change token and text payload.

        Raises:
            ClipboardAccessError: If the clipboard cannot be read right now.
        """
        ...

    def write_text(self, text: str) -> None:
        """Replace the clipboard contents with `text`, advancing the token.

        Raises:
            ClipboardAccessError: If the clipboard cannot be written.
        """
        ...


class ShortcutRegistry(Protocol):
    """Host-registered keyboard shortcuts.

    Key specs are opaque to the core; the registry decides what they mean.
    """

    def register_shortcut(
        self,
        spec: str,
        handler: Callable[[], None],
        active: Callable[[], bool] | None = None,
    ) -> None:
        """Bind `handler` to `spec`, optionally only while `active()` is true."""
        ...

    def unregister_shortcut(self, spec: str) -> None:
        """Remove the binding for `spec` if one exists."""
        ...
