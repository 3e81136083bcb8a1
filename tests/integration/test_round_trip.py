"""End-to-end tests: copy, list, restore, and the prompt loop."""

import asyncio
import contextlib
from pathlib import Path
from unittest.mock import patch

import pytest
from rich.console import Console

from utklipp.cli.app import ClipboardApp
from utklipp.cli.repl import run_repl
from utklipp.clipboard.backend import InMemoryClipboard
from utklipp.config.loader import load_preferences
from utklipp.config.schema import Preferences


class ScriptedSession:
    """Stands in for PromptSession, replaying lines then EOF."""

    def __init__(self, lines: list[str], before_each=None, **kwargs) -> None:
        self.lines = list(lines)
        self.before_each = before_each
        self.key_bindings = kwargs.get("key_bindings")

    async def prompt_async(self, message: str) -> str:
        if self.before_each is not None:
            await self.before_each()
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


@pytest.fixture
def app(clipboard: InMemoryClipboard, console: Console, tmp_path: Path) -> ClipboardApp:
    return ClipboardApp(
        clipboard,
        Preferences(),
        preferences_path=tmp_path / "preferences.json",
        console=console,
        interval=0.01,
    )


class TestRestoreRoundTrip:
    """Restored text comes back through the watcher as a duplicate."""

    @pytest.mark.asyncio
    async def test_restore_is_not_reingested(
        self, app: ClipboardApp, clipboard: InMemoryClipboard
    ) -> None:
        """Restore E, poll once: the changed token is seen, history unchanged."""
        app.watcher.prime()
        for text in ("A", "B", "C"):
            clipboard.write_text(text)
            await app.watcher.poll_async()
        before = app.history.current_view()

        restored = app.router.select_by_index(3)
        assert restored is not None and restored.text == "A"

        token_before_poll = app.watcher.last_token
        assert await app.watcher.poll_async() is True
        assert app.watcher.last_token != token_before_poll
        assert app.history.current_view() == before

    @pytest.mark.asyncio
    async def test_external_copy_of_existing_text_is_deduped(
        self, app: ClipboardApp, clipboard: InMemoryClipboard
    ) -> None:
        """Copying an old entry again doesn't move it to the top."""
        app.watcher.prime()
        for text in ("A", "B", "A"):
            clipboard.write_text(text)
            await app.watcher.poll_async()

        assert [e.text for e in app.history.current_view()] == ["B", "A"]


class TestRunRepl:
    """Tests for the prompt loop with the watcher running."""

    @pytest.mark.asyncio
    async def test_session_flow(
        self,
        app: ClipboardApp,
        clipboard: InMemoryClipboard,
        console: Console,
        tmp_path: Path,
    ) -> None:
        """Copies made while the prompt runs are listed, picked and saved."""
        copies = iter(["first", "second", "third"])

        async def user_copies() -> None:
            # Let the watcher prime, then copy one item and wait for capture
            for _ in range(100):
                if app.watcher.last_token is not None:
                    break
                await asyncio.sleep(0.01)
            text = next(copies, None)
            if text is None:
                return
            count = len(app.history)
            clipboard.write_text(text)
            for _ in range(100):
                if len(app.history) > count:
                    break
                await asyncio.sleep(0.01)

        lines = ["list", "prefs", "pick 3", "set max 5", "bogus"]
        with (
            patch(
                "utklipp.cli.repl.PromptSession",
                lambda **kwargs: ScriptedSession(lines, user_copies, **kwargs),
            ),
            patch("utklipp.cli.repl.patch_stdout", contextlib.nullcontext),
        ):
            await run_repl(app)

        assert not app.watcher.running
        assert [e.text for e in app.history.current_view()] == ["third", "second", "first"]
        assert clipboard.read().text == "first"
        assert load_preferences(tmp_path / "preferences.json").maximum_history_items == 5

        output = console.export_text()
        assert "Restored entry" in output
        assert "Unknown command: bogus" in output
