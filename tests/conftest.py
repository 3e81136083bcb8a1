"""Shared pytest fixtures and configuration for pytest."""

import sys
from pathlib import Path

import pytest
from rich.console import Console

from utklipp.clipboard.backend import InMemoryClipboard
from utklipp.clipboard.history import HistoryStore


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for platform-specific tests."""
    config.addinivalue_line("markers", "unix_only: mark test to run only on Unix")


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Auto-skip tests based on platform markers."""
    skip_unix = pytest.mark.skip(reason="Unix-only test")

    for item in items:
        if "unix_only" in item.keywords and sys.platform == "win32":
            item.add_marker(skip_unix)


@pytest.fixture(autouse=True)
def utklipp_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point UTKLIPP_HOME at a temp dir so tests never touch ~/.utklipp."""
    home = tmp_path / "utklipp-home"
    monkeypatch.setenv("UTKLIPP_HOME", str(home))
    return home


@pytest.fixture
def clipboard() -> InMemoryClipboard:
    """Empty in-memory clipboard."""
    return InMemoryClipboard()


@pytest.fixture
def history() -> HistoryStore:
    """History with the default capacity."""
    return HistoryStore()


@pytest.fixture
def console() -> Console:
    """Console that records output instead of writing to the terminal."""
    return Console(record=True, width=100, force_terminal=False, color_system=None)
