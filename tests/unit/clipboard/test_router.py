"""Tests for selection routing and clipboard writes."""

import uuid

import pytest

from utklipp.clipboard.backend import InMemoryClipboard
from utklipp.clipboard.history import HistoryStore
from utklipp.clipboard.router import SelectionRouter
from utklipp.clipboard.types import ClipboardSnapshot, HistoryEntry
from utklipp.clipboard.writer import ClipboardWriter
from utklipp.core.errors import ClipboardAccessError


class ReadOnlyClipboard:
    """Clipboard that refuses writes."""

    def read(self) -> ClipboardSnapshot:
        return ClipboardSnapshot(token=0, text=None)

    def write_text(self, text: str) -> None:
        raise ClipboardAccessError("write", "read-only")


@pytest.fixture
def xyz_history() -> HistoryStore:
    """History holding [X, Y, Z]."""
    store = HistoryStore()
    for text in ("Z", "Y", "X"):
        store.ingest(text)
    return store


@pytest.fixture
def restored() -> list[HistoryEntry]:
    """Entries passed to the on_restored callback."""
    return []


@pytest.fixture
def router(
    xyz_history: HistoryStore,
    clipboard: InMemoryClipboard,
    restored: list[HistoryEntry],
) -> SelectionRouter:
    return SelectionRouter(xyz_history, ClipboardWriter(clipboard), on_restored=restored.append)


class TestClipboardWriter:
    """Tests for ClipboardWriter."""

    def test_write_sets_text_and_advances_token(self, clipboard: InMemoryClipboard) -> None:
        """write() replaces the clipboard contents."""
        before = clipboard.read().token
        ClipboardWriter(clipboard).write("restored")

        snapshot = clipboard.read()
        assert snapshot.text == "restored"
        assert snapshot.token != before

    def test_write_failure_propagates(self) -> None:
        """Backend errors reach the caller."""
        with pytest.raises(ClipboardAccessError):
            ClipboardWriter(ReadOnlyClipboard()).write("x")


class TestSelectByIndex:
    """Tests for select_by_index()."""

    def test_restores_slot(
        self,
        router: SelectionRouter,
        clipboard: InMemoryClipboard,
        restored: list[HistoryEntry],
    ) -> None:
        """Given [X, Y, Z], slot 2 restores Y."""
        entry = router.select_by_index(2)

        assert entry is not None
        assert entry.text == "Y"
        assert clipboard.read().text == "Y"
        assert restored == [entry]

    @pytest.mark.parametrize("index", [0, -1, 4, 5, 10])
    def test_out_of_range_is_noop(
        self,
        router: SelectionRouter,
        clipboard: InMemoryClipboard,
        restored: list[HistoryEntry],
        index: int,
    ) -> None:
        """Slots outside 1..len(entries) do nothing."""
        assert router.select_by_index(index) is None
        assert clipboard.read().token == 0
        assert restored == []

    def test_slots_stop_at_nine(self, clipboard: InMemoryClipboard) -> None:
        """Only the first nine entries are reachable by index."""
        store = HistoryStore()
        for i in range(12):
            store.ingest(f"item {i}")
        router = SelectionRouter(store, ClipboardWriter(clipboard))

        assert router.select_by_index(9) is not None
        assert router.select_by_index(10) is None

    def test_selection_does_not_reorder(
        self, router: SelectionRouter, xyz_history: HistoryStore
    ) -> None:
        """Restoring an entry leaves the history order alone."""
        router.select_by_index(3)

        assert [e.text for e in xyz_history.current_view()] == ["X", "Y", "Z"]


class TestSelectByClick:
    """Tests for select_by_click()."""

    def test_restores_entry(
        self,
        router: SelectionRouter,
        xyz_history: HistoryStore,
        clipboard: InMemoryClipboard,
    ) -> None:
        """A click on an entry restores its text."""
        target = xyz_history.current_view()[2]

        assert router.select_by_click(target.id) == target
        assert clipboard.read().text == "Z"

    def test_unknown_id_is_noop(
        self,
        router: SelectionRouter,
        clipboard: InMemoryClipboard,
        restored: list[HistoryEntry],
    ) -> None:
        """Ids that aren't in the history do nothing."""
        assert router.select_by_click(uuid.uuid4()) is None
        assert clipboard.read().token == 0
        assert restored == []

    def test_stale_id_after_eviction_is_noop(
        self,
        router: SelectionRouter,
        xyz_history: HistoryStore,
        clipboard: InMemoryClipboard,
    ) -> None:
        """Clicking an entry evicted since the view was taken does nothing."""
        stale_view = xyz_history.current_view()
        xyz_history.apply_preference_change(1)

        assert router.select_by_click(stale_view[-1].id) is None
        assert clipboard.read().token == 0


class TestRestoreFailure:
    """Tests for restores that can't write the clipboard."""

    def test_write_failure_degrades_to_noop(
        self, xyz_history: HistoryStore, restored: list[HistoryEntry]
    ) -> None:
        """A failed write returns None and doesn't dismiss."""
        router = SelectionRouter(
            xyz_history, ClipboardWriter(ReadOnlyClipboard()), on_restored=restored.append
        )

        assert router.select_by_index(1) is None
        assert restored == []
