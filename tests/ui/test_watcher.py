"""Tests for StoreWatcherMixin."""

from taskban.ui.watcher import StoreWatcherMixin

from tests.conftest import _make_column, _make_store


class FakeWidget(StoreWatcherMixin):
    """Minimal stand-in for a Textual widget."""

    def __init__(self):
        self._init_watcher()


def test_watch_fires_callback():
    widget = FakeWidget()
    store = _make_store(_make_column("a"))
    calls = []
    widget.store_watch(store, lambda src, old, new: calls.append(new[0].title))

    store.rename_column("a", "Backlog")
    assert calls == ["Backlog"]


def test_on_unmount_cleans_up():
    widget = FakeWidget()
    store = _make_store(_make_column("a"))
    calls = []
    widget.store_watch(store, lambda *args: calls.append(args))

    widget.on_unmount()

    store.rename_column("a", "Backlog")
    assert calls == []


def test_multi_watch_cleanup():
    widget = FakeWidget()
    first = _make_store(_make_column("a"))
    second = _make_store(_make_column("b"))
    calls = []
    widget.store_watch(first, lambda *args: calls.append("first"))
    widget.store_watch(second, lambda *args: calls.append("second"))

    first.toggle_collapse("a")
    second.toggle_collapse("b")
    assert calls == ["first", "second"]

    widget.on_unmount()
    first.toggle_collapse("a")
    second.toggle_collapse("b")
    assert calls == ["first", "second"]
