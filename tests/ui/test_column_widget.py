"""Tests for the column widget."""

import pytest
from textual.app import App, ComposeResult
from textual.widgets import Button, Static

from taskban.interaction.drag import ColumnTarget, TaskTarget
from taskban.ui.card import TaskCard
from taskban.ui.column import ColumnWidget

from tests.conftest import _make_column


class ColumnApp(App):
    """Minimal app showing one column and recording its requests."""

    def __init__(self, column, visible_tasks=None, dragging_id=None):
        super().__init__()
        self.column = column
        self.visible_tasks = visible_tasks
        self.dragging_id = dragging_id
        self.requests = []

    def compose(self) -> ComposeResult:
        yield ColumnWidget(self.column, self.visible_tasks, self.dragging_id)

    def on_column_widget_add_task_requested(self, event):
        self.requests.append(("add", event.column_id))

    def on_column_widget_collapse_requested(self, event):
        self.requests.append(("collapse", event.column_id))


def _count(app):
    return str(app.query_one(".column-count", Static).content)


@pytest.mark.asyncio
async def test_shows_cards_in_order():
    app = ColumnApp(_make_column("a", ["a1", "a2"], title="To Do"))
    async with app.run_test() as pilot:
        await pilot.pause()
        assert [c.task_id for c in app.query(TaskCard)] == ["a1", "a2"]
        assert str(app.query_one(".column-title", Static).content) == "To Do"
        assert _count(app) == "2"


@pytest.mark.asyncio
async def test_filtered_count():
    column = _make_column("a", ["a1", "a2", "a3"])
    app = ColumnApp(column, visible_tasks=column.tasks[:1])
    async with app.run_test() as pilot:
        await pilot.pause()
        assert [c.task_id for c in app.query(TaskCard)] == ["a1"]
        assert _count(app) == "1/3"


@pytest.mark.asyncio
async def test_wip_exceeded_class():
    app = ColumnApp(_make_column("a", ["a1", "a2"], wip_limit=1))
    async with app.run_test() as pilot:
        await pilot.pause()
        assert app.query_one(ColumnWidget).has_class("wip-exceeded")


@pytest.mark.asyncio
async def test_dragging_card_is_hidden():
    app = ColumnApp(_make_column("a", ["a1", "a2"]), dragging_id="a2")
    async with app.run_test() as pilot:
        await pilot.pause()
        cards = {c.task_id: c for c in app.query(TaskCard)}
        assert cards["a2"].has_class("dragging")
        assert not cards["a1"].has_class("dragging")


@pytest.mark.asyncio
async def test_collapsed_column_hides_cards():
    app = ColumnApp(_make_column("a", ["a1"], collapsed=True))
    async with app.run_test() as pilot:
        await pilot.pause()
        assert not app.query(TaskCard)
        await pilot.click(".column-expand")
        assert app.requests == [("collapse", "a")]


@pytest.mark.asyncio
async def test_add_button_requests_task():
    app = ColumnApp(_make_column("a"))
    async with app.run_test() as pilot:
        await pilot.pause()
        app.query_one(".add-task", Button).press()
        await pilot.pause()
        assert app.requests == [("add", "a")]


@pytest.mark.asyncio
async def test_pointer_targets():
    app = ColumnApp(_make_column("a", ["a1"]))
    async with app.run_test() as pilot:
        await pilot.pause()
        assert app.query_one(ColumnWidget).pointer_target() == ColumnTarget("a")
        assert app.query_one(TaskCard).pointer_target() == TaskTarget("a1")
