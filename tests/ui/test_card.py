"""Tests for the task card widget."""

from datetime import datetime, timedelta

import pytest
from textual.app import App, ComposeResult
from textual.widgets import Static

from taskban.model.task import Assignee, Priority, Task
from taskban.ui.card import TaskCard


class CardApp(App):
    """Minimal app showing one card and recording its requests."""

    def __init__(self, task):
        super().__init__()
        self.board_task = task
        self.requests = []

    def compose(self) -> ComposeResult:
        yield TaskCard(self.board_task)

    def on_task_card_edit_requested(self, event):
        self.requests.append(("edit", event.board_task.id))

    def on_task_card_duplicate_requested(self, event):
        self.requests.append(("duplicate", event.board_task.id))

    def on_task_card_delete_requested(self, event):
        self.requests.append(("delete", event.board_task.id))


def _task(**kwargs):
    fields = dict(id="task-1", title="Ship it", column_id="todo", priority=Priority.HIGH)
    fields.update(kwargs)
    return Task(**fields)


def _texts(app):
    return [str(s.content) for s in app.query_one(TaskCard).query(Static)]


@pytest.mark.asyncio
async def test_shows_title_and_first_description_line():
    app = CardApp(_task(description="First line\nSecond line"))
    async with app.run_test() as pilot:
        await pilot.pause()
        texts = _texts(app)
        assert texts[0] == "high Ship it"
        assert texts[1] == "First line"
        assert len(texts) == 2


@pytest.mark.asyncio
async def test_footer_only_when_something_to_show():
    app = CardApp(_task(assignee=Assignee("Jane Smith"), tags=("UI",)))
    async with app.run_test() as pilot:
        await pilot.pause()
        assert "#UI" in _texts(app)[-1]


@pytest.mark.asyncio
async def test_overdue_class():
    app = CardApp(_task(due_date=datetime.now() - timedelta(days=1)))
    async with app.run_test() as pilot:
        await pilot.pause()
        assert app.query_one(TaskCard).has_class("overdue")


@pytest.mark.asyncio
async def test_not_overdue():
    app = CardApp(_task(due_date=datetime.now() + timedelta(days=1)))
    async with app.run_test() as pilot:
        await pilot.pause()
        assert not app.query_one(TaskCard).has_class("overdue")


@pytest.mark.asyncio
async def test_key_bindings_post_requests():
    app = CardApp(_task())
    async with app.run_test() as pilot:
        await pilot.pause()
        app.query_one(TaskCard).focus()
        await pilot.press("enter", "space", "d", "delete")
        assert app.requests == [
            ("edit", "task-1"),
            ("edit", "task-1"),
            ("duplicate", "task-1"),
            ("delete", "task-1"),
        ]


@pytest.mark.asyncio
async def test_click_requests_edit():
    app = CardApp(_task())
    async with app.run_test() as pilot:
        await pilot.pause()
        await pilot.click(TaskCard)
        assert app.requests == [("edit", "task-1")]
        assert app.focused is app.query_one(TaskCard)
