"""Tests for the starting boards."""

from datetime import datetime

from taskban.model.sample import default_columns, sample_columns
from taskban.model.store import BoardStore


def test_default_columns():
    columns = default_columns()
    assert [c.title for c in columns] == ["To Do", "In Progress", "Done"]
    assert all(not c.tasks for c in columns)


def test_sample_board_is_valid():
    now = datetime(2024, 3, 10, 12, 0)
    store = BoardStore(sample_columns(now))
    assert [c.id for c in store.columns] == ["todo", "in-progress", "review", "done"]
    assert sorted(t.id for t in store.tasks()) == [f"task-{n}" for n in range(1, 6)]


def test_sample_board_has_an_overdue_task():
    now = datetime(2024, 3, 10, 12, 0)
    overdue = [t.title for col in sample_columns(now) for t in col.tasks if t.is_overdue(now)]
    assert "Fix Accessibility Issues" in overdue
