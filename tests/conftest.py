"""Shared builders and fixtures for taskban tests."""

from datetime import datetime

import pytest

from taskban.model.column import Column
from taskban.model.store import BoardStore
from taskban.model.task import Assignee, Priority, Task

NOW = datetime(2024, 3, 10, 12, 0)


def _make_task(task_id, column_id, title=None, **kwargs):
    """Helper to build a task. The title defaults to the id."""
    return Task(id=task_id, title=title or task_id, column_id=column_id, **kwargs)


def _make_column(column_id, task_ids=(), title=None, **kwargs):
    """Helper to build a column holding plain tasks with the given ids."""
    tasks = tuple(_make_task(tid, column_id) for tid in task_ids)
    return Column(id=column_id, title=title or column_id.upper(), tasks=tasks, **kwargs)


def _make_store(*columns, **kwargs):
    """Helper to build a store with a fixed clock."""
    kwargs.setdefault("clock", lambda: NOW)
    return BoardStore(columns, **kwargs)


def _ids(column):
    return [task.id for task in column.tasks]


@pytest.fixture
def store():
    """Three columns: A holds a1..a3, B holds b1..b2, C is empty."""
    return _make_store(
        _make_column("a", ["a1", "a2", "a3"]),
        _make_column("b", ["b1", "b2"]),
        _make_column("c"),
    )


@pytest.fixture
def filter_board():
    """A board with a login bug, a billing task and an unassigned chore."""
    login = _make_task(
        "task-1",
        "todo",
        "Fix login bug",
        description="Users cannot sign in",
        assignee=Assignee("Ann Lee"),
        priority=Priority.HIGH,
        tags=("A11y", "Bug"),
    )
    billing = _make_task(
        "task-2",
        "todo",
        "Update billing page",
        assignee=Assignee("Bob Ray"),
        tags=("Payments",),
    )
    chore = _make_task("task-3", "done", "Tidy up", priority=Priority.LOW)
    return (
        Column(id="todo", title="To Do", tasks=(login, billing)),
        Column(id="done", title="Done", tasks=(chore,)),
    )
