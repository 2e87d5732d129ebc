"""Filtered projections of a board.

Nothing here mutates the store. Projections are recomputed from scratch
whenever the board or the filter changes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from taskban.model.column import Column
from taskban.model.task import Priority, Task


@dataclass(frozen=True)
class BoardFilter:
    """Free-text query plus optional exact-match criteria."""

    query: str = ""
    assignee: str | None = None
    priority: Priority | None = None
    tag: str | None = None

    @property
    def active(self) -> bool:
        return bool(self.query.strip()) or any(v is not None for v in (self.assignee, self.priority, self.tag))


def matches_query(task: Task, query: str) -> bool:
    """Case-insensitive substring match on title, description, assignee name or any tag."""
    needle = query.strip().lower()
    if not needle:
        return True
    fields = [task.title, task.description]
    if task.assignee is not None:
        fields.append(task.assignee.name)
    fields.extend(task.tags)
    return any(needle in text.lower() for text in fields)


def matches(task: Task, board_filter: BoardFilter) -> bool:
    """True if task passes every active criterion of the filter."""
    if board_filter.assignee is not None:
        if task.assignee is None or task.assignee.name != board_filter.assignee:
            return False
    if board_filter.priority is not None and task.priority != board_filter.priority:
        return False
    if board_filter.tag is not None and board_filter.tag not in task.tags:
        return False
    return matches_query(task, board_filter.query)


def filter_columns(columns: Sequence[Column], board_filter: BoardFilter) -> tuple[Column, ...]:
    """Return the columns with only the matching tasks, order preserved."""
    if not board_filter.active:
        return tuple(columns)
    return tuple(col.with_tasks(t for t in col.tasks if matches(t, board_filter)) for col in columns)


def _tasks(columns: Iterable[Column]) -> Iterable[Task]:
    for col in columns:
        yield from col.tasks


def distinct_assignees(columns: Iterable[Column]) -> list[str]:
    """Sorted assignee names present on the board."""
    return sorted({t.assignee.name for t in _tasks(columns) if t.assignee is not None})


def distinct_priorities(columns: Iterable[Column]) -> list[Priority]:
    """Priorities present on the board, lowest first."""
    present = {t.priority for t in _tasks(columns)}
    return [p for p in Priority if p in present]


def distinct_tags(columns: Iterable[Column]) -> list[str]:
    """Sorted tags present on the board."""
    return sorted({tag for t in _tasks(columns) for tag in t.tags})
