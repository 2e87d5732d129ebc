"""The board store: authoritative column list and its mutations.

Every mutation computes the complete next tuple of columns and swaps it
in at once, so watchers never observe a half-applied change. Lookups of
missing tasks or columns are no-ops; only validation and capacity
failures raise.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime, timedelta
from typing import Callable, Iterable, Iterator

from taskban.errors import BoardError, CapacityExceeded, ReferenceNotFound, ValidationFailed
from taskban.ids import next_id, unique_key
from taskban.model.column import MAX_COLUMNS, Column, slugify
from taskban.model.ordering import move_between, reorder
from taskban.model.task import Priority, Task

logger = logging.getLogger(__name__)

DEFAULT_DUE_DAYS = 3
COPY_SUFFIX = " (Copy)"

Columns = tuple[Column, ...]
Callback = Callable[["BoardStore", Columns, Columns], None]


class BoardStore:
    """Owns the ordered columns of one board."""

    def __init__(
        self,
        columns: Iterable[Column] = (),
        *,
        due_days: int = DEFAULT_DUE_DAYS,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._columns: Columns = tuple(columns)
        self._watchers: list[Callback] = []
        self._version = 0
        self.due_days = due_days
        self.clock = clock
        self.check_invariants()

    # -- Reading --

    @property
    def columns(self) -> Columns:
        return self._columns

    @property
    def version(self) -> int:
        """Incremented on every swap."""
        return self._version

    def watch(self, callback: Callback) -> Callable[[], None]:
        """Call callback(store, old, new) after every change. Returns an unwatch callable."""
        self._watchers.append(callback)

        def unwatch() -> None:
            if callback in self._watchers:
                self._watchers.remove(callback)

        return unwatch

    def column(self, column_id: str) -> Column | None:
        index = self.column_index(column_id)
        return None if index is None else self._columns[index]

    def column_index(self, column_id: str) -> int | None:
        for i, col in enumerate(self._columns):
            if col.id == column_id:
                return i
        return None

    def locate(self, task_id: str) -> tuple[int, int] | None:
        """Return (column_index, task_index) for a task, or None."""
        for c, col in enumerate(self._columns):
            t = col.index_of(task_id)
            if t is not None:
                return c, t
        return None

    def find_task(self, task_id: str) -> Task | None:
        pos = self.locate(task_id)
        if pos is None:
            return None
        c, t = pos
        return self._columns[c].tasks[t]

    def tasks(self) -> Iterator[Task]:
        for col in self._columns:
            yield from col.tasks

    def check_invariants(self) -> None:
        """Raise BoardError describing the first broken board invariant."""
        if len(self._columns) > MAX_COLUMNS:
            raise BoardError(f"Board has {len(self._columns)} columns, at most {MAX_COLUMNS} allowed")
        column_ids: set[str] = set()
        task_ids: set[str] = set()
        for col in self._columns:
            if col.id in column_ids:
                raise BoardError(f"Duplicate column id '{col.id}'")
            column_ids.add(col.id)
            for task in col.tasks:
                if not task.id:
                    raise BoardError(f"Provisional task '{task.title}' stored in column '{col.id}'")
                if task.id in task_ids:
                    raise BoardError(f"Duplicate task id '{task.id}'")
                if task.column_id != col.id:
                    raise BoardError(f"Task '{task.id}' says column '{task.column_id}' but is stored in '{col.id}'")
                task_ids.add(task.id)

    # -- Swapping --

    def _swap(self, columns: list[Column] | Columns, reason: str) -> None:
        new = tuple(columns)
        old = self._columns
        if new == old:
            return
        self._columns = new
        self._version += 1
        logger.debug("%s (version %d)", reason, self._version)
        for callback in list(self._watchers):
            callback(self, old, new)

    def _task_ids(self) -> list[str]:
        return [task.id for task in self.tasks()]

    # -- Tasks --

    def add_task(self, column_id: str) -> Task:
        """Build a provisional task for column_id. Nothing is stored until save_task."""
        return Task(
            id="",
            title="",
            column_id=column_id,
            priority=Priority.MEDIUM,
            due_date=self.clock() + timedelta(days=self.due_days),
        )

    def save_task(self, task: Task) -> Task:
        """Store a task, assigning an id if it is provisional.

        A task moved to another column is appended to that column's end.
        An unmoved task is replaced in place. Returns the stored task.
        """
        if not task.title.strip():
            logger.warning("rejected save: empty title for task %r", task.id)
            raise ValidationFailed("title", "A task needs a title")
        dest = self.column_index(task.column_id)
        if dest is None:
            logger.warning("rejected save: unknown column %r", task.column_id)
            raise ReferenceNotFound("column", task.column_id)

        columns = list(self._columns)
        pos = self.locate(task.id) if task.id else None

        if not task.id:
            task = replace(task, id=next_id(self._task_ids()))
        if pos is None:
            columns[dest] = columns[dest].with_tasks(columns[dest].tasks + (task,))
            self._swap(columns, f"added task {task.id} to {task.column_id}")
            return task

        c, t = pos
        if c != dest:
            source = columns[c]
            columns[c] = source.with_tasks(source.tasks[:t] + source.tasks[t + 1 :])
            columns[dest] = columns[dest].with_tasks(columns[dest].tasks + (task,))
            self._swap(columns, f"moved task {task.id} from {source.id} to {task.column_id}")
        else:
            tasks = list(columns[c].tasks)
            tasks[t] = task
            columns[c] = columns[c].with_tasks(tasks)
            self._swap(columns, f"updated task {task.id}")
        return task

    def delete_task(self, task_id: str) -> None:
        pos = self.locate(task_id)
        if pos is None:
            logger.debug("delete of unknown task %r ignored", task_id)
            return
        c, t = pos
        columns = list(self._columns)
        col = columns[c]
        columns[c] = col.with_tasks(col.tasks[:t] + col.tasks[t + 1 :])
        self._swap(columns, f"deleted task {task_id}")

    def duplicate_task(self, task: Task) -> Task | None:
        """Append a copy of task, with a fresh id, to the end of its column."""
        pos = self.locate(task.id) if task.id else None
        c = pos[0] if pos is not None else self.column_index(task.column_id)
        if c is None:
            logger.debug("duplicate into unknown column %r ignored", task.column_id)
            return None
        copy = replace(
            task,
            id=next_id(self._task_ids()),
            title=task.title + COPY_SUFFIX,
            column_id=self._columns[c].id,
        )
        columns = list(self._columns)
        columns[c] = columns[c].with_tasks(columns[c].tasks + (copy,))
        self._swap(columns, f"duplicated task {task.id} as {copy.id}")
        return copy

    # -- Columns --

    def _update_column(self, column_id: str, reason: str, **changes) -> None:
        c = self.column_index(column_id)
        if c is None:
            logger.debug("%s: unknown column %r ignored", reason, column_id)
            return
        columns = list(self._columns)
        columns[c] = replace(columns[c], **changes)
        self._swap(columns, f"{reason} {column_id}")

    def rename_column(self, column_id: str, title: str) -> None:
        title = title.strip()
        if not title:
            raise ValidationFailed("title", "A column needs a title")
        self._update_column(column_id, "renamed column", title=title)

    def set_wip_limit(self, column_id: str, limit: int | None) -> None:
        """Set or clear (None) the advisory WIP limit."""
        if limit is not None and limit < 1:
            raise ValidationFailed("wip_limit", "A WIP limit must be a positive number")
        self._update_column(column_id, "set WIP limit on", wip_limit=limit)

    def update_column(self, column_id: str, title: str, wip_limit: int | None) -> None:
        """Rename a column and set its WIP limit in a single change."""
        title = title.strip()
        if not title:
            raise ValidationFailed("title", "A column needs a title")
        if wip_limit is not None and wip_limit < 1:
            raise ValidationFailed("wip_limit", "A WIP limit must be a positive number")
        self._update_column(column_id, "edited column", title=title, wip_limit=wip_limit)

    def toggle_collapse(self, column_id: str) -> None:
        col = self.column(column_id)
        if col is None:
            logger.debug("collapse of unknown column %r ignored", column_id)
            return
        self._update_column(column_id, "toggled collapse on", collapsed=not col.collapsed)

    def add_column(self, title: str | None = None) -> Column:
        """Append an empty column. Raises CapacityExceeded at MAX_COLUMNS."""
        if len(self._columns) >= MAX_COLUMNS:
            logger.warning("rejected add column: board already has %d columns", len(self._columns))
            raise CapacityExceeded(MAX_COLUMNS)
        title = (title or "").strip() or f"Column {len(self._columns) + 1}"
        column_id = unique_key(slugify(title), {col.id for col in self._columns})
        column = Column(id=column_id, title=title)
        self._swap(self._columns + (column,), f"added column {column_id}")
        return column

    def delete_column(self, column_id: str) -> None:
        """Delete a column.

        Tasks of any column but the first are appended to the first column.
        Deleting the first column discards its tasks.
        """
        c = self.column_index(column_id)
        if c is None:
            logger.debug("delete of unknown column %r ignored", column_id)
            return
        columns = list(self._columns)
        doomed = columns.pop(c)
        if c != 0 and doomed.tasks:
            first = columns[0]
            moved = tuple(task.moved_to(first.id) for task in doomed.tasks)
            columns[0] = first.with_tasks(first.tasks + moved)
            self._swap(columns, f"deleted column {column_id}, {len(moved)} tasks moved to {first.id}")
        else:
            self._swap(columns, f"deleted column {column_id}")

    # -- Ordering --

    def reorder_within_column(self, column_id: str, from_index: int, to_index: int) -> None:
        c = self.column_index(column_id)
        if c is None:
            logger.debug("reorder in unknown column %r ignored", column_id)
            return
        col = self._columns[c]
        if not (0 <= from_index < len(col.tasks) and 0 <= to_index < len(col.tasks)):
            logger.debug("reorder %d→%d out of range in %r ignored", from_index, to_index, column_id)
            return
        columns = list(self._columns)
        columns[c] = col.with_tasks(reorder(col.tasks, from_index, to_index))
        self._swap(columns, f"reordered {column_id} {from_index}→{to_index}")

    def move_across_columns(self, source_id: str, dest_id: str, source_index: int, dest_index: int) -> None:
        """Move a task between columns, rewriting its column_id in the same swap."""
        if source_id == dest_id:
            self.reorder_within_column(source_id, source_index, dest_index)
            return
        s = self.column_index(source_id)
        d = self.column_index(dest_id)
        if s is None or d is None:
            logger.debug("move %r→%r with unknown column ignored", source_id, dest_id)
            return
        source, dest = self._columns[s], self._columns[d]
        if not (0 <= source_index < len(source.tasks) and 0 <= dest_index <= len(dest.tasks)):
            logger.debug("move %r[%d]→%r[%d] out of range ignored", source_id, source_index, dest_id, dest_index)
            return
        new_source, new_dest = move_between(source.tasks, dest.tasks, source_index, dest_index)
        new_dest = new_dest[:dest_index] + (new_dest[dest_index].moved_to(dest_id),) + new_dest[dest_index + 1 :]
        columns = list(self._columns)
        columns[s] = source.with_tasks(new_source)
        columns[d] = dest.with_tasks(new_dest)
        self._swap(columns, f"moved {source_id}[{source_index}] to {dest_id}[{dest_index}]")
