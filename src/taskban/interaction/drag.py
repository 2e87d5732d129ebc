"""Pointer drag state machine.

IDLE --start--> DRAGGING --end/cancel--> IDLE

While dragging, ``over`` moves the active task into whichever column the
pointer is above, as a real store mutation (a preview move). Reordering
inside a column only happens on ``end``. Releasing outside any target
keeps the last previewed column; there is no rollback to where the drag
began.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from taskban.model.store import BoardStore
from taskban.model.task import Task

logger = logging.getLogger(__name__)


class DragState(str, Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


@dataclass(frozen=True)
class ColumnTarget:
    """The pointer is over a column (its header, gaps or empty space)."""

    column_id: str


@dataclass(frozen=True)
class TaskTarget:
    """The pointer is over a task card."""

    task_id: str


PointerTarget = ColumnTarget | TaskTarget


class DragMachine:
    """Turns drag lifecycle events into board store mutations.

    Positions are read from the store on every event. The drag only
    remembers the id of the task being dragged.
    """

    def __init__(self, store: BoardStore) -> None:
        self.store = store
        self.state = DragState.IDLE
        self._active_id: str | None = None

    @property
    def is_dragging(self) -> bool:
        return self.state is DragState.DRAGGING

    @property
    def active_id(self) -> str | None:
        return self._active_id

    @property
    def active_task(self) -> Task | None:
        """The dragged task as it currently stands in the store."""
        if self._active_id is None:
            return None
        return self.store.find_task(self._active_id)

    def start(self, task_id: str) -> bool:
        """Pick up a task. Stays idle if it cannot be found."""
        if self.is_dragging:
            self._finish()
        if self.store.find_task(task_id) is None:
            logger.debug("drag start on unknown task %r ignored", task_id)
            return False
        self.state = DragState.DRAGGING
        self._active_id = task_id
        logger.debug("drag started on %s", task_id)
        return True

    def target_column_id(self, target: PointerTarget | None) -> str | None:
        """Column the target belongs to right now, or None."""
        if isinstance(target, ColumnTarget):
            return target.column_id if self.store.column(target.column_id) is not None else None
        if isinstance(target, TaskTarget):
            pos = self.store.locate(target.task_id)
            if pos is None:
                return None
            return self.store.columns[pos[0]].id
        return None

    def over(self, target: PointerTarget | None) -> bool:
        """Preview-move the active task into the target's column.

        Returns True if the store changed.
        """
        if not self.is_dragging:
            return False
        pos = self.store.locate(self._active_id)
        if pos is None:
            return False
        dest_id = self.target_column_id(target)
        if dest_id is None:
            return False
        c, t = pos
        source = self.store.columns[c]
        if source.id == dest_id:
            return False
        dest = self.store.column(dest_id)
        self.store.move_across_columns(source.id, dest_id, t, len(dest.tasks))
        logger.debug("drag preview moved %s to %s", self._active_id, dest_id)
        return True

    def end(self, target: PointerTarget | None) -> bool:
        """Release. Reorders within the column if dropped on a sibling task.

        Always returns to IDLE. Returns True if the store changed.
        """
        try:
            if not self.is_dragging or not isinstance(target, TaskTarget):
                return False
            if target.task_id == self._active_id:
                return False
            active = self.store.locate(self._active_id)
            dropped = self.store.locate(target.task_id)
            if active is None or dropped is None or active[0] != dropped[0]:
                return False
            if active[1] == dropped[1]:
                return False
            column_id = self.store.columns[active[0]].id
            self.store.reorder_within_column(column_id, active[1], dropped[1])
            return True
        finally:
            self._finish()

    def cancel(self) -> None:
        """End the gesture without a drop. Previewed moves stay in place."""
        self.end(None)

    def _finish(self) -> None:
        if self._active_id is not None:
            logger.debug("drag ended on %s", self._active_id)
        self.state = DragState.IDLE
        self._active_id = None
