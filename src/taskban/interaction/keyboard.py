"""Keyboard navigation over the board grid.

Columns are the x axis, tasks within a column the y axis. The current
position is derived from the focused task id each time a key arrives, so
there is no cursor to fall out of step with focus. Navigation only moves
focus; it never changes the board.
"""

from __future__ import annotations

import logging
from typing import Callable, NamedTuple, Protocol, Sequence

from taskban.model.column import Column

logger = logging.getLogger(__name__)

KEY_ALIASES = {
    "ArrowUp": "up",
    "ArrowDown": "down",
    "ArrowLeft": "left",
    "ArrowRight": "right",
    "Home": "home",
    "End": "end",
    "Enter": "enter",
}

NAVIGATION_KEYS = frozenset({"up", "down", "left", "right", "home", "end", "enter"})

START_COLUMN_NAMES = ("to do", "todo")


class GridPosition(NamedTuple):
    column: int
    task: int


class FocusTarget(Protocol):
    """Whatever owns real focus: a widget tree, or a fake in tests."""

    def identify(self, position: GridPosition) -> str | None:
        """Return the id of the task shown at position, if any."""

    def move_focus_to(self, task_id: str) -> None:
        """Focus the task and scroll it into view."""

    def announce(self, text: str) -> None:
        """Tell assistive technology what happened."""


def normalize_key(key: str) -> str:
    return KEY_ALIASES.get(key, key)


def find_position(columns: Sequence[Column], task_id: str) -> GridPosition | None:
    for c, col in enumerate(columns):
        t = col.index_of(task_id)
        if t is not None:
            return GridPosition(c, t)
    return None


def next_position(columns: Sequence[Column], key: str, here: GridPosition) -> GridPosition | None:
    """Where key moves focus from here, or None if it goes nowhere."""
    c, t = here
    tasks = columns[c].tasks
    match key:
        case "up":
            if t > 0:
                return GridPosition(c, t - 1)
            if c > 0 and columns[c - 1].tasks:
                return GridPosition(c - 1, len(columns[c - 1].tasks) - 1)
        case "down":
            if t + 1 < len(tasks):
                return GridPosition(c, t + 1)
            if c + 1 < len(columns) and columns[c + 1].tasks:
                return GridPosition(c + 1, 0)
        case "left" | "right":
            target = c - 1 if key == "left" else c + 1
            if 0 <= target < len(columns) and columns[target].tasks:
                return GridPosition(target, min(t, len(columns[target].tasks) - 1))
        case "home":
            if tasks:
                return GridPosition(c, 0)
        case "end":
            if tasks:
                return GridPosition(c, len(tasks) - 1)
    return None


def start_position(columns: Sequence[Column]) -> GridPosition | None:
    """First task of the "To Do" column, or of the first non-empty column."""
    for c, col in enumerate(columns):
        if col.title.strip().lower() in START_COLUMN_NAMES or col.id.lower() in START_COLUMN_NAMES:
            if col.tasks:
                return GridPosition(c, 0)
            break
    for c, col in enumerate(columns):
        if col.tasks:
            return GridPosition(c, 0)
    return None


class KeyboardNavigator:
    """Maps navigation keys to focus moves and announcements."""

    def __init__(self, columns: Callable[[], Sequence[Column]], focus: FocusTarget) -> None:
        self._columns = columns
        self.focus = focus

    def key_press(
        self,
        key: str,
        focused_id: str | None,
        *,
        modal_open: bool = False,
        editing_text: bool = False,
    ) -> str | None:
        """Handle a key. Returns the id of the newly focused task, if focus moved."""
        key = normalize_key(key)
        if modal_open or editing_text or key not in NAVIGATION_KEYS:
            return None
        columns = self._columns()

        if focused_id is None:
            if key != "enter":
                return None
            pos = start_position(columns)
            if pos is None:
                return None
            task_id = self.focus.identify(pos)
            if task_id is None:
                return None
            col = columns[pos.column]
            self.focus.move_focus_to(task_id)
            self.focus.announce(f"Focused first task: {col.tasks[pos.task].title} in {col.title}")
            return task_id

        if key == "enter":
            return None
        here = find_position(columns, focused_id)
        if here is None:
            return None
        there = next_position(columns, key, here)
        if there is None:
            return None
        task_id = self.focus.identify(there)
        if task_id is None:
            return None
        col = columns[there.column]
        self.focus.move_focus_to(task_id)
        self.focus.announce(f"Navigated to task: {col.tasks[there.task].title} in {col.title} column")
        logger.debug("focus %s -> %s via %s", focused_id, task_id, key)
        return task_id
