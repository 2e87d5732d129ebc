"""Search box and exact-match filters above the board."""

from __future__ import annotations

from dataclasses import replace

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.message import Message
from textual.timer import Timer
from textual.widgets import Input, Select

from taskban.model.filters import BoardFilter
from taskban.model.task import Priority
from taskban.ui.constants import ICON_FILTER

DEFAULT_SEARCH_DELAY = 0.3


class FilterBar(Horizontal):
    """Free-text search plus assignee, priority and tag selectors.

    Select changes apply at once. Typing in the search box is debounced:
    each keystroke restarts the timer, and the query only applies once
    typing pauses for ``search_delay`` seconds.
    """

    class Changed(Message):
        def __init__(self, board_filter: BoardFilter) -> None:
            super().__init__()
            self.board_filter = board_filter

    DEFAULT_CSS = """
    FilterBar {
        height: auto;
        width: 100%;
    }
    FilterBar #search {
        width: 2fr;
    }
    FilterBar Select {
        width: 1fr;
    }
    """

    def __init__(self, search_delay: float = DEFAULT_SEARCH_DELAY, **kwargs) -> None:
        super().__init__(**kwargs)
        self.search_delay = search_delay
        self.board_filter = BoardFilter()
        self._pending: Timer | None = None
        self._choices: dict[str, list[str]] = {"assignee": [], "tag": []}

    def compose(self) -> ComposeResult:
        yield Input(placeholder=f"{ICON_FILTER} Search tasks", id="search")
        yield Select([], prompt="Assignee", id="assignee")
        yield Select([(p.value, p) for p in Priority], prompt="Priority", id="priority")
        yield Select([], prompt="Tag", id="tag")

    def set_choices(self, assignees: list[str], tags: list[str]) -> None:
        """Refresh selector options, keeping current selections that still exist."""
        self._set_select_options("assignee", assignees)
        self._set_select_options("tag", tags)

    def _set_select_options(self, name: str, values: list[str]) -> None:
        if self._choices[name] == values:
            return
        self._choices[name] = list(values)
        select = self.query_one(f"#{name}", Select)
        current = getattr(self.board_filter, name)
        with select.prevent(Select.Changed):
            select.set_options([(v, v) for v in values])
            if current in values:
                select.value = current
        if current is not None and current not in values:
            self._apply(**{name: None})

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id != "search":
            return
        event.stop()
        if self._pending is not None:
            self._pending.stop()
        self._pending = self.set_timer(self.search_delay, lambda: self._apply_query(event.value))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id != "search":
            return
        event.stop()
        if self._pending is not None:
            self._pending.stop()
        self._apply_query(event.value)

    def _apply_query(self, query: str) -> None:
        self._pending = None
        self._apply(query=query)

    def on_select_changed(self, event: Select.Changed) -> None:
        event.stop()
        value = None if event.value is Select.NULL else event.value
        self._apply(**{event.select.id: value})

    def clear(self) -> None:
        """Reset every criterion."""
        if self._pending is not None:
            self._pending.stop()
            self._pending = None
        with self.prevent(Input.Changed, Select.Changed):
            self.query_one("#search", Input).value = ""
            for select in self.query(Select):
                select.clear()
        self._apply(query="", assignee=None, priority=None, tag=None)

    def _apply(self, **changes) -> None:
        new = replace(self.board_filter, **changes)
        if new == self.board_filter:
            return
        self.board_filter = new
        self.post_message(self.Changed(new))
