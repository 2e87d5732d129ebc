"""Modal forms for editing tasks and columns."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Sequence

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.suggester import SuggestFromList
from textual.widgets import Button, Input, Label, Select, Static, TextArea

from taskban.errors import ValidationFailed
from taskban.model.column import Column
from taskban.model.task import Assignee, Priority, Task

DUE_FORMAT = "%Y-%m-%d"


def parse_tags(text: str) -> tuple[str, ...]:
    """Split comma-separated tags, dropping blanks. Order and repeats are kept."""
    return tuple(tag for tag in (part.strip() for part in text.split(",")) if tag)


def format_due_input(due: datetime | None) -> str:
    return due.strftime(DUE_FORMAT) if due is not None else ""


def parse_due(text: str, previous: datetime | None = None) -> datetime | None:
    """Parse a YYYY-MM-DD due date.

    Keeps ``previous`` untouched when it falls on the same day, so an
    unedited field does not shift the time of day.
    """
    text = text.strip()
    if not text:
        return None
    try:
        parsed = datetime.strptime(text, DUE_FORMAT)
    except ValueError:
        raise ValidationFailed("due_date", f"Due date '{text}' is not YYYY-MM-DD") from None
    if previous is not None and previous.date() == parsed.date():
        return previous
    if previous is not None and previous.tzinfo is not None:
        parsed = parsed.replace(tzinfo=previous.tzinfo)
    return parsed


def parse_assignee(text: str, previous: Assignee | None = None) -> Assignee | None:
    name = text.strip()
    if not name:
        return None
    if previous is not None and previous.name == name:
        return previous
    return Assignee(name)


def parse_wip_limit(text: str) -> int | None:
    text = text.strip()
    if not text:
        return None
    try:
        limit = int(text)
    except ValueError:
        raise ValidationFailed("wip_limit", f"WIP limit '{text}' is not a number") from None
    if limit < 1:
        raise ValidationFailed("wip_limit", "WIP limit must be at least 1")
    return limit


@dataclass(frozen=True)
class TaskModalResult:
    """What the task form was closed with: ``save`` or ``delete``."""

    action: str
    task: Task


@dataclass(frozen=True)
class ColumnEdit:
    title: str
    wip_limit: int | None


class FormModal(ModalScreen):
    """Shared layout and key handling for the edit forms."""

    DEFAULT_CSS = """
    FormModal {
        align: center middle;
        background: rgba(0, 0, 0, 0.6);
    }
    FormModal #form {
        width: 70;
        height: auto;
        max-height: 90%;
        border: thick $primary;
        background: $surface;
        padding: 1 2;
        overflow-y: auto;
    }
    FormModal #form-title {
        text-style: bold;
        margin-bottom: 1;
    }
    FormModal Label {
        margin-top: 1;
        color: $text-muted;
    }
    FormModal TextArea {
        height: 6;
    }
    FormModal #buttons {
        width: 100%;
        height: 3;
        margin-top: 1;
        align: right middle;
    }
    FormModal Button {
        margin-left: 2;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
        Binding("ctrl+s", "save", "Save"),
    ]

    def action_cancel(self) -> None:
        self.dismiss(None)

    def action_save(self) -> None:
        try:
            result = self.build_result()
        except ValidationFailed as e:
            self.notify(str(e), severity="error", markup=False)
            self._focus_field(e.field)
            return
        self.dismiss(result)

    def build_result(self):
        raise NotImplementedError

    def _focus_field(self, name: str) -> None:
        for widget in self.query(f"#{name.replace('_', '-')}"):
            widget.focus()
            return

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.id == "save":
            self.action_save()
        elif event.button.id == "cancel":
            self.action_cancel()


class TaskModal(FormModal):
    """Edit every field of a task, or delete it.

    Dismisses with a TaskModalResult, or None when cancelled.
    """

    def __init__(self, task: Task, columns: Sequence[Column], suggestions: Sequence[str] = ()):
        super().__init__()
        self.board_task = task
        self.columns = tuple(columns)
        self.suggestions = list(suggestions)

    def compose(self) -> ComposeResult:
        task = self.board_task
        heading = "New task" if task.is_provisional else f"Edit task {task.id}"
        with Vertical(id="form"):
            yield Static(heading, id="form-title")
            yield Label("Title")
            yield Input(task.title, placeholder="What needs doing?", id="title")
            yield Label("Description")
            yield TextArea(task.description, id="description")
            yield Label("Priority")
            yield Select(
                [(p.value.title(), p) for p in Priority],
                value=task.priority,
                allow_blank=False,
                id="priority",
            )
            yield Label("Column")
            yield Select(
                [(col.title, col.id) for col in self.columns],
                value=task.column_id,
                allow_blank=False,
                id="column",
            )
            yield Label("Assignee")
            yield Input(
                task.assignee.name if task.assignee else "",
                placeholder="Name",
                suggester=SuggestFromList(self.suggestions, case_sensitive=False),
                id="assignee",
            )
            yield Label("Tags")
            yield Input(", ".join(task.tags), placeholder="Comma separated", id="tags")
            yield Label("Due date")
            yield Input(format_due_input(task.due_date), placeholder="YYYY-MM-DD", id="due-date")
            with Horizontal(id="buttons"):
                if not task.is_provisional:
                    yield Button("Delete", id="delete", variant="error")
                yield Button("Cancel", id="cancel")
                yield Button("Save", id="save", variant="primary")

    def on_mount(self) -> None:
        self.query_one("#title", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.action_save()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "delete":
            event.stop()
            self.dismiss(TaskModalResult("delete", self.board_task))
            return
        super().on_button_pressed(event)

    def build_result(self) -> TaskModalResult:
        task = self.board_task
        title = self.query_one("#title", Input).value.strip()
        if not title:
            raise ValidationFailed("title", "A task needs a title")
        edited = replace(
            task,
            title=title,
            description=self.query_one("#description", TextArea).text.strip(),
            priority=self.query_one("#priority", Select).value,
            column_id=self.query_one("#column", Select).value,
            assignee=parse_assignee(self.query_one("#assignee", Input).value, task.assignee),
            tags=parse_tags(self.query_one("#tags", Input).value),
            due_date=parse_due(self.query_one("#due-date", Input).value, task.due_date),
        )
        return TaskModalResult("save", edited)


class ColumnModal(FormModal):
    """Rename a column and set its WIP limit. Dismisses with a ColumnEdit."""

    def __init__(self, column: Column):
        super().__init__()
        self.column = column

    def compose(self) -> ComposeResult:
        col = self.column
        with Vertical(id="form"):
            yield Static(f"Edit column {col.id}", id="form-title")
            yield Label("Title")
            yield Input(col.title, id="title")
            yield Label("WIP limit")
            yield Input(
                str(col.wip_limit) if col.wip_limit is not None else "",
                placeholder="No limit",
                type="integer",
                id="wip-limit",
            )
            with Horizontal(id="buttons"):
                yield Button("Cancel", id="cancel")
                yield Button("Save", id="save", variant="primary")

    def on_mount(self) -> None:
        self.query_one("#title", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.action_save()

    def build_result(self) -> ColumnEdit:
        title = self.query_one("#title", Input).value.strip()
        if not title:
            raise ValidationFailed("title", "A column needs a title")
        return ColumnEdit(title, parse_wip_limit(self.query_one("#wip-limit", Input).value))
