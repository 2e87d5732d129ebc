"""Column widgets for the taskban board."""

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.message import Message
from textual.widgets import Button, Static

from taskban.interaction.drag import ColumnTarget
from taskban.model.column import Column
from taskban.model.task import Task
from taskban.ui.card import TaskCard
from taskban.ui.card_indicators import column_count_text
from taskban.ui.constants import ICON_ADD, ICON_COLLAPSED, ICON_EXPANDED
from taskban.ui.drag import DropTarget


class ColumnWidget(DropTarget, Vertical):
    """A column: header, its visible task cards and an add button.

    ``column`` is the full column from the store; ``visible_tasks`` holds the
    tasks that pass the current filter.
    """

    BINDINGS = [
        ("a", "add_task", "Add task"),
        ("r", "edit_column", "Edit column"),
        ("c", "toggle_collapse", "Collapse"),
        ("x", "delete_column", "Delete column"),
    ]

    class AddTaskRequested(Message):
        def __init__(self, column_id: str):
            super().__init__()
            self.column_id = column_id

    class EditRequested(Message):
        def __init__(self, column: Column):
            super().__init__()
            self.column = column

    class CollapseRequested(Message):
        def __init__(self, column_id: str):
            super().__init__()
            self.column_id = column_id

    class DeleteRequested(Message):
        def __init__(self, column: Column):
            super().__init__()
            self.column = column

    DEFAULT_CSS = """
    ColumnWidget {
        width: 1fr;
        min-width: 24;
        height: 100%;
        padding: 0 1;
        border-right: vkey $surface-lighten-1;
    }
    ColumnWidget.collapsed {
        width: 8;
        min-width: 8;
    }
    ColumnWidget.wip-exceeded .column-header {
        background: $error-darken-2;
    }
    ColumnWidget .column-header {
        height: auto;
        width: 100%;
    }
    ColumnWidget .column-title {
        width: 1fr;
        text-style: bold;
    }
    ColumnWidget .column-count {
        width: auto;
        padding: 0 1;
    }
    ColumnWidget .column-toggle {
        width: 2;
    }
    ColumnWidget .column-tasks {
        height: 1fr;
        overflow-y: auto;
    }
    ColumnWidget .add-task {
        width: 100%;
        min-width: 4;
    }
    """

    def __init__(self, column: Column, visible_tasks: tuple[Task, ...] | None = None, dragging_id: str | None = None):
        super().__init__(classes="collapsed" if column.collapsed else None)
        self.column = column
        self.visible_tasks = column.tasks if visible_tasks is None else visible_tasks
        self.dragging_id = dragging_id

    @property
    def column_id(self) -> str:
        return self.column.id

    def compose(self) -> ComposeResult:
        col = self.column
        shown = len(self.visible_tasks) if self.visible_tasks is not col.tasks else None
        if col.collapsed:
            yield Button(ICON_COLLAPSED, classes="column-expand", compact=True, tooltip=col.title)
            yield Static(column_count_text(col, shown), classes="column-count")
            return
        with Horizontal(classes="column-header"):
            yield Static(ICON_EXPANDED, classes="column-toggle")
            yield Static(col.title, classes="column-title")
            yield Static(column_count_text(col, shown), classes="column-count")
        with Vertical(classes="column-tasks"):
            for task in self.visible_tasks:
                card = TaskCard(task)
                if task.id == self.dragging_id:
                    card.add_class("dragging")
                yield card
        yield Button(f"{ICON_ADD} Add task", classes="add-task", compact=True)

    def on_mount(self) -> None:
        self.set_class(self.column.wip_exceeded, "wip-exceeded")
        self.tooltip = f"{self.column.title} column. {len(self.column.tasks)} tasks."

    def pointer_target(self) -> ColumnTarget:
        return ColumnTarget(self.column_id)

    def on_click(self, event) -> None:
        toggles = list(self.query(".column-toggle"))
        if toggles and toggles[0].region.contains(event.screen_x, event.screen_y):
            event.stop()
            self.action_toggle_collapse()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.has_class("add-task"):
            event.stop()
            self.action_add_task()
        elif event.button.has_class("column-expand"):
            event.stop()
            self.action_toggle_collapse()

    def action_add_task(self) -> None:
        self.post_message(self.AddTaskRequested(self.column_id))

    def action_edit_column(self) -> None:
        self.post_message(self.EditRequested(self.column))

    def action_toggle_collapse(self) -> None:
        self.post_message(self.CollapseRequested(self.column_id))

    def action_delete_column(self) -> None:
        self.post_message(self.DeleteRequested(self.column))
