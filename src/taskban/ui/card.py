"""Task card widget."""

from textual.app import ComposeResult
from textual.message import Message
from textual.widgets import Static

from taskban.interaction.drag import TaskTarget
from taskban.model.task import Task
from taskban.ui.card_indicators import build_footer_text, build_header_text
from taskban.ui.drag import DraggableMixin, DropTarget


class TaskCard(DraggableMixin, DropTarget, Static, can_focus=True):
    """A single task in a column."""

    BINDINGS = [
        ("space", "edit", "Edit"),
        ("enter", "edit"),
        ("d", "duplicate", "Duplicate"),
        ("delete", "delete", "Delete"),
    ]

    class EditRequested(Message):
        def __init__(self, task: Task):
            super().__init__()
            self.board_task = task

    class DuplicateRequested(Message):
        def __init__(self, task: Task):
            super().__init__()
            self.board_task = task

    class DeleteRequested(Message):
        def __init__(self, task: Task):
            super().__init__()
            self.board_task = task

    DEFAULT_CSS = """
    TaskCard {
        width: 100%;
        height: auto;
        padding: 0 1;
        margin-bottom: 1;
        background: $surface;
    }
    TaskCard:focus {
        background: $primary;
    }
    TaskCard.overdue {
        border-left: thick $error;
    }
    TaskCard.dragging {
        display: none;
    }
    TaskCard .card-description {
        color: $text-muted;
    }
    """

    def __init__(self, task: Task, **kwargs):
        Static.__init__(self, **kwargs)
        self._init_draggable()
        self.board_task = task

    @property
    def task_id(self) -> str:
        return self.board_task.id

    def compose(self) -> ComposeResult:
        yield Static(build_header_text(self.board_task), classes="card-title")
        if self.board_task.description:
            yield Static(self.board_task.description.splitlines()[0], classes="card-description")
        footer = build_footer_text(self.board_task)
        if footer.plain:
            yield Static(footer, classes="card-footer")

    def on_mount(self) -> None:
        self.set_class(self.board_task.is_overdue(), "overdue")
        self.tooltip = f"{self.board_task.title}. Priority: {self.board_task.priority.value}."

    def pointer_target(self) -> TaskTarget:
        return TaskTarget(self.task_id)

    def draggable_enabled(self) -> bool:
        return getattr(self.screen, "drag_enabled", True)

    def draggable_clicked(self) -> None:
        self.focus()
        self.post_message(self.EditRequested(self.board_task))

    def action_edit(self) -> None:
        self.post_message(self.EditRequested(self.board_task))

    def action_duplicate(self) -> None:
        self.post_message(self.DuplicateRequested(self.board_task))

    def action_delete(self) -> None:
        self.post_message(self.DeleteRequested(self.board_task))
