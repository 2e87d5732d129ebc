"""Board screen showing kanban columns and cards."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from textual.app import ComposeResult
from textual.actions import SkipAction
from textual.binding import Binding
from textual.containers import Horizontal
from textual.screen import Screen
from textual.widgets import Button, Footer, Input, Select, Static, TextArea

from taskban.errors import BoardError
from taskban.interaction.drag import DragMachine
from taskban.interaction.keyboard import GridPosition, KeyboardNavigator
from taskban.model.column import Column
from taskban.model.filters import BoardFilter, distinct_assignees, distinct_tags, filter_columns
from taskban.model.store import BoardStore, Columns
from taskban.model.task import Task
from taskban.ui.card import TaskCard
from taskban.ui.column import ColumnWidget
from taskban.ui.confirm import ConfirmScreen
from taskban.ui.constants import ICON_ADD, ICON_BOARD
from taskban.ui.drag import CardDragManager
from taskban.ui.filter_bar import FilterBar
from taskban.ui.modal import ColumnEdit, ColumnModal, TaskModal, TaskModalResult
from taskban.ui.watcher import StoreWatcherMixin

if TYPE_CHECKING:
    from taskban.config import Config

logger = logging.getLogger(__name__)

TEXT_ENTRY_WIDGETS = (Input, TextArea, Select)


class BoardView(Horizontal):
    """The row of columns. Rebuilt from scratch whenever the board changes."""

    DEFAULT_CSS = """
    BoardView {
        width: 1fr;
        height: 1fr;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.shown: list[tuple[Column, tuple[Task, ...]]] = []
        self.dragging_id: str | None = None
        self.refocus_id: str | None = None
        self._rebuild_pending = False

    def compose(self) -> ComposeResult:
        for column, visible_tasks in self.shown:
            yield ColumnWidget(column, visible_tasks, self.dragging_id)

    def show(self, shown: list[tuple[Column, tuple[Task, ...]]], dragging_id: str | None = None) -> None:
        """Replace what is shown and schedule a rebuild, keeping focus on the same task."""
        self.shown = shown
        self.dragging_id = dragging_id
        focused = self.screen.focused
        if isinstance(focused, TaskCard):
            self.refocus_id = focused.task_id
        if not self._rebuild_pending:
            self._rebuild_pending = True
            self.call_later(self._rebuild)

    async def _rebuild(self) -> None:
        self._rebuild_pending = False
        await self.recompose()
        if self.refocus_id is not None:
            self.focus_task(self.refocus_id)
            self.refocus_id = None

    def column_widgets(self) -> list[ColumnWidget]:
        return list(self.query(ColumnWidget))

    def card_for(self, task_id: str) -> TaskCard | None:
        for card in self.query(TaskCard):
            if card.task_id == task_id:
                return card
        return None

    def focus_task(self, task_id: str) -> bool:
        card = self.card_for(task_id)
        if card is None:
            return False
        card.focus()
        card.scroll_visible()
        return True


class TextualFocusTarget:
    """Gives the keyboard navigator the board's real widgets to work on."""

    def __init__(self, screen: BoardScreen) -> None:
        self.screen = screen

    def identify(self, position: GridPosition) -> str | None:
        columns = self.screen.board_view.column_widgets()
        if not 0 <= position.column < len(columns):
            return None
        cards = [c for c in columns[position.column].query(TaskCard) if not c.has_class("dragging")]
        if not 0 <= position.task < len(cards):
            return None
        return cards[position.task].task_id

    def move_focus_to(self, task_id: str) -> None:
        self.screen.board_view.focus_task(task_id)

    def announce(self, text: str) -> None:
        logger.debug("announce: %s", text)
        if self.screen.config.announce:
            self.screen.query_one("#announcer", Static).update(text)


class BoardScreen(StoreWatcherMixin, Screen):
    """Main board screen showing all columns."""

    AUTO_FOCUS = ""

    BINDINGS = [
        Binding("escape", "escape", "Cancel", show=False),
        Binding("n", "add_column", "New column"),
        Binding("slash", "focus_search", "Search"),
        Binding("up", "navigate('up')", show=False, priority=True),
        Binding("down", "navigate('down')", show=False, priority=True),
        Binding("left", "navigate('left')", show=False, priority=True),
        Binding("right", "navigate('right')", show=False, priority=True),
        Binding("home", "navigate('home')", show=False, priority=True),
        Binding("end", "navigate('end')", show=False, priority=True),
        Binding("enter", "navigate('enter')", show=False, priority=True),
    ]

    DEFAULT_CSS = """
    BoardScreen {
        layers: base overlay;
    }
    BoardScreen #board-header {
        height: auto;
        width: 100%;
        background: $primary-darken-2;
    }
    BoardScreen #board-title {
        width: auto;
        padding: 1 2 0 1;
        text-style: bold;
    }
    BoardScreen #board-body {
        height: 1fr;
    }
    BoardScreen #add-column {
        width: auto;
        min-width: 8;
        margin: 0 1;
    }
    BoardScreen #announcer {
        height: 1;
        width: 100%;
        padding: 0 1;
        color: $text-muted;
    }
    """

    def __init__(self, store: BoardStore, config: Config):
        self._init_watcher()
        super().__init__()
        self.store = store
        self.config = config
        self.board_filter = BoardFilter()
        self.drag = CardDragManager(self, DragMachine(store))
        self.navigator = KeyboardNavigator(self.navigable_columns, TextualFocusTarget(self))

    def compose(self) -> ComposeResult:
        with Horizontal(id="board-header"):
            yield Static(f"{ICON_BOARD} taskban", id="board-title")
            yield FilterBar(self.config.search_delay_seconds, id="filters")
        with Horizontal(id="board-body"):
            yield BoardView(id="board-view")
            yield Button(f"{ICON_ADD} Column", id="add-column", compact=True)
        yield Static("", id="announcer")
        yield Footer()

    def on_mount(self) -> None:
        self.store_watch(self.store, self._on_store_changed)
        self.refresh_board()
        self._refresh_choices(self.store.columns)

    @property
    def board_view(self) -> BoardView:
        return self.query_one("#board-view", BoardView)

    @property
    def filter_bar(self) -> FilterBar:
        return self.query_one("#filters", FilterBar)

    @property
    def drag_enabled(self) -> bool:
        """False while a filter hides any tasks."""
        return not self.board_filter.active

    # -- Board state --

    def displayed_columns(self) -> tuple[Column, ...]:
        return filter_columns(self.store.columns, self.board_filter)

    def navigable_columns(self) -> tuple[Column, ...]:
        """Columns as the keyboard sees them: filtered, collapsed ones empty."""
        return tuple(col.with_tasks(()) if col.collapsed else col for col in self.displayed_columns())

    def refresh_board(self) -> None:
        shown = [
            (column, filtered.tasks)
            for column, filtered in zip(self.store.columns, self.displayed_columns())
        ]
        self.board_view.show(shown, self.drag.active_id)

    def _on_store_changed(self, store: BoardStore, old: Columns, new: Columns) -> None:
        self.refresh_board()
        self._refresh_choices(new)

    def _refresh_choices(self, columns: Columns) -> None:
        self.filter_bar.set_choices(distinct_assignees(columns), distinct_tags(columns))

    def on_filter_bar_changed(self, event: FilterBar.Changed) -> None:
        event.stop()
        self.board_filter = event.board_filter
        logger.debug("filter changed: %r", self.board_filter)
        self.refresh_board()

    def _run(self, operation, *args):
        """Run a store operation, showing board errors to the user."""
        try:
            return operation(*args)
        except BoardError as e:
            self.notify(str(e), severity="error", markup=False)
            return None

    # -- Mouse: the drag manager owns the pointer while a drag is active --

    def on_mouse_move(self, event) -> None:
        if self.drag.active:
            self.drag.update_position(event.screen_x, event.screen_y)

    def on_mouse_up(self, event) -> None:
        if self.drag.active:
            task_id = self.drag.finish(event.screen_x, event.screen_y)
            self.board_view.refocus_id = task_id
            self.refresh_board()

    def action_escape(self) -> None:
        if self.drag.active:
            task_id = self.drag.cancel()
            self.board_view.refocus_id = task_id
            self.refresh_board()
        elif self.board_filter.active:
            self.filter_bar.clear()
        else:
            self.set_focus(None)

    # -- Keyboard --

    def _editing_text(self) -> bool:
        widget = self.focused
        while widget is not None:
            if isinstance(widget, TEXT_ENTRY_WIDGETS):
                return True
            widget = widget.parent
        return False

    def action_navigate(self, key: str) -> None:
        focused = self.focused
        if self._editing_text() or (focused is not None and not isinstance(focused, TaskCard)):
            raise SkipAction()
        focused_id = focused.task_id if focused is not None else None
        modal_open = self.app.screen is not self
        if self.navigator.key_press(key, focused_id, modal_open=modal_open) is None:
            raise SkipAction()

    def action_focus_search(self) -> None:
        self.query_one("#search", Input).focus()

    # -- Columns --

    def action_add_column(self) -> None:
        column = self._run(self.store.add_column)
        if column is not None:
            self.notify(f"Added column {column.title}", markup=False)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "add-column":
            event.stop()
            self.action_add_column()

    def on_column_widget_add_task_requested(self, event: ColumnWidget.AddTaskRequested) -> None:
        event.stop()
        self.open_task(self.store.add_task(event.column_id))

    def on_column_widget_collapse_requested(self, event: ColumnWidget.CollapseRequested) -> None:
        event.stop()
        self.store.toggle_collapse(event.column_id)

    def on_column_widget_edit_requested(self, event: ColumnWidget.EditRequested) -> None:
        event.stop()
        column_id = event.column.id

        def apply(edit: ColumnEdit | None) -> None:
            if edit is None:
                return
            self._run(self.store.update_column, column_id, edit.title, edit.wip_limit)

        self.app.push_screen(ColumnModal(event.column), apply)

    def on_column_widget_delete_requested(self, event: ColumnWidget.DeleteRequested) -> None:
        event.stop()
        column = event.column
        first = self.store.columns[0]
        if column.tasks and column.id == first.id:
            message = f"Delete column '{column.title}' and its {len(column.tasks)} tasks?"
        elif column.tasks:
            message = f"Delete column '{column.title}'? Its tasks move to '{first.title}'."
        else:
            message = f"Delete column '{column.title}'?"

        def apply(confirmed: bool) -> None:
            if confirmed:
                self.store.delete_column(column.id)

        self.app.push_screen(ConfirmScreen(message, "Delete"), apply)

    # -- Tasks --

    def open_task(self, task: Task) -> None:
        """Show the task form and apply whatever it is closed with."""
        suggestions = sorted(set(self.config.assignee_suggestions) | set(distinct_assignees(self.store.columns)))

        def apply(result: TaskModalResult | None) -> None:
            if result is None:
                return
            if result.action == "delete":
                self.store.delete_task(result.task.id)
                return
            saved = self._run(self.store.save_task, result.task)
            if saved is not None:
                self.board_view.refocus_id = saved.id

        self.app.push_screen(TaskModal(task, self.store.columns, suggestions), apply)

    def on_task_card_edit_requested(self, event: TaskCard.EditRequested) -> None:
        event.stop()
        self.open_task(event.board_task)

    def on_task_card_duplicate_requested(self, event: TaskCard.DuplicateRequested) -> None:
        event.stop()
        copy = self.store.duplicate_task(event.board_task)
        if copy is not None:
            self.notify(f"Duplicated as {copy.title}", markup=False)

    def on_task_card_delete_requested(self, event: TaskCard.DeleteRequested) -> None:
        event.stop()
        task = event.board_task

        def apply(confirmed: bool) -> None:
            if confirmed:
                self.store.delete_task(task.id)

        self.app.push_screen(ConfirmScreen(f"Delete task '{task.title}'?", "Delete"), apply)
