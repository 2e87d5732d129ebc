"""Pointer drag-and-drop for task cards.

- DraggableMixin: on cards, tells a click from the start of a drag
- DropTarget: on widgets that name a pointer target (cards, columns)
- CardDragManager: owned by the board screen, drives the DragMachine

The board is recomposed while a drag is in flight (preview moves change
the store), so the manager keeps no widget references beyond the ghost.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.geometry import Offset
from textual.widgets import Static

from taskban.interaction.drag import DragMachine, PointerTarget
from taskban.model.task import Task
from taskban.ui.card_indicators import build_header_text

if TYPE_CHECKING:
    from textual.screen import Screen
    from textual.widget import Widget


class DropTarget:
    """Mixin for widgets the pointer can be over during a drag."""

    def pointer_target(self) -> PointerTarget:
        raise NotImplementedError


class DraggableMixin:
    """Mixin for widgets that can be dragged.

    Subclasses should:
    - Call _init_draggable() in __init__
    - Implement draggable_clicked() for click-without-drag behavior
    - Implement draggable_enabled() to veto drags
    """

    DRAG_THRESHOLD = 2

    def _init_draggable(self) -> None:
        self._drag_start_pos: Offset | None = None

    def on_mouse_down(self, event) -> None:
        if event.button != 1:
            return
        event.stop()
        event.prevent_default()
        self._drag_start_pos = Offset(event.screen_x, event.screen_y)
        self.capture_mouse()

    def on_mouse_move(self, event) -> None:
        if self._drag_start_pos is None:
            return
        event.stop()
        event.prevent_default()
        dx = abs(event.screen_x - self._drag_start_pos.x)
        dy = abs(event.screen_y - self._drag_start_pos.y)
        if dx > self.DRAG_THRESHOLD or dy > self.DRAG_THRESHOLD:
            self.release_mouse()
            mouse_pos = self._drag_start_pos
            self._drag_start_pos = None
            if self.draggable_enabled():
                self.screen.drag.start(self, mouse_pos)

    def on_mouse_up(self, event) -> None:
        event.stop()
        event.prevent_default()
        self.release_mouse()
        if self._drag_start_pos is not None:
            self._drag_start_pos = None
            self.draggable_clicked()

    def draggable_enabled(self) -> bool:
        return True

    def draggable_clicked(self) -> None:
        """Called when mouse released without dragging. Override for click behavior."""
        raise NotImplementedError


class DragGhost(Static):
    """Floating overlay showing the task being dragged."""

    DEFAULT_CSS = """
    DragGhost {
        layer: overlay;
        height: auto;
        padding: 0 1;
        background: $primary-darken-2;
        border: round $primary;
    }
    """

    def __init__(self, task: Task):
        super().__init__(build_header_text(task))


class CardDragManager:
    """Routes a card drag from the screen's mouse events to the DragMachine."""

    def __init__(self, screen: Screen, machine: DragMachine):
        self.screen = screen
        self.machine = machine
        self.ghost: DragGhost | None = None
        self.drag_offset: Offset = Offset(0, 0)

    @property
    def active(self) -> bool:
        return self.machine.is_dragging

    @property
    def active_id(self) -> str | None:
        return self.machine.active_id

    def start(self, card: Widget, mouse_pos: Offset) -> bool:
        if not self.machine.start(card.task_id):
            return False

        region = card.region
        self.drag_offset = Offset(mouse_pos.x - region.x, mouse_pos.y - region.y)

        self.ghost = DragGhost(self.machine.active_task)
        self.ghost.styles.width = region.width
        self.ghost.styles.offset = (region.x, region.y)
        self.screen.mount(self.ghost)

        card.add_class("dragging")
        self.screen.set_focus(None)
        self.screen.capture_mouse()
        return True

    def update_position(self, screen_x: int, screen_y: int) -> None:
        if not self.active:
            return
        if self.ghost is not None:
            self.ghost.styles.offset = (screen_x - self.drag_offset.x, screen_y - self.drag_offset.y)
        target = self.find_target(screen_x, screen_y)
        if target is not None:
            self.machine.over(target)

    def finish(self, screen_x: int, screen_y: int) -> str | None:
        """Drop at the pointer. Returns the id of the task that was dragged."""
        if not self.active:
            return None
        task_id = self.machine.active_id
        target = self.find_target(screen_x, screen_y)
        self.machine.end(target)
        self._cleanup()
        return task_id

    def cancel(self) -> str | None:
        if not self.active:
            return None
        task_id = self.machine.active_id
        self.machine.cancel()
        self._cleanup()
        return task_id

    def find_target(self, screen_x: int, screen_y: int) -> PointerTarget | None:
        """The innermost DropTarget under the pointer, skipping the ghost."""
        for widget, _region in self.screen.get_widgets_at(screen_x, screen_y):
            if self.ghost is not None and (widget is self.ghost or self.ghost in widget.ancestors):
                continue
            candidate = widget
            while candidate is not None:
                if isinstance(candidate, DropTarget):
                    return candidate.pointer_target()
                candidate = candidate.parent
        return None

    def _cleanup(self) -> None:
        self.screen.release_mouse()
        if self.ghost is not None:
            self.ghost.remove()
        self.ghost = None
        self.drag_offset = Offset(0, 0)
