"""Gesture state machines that sit between input events and the store."""

from taskban.interaction.drag import ColumnTarget, DragMachine, DragState, PointerTarget, TaskTarget
from taskban.interaction.keyboard import FocusTarget, GridPosition, KeyboardNavigator

__all__ = [
    "ColumnTarget",
    "DragMachine",
    "DragState",
    "FocusTarget",
    "GridPosition",
    "KeyboardNavigator",
    "PointerTarget",
    "TaskTarget",
]
