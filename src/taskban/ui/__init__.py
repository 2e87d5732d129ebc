"""Textual UI for taskban."""

from taskban.ui.app import TaskbanApp
from taskban.ui.board import BoardScreen
from taskban.ui.confirm import ConfirmScreen
from taskban.ui.modal import ColumnModal, TaskModal, TaskModalResult

__all__ = [
    "BoardScreen",
    "ColumnModal",
    "ConfirmScreen",
    "TaskModal",
    "TaskModalResult",
    "TaskbanApp",
]
