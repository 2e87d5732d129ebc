"""Main Textual application for taskban."""

from __future__ import annotations

from textual.app import App

from taskban.config import Config
from taskban.model.store import BoardStore
from taskban.ui.board import BoardScreen


class TaskbanApp(App):
    """Keyboard and mouse driven kanban board."""

    CSS = """
    Tooltip {
        padding: 0 1;
        margin: 0;
    }
    """

    TITLE = "taskban"
    BINDINGS = [("ctrl+q", "quit", "Quit")]

    def __init__(self, store: BoardStore, config: Config | None = None):
        super().__init__()
        self.store = store
        self.config = config or Config()

    def on_mount(self) -> None:
        self.push_screen(BoardScreen(self.store, self.config))
