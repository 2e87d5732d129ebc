"""Kanban board with drag-and-drop, keyboard navigation and filtering."""

__version__ = "0.1.0"
