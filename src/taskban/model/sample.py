"""Starting boards: an empty default layout and a populated demo."""

from __future__ import annotations

from datetime import datetime, timedelta

from taskban.model.column import Column
from taskban.model.task import Assignee, Priority, Task


def default_columns() -> tuple[Column, ...]:
    """Empty To Do / In Progress / Done board."""
    return (
        Column(id="todo", title="To Do"),
        Column(id="in-progress", title="In Progress"),
        Column(id="done", title="Done"),
    )


def sample_columns(now: datetime | None = None) -> tuple[Column, ...]:
    """Four columns with a handful of tasks, one of them overdue."""
    now = now or datetime.now()

    def days(n: int) -> datetime:
        return now + timedelta(days=n)

    tasks = [
        Task(
            id="task-1",
            title="Create UI Components",
            description="Build reusable UI components for the application",
            priority=Priority.HIGH,
            column_id="todo",
            assignee=Assignee("John Doe"),
            tags=("UI", "Design", "Frontend"),
            due_date=days(3),
        ),
        Task(
            id="task-2",
            title="Implement Drag and Drop",
            description="Add drag and drop functionality to the board",
            priority=Priority.MEDIUM,
            column_id="in-progress",
            assignee=Assignee("Jane Smith"),
            tags=("Feature", "Interaction"),
            due_date=days(5),
        ),
        Task(
            id="task-3",
            title="Write Unit Tests",
            description="Create unit tests for all components",
            priority=Priority.LOW,
            column_id="todo",
            assignee=Assignee("Bob Johnson"),
            tags=("Testing", "QA"),
            due_date=days(7),
        ),
        Task(
            id="task-4",
            title="Fix Accessibility Issues",
            description="Ensure all components are accessible",
            priority=Priority.URGENT,
            column_id="review",
            assignee=Assignee("Alice Brown"),
            tags=("A11y", "Bug"),
            due_date=days(-1),
        ),
        Task(
            id="task-5",
            title="Deploy to Production",
            description="Deploy the application to the production environment",
            priority=Priority.HIGH,
            column_id="done",
            assignee=Assignee("Charlie Wilson"),
            tags=("DevOps", "Release"),
            due_date=days(-2),
        ),
    ]

    layout = [
        ("todo", "To Do"),
        ("in-progress", "In Progress"),
        ("review", "Review"),
        ("done", "Done"),
    ]
    return tuple(
        Column(id=col_id, title=title, tasks=tuple(t for t in tasks if t.column_id == col_id))
        for col_id, title in layout
    )
