"""Pure functions for building task card text."""

from datetime import datetime

from rich.text import Text

from taskban.model.column import Column
from taskban.model.task import Assignee, Priority, Task
from taskban.ui.constants import ICON_CALENDAR, ICON_USER, ICON_WARNING, PRIORITY_STYLES


def priority_text(priority: Priority) -> Text:
    """Priority badge, coloured by urgency."""
    return Text(priority.value, style=PRIORITY_STYLES.get(priority.value, PRIORITY_STYLES["medium"]))


def assignee_text(assignee: Assignee | None) -> Text:
    if assignee is None:
        return Text()
    return Text(f"{ICON_USER}{assignee.initials}", style="bold")


def format_due(due: datetime) -> str:
    """Short month and day, e.g. "Mar 5"."""
    return f"{due:%b} {due.day}"


def due_text(task: Task, now: datetime | None = None) -> Text:
    """Calendar icon and date, red if overdue."""
    if task.due_date is None:
        return Text()
    style = "bold red" if task.is_overdue(now) else "dim"
    return Text(f"{ICON_CALENDAR}{format_due(task.due_date)}", style=style)


def tags_text(tags: tuple[str, ...]) -> Text:
    return Text(" ".join(f"#{tag}" for tag in tags), style="italic dim")


def build_header_text(task: Task) -> Text:
    """Title line with the priority badge."""
    result = Text()
    result.append_text(priority_text(task.priority))
    result.append(" ")
    result.append(task.title, style="bold")
    return result


def build_footer_text(task: Task, now: datetime | None = None) -> Text:
    """Assignee, due date and tags, space separated, skipping blanks."""
    parts = [assignee_text(task.assignee), due_text(task, now), tags_text(task.tags)]
    return Text(" ").join(p for p in parts if p.plain)


def column_count_text(column: Column, shown: int | None = None) -> Text:
    """Task count, with the WIP limit and a warning when it is exceeded.

    ``shown`` is the number of tasks visible under a filter, if different.
    """
    total = len(column.tasks)
    count = f"{shown}/{total}" if shown is not None and shown != total else str(total)
    if column.wip_limit is None:
        return Text(count, style="dim")
    if column.wip_exceeded:
        return Text(f"{ICON_WARNING} {count} (max {column.wip_limit})", style="bold red")
    return Text(f"{count} (max {column.wip_limit})", style="dim")
