"""Column records."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace

from taskban.model.task import Task

MAX_COLUMNS = 6


def slugify(text: str) -> str:
    """Convert text to a URL-friendly slug."""
    slug = text.lower()
    slug = re.sub(r"[^a-z0-9]+", "-", slug)
    slug = slug.strip("-")
    return slug or "untitled"


@dataclass(frozen=True)
class Column:
    """A named, ordered bucket of tasks."""

    id: str
    title: str
    tasks: tuple[Task, ...] = field(default_factory=tuple)
    wip_limit: int | None = None
    collapsed: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "tasks", tuple(self.tasks))

    @property
    def wip_exceeded(self) -> bool:
        """Advisory only: more tasks than the WIP limit allows."""
        return self.wip_limit is not None and len(self.tasks) > self.wip_limit

    def index_of(self, task_id: str) -> int | None:
        for i, task in enumerate(self.tasks):
            if task.id == task_id:
                return i
        return None

    def with_tasks(self, tasks) -> Column:
        return replace(self, tasks=tuple(tasks))
