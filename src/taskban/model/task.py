"""Task records."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum

from taskban.errors import ValidationFailed


class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"

    @classmethod
    def parse(cls, value: str | Priority) -> Priority:
        """Parse a priority name, case-insensitively."""
        if isinstance(value, Priority):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            names = ", ".join(p.value for p in cls)
            raise ValidationFailed("priority", f"Unknown priority '{value}' (expected one of {names})") from None


@dataclass(frozen=True)
class Assignee:
    name: str
    avatar: str = ""

    @property
    def initials(self) -> str:
        """Up to two upper-case initials, one per word of the name."""
        return "".join(part[0] for part in self.name.split()).upper()[:2]


@dataclass(frozen=True)
class Task:
    """A single work item.

    An empty ``id`` marks a provisional task that has not been saved yet.
    """

    id: str
    title: str
    column_id: str
    description: str = ""
    priority: Priority = Priority.MEDIUM
    assignee: Assignee | None = None
    tags: tuple[str, ...] = field(default_factory=tuple)
    due_date: datetime | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "tags", tuple(self.tags))
        object.__setattr__(self, "priority", Priority.parse(self.priority))

    @property
    def is_provisional(self) -> bool:
        return not self.id

    def is_overdue(self, now: datetime | None = None) -> bool:
        """True if the due date is strictly before now."""
        if self.due_date is None:
            return False
        if now is None:
            now = datetime.now(self.due_date.tzinfo)
        return self.due_date < now

    def moved_to(self, column_id: str) -> Task:
        return replace(self, column_id=column_id)
