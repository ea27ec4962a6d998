"""Domain models for tasks and the daily agenda."""

from dataclasses import dataclass
from datetime import date
from enum import Enum


class Priority(str, Enum):
    """Task priority levels."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


PRIORITY_ORDER = {
    Priority.HIGH: 0,
    Priority.MEDIUM: 1,
    Priority.LOW: 2,
}


@dataclass(frozen=True)
class Task:
    """A dated to-do item.

    Attributes:
        id: Opaque identifier assigned at creation time.
        title: Short task title.
        project: Client or project the task belongs to.
        date: Calendar day the task is due.
        priority: Priority level.
        completed: Whether the task is done.
        created_at: Creation instant in epoch milliseconds.
        description: Optional free-text details.
    """

    id: str
    title: str
    project: str
    date: date
    priority: Priority
    completed: bool
    created_at: int
    description: str | None = None


@dataclass(frozen=True)
class DailyAgenda:
    """Pending work for a single day."""

    day: date
    due_today: list[Task]
    overdue_count: int

    @property
    def due_count(self) -> int:
        return len(self.due_today)


__all__ = ["Priority", "PRIORITY_ORDER", "Task", "DailyAgenda"]
