"""Domain services for the daily task digest."""

from collections.abc import Iterable
from datetime import date

from src.domain.models import PRIORITY_ORDER, DailyAgenda, Task


def sort_by_priority(tasks: Iterable[Task]) -> list[Task]:
    """Order tasks from high to low priority, keeping stored order on ties."""
    return sorted(tasks, key=lambda task: PRIORITY_ORDER[task.priority])


def sort_by_date(tasks: Iterable[Task]) -> list[Task]:
    """Order tasks by due day, keeping stored order on ties."""
    return sorted(tasks, key=lambda task: task.date)


def build_daily_agenda(tasks: Iterable[Task], day: date) -> DailyAgenda:
    """Collect the pending tasks due on ``day`` and count overdue ones.

    Args:
        tasks: Full task collection.
        day: Day to build the agenda for.

    Returns:
        DailyAgenda: Pending tasks for the day by priority, plus the number
        of pending tasks due before the day.
    """
    due_today: list[Task] = []
    overdue_count = 0
    for task in tasks:
        if task.completed:
            continue
        if task.date == day:
            due_today.append(task)
        elif task.date < day:
            overdue_count += 1
    return DailyAgenda(
        day=day,
        due_today=sort_by_priority(due_today),
        overdue_count=overdue_count,
    )


__all__ = ["sort_by_priority", "sort_by_date", "build_daily_agenda"]
