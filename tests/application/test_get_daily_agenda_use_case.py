"""Tests for the GetDailyAgendaUseCase."""

from datetime import date
from unittest.mock import MagicMock

from src.application.use_cases.get_daily_agenda import GetDailyAgendaUseCase
from src.domain.models import Priority, Task
from src.infrastructure.tasks_repository import TasksRepository


def _task(
    task_id: str,
    day: date,
    priority: Priority = Priority.MEDIUM,
    completed: bool = False,
) -> Task:
    return Task(
        id=task_id,
        title=f"Task {task_id}",
        project="Acme",
        date=day,
        priority=priority,
        completed=completed,
        created_at=1717200000000,
    )


def test_agenda_lists_pending_tasks_by_priority(
    local_store,
    recording_sync,
) -> None:
    tasks = TasksRepository(local_store, recording_sync, logger=MagicMock())
    today = date(2024, 6, 10)
    tasks.upsert(_task("low", today, Priority.LOW))
    tasks.upsert(_task("high", today, Priority.HIGH))
    tasks.upsert(_task("done", today, Priority.HIGH, completed=True))
    tasks.upsert(_task("late", date(2024, 6, 1)))
    tasks.upsert(_task("later", date(2024, 6, 20)))
    use_case = GetDailyAgendaUseCase(tasks, logger=MagicMock())

    agenda = use_case.execute(today)

    assert [task.id for task in agenda.due_today] == ["high", "low"]
    assert agenda.due_count == 2
    assert agenda.overdue_count == 1
    assert agenda.day == today


def test_agenda_on_empty_store(local_store, recording_sync) -> None:
    tasks = TasksRepository(local_store, recording_sync, logger=MagicMock())
    use_case = GetDailyAgendaUseCase(tasks, logger=MagicMock())

    agenda = use_case.execute(date(2024, 6, 10))

    assert agenda.due_today == []
    assert agenda.overdue_count == 0
