"""Local-store repository for tasks."""

from __future__ import annotations

from datetime import date

from src.application.ports.repositories import TasksRepositoryPort
from src.domain.constants import EntityKind
from src.domain.models import Task
from src.domain.services.agenda import sort_by_date
from src.domain.services.validation import validate_task
from src.infrastructure.collection_repository import CollectionRepository


class TasksRepository(CollectionRepository[Task], TasksRepositoryPort):
    """Repository for the task collection."""

    kind = EntityKind.TASKS

    def list_for_day(self, day: date) -> list[Task]:
        """Return tasks due on ``day`` in stored order."""
        return self.list(lambda task: task.date == day)

    def list_sorted_by_date(self) -> list[Task]:
        """Return every task ordered by due day."""
        return sort_by_date(self.list())

    def _validate(self, entity: Task) -> None:
        validate_task(entity)


__all__ = ["TasksRepository"]
