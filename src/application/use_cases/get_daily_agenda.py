"""Use case to build the daily task digest."""

from datetime import date

from src.application.ports.repositories import TasksRepositoryPort
from src.domain.models import DailyAgenda
from src.domain.services.agenda import build_daily_agenda
from src.infrastructure.logging.logger import get_app_logger


class GetDailyAgendaUseCase:
    """Collect pending tasks for a day and count overdue ones."""

    def __init__(self, tasks: TasksRepositoryPort, logger=None) -> None:
        self._tasks = tasks
        self._logger = logger or get_app_logger()

    def execute(self, day: date | None = None) -> DailyAgenda:
        """Return the agenda for ``day`` (today when omitted)."""
        target = day or date.today()
        agenda = build_daily_agenda(self._tasks.list(), target)
        self._logger.info(
            f"Agenda for {target.isoformat()}: {agenda.due_count} due, "
            f"{agenda.overdue_count} overdue"
        )
        return agenda


__all__ = ["GetDailyAgendaUseCase", "DailyAgenda"]
