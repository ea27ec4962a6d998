"""CLI adapter running the session bootstrap against the local store.

This module wires the dashboard services from environment settings, pulls
the remote snapshot once and prints the connectivity of the session together
with the size of every local collection.
"""

import asyncio
from datetime import date

from src.application.use_cases.session_bootstrap import SessionState
from src.domain.services.normalization import month_key
from src.infrastructure.container import (
    DashboardServices,
    build_dashboard_services,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import DashboardSettings


async def _run_session(services: DashboardServices) -> SessionState:
    """Run the bootstrap and wait for pushes it may have triggered."""
    state = await services.bootstrap.run()
    await services.gateway.drain()
    return state


def main() -> None:
    """Run the session bootstrap and print a summary."""
    logger = get_app_logger()
    settings = DashboardSettings.from_env()
    services = build_dashboard_services(settings=settings)

    state = asyncio.run(_run_session(services))
    if state.is_offline:
        logger.warning("Remote store unreachable, running in offline mode")

    print(f"Connectivity: {state.connectivity.value}")
    if state.rollover is not None:
        print(
            f"New month: {state.rollover.current_month} "
            f"(previous {state.rollover.previous_month})"
        )
    print(
        f"Tasks: {len(services.tasks.list())}, "
        f"transactions: {len(services.transactions.list())}, "
        f"folders: {len(services.folders.list())}, "
        f"files: {len(services.files.list())}"
    )

    today = date.today()
    agenda = services.daily_agenda.execute(today)
    summary = services.financial_summary.execute(month_key(today))
    print(
        f"Today: {agenda.due_count} due, {agenda.overdue_count} overdue"
    )
    print(
        f"This month: income={summary.total_income}, "
        f"expense={summary.total_expense}, balance={summary.balance}, "
        f"goal={summary.monthly_goal}"
    )


if __name__ == "__main__":  # pragma: no cover
    main()
