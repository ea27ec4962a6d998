"""Composition root for wiring infrastructure adapters."""

from dataclasses import dataclass

from src.application.cloud_sync_gateway import CloudSyncGateway
from src.application.ports.cloud_sync import RemoteDocumentPort
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.local_store import LocalStorePort
from src.application.use_cases.get_daily_agenda import GetDailyAgendaUseCase
from src.application.use_cases.get_financial_summary import (
    GetFinancialSummaryUseCase,
)
from src.application.use_cases.session_bootstrap import (
    SessionBootstrapUseCase,
)
from src.application.use_cases.set_monthly_goal import SetMonthlyGoalUseCase
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.local_store import SqlAlchemyLocalStore
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.notes_repository import (
    FileItemsRepository,
    FoldersRepository,
)
from src.infrastructure.preferences_repository import PreferencesRepository
from src.infrastructure.remote_store import HttpRemoteDocumentStore
from src.infrastructure.settings import DashboardSettings
from src.infrastructure.tasks_repository import TasksRepository
from src.infrastructure.transactions_repository import TransactionsRepository


@dataclass(frozen=True)
class DashboardServices:
    """Repositories and use cases sharing one store and one gateway."""

    store: LocalStorePort
    gateway: CloudSyncGateway
    tasks: TasksRepository
    transactions: TransactionsRepository
    folders: FoldersRepository
    files: FileItemsRepository
    preferences: PreferencesRepository
    bootstrap: SessionBootstrapUseCase
    financial_summary: GetFinancialSummaryUseCase
    daily_agenda: GetDailyAgendaUseCase
    monthly_goal: SetMonthlyGoalUseCase


def build_database_adapter(
    settings: DashboardSettings | None = None,
) -> DatabaseEnginePort:
    """Return the database adapter for the configured local store URL."""
    resolved = settings or DashboardSettings.from_env()
    return SqlAlchemyDatabaseEngineAdapter(resolved.local_db_url)


def build_local_store(
    db_port: DatabaseEnginePort | None = None,
) -> LocalStorePort:
    """Return the local store adapter."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyLocalStore(resolved_db, logger=get_app_logger())


def build_remote_store(
    settings: DashboardSettings | None = None,
) -> RemoteDocumentPort | None:
    """Return the remote transport, or None when no endpoint is configured."""
    resolved = settings or DashboardSettings.from_env()
    if not resolved.sync_enabled:
        return None
    return HttpRemoteDocumentStore(
        resolved.remote_url,
        timeout=resolved.push_timeout,
    )


def build_cloud_sync_gateway(
    store: LocalStorePort,
    settings: DashboardSettings | None = None,
    remote: RemoteDocumentPort | None = None,
) -> CloudSyncGateway:
    """Return the gateway replicating the given store."""
    resolved = settings or DashboardSettings.from_env()
    resolved_remote = remote or build_remote_store(resolved)
    return CloudSyncGateway(
        resolved_remote,
        store,
        pull_timeout=resolved.pull_timeout,
        logger=get_app_logger(),
    )


def build_dashboard_services(
    settings: DashboardSettings | None = None,
    store: LocalStorePort | None = None,
    remote: RemoteDocumentPort | None = None,
) -> DashboardServices:
    """Wire every repository and use case around one store and gateway.

    Args:
        settings: Settings to use; read from the environment when omitted.
        store: Local store to use; built from settings when omitted.
        remote: Remote transport to use; built from settings when omitted.

    Returns:
        DashboardServices: Fully wired services.
    """
    resolved = settings or DashboardSettings.from_env()
    logger = get_app_logger()
    resolved_store = store or build_local_store(
        build_database_adapter(resolved)
    )
    gateway = build_cloud_sync_gateway(
        resolved_store,
        settings=resolved,
        remote=remote,
    )
    files = FileItemsRepository(resolved_store, gateway, logger=logger)
    folders = FoldersRepository(resolved_store, gateway, files, logger=logger)
    tasks = TasksRepository(resolved_store, gateway, logger=logger)
    transactions = TransactionsRepository(
        resolved_store,
        gateway,
        logger=logger,
    )
    preferences = PreferencesRepository(resolved_store, logger=logger)
    return DashboardServices(
        store=resolved_store,
        gateway=gateway,
        tasks=tasks,
        transactions=transactions,
        folders=folders,
        files=files,
        preferences=preferences,
        bootstrap=SessionBootstrapUseCase(preferences, gateway, logger=logger),
        financial_summary=GetFinancialSummaryUseCase(
            transactions,
            preferences,
            logger=logger,
        ),
        daily_agenda=GetDailyAgendaUseCase(tasks, logger=logger),
        monthly_goal=SetMonthlyGoalUseCase(preferences),
    )


__all__ = [
    "DashboardServices",
    "build_database_adapter",
    "build_local_store",
    "build_remote_store",
    "build_cloud_sync_gateway",
    "build_dashboard_services",
]
