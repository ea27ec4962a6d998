"""Application ports package."""

from .cloud_sync import CloudSyncPort, RemoteDocumentPort, RemoteStoreError
from .database import DatabaseEnginePort
from .local_store import LocalStoreError, LocalStorePort, StoreKey
from .repositories import (
    CollectionRepositoryPort,
    FileItemsRepositoryPort,
    FoldersRepositoryPort,
    PreferencesRepositoryPort,
    TasksRepositoryPort,
    TransactionsRepositoryPort,
)

__all__ = [
    "CloudSyncPort",
    "RemoteDocumentPort",
    "RemoteStoreError",
    "DatabaseEnginePort",
    "LocalStoreError",
    "LocalStorePort",
    "StoreKey",
    "CollectionRepositoryPort",
    "FileItemsRepositoryPort",
    "FoldersRepositoryPort",
    "PreferencesRepositoryPort",
    "TasksRepositoryPort",
    "TransactionsRepositoryPort",
]
