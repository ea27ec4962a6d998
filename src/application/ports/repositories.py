"""Ports for the entity repositories."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date
from decimal import Decimal
from typing import Protocol, TypeVar

from src.domain.models import FileItem, Folder, Task, Transaction


EntityT = TypeVar("EntityT")


class CollectionRepositoryPort(Protocol[EntityT]):
    """CRUD access to a single entity collection."""

    def list(
        self,
        predicate: Callable[[EntityT], bool] | None = None,
    ) -> list[EntityT]:
        """Return the collection in stored order, optionally filtered."""

    def get_by_id(self, entity_id: str) -> EntityT | None:
        """Return the entity with ``entity_id`` or None."""

    def upsert(self, entity: EntityT) -> None:
        """Insert or replace the entity in place by id."""

    def delete_by_id(self, entity_id: str) -> None:
        """Remove the entity with ``entity_id``."""


class TasksRepositoryPort(CollectionRepositoryPort[Task], Protocol):
    """Task collection access."""

    def list_for_day(self, day: date) -> list[Task]:
        """Return tasks due on ``day``."""


class TransactionsRepositoryPort(
    CollectionRepositoryPort[Transaction],
    Protocol,
):
    """Transaction collection access."""

    def list_for_month(self, month: str) -> list[Transaction]:
        """Return transactions for the month key."""


class FoldersRepositoryPort(CollectionRepositoryPort[Folder], Protocol):
    """Folder collection access; deletion cascades to file items."""


class FileItemsRepositoryPort(CollectionRepositoryPort[FileItem], Protocol):
    """File item collection access."""

    def list_in_folder(self, folder_id: str | None) -> list[FileItem]:
        """Return file items in the folder, root when None."""


class PreferencesRepositoryPort(Protocol):
    """Scalar preferences kept next to the collections."""

    def get_monthly_goal(self) -> Decimal:
        """Return the stored monthly goal or the default."""

    def set_monthly_goal(self, amount: Decimal) -> None:
        """Store the monthly goal."""

    def get_last_login_month(self) -> str | None:
        """Return the last-seen month key, None when never stored."""

    def set_last_login_month(self, month: str) -> None:
        """Store the last-seen month key."""


__all__ = [
    "CollectionRepositoryPort",
    "TasksRepositoryPort",
    "TransactionsRepositoryPort",
    "FoldersRepositoryPort",
    "FileItemsRepositoryPort",
    "PreferencesRepositoryPort",
]
