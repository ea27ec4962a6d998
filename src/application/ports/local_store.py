"""Port for the durable key-value local store."""

from collections.abc import Mapping
from typing import Protocol


class StoreKey:
    """Fixed keys addressed in the local store."""

    TASKS = "tasks"
    TRANSACTIONS = "transactions"
    FOLDERS = "folders"
    FILES = "files"
    MONTHLY_GOAL = "monthlyGoal"
    LAST_LOGIN_MONTH = "lastLoginMonth"


class LocalStoreError(RuntimeError):
    """Raised when the local store rejects a read or write."""


class LocalStorePort(Protocol):
    """Port exposing whole-value persistence by string key.

    Values are raw serialized text; callers own encoding and the default
    used when a key is absent.
    """

    def read(self, key: str) -> str | None:
        """Return the raw value for ``key`` or None when absent."""

    def write(self, key: str, raw: str) -> None:
        """Overwrite ``key`` with ``raw``.

        Raises:
            LocalStoreError: If the value could not be persisted.
        """

    def write_many(self, entries: Mapping[str, str]) -> None:
        """Overwrite several keys as a single all-or-nothing unit.

        Raises:
            LocalStoreError: If the values could not be persisted.
        """


__all__ = ["StoreKey", "LocalStoreError", "LocalStorePort"]
