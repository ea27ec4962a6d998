"""Shared fixtures for the dashboard core tests."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.local_store import SqlAlchemyLocalStore


class RecordingSync:
    """Sync port double recording every push."""

    def __init__(self) -> None:
        self.pushes: list[tuple[str, list]] = []

    def push(self, kind, collection) -> None:
        self.pushes.append((kind.value, list(collection)))

    async def pull(self) -> bool:
        return True

    def pushed_kinds(self) -> list[str]:
        return [kind for kind, _ in self.pushes]


@pytest.fixture
def local_store(tmp_path: Path) -> SqlAlchemyLocalStore:
    """SQLite-backed local store in a temporary directory."""
    db_port = SqlAlchemyDatabaseEngineAdapter(
        f"sqlite:///{tmp_path / 'store.sqlite3'}"
    )
    return SqlAlchemyLocalStore(db_port, logger=MagicMock())


@pytest.fixture
def recording_sync() -> RecordingSync:
    return RecordingSync()
