"""Tests for the SQLAlchemy local store."""

from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from src.application.ports.local_store import LocalStoreError, StoreKey
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.local_store import SqlAlchemyLocalStore


def test_read_returns_none_for_absent_key(local_store) -> None:
    """Keys never written should read as absent."""
    assert local_store.read(StoreKey.TASKS) is None


def test_write_overwrites_previous_value(local_store) -> None:
    """A second write should replace the first one."""
    local_store.write(StoreKey.TASKS, '[{"id": "1"}]')
    local_store.write(StoreKey.TASKS, "[]")

    assert local_store.read(StoreKey.TASKS) == "[]"


def test_values_survive_a_new_store_instance(tmp_path) -> None:
    """Data should persist across store instances on the same file."""
    db_url = f"sqlite:///{tmp_path / 'persist.sqlite3'}"
    first = SqlAlchemyLocalStore(
        SqlAlchemyDatabaseEngineAdapter(db_url),
        logger=MagicMock(),
    )
    first.write(StoreKey.MONTHLY_GOAL, "12000")

    second = SqlAlchemyLocalStore(
        SqlAlchemyDatabaseEngineAdapter(db_url),
        logger=MagicMock(),
    )

    assert second.read(StoreKey.MONTHLY_GOAL) == "12000"


def test_write_many_is_all_or_nothing(local_store) -> None:
    """A failing entry should roll back every entry of the batch."""
    local_store.write_many({StoreKey.FOLDERS: '["old"]', StoreKey.FILES: "[]"})

    with pytest.raises(LocalStoreError):
        local_store.write_many(
            {StoreKey.FOLDERS: "[]", StoreKey.FILES: None}
        )

    assert local_store.read(StoreKey.FOLDERS) == '["old"]'
    assert local_store.read(StoreKey.FILES) == "[]"


def test_write_failure_is_surfaced() -> None:
    """Database errors should be raised as LocalStoreError and logged."""
    engine = MagicMock()
    engine.begin.side_effect = OperationalError(
        "INSERT", {}, Exception("database or disk is full")
    )
    db_port = MagicMock()
    db_port.get_local_engine.return_value = engine
    logger = MagicMock()
    store = SqlAlchemyLocalStore(db_port, logger=logger)

    with pytest.raises(LocalStoreError):
        store.write(StoreKey.TASKS, "[]")

    logger.error.assert_called_once()
