"""Database infrastructure for the dashboard local store.

This module exposes concrete helpers to create and reuse the SQLAlchemy
engine backing the local store. It belongs to the infrastructure layer
because it deals with an external system (a SQLite file by default).
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from src.application.ports.database import DatabaseEnginePort


def _get_env_var(name: str) -> str:
    """Read an environment variable or raise a descriptive error.

    Args:
        name: Name of the environment variable to read.

    Returns:
        str: The raw value of the environment variable.

    Raises:
        RuntimeError: If the environment variable is missing or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine for the local store.

    In-memory SQLite URLs share a single connection so every caller sees the
    same database.

    Args:
        db_url: Fully qualified database URL.

    Returns:
        Engine: A SQLAlchemy engine instance.
    """
    if db_url in ("sqlite://", "sqlite:///:memory:"):
        return create_engine(
            db_url,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
            future=True,
        )
    return create_engine(db_url, pool_pre_ping=True, future=True)


_local_engine: Optional[Engine] = None


def get_local_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the local store.

    Returns:
        Engine: Lazily initialized engine built from LOCAL_STORE_DB_URL.
    """
    global _local_engine
    if _local_engine is None:
        db_url = _get_env_var("LOCAL_STORE_DB_URL")
        _local_engine = _create_engine(db_url)
    return _local_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by SQLAlchemy engines.

    When a URL is given the adapter owns its own engine; otherwise it proxies
    the module-level singleton configured through the environment.
    """

    def __init__(self, db_url: str | None = None) -> None:
        self._db_url = db_url
        self._engine: Optional[Engine] = None

    def get_local_engine(self) -> Engine:
        """Get the engine for the local store.

        Returns:
            Engine: SQLAlchemy engine connected to the local store.
        """
        if self._db_url is None:
            return get_local_engine()
        if self._engine is None:
            self._engine = _create_engine(self._db_url)
        return self._engine


__all__ = [
    "get_local_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
