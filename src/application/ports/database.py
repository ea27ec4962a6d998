"""Database ports for the dashboard core.

This module defines the application-layer protocol for accessing the
database engine that backs the local store. Infrastructure implementations
are expected to provide concrete adapters that satisfy this port.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the local store database engine."""

    def get_local_engine(self) -> Engine:
        """Get the engine for the local store database.

        Returns:
            Engine: SQLAlchemy engine connected to the local store.
        """


__all__ = ["DatabaseEnginePort"]
