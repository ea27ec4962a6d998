"""SQLAlchemy-backed key-value local store."""

from collections.abc import Mapping

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.local_store import LocalStoreError, LocalStorePort
from src.infrastructure.logging.logger import get_app_logger


CREATE_LOCAL_STORE_SQL = """
CREATE TABLE IF NOT EXISTS local_store (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL
)
"""

SELECT_VALUE_SQL = text("SELECT value FROM local_store WHERE key = :key")

UPSERT_VALUE_SQL = text(
    """
    INSERT INTO local_store (key, value)
    VALUES (:key, :value)
    ON CONFLICT (key) DO UPDATE SET value = excluded.value
    """
)


class SqlAlchemyLocalStore(LocalStorePort):
    """Local store keeping one serialized value per key in a single table.

    Every write runs in its own transaction, so a failed write leaves the
    previously committed values in place.
    """

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing access to the local store engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()
        self._table_ready = False

    def read(self, key: str) -> str | None:
        """Return the raw value stored under ``key``.

        Args:
            key: Store key.

        Returns:
            str | None: Raw value, or None when the key was never written.

        Raises:
            LocalStoreError: If the database cannot be read.
        """
        try:
            self._ensure_table()
            engine = self._db_port.get_local_engine()
            with engine.connect() as conn:
                row = conn.execute(SELECT_VALUE_SQL, {"key": key}).first()
        except SQLAlchemyError as exc:
            self._logger.error(f"Local store read failed for '{key}': {exc}")
            raise LocalStoreError(f"Could not read '{key}'") from exc
        if row is None:
            return None
        return row.value

    def write(self, key: str, raw: str) -> None:
        """Overwrite a single key.

        Args:
            key: Store key.
            raw: Serialized value.

        Raises:
            LocalStoreError: If the value could not be persisted.
        """
        self.write_many({key: raw})

    def write_many(self, entries: Mapping[str, str]) -> None:
        """Overwrite several keys in one transaction.

        Args:
            entries: Mapping of store keys to serialized values.

        Raises:
            LocalStoreError: If any value could not be persisted; none of the
            entries are kept in that case.
        """
        if not entries:
            return
        payload = [{"key": key, "value": raw} for key, raw in entries.items()]
        try:
            self._ensure_table()
            engine = self._db_port.get_local_engine()
            with engine.begin() as conn:
                conn.execute(UPSERT_VALUE_SQL, payload)
        except SQLAlchemyError as exc:
            keys = ", ".join(entries)
            self._logger.error(f"Local store write failed for {keys}: {exc}")
            raise LocalStoreError(f"Could not write {keys}") from exc

    def _ensure_table(self) -> None:
        """Create the local_store table if it does not exist."""
        if self._table_ready:
            return
        engine = self._db_port.get_local_engine()
        with engine.begin() as conn:
            conn.exec_driver_sql(CREATE_LOCAL_STORE_SQL)
        self._table_ready = True


__all__ = [
    "SqlAlchemyLocalStore",
    "CREATE_LOCAL_STORE_SQL",
    "SELECT_VALUE_SQL",
    "UPSERT_VALUE_SQL",
]
