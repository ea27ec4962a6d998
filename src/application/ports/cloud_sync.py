"""Ports for best-effort replication to the remote document store."""

from collections.abc import Sequence
from typing import Any, Protocol

from src.domain.constants import EntityKind


class RemoteStoreError(RuntimeError):
    """Raised when the remote endpoint rejects or fails a request."""


class RemoteDocumentPort(Protocol):
    """Transport to an endpoint storing one whole collection per kind."""

    async def send_collection(
        self,
        kind: str,
        records: list[dict[str, Any]],
    ) -> None:
        """Transmit the full serialized collection for ``kind``."""

    async def fetch_snapshot(self) -> Any:
        """Return the decoded snapshot of every stored collection."""


class CloudSyncPort(Protocol):
    """Port used by repositories to replicate their collections."""

    def push(self, kind: EntityKind, collection: Sequence[Any]) -> None:
        """Schedule a best-effort push and return immediately."""

    async def pull(self) -> bool:
        """Replace local collections from the remote snapshot."""


__all__ = [
    "RemoteStoreError",
    "RemoteDocumentPort",
    "CloudSyncPort",
]
