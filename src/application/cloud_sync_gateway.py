"""Best-effort bridge between the local store and the remote mirror.

The local store is the copy of record. Pushes replicate a whole collection
after each mutation without the caller waiting for, or learning about, the
outcome. A pull runs once per session and either replaces every collection
present in the remote snapshot or leaves the store untouched.
"""

import asyncio
from collections.abc import Sequence
from typing import Any

from src.application.ports.cloud_sync import CloudSyncPort, RemoteDocumentPort
from src.application.ports.local_store import LocalStoreError, LocalStorePort
from src.domain.constants import EntityKind
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.record_codec import (
    RecordDecodeError,
    decode_collection,
    dumps_collection,
    encode_collection,
)
from src.infrastructure.settings import DEFAULT_PULL_TIMEOUT_SECONDS


class CloudSyncGateway(CloudSyncPort):
    """Replicates collections to a remote document endpoint.

    Pushes are detached ``asyncio`` tasks on the running loop. They are not
    retried, carry no sequencing token and may reach the endpoint out of
    order; only the last one to arrive for a kind survives remotely.
    """

    def __init__(
        self,
        remote: RemoteDocumentPort | None,
        store: LocalStorePort,
        pull_timeout: float = DEFAULT_PULL_TIMEOUT_SECONDS,
        logger=None,
    ) -> None:
        """Initialize the gateway.

        Args:
            remote: Remote transport, or None when synchronization is off.
            store: Local store overwritten by a successful pull.
            pull_timeout: Hard deadline in seconds for ``pull``.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._remote = remote
        self._store = store
        self._pull_timeout = pull_timeout
        self._logger = logger or get_app_logger()
        self._in_flight: set[asyncio.Task] = set()

    @property
    def enabled(self) -> bool:
        return self._remote is not None

    @property
    def pending_pushes(self) -> int:
        return len(self._in_flight)

    def push(self, kind: EntityKind, collection: Sequence[Any]) -> None:
        """Schedule a push of the full collection and return immediately.

        The collection is serialized before this method returns, so the push
        reflects the state at issue time even if later mutations follow.

        Args:
            kind: Entity kind of the collection.
            collection: Every entity of that kind, post-mutation.
        """
        kind = EntityKind(kind)
        if self._remote is None:
            self._logger.debug(
                f"[Cloud] Sync disabled, {kind.value} kept local only"
            )
            return
        try:
            records = encode_collection(kind, collection)
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            self._logger.error(
                f"[Cloud] Could not serialize {kind.value}: {exc!r}"
            )
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            self._logger.warning(
                f"[Cloud] No running event loop, push of {kind.value} skipped"
            )
            return
        task = loop.create_task(
            self._send(kind, records),
            name=f"cloud-push-{kind.value}",
        )
        self._in_flight.add(task)
        task.add_done_callback(self._in_flight.discard)

    async def pull(self) -> bool:
        """Replace local collections with the remote snapshot.

        Every collection present in the snapshot is decoded before anything
        is written, then all of them are written in one store transaction.
        Kinds missing from the snapshot keep their local copy.

        Returns:
            bool: True when the snapshot was applied, False on timeout,
            transport error, malformed snapshot or local write failure. The
            store is untouched whenever False is returned.
        """
        if self._remote is None:
            self._logger.warning("[Cloud] Sync disabled, using local data")
            return False
        try:
            snapshot = await asyncio.wait_for(
                self._remote.fetch_snapshot(),
                timeout=self._pull_timeout,
            )
        except asyncio.TimeoutError:
            self._logger.warning(
                f"[Cloud] Sync timed out after {self._pull_timeout}s, "
                "using local data"
            )
            return False
        except Exception as exc:
            self._logger.warning(
                f"[Cloud] Sync failed, using local data: {exc!r}"
            )
            return False

        if not isinstance(snapshot, dict):
            self._logger.warning(
                "[Cloud] Sync failed, snapshot is not an object: "
                f"{type(snapshot).__name__}"
            )
            return False

        entries: dict[str, str] = {}
        for kind in EntityKind:
            records = snapshot.get(kind.value)
            if records is None:
                continue
            try:
                entities = decode_collection(kind, records)
            except RecordDecodeError as exc:
                self._logger.warning(
                    f"[Cloud] Sync failed, invalid {kind.value}: {exc}"
                )
                return False
            entries[kind.value] = dumps_collection(kind, entities)

        try:
            self._store.write_many(entries)
        except LocalStoreError as exc:
            self._logger.error(
                f"[Cloud] Sync fetched data but could not store it: {exc}"
            )
            return False

        replaced = ", ".join(entries) or "nothing"
        self._logger.info(f"[Cloud] Data synced successfully ({replaced})")
        return True

    async def drain(self) -> None:
        """Wait until every in-flight push has finished."""
        while self._in_flight:
            await asyncio.gather(
                *list(self._in_flight),
                return_exceptions=True,
            )

    async def _send(self, kind: EntityKind, records: list[dict]) -> None:
        try:
            await self._remote.send_collection(kind.value, records)
        except Exception as exc:
            self._logger.error(f"[Cloud] Error saving {kind.value}: {exc!r}")
            return
        self._logger.info(
            f"[Cloud] Saved {kind.value} ({len(records)} records, background)"
        )


__all__ = ["CloudSyncGateway"]
