"""Base repository persisting one entity collection in the local store."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, Generic, TypeVar

from src.application.ports.cloud_sync import CloudSyncPort
from src.application.ports.local_store import LocalStorePort
from src.domain.constants import EntityKind
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.record_codec import dumps_collection, loads_collection


EntityT = TypeVar("EntityT")


class CollectionRepository(Generic[EntityT]):
    """Whole-collection CRUD facade over the local store.

    Every read loads the full collection from the store and every mutation
    rewrites it, so nothing is cached between calls. After a successful write
    the post-mutation collection is handed to the sync port as a
    fire-and-forget push.

    With the asyncio gateway, pushes only replicate when the mutation runs
    inside a running event loop. Synchronous callers still persist locally,
    but their pushes are skipped with a warning.
    """

    kind: EntityKind

    def __init__(
        self,
        store: LocalStorePort,
        sync: CloudSyncPort,
        logger=None,
    ) -> None:
        """Initialize the repository.

        Args:
            store: Local store holding the serialized collection.
            sync: Gateway receiving a push after each mutation.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._sync = sync
        self._logger = logger or get_app_logger()

    @property
    def store_key(self) -> str:
        return self.kind.value

    def list(
        self,
        predicate: Callable[[EntityT], bool] | None = None,
    ) -> list[EntityT]:
        """Return the collection in stored order.

        Args:
            predicate: Optional filter applied to every entity.

        Returns:
            list[EntityT]: Matching entities; empty when nothing was stored.
        """
        entities = self._load()
        if predicate is None:
            return entities
        return [entity for entity in entities if predicate(entity)]

    def get_by_id(self, entity_id: str) -> EntityT | None:
        for entity in self._load():
            if entity.id == entity_id:
                return entity
        return None

    def upsert(self, entity: EntityT) -> None:
        """Insert the entity, or replace the stored one with the same id.

        Replacement keeps the entity at its original position.

        Args:
            entity: Entity to persist.

        Raises:
            EntityValidationError: If the entity breaks a domain invariant.
            LocalStoreError: If the collection could not be persisted.
        """
        self._validate(entity)
        entities = self._load()
        for index, existing in enumerate(entities):
            if existing.id == entity.id:
                entities[index] = entity
                break
        else:
            entities.append(entity)
        self._save(entities)
        self._logger.info(
            f"Saved {self.kind.value} record {entity.id} "
            f"({len(entities)} stored)"
        )

    def delete_by_id(self, entity_id: str) -> None:
        """Remove the entity with ``entity_id``.

        Unknown ids still rewrite and push the unchanged collection.

        Raises:
            LocalStoreError: If the collection could not be persisted.
        """
        entities = [
            entity for entity in self._load() if entity.id != entity_id
        ]
        self._save(entities)
        self._logger.info(
            f"Deleted {self.kind.value} record {entity_id} "
            f"({len(entities)} stored)"
        )

    def _validate(self, entity: EntityT) -> None:
        """Hook for kind-specific invariants."""

    def _load(self) -> list[EntityT]:
        return loads_collection(self.kind, self._store.read(self.store_key))

    def _dumps(self, entities: Sequence[EntityT]) -> str:
        return dumps_collection(self.kind, entities)

    def _save(self, entities: Sequence[EntityT]) -> None:
        self._store.write(self.store_key, self._dumps(entities))
        self._push(self.kind, entities)

    def _push(self, kind: EntityKind, entities: Sequence[Any]) -> None:
        """Hand the collection to the sync port without surfacing failures."""
        try:
            self._sync.push(kind, list(entities))
        except Exception as exc:
            self._logger.error(
                f"Could not schedule push for {kind.value}: {exc!r}"
            )


__all__ = ["CollectionRepository"]
