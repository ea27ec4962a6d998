"""Local-store repositories for folders and file items."""

from __future__ import annotations

from collections.abc import Iterable

from src.application.ports.cloud_sync import CloudSyncPort
from src.application.ports.local_store import LocalStorePort
from src.application.ports.repositories import (
    FileItemsRepositoryPort,
    FoldersRepositoryPort,
)
from src.domain.constants import ROOT_FOLDER_ID, EntityKind
from src.domain.models import FileItem, Folder
from src.domain.services.validation import (
    EntityValidationError,
    validate_file_item,
    validate_folder,
)
from src.infrastructure.collection_repository import CollectionRepository


class FileItemsRepository(
    CollectionRepository[FileItem],
    FileItemsRepositoryPort,
):
    """Repository for notes and documents."""

    kind = EntityKind.FILES

    def list_in_folder(self, folder_id: str | None) -> list[FileItem]:
        """Return file items stored in a folder.

        Args:
            folder_id: Folder id, or None for the root folder.

        Returns:
            list[FileItem]: Matching items in stored order.
        """
        target = folder_id or ROOT_FOLDER_ID
        return self.list(lambda file_item: file_item.folder_id == target)

    def _validate(self, entity: FileItem) -> None:
        validate_file_item(entity)


class FoldersRepository(CollectionRepository[Folder], FoldersRepositoryPort):
    """Repository for folders; deleting a folder removes its file items."""

    kind = EntityKind.FOLDERS

    def __init__(
        self,
        store: LocalStorePort,
        sync: CloudSyncPort,
        files: FileItemsRepository,
        logger=None,
    ) -> None:
        """Initialize the repository.

        Args:
            store: Local store holding both collections.
            sync: Gateway receiving a push after each mutation.
            files: Repository owning the file items cascaded on delete.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        super().__init__(store, sync, logger=logger)
        self._files = files

    def delete_by_id(self, entity_id: str) -> None:
        """Remove a folder and every file item it contains.

        Both collections are written in one store transaction, so either both
        changes are persisted or neither is. Pushes for folders and files are
        issued only after the write succeeded.

        Raises:
            EntityValidationError: If ``entity_id`` is the root sentinel.
            LocalStoreError: If the collections could not be persisted.
        """
        if entity_id == ROOT_FOLDER_ID:
            raise EntityValidationError("The root folder cannot be deleted")
        folders = [folder for folder in self._load() if folder.id != entity_id]
        files = self._files.list()
        remaining = [
            file_item for file_item in files if file_item.folder_id != entity_id
        ]
        self._store.write_many(
            {
                self.store_key: self._dumps(folders),
                self._files.store_key: self._files._dumps(remaining),
            }
        )
        self._push(EntityKind.FOLDERS, folders)
        self._push(EntityKind.FILES, remaining)
        self._logger.info(
            f"Deleted folder {entity_id} and "
            f"{len(files) - len(remaining)} file items"
        )

    def _validate(self, entity: Folder) -> None:
        validate_folder(entity)


def resolve_folder_id(file_item: FileItem, folders: Iterable[Folder]) -> str:
    """Return the file's folder id, or the root when the folder is gone."""
    if file_item.folder_id == ROOT_FOLDER_ID:
        return ROOT_FOLDER_ID
    known_ids = {folder.id for folder in folders}
    if file_item.folder_id in known_ids:
        return file_item.folder_id
    return ROOT_FOLDER_ID


__all__ = ["FileItemsRepository", "FoldersRepository", "resolve_folder_id"]
