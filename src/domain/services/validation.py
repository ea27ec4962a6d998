"""Domain validation helpers.

Repositories call these before persisting so that invalid entities never
reach the local store.
"""

from logging import Logger

from src.domain.constants import (
    EXPENSE_CATEGORIES,
    INCOME_CATEGORIES,
    ROOT_FOLDER_ID,
)
from src.domain.models import (
    FileItem,
    FileType,
    Folder,
    Priority,
    Task,
    Transaction,
    TransactionType,
)
from src.domain.services.normalization import is_month_key, month_key


class EntityValidationError(ValueError):
    """Raised when an entity violates a domain invariant."""


def _require_id(entity_id: str, kind: str) -> None:
    if not isinstance(entity_id, str) or not entity_id.strip():
        raise EntityValidationError(f"{kind} id must be a non-empty string")


def validate_task(task: Task) -> None:
    """Validate task invariants.

    Args:
        task: Task to validate.

    Raises:
        EntityValidationError: If the id or priority is invalid.
    """
    _require_id(task.id, "Task")
    if not isinstance(task.priority, Priority):
        raise EntityValidationError(
            f"Unknown task priority: {task.priority!r}"
        )


def validate_transaction(
    transaction: Transaction,
    logger: Logger | None = None,
) -> None:
    """Validate transaction invariants.

    Args:
        transaction: Transaction to validate.
        logger: Optional logger used to flag unconventional categories.

    Raises:
        EntityValidationError: If the amount, type or month is invalid.
    """
    _require_id(transaction.id, "Transaction")
    if not isinstance(transaction.type, TransactionType):
        raise EntityValidationError(
            f"Unknown transaction type: {transaction.type!r}"
        )
    if transaction.amount <= 0:
        raise EntityValidationError(
            f"Transaction amount must be positive, got {transaction.amount}"
        )
    if not is_month_key(transaction.month):
        raise EntityValidationError(
            f"Invalid month key: {transaction.month!r}"
        )
    expected_month = month_key(transaction.date)
    if transaction.month != expected_month:
        raise EntityValidationError(
            f"Transaction month {transaction.month} does not match "
            f"date {transaction.date.isoformat()}"
        )
    if logger is not None:
        known = (
            INCOME_CATEGORIES
            if transaction.type is TransactionType.INCOME
            else EXPENSE_CATEGORIES
        )
        if transaction.category not in known:
            logger.warning(
                f"Unconventional {transaction.type.value} category "
                f"'{transaction.category}' for transaction {transaction.id}"
            )


def validate_folder(folder: Folder) -> None:
    """Validate folder invariants."""
    _require_id(folder.id, "Folder")
    if folder.id == ROOT_FOLDER_ID:
        raise EntityValidationError(
            f"'{ROOT_FOLDER_ID}' is reserved for the root folder"
        )
    if not folder.name or not folder.name.strip():
        raise EntityValidationError("Folder name must not be empty")


def validate_file_item(file_item: FileItem) -> None:
    """Validate file item invariants.

    The folder reference is not checked against existing folders; orphaned
    references are resolved to the root folder when displayed.
    """
    _require_id(file_item.id, "FileItem")
    if not isinstance(file_item.type, FileType):
        raise EntityValidationError(f"Unknown file type: {file_item.type!r}")
    if not file_item.folder_id:
        raise EntityValidationError("FileItem folder_id must not be empty")


__all__ = [
    "EntityValidationError",
    "validate_task",
    "validate_transaction",
    "validate_folder",
    "validate_file_item",
]
