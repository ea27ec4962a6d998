"""Factories assigning identity and creation time to new entities."""

from collections.abc import Callable
from datetime import date, datetime, timezone
from decimal import Decimal
import uuid

from src.domain.constants import ROOT_FOLDER_ID
from src.domain.models import (
    FileItem,
    FileType,
    Folder,
    Priority,
    Task,
    Transaction,
    TransactionType,
)
from src.domain.services.normalization import month_key, normalize_category
from src.utils.decimal_utils import coerce_decimal


Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def new_entity_id() -> str:
    """Return a fresh opaque identifier."""
    return uuid.uuid4().hex


def epoch_millis(moment: datetime) -> int:
    """Convert an instant to epoch milliseconds."""
    return int(moment.timestamp() * 1000)


def create_task(
    title: str,
    project: str,
    day: date,
    priority: Priority = Priority.MEDIUM,
    description: str | None = None,
    clock: Clock = utc_now,
) -> Task:
    """Create a pending task with a fresh id."""
    return Task(
        id=new_entity_id(),
        title=title,
        project=project,
        date=day,
        priority=Priority(priority),
        completed=False,
        created_at=epoch_millis(clock()),
        description=description,
    )


def create_transaction(
    description: str,
    amount: Decimal | int | float | str,
    transaction_type: TransactionType,
    category: str,
    day: date,
) -> Transaction:
    """Create a transaction whose month key is derived from its day."""
    return Transaction(
        id=new_entity_id(),
        description=description,
        amount=coerce_decimal(amount),
        type=TransactionType(transaction_type),
        category=normalize_category(category),
        date=day,
        month=month_key(day),
    )


def create_folder(name: str, clock: Clock = utc_now) -> Folder:
    """Create a folder with a fresh id."""
    return Folder(
        id=new_entity_id(),
        name=name.strip(),
        created_at=epoch_millis(clock()),
    )


def create_file_item(
    title: str,
    content: str = "",
    file_type: FileType = FileType.NOTE,
    folder_id: str | None = None,
    clock: Clock = utc_now,
) -> FileItem:
    """Create a note or document, placed at the root when no folder is given."""
    return FileItem(
        id=new_entity_id(),
        folder_id=folder_id or ROOT_FOLDER_ID,
        title=title,
        content=content,
        type=FileType(file_type),
        created_at=epoch_millis(clock()),
    )


__all__ = [
    "Clock",
    "utc_now",
    "new_entity_id",
    "epoch_millis",
    "create_task",
    "create_transaction",
    "create_folder",
    "create_file_item",
]
