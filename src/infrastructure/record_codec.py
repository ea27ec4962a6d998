"""JSON record codec shared by the local store and the remote mirror.

Records use the camelCase field names of the remote spreadsheet
(``createdAt``, ``folderId``), ISO calendar dates and plain JSON numbers, so
the same text can be stored locally and pushed unchanged.
"""

from collections.abc import Callable, Iterable, Mapping
from datetime import date
import json
from typing import Any

from src.domain.constants import ROOT_FOLDER_ID, EntityKind
from src.domain.models import (
    FileItem,
    FileType,
    Folder,
    Priority,
    Task,
    Transaction,
    TransactionType,
)
from src.domain.services.normalization import month_key
from src.utils.decimal_utils import coerce_decimal, decimal_to_number


Record = dict[str, Any]


class RecordDecodeError(ValueError):
    """Raised when a stored or remote record cannot be decoded."""


def _parse_day(value: Any) -> date:
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def encode_task(task: Task) -> Record:
    record: Record = {
        "id": task.id,
        "title": task.title,
        "project": task.project,
        "date": task.date.isoformat(),
        "priority": task.priority.value,
        "completed": task.completed,
        "createdAt": task.created_at,
    }
    if task.description is not None:
        record["description"] = task.description
    return record


def decode_task(record: Mapping[str, Any]) -> Task:
    return Task(
        id=str(record["id"]),
        title=str(record.get("title", "")),
        project=str(record.get("project", "")),
        date=_parse_day(record["date"]),
        priority=Priority(record.get("priority", Priority.MEDIUM.value)),
        completed=bool(record.get("completed", False)),
        created_at=int(record.get("createdAt") or 0),
        description=record.get("description"),
    )


def encode_transaction(transaction: Transaction) -> Record:
    return {
        "id": transaction.id,
        "description": transaction.description,
        "amount": decimal_to_number(transaction.amount),
        "type": transaction.type.value,
        "category": transaction.category,
        "date": transaction.date.isoformat(),
        "month": transaction.month,
    }


def decode_transaction(record: Mapping[str, Any]) -> Transaction:
    day = _parse_day(record["date"])
    return Transaction(
        id=str(record["id"]),
        description=str(record.get("description", "")),
        amount=coerce_decimal(record["amount"]),
        type=TransactionType(record["type"]),
        category=str(record.get("category", "")),
        date=day,
        month=str(record.get("month") or month_key(day)),
    )


def encode_folder(folder: Folder) -> Record:
    return {
        "id": folder.id,
        "name": folder.name,
        "createdAt": folder.created_at,
    }


def decode_folder(record: Mapping[str, Any]) -> Folder:
    return Folder(
        id=str(record["id"]),
        name=str(record.get("name", "")),
        created_at=int(record.get("createdAt") or 0),
    )


def encode_file_item(file_item: FileItem) -> Record:
    return {
        "id": file_item.id,
        "folderId": file_item.folder_id,
        "title": file_item.title,
        "content": file_item.content,
        "type": file_item.type.value,
        "createdAt": file_item.created_at,
    }


def decode_file_item(record: Mapping[str, Any]) -> FileItem:
    return FileItem(
        id=str(record["id"]),
        folder_id=str(record.get("folderId") or ROOT_FOLDER_ID),
        title=str(record.get("title", "")),
        content=str(record.get("content", "")),
        type=FileType(record.get("type", FileType.NOTE.value)),
        created_at=int(record.get("createdAt") or 0),
    )


ENCODERS: dict[EntityKind, Callable[[Any], Record]] = {
    EntityKind.TASKS: encode_task,
    EntityKind.TRANSACTIONS: encode_transaction,
    EntityKind.FOLDERS: encode_folder,
    EntityKind.FILES: encode_file_item,
}

DECODERS: dict[EntityKind, Callable[[Mapping[str, Any]], Any]] = {
    EntityKind.TASKS: decode_task,
    EntityKind.TRANSACTIONS: decode_transaction,
    EntityKind.FOLDERS: decode_folder,
    EntityKind.FILES: decode_file_item,
}


def encode_collection(kind: EntityKind, entities: Iterable[Any]) -> list[Record]:
    """Encode entities of one kind into JSON-ready records."""
    encoder = ENCODERS[EntityKind(kind)]
    return [encoder(entity) for entity in entities]


def decode_collection(kind: EntityKind, records: Any) -> list[Any]:
    """Decode a JSON array of records of one kind.

    Args:
        kind: Entity kind the records belong to.
        records: Decoded JSON value, expected to be a list of objects.

    Returns:
        list[Any]: Entities in record order.

    Raises:
        RecordDecodeError: If the value is not a list of valid records.
    """
    kind = EntityKind(kind)
    if not isinstance(records, list):
        raise RecordDecodeError(
            f"Expected a list of {kind.value}, got {type(records).__name__}"
        )
    decoder = DECODERS[kind]
    entities = []
    for index, record in enumerate(records):
        if not isinstance(record, Mapping):
            raise RecordDecodeError(
                f"{kind.value}[{index}] is not an object"
            )
        try:
            entities.append(decoder(record))
        except (KeyError, TypeError, ValueError, ArithmeticError) as exc:
            raise RecordDecodeError(
                f"{kind.value}[{index}] is invalid: {exc!r}"
            ) from exc
    return entities


def dumps_collection(kind: EntityKind, entities: Iterable[Any]) -> str:
    """Serialize a collection to JSON text."""
    return json.dumps(encode_collection(kind, entities), ensure_ascii=False)


def loads_collection(kind: EntityKind, raw: str | None) -> list[Any]:
    """Deserialize JSON text into a collection; None yields an empty list.

    Raises:
        RecordDecodeError: If the text is not a valid collection.
    """
    if raw is None:
        return []
    try:
        records = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise RecordDecodeError(
            f"Stored {EntityKind(kind).value} are not valid JSON"
        ) from exc
    return decode_collection(kind, records)


__all__ = [
    "Record",
    "RecordDecodeError",
    "encode_task",
    "decode_task",
    "encode_transaction",
    "decode_transaction",
    "encode_folder",
    "decode_folder",
    "encode_file_item",
    "decode_file_item",
    "encode_collection",
    "decode_collection",
    "dumps_collection",
    "loads_collection",
]
