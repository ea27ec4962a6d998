"""Tests for the JSON record codec."""

from datetime import date
from decimal import Decimal

import pytest

from src.domain.constants import EntityKind
from src.domain.models import (
    FileItem,
    FileType,
    Priority,
    Task,
    Transaction,
    TransactionType,
)
from src.infrastructure.record_codec import (
    RecordDecodeError,
    decode_collection,
    encode_file_item,
    encode_task,
    encode_transaction,
    loads_collection,
)


def test_task_record_uses_wire_field_names() -> None:
    """Tasks should be encoded with camelCase keys and ISO dates."""
    task = Task(
        id="1",
        title="Draft logo",
        project="Acme",
        date=date(2024, 6, 1),
        priority=Priority.HIGH,
        completed=False,
        created_at=1717200000000,
    )

    assert encode_task(task) == {
        "id": "1",
        "title": "Draft logo",
        "project": "Acme",
        "date": "2024-06-01",
        "priority": "high",
        "completed": False,
        "createdAt": 1717200000000,
    }


def test_file_item_record_uses_folder_id_key() -> None:
    """File items should reference their folder through folderId."""
    record = encode_file_item(
        FileItem(
            id="n1",
            folder_id="root",
            title="Ideas",
            content="moodboard",
            type=FileType.DOCUMENT,
            created_at=5,
        )
    )

    assert record["folderId"] == "root"
    assert record["type"] == "document"


def test_transaction_without_month_derives_it() -> None:
    """Records missing the month key should get it from their date."""
    (transaction,) = decode_collection(
        EntityKind.TRANSACTIONS,
        [
            {
                "id": "t1",
                "description": "Logo",
                "amount": 500,
                "type": "income",
                "category": "Design",
                "date": "2024-06-12",
            }
        ],
    )

    assert transaction.month == "2024-06"
    assert transaction.amount == Decimal("500")
    assert transaction.type is TransactionType.INCOME


def test_decode_rejects_unknown_enum_values() -> None:
    """Invalid priorities should raise a decode error naming the record."""
    with pytest.raises(RecordDecodeError, match=r"tasks\[0\]"):
        decode_collection(
            EntityKind.TASKS,
            [{"id": "1", "date": "2024-06-01", "priority": "urgent"}],
        )


def test_decode_rejects_non_list_payload() -> None:
    """A collection must be a JSON array."""
    with pytest.raises(RecordDecodeError):
        decode_collection(EntityKind.FOLDERS, {"id": "f1"})


def test_loads_collection_defaults_to_empty() -> None:
    """Absent stored values should yield an empty collection."""
    assert loads_collection(EntityKind.FILES, None) == []


def test_loads_collection_rejects_corrupt_json() -> None:
    """Corrupt stored text should not be mistaken for an empty list."""
    with pytest.raises(RecordDecodeError):
        loads_collection(EntityKind.TASKS, "[{")


@pytest.mark.parametrize(
    "amount, expected",
    [
        ("500", 500),
        ("250.50", 250.5),
        ("12345678901234567.89", "12345678901234567.89"),
    ],
)
def test_transaction_amount_keeps_precision_on_the_wire(
    amount,
    expected,
) -> None:
    """Amounts stay numeric unless a float would round them."""
    record = encode_transaction(
        Transaction(
            id="t1",
            description="Retainer",
            amount=Decimal(amount),
            type=TransactionType.INCOME,
            category="Design",
            date=date(2024, 6, 12),
            month="2024-06",
        )
    )

    assert record["amount"] == expected
    assert type(record["amount"]) is type(expected)
    (decoded,) = decode_collection(EntityKind.TRANSACTIONS, [record])
    assert decoded.amount == Decimal(amount)
