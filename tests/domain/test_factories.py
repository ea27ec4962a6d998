"""Tests for the entity factories."""

from datetime import date, datetime, timezone
from decimal import Decimal

from src.domain.constants import ROOT_FOLDER_ID
from src.domain.models import FileType, Priority, TransactionType
from src.domain.services.factories import (
    create_file_item,
    create_folder,
    create_task,
    create_transaction,
)


def _fixed_clock() -> datetime:
    return datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


def test_create_task_assigns_fresh_identity() -> None:
    """Each created task should get its own id and creation time."""
    first = create_task(
        "Draft logo",
        "Acme",
        date(2024, 6, 1),
        Priority.HIGH,
        clock=_fixed_clock,
    )
    second = create_task("Draft logo", "Acme", date(2024, 6, 1))

    assert first.id != second.id
    assert first.created_at == 1717243200000
    assert first.completed is False
    assert first.priority is Priority.HIGH


def test_create_transaction_derives_month_from_date() -> None:
    """The month key should follow the transaction date."""
    transaction = create_transaction(
        "Brand kit",
        "1250.00",
        TransactionType.INCOME,
        " Branding ",
        date(2024, 11, 3),
    )

    assert transaction.month == "2024-11"
    assert transaction.amount == Decimal("1250.00")
    assert transaction.category == "Branding"


def test_create_file_item_defaults_to_root_note() -> None:
    """Files without a folder should land at the root."""
    file_item = create_file_item("Ideas", clock=_fixed_clock)
    folder = create_folder("  Clients ", clock=_fixed_clock)

    assert file_item.folder_id == ROOT_FOLDER_ID
    assert file_item.type is FileType.NOTE
    assert folder.name == "Clients"
