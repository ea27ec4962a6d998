"""Tests for the GetFinancialSummaryUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.get_financial_summary import (
    GetFinancialSummaryUseCase,
)
from src.domain.constants import DEFAULT_MONTHLY_GOAL
from src.domain.models import CategoryAmount, Transaction, TransactionType
from src.infrastructure.preferences_repository import PreferencesRepository
from src.infrastructure.transactions_repository import TransactionsRepository


def _transaction(
    transaction_id: str,
    amount: str,
    transaction_type: TransactionType,
    category: str = "Design",
    day: date = date(2024, 6, 5),
) -> Transaction:
    return Transaction(
        id=transaction_id,
        description="Entry",
        amount=Decimal(amount),
        type=transaction_type,
        category=category,
        date=day,
        month=f"{day.year:04d}-{day.month:02d}",
    )


def _build(local_store, recording_sync):
    transactions = TransactionsRepository(
        local_store,
        recording_sync,
        logger=MagicMock(),
    )
    preferences = PreferencesRepository(local_store, logger=MagicMock())
    use_case = GetFinancialSummaryUseCase(
        transactions,
        preferences,
        logger=MagicMock(),
    )
    return transactions, preferences, use_case


def test_summary_uses_stored_transactions_and_goal(
    local_store,
    recording_sync,
) -> None:
    """Balance should be income minus expense for the month."""
    transactions, preferences, use_case = _build(local_store, recording_sync)
    transactions.upsert(_transaction("a", "1500", TransactionType.INCOME))
    transactions.upsert(
        _transaction("b", "250.50", TransactionType.EXPENSE, "Software")
    )
    transactions.upsert(
        _transaction(
            "c",
            "999",
            TransactionType.INCOME,
            day=date(2024, 5, 31),
        )
    )
    preferences.set_monthly_goal(Decimal("3000"))

    summary = use_case.execute("2024-06")

    assert summary.total_income == Decimal("1500")
    assert summary.total_expense == Decimal("250.50")
    assert summary.balance == Decimal("1249.50")
    assert summary.monthly_goal == Decimal("3000")
    assert summary.goal_progress == Decimal("50")


def test_summary_defaults_goal_when_none_stored(
    local_store,
    recording_sync,
) -> None:
    """An empty store should yield zero totals and the default goal."""
    _, _, use_case = _build(local_store, recording_sync)

    summary = use_case.execute("2024-06")

    assert summary.total_income == Decimal("0")
    assert summary.total_expense == Decimal("0")
    assert summary.monthly_goal == DEFAULT_MONTHLY_GOAL


def test_expense_breakdown_orders_largest_first(
    local_store,
    recording_sync,
) -> None:
    transactions, _, use_case = _build(local_store, recording_sync)
    transactions.upsert(
        _transaction("a", "40", TransactionType.EXPENSE, "Software")
    )
    transactions.upsert(
        _transaction("b", "120", TransactionType.EXPENSE, "Equipment")
    )
    transactions.upsert(
        _transaction("c", "30", TransactionType.EXPENSE, "Software")
    )
    transactions.upsert(_transaction("d", "900", TransactionType.INCOME))

    breakdown = use_case.expense_breakdown("2024-06")

    assert breakdown == [
        CategoryAmount(category="Equipment", amount=Decimal("120")),
        CategoryAmount(category="Software", amount=Decimal("70")),
    ]


def test_summary_does_not_push(local_store, recording_sync) -> None:
    """Reading the summary should never replicate anything."""
    _, _, use_case = _build(local_store, recording_sync)

    use_case.execute("2024-06")

    assert recording_sync.pushes == []
