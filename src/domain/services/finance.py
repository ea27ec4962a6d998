"""Domain services for monthly finance aggregates."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.models import (
    CategoryAmount,
    FinancialSummary,
    Transaction,
    TransactionType,
)
from src.utils.decimal_utils import coerce_decimal


def compute_financial_summary(
    transactions: Iterable[Transaction],
    *,
    month: str,
    monthly_goal: Decimal,
) -> FinancialSummary:
    """Compute income and expense totals for a month.

    Transactions outside ``month`` are ignored, so the full collection can be
    passed in.

    Args:
        transactions: Transactions to aggregate.
        month: Month key (YYYY-MM) to summarize.
        monthly_goal: Stored income goal for the month.

    Returns:
        FinancialSummary: Totals for the requested month.
    """
    total_income = Decimal("0")
    total_expense = Decimal("0")
    for transaction in transactions:
        if transaction.month != month:
            continue
        amount = coerce_decimal(transaction.amount)
        if transaction.type is TransactionType.INCOME:
            total_income += amount
        elif transaction.type is TransactionType.EXPENSE:
            total_expense += amount
    return FinancialSummary(
        month=month,
        total_income=total_income,
        total_expense=total_expense,
        monthly_goal=coerce_decimal(monthly_goal),
    )


def compute_category_breakdown(
    transactions: Iterable[Transaction],
    *,
    month: str,
    transaction_type: TransactionType = TransactionType.EXPENSE,
) -> list[CategoryAmount]:
    """Aggregate amounts per category for a month.

    Args:
        transactions: Transactions to aggregate.
        month: Month key (YYYY-MM) to summarize.
        transaction_type: Which side of the ledger to aggregate.

    Returns:
        list[CategoryAmount]: Categories ordered by descending amount, ties
        kept in first-seen order.
    """
    totals: dict[str, Decimal] = {}
    for transaction in transactions:
        if transaction.month != month:
            continue
        if transaction.type is not transaction_type:
            continue
        amount = coerce_decimal(transaction.amount)
        totals[transaction.category] = (
            totals.get(transaction.category, Decimal("0")) + amount
        )
    ordered = sorted(totals.items(), key=lambda item: item[1], reverse=True)
    return [
        CategoryAmount(category=category, amount=amount)
        for category, amount in ordered
    ]


__all__ = ["compute_financial_summary", "compute_category_breakdown"]
