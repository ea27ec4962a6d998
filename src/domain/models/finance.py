"""Domain models for income and expense tracking."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum


class TransactionType(str, Enum):
    """Direction of a transaction."""

    INCOME = "income"
    EXPENSE = "expense"


@dataclass(frozen=True)
class Transaction:
    """A single income or expense entry.

    Attributes:
        id: Opaque identifier assigned at creation time.
        description: Free-text label.
        amount: Strictly positive amount.
        type: Income or expense.
        category: Free-text category, conventionally one of the fixed sets.
        date: Calendar day of the transaction.
        month: Month key (YYYY-MM) derived from ``date``.
    """

    id: str
    description: str
    amount: Decimal
    type: TransactionType
    category: str
    date: date
    month: str


@dataclass(frozen=True)
class FinancialSummary:
    """Income and expense totals for a month."""

    month: str
    total_income: Decimal
    total_expense: Decimal
    monthly_goal: Decimal

    @property
    def balance(self) -> Decimal:
        """Return total_income minus total_expense."""
        return self.total_income - self.total_expense

    @property
    def goal_progress(self) -> Decimal:
        """Return income as a percentage of the goal, capped at 100."""
        if self.monthly_goal <= 0:
            return Decimal("0")
        progress = self.total_income / self.monthly_goal * Decimal("100")
        return min(Decimal("100"), progress)


@dataclass(frozen=True)
class CategoryAmount:
    """Amount aggregated for a given category."""

    category: str
    amount: Decimal


__all__ = [
    "TransactionType",
    "Transaction",
    "FinancialSummary",
    "CategoryAmount",
]
