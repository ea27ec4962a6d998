"""Use case to compute the monthly financial summary."""

from src.application.ports.repositories import (
    PreferencesRepositoryPort,
    TransactionsRepositoryPort,
)
from src.domain.models import (
    CategoryAmount,
    FinancialSummary,
    TransactionType,
)
from src.domain.services.finance import (
    compute_category_breakdown,
    compute_financial_summary,
)
from src.infrastructure.logging.logger import get_app_logger


class GetFinancialSummaryUseCase:
    """Compute income, expense and goal figures for a month.

    The use case only reads; it never writes to the store or pushes.
    """

    def __init__(
        self,
        transactions: TransactionsRepositoryPort,
        preferences: PreferencesRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            transactions: Repository providing the transaction collection.
            preferences: Repository providing the monthly goal.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._transactions = transactions
        self._preferences = preferences
        self._logger = logger or get_app_logger()

    def execute(self, month: str) -> FinancialSummary:
        """Return the summary for a month key.

        Args:
            month: Month key (YYYY-MM).

        Returns:
            FinancialSummary: Totals and the stored or default goal.
        """
        transactions = self._transactions.list_for_month(month)
        summary = compute_financial_summary(
            transactions,
            month=month,
            monthly_goal=self._preferences.get_monthly_goal(),
        )
        self._logger.info(
            f"Financial summary for {month}: income={summary.total_income}, "
            f"expense={summary.total_expense}, balance={summary.balance}"
        )
        return summary

    def expense_breakdown(self, month: str) -> list[CategoryAmount]:
        """Return expenses per category for a month, largest first."""
        return compute_category_breakdown(
            self._transactions.list_for_month(month),
            month=month,
            transaction_type=TransactionType.EXPENSE,
        )


__all__ = ["GetFinancialSummaryUseCase", "FinancialSummary"]
