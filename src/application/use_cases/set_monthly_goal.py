"""Use case to update the monthly income goal."""

from decimal import Decimal

from src.application.ports.repositories import PreferencesRepositoryPort
from src.utils.decimal_utils import coerce_decimal


class SetMonthlyGoalUseCase:
    """Store a new monthly goal locally."""

    def __init__(self, preferences: PreferencesRepositoryPort) -> None:
        self._preferences = preferences

    def execute(self, amount: Decimal | int | float | str) -> Decimal:
        """Persist the goal and return it as a Decimal.

        Raises:
            EntityValidationError: If the amount is not positive.
            LocalStoreError: If the value could not be persisted.
        """
        goal = coerce_decimal(amount)
        self._preferences.set_monthly_goal(goal)
        return goal


__all__ = ["SetMonthlyGoalUseCase"]
