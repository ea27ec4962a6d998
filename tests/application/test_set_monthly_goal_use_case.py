"""Tests for the SetMonthlyGoalUseCase."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.ports.local_store import StoreKey
from src.application.use_cases.set_monthly_goal import SetMonthlyGoalUseCase
from src.domain.services.validation import EntityValidationError
from src.infrastructure.preferences_repository import PreferencesRepository


def test_goal_is_stored_locally(local_store) -> None:
    preferences = PreferencesRepository(local_store, logger=MagicMock())

    goal = SetMonthlyGoalUseCase(preferences).execute("12500.5")

    assert goal == Decimal("12500.5")
    assert preferences.get_monthly_goal() == Decimal("12500.5")
    assert local_store.read(StoreKey.MONTHLY_GOAL) == "12500.5"


@pytest.mark.parametrize("amount", ["0", -10])
def test_non_positive_goal_is_rejected(local_store, amount) -> None:
    preferences = PreferencesRepository(local_store, logger=MagicMock())

    with pytest.raises(EntityValidationError):
        SetMonthlyGoalUseCase(preferences).execute(amount)

    assert local_store.read(StoreKey.MONTHLY_GOAL) is None
