"""Local-store repository for scalar preferences."""

import json
from decimal import Decimal

from src.application.ports.local_store import LocalStorePort, StoreKey
from src.application.ports.repositories import PreferencesRepositoryPort
from src.domain.constants import DEFAULT_MONTHLY_GOAL
from src.domain.services.normalization import is_month_key
from src.domain.services.validation import EntityValidationError
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.record_codec import RecordDecodeError
from src.utils.decimal_utils import coerce_decimal, decimal_to_number


class PreferencesRepository(PreferencesRepositoryPort):
    """Stores the monthly goal and the last-seen month marker.

    These scalars stay local; they are never pushed to the remote mirror.
    """

    def __init__(self, store: LocalStorePort, logger=None) -> None:
        self._store = store
        self._logger = logger or get_app_logger()

    def get_monthly_goal(self) -> Decimal:
        """Return the stored goal, or the default when none was stored."""
        raw = self._store.read(StoreKey.MONTHLY_GOAL)
        if raw is None:
            return DEFAULT_MONTHLY_GOAL
        try:
            return coerce_decimal(json.loads(raw))
        except (ValueError, TypeError, ArithmeticError) as exc:
            raise RecordDecodeError(
                f"Stored monthly goal is invalid: {raw!r}"
            ) from exc

    def set_monthly_goal(self, amount: Decimal) -> None:
        """Store a new monthly goal.

        Raises:
            EntityValidationError: If the amount is not positive.
            LocalStoreError: If the value could not be persisted.
        """
        goal = coerce_decimal(amount)
        if goal <= 0:
            raise EntityValidationError(
                f"Monthly goal must be positive, got {goal}"
            )
        self._store.write(
            StoreKey.MONTHLY_GOAL,
            json.dumps(decimal_to_number(goal)),
        )
        self._logger.info(f"Monthly goal set to {goal}")

    def get_last_login_month(self) -> str | None:
        raw = self._store.read(StoreKey.LAST_LOGIN_MONTH)
        if raw is None:
            return None
        try:
            value = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise RecordDecodeError(
                f"Stored last login month is invalid: {raw!r}"
            ) from exc
        return str(value) if value else None

    def set_last_login_month(self, month: str) -> None:
        if not is_month_key(month):
            raise EntityValidationError(f"Invalid month key: {month!r}")
        self._store.write(StoreKey.LAST_LOGIN_MONTH, json.dumps(month))


__all__ = ["PreferencesRepository"]
