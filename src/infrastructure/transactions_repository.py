"""Local-store repository for income and expense transactions."""

from __future__ import annotations

from src.application.ports.repositories import TransactionsRepositoryPort
from src.domain.constants import EntityKind
from src.domain.models import Transaction
from src.domain.services.validation import validate_transaction
from src.infrastructure.collection_repository import CollectionRepository


class TransactionsRepository(
    CollectionRepository[Transaction],
    TransactionsRepositoryPort,
):
    """Repository for the transaction collection."""

    kind = EntityKind.TRANSACTIONS

    def list_for_month(self, month: str) -> list[Transaction]:
        """Return transactions whose month key equals ``month``."""
        return self.list(lambda transaction: transaction.month == month)

    def add_transaction(self, transaction: Transaction) -> None:
        self.upsert(transaction)

    def _validate(self, entity: Transaction) -> None:
        validate_transaction(entity, logger=self._logger)


__all__ = ["TransactionsRepository"]
