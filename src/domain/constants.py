"""Domain constants for the dashboard collections."""

from decimal import Decimal
from enum import Enum


class EntityKind(str, Enum):
    """Collections replicated to the remote document store."""

    TASKS = "tasks"
    TRANSACTIONS = "transactions"
    FOLDERS = "folders"
    FILES = "files"


ROOT_FOLDER_ID = "root"

DEFAULT_MONTHLY_GOAL = Decimal("10000")

INCOME_CATEGORIES = (
    "Design",
    "Trafego Pago",
    "Branding",
    "Social Media",
)

EXPENSE_CATEGORIES = (
    "Software",
    "Marketing",
    "Impostos",
    "Outros",
)


__all__ = [
    "EntityKind",
    "ROOT_FOLDER_ID",
    "DEFAULT_MONTHLY_GOAL",
    "INCOME_CATEGORIES",
    "EXPENSE_CATEGORIES",
]
