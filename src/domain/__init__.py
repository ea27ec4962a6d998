"""Domain package for business rules and core models."""

from .constants import (
    DEFAULT_MONTHLY_GOAL,
    EXPENSE_CATEGORIES,
    INCOME_CATEGORIES,
    ROOT_FOLDER_ID,
    EntityKind,
)
from .models import (
    CategoryAmount,
    DailyAgenda,
    FileItem,
    FileType,
    FinancialSummary,
    Folder,
    Priority,
    Task,
    Transaction,
    TransactionType,
)
from .services import (
    EntityValidationError,
    build_daily_agenda,
    compute_category_breakdown,
    compute_financial_summary,
    month_key,
)

__all__ = [
    "DEFAULT_MONTHLY_GOAL",
    "EXPENSE_CATEGORIES",
    "INCOME_CATEGORIES",
    "ROOT_FOLDER_ID",
    "EntityKind",
    "CategoryAmount",
    "DailyAgenda",
    "FileItem",
    "FileType",
    "FinancialSummary",
    "Folder",
    "Priority",
    "Task",
    "Transaction",
    "TransactionType",
    "EntityValidationError",
    "build_daily_agenda",
    "compute_category_breakdown",
    "compute_financial_summary",
    "month_key",
]
