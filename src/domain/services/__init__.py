"""Domain services package."""

from .agenda import build_daily_agenda, sort_by_date, sort_by_priority
from .finance import compute_category_breakdown, compute_financial_summary
from .normalization import is_month_key, month_key, normalize_category
from .validation import (
    EntityValidationError,
    validate_file_item,
    validate_folder,
    validate_task,
    validate_transaction,
)

__all__ = [
    "build_daily_agenda",
    "sort_by_date",
    "sort_by_priority",
    "compute_category_breakdown",
    "compute_financial_summary",
    "is_month_key",
    "month_key",
    "normalize_category",
    "EntityValidationError",
    "validate_file_item",
    "validate_folder",
    "validate_task",
    "validate_transaction",
]
