"""Domain models package."""

from .finance import (
    CategoryAmount,
    FinancialSummary,
    Transaction,
    TransactionType,
)
from .notes import FileItem, FileType, Folder
from .tasks import PRIORITY_ORDER, DailyAgenda, Priority, Task

__all__ = [
    "Task",
    "Priority",
    "PRIORITY_ORDER",
    "DailyAgenda",
    "Transaction",
    "TransactionType",
    "FinancialSummary",
    "CategoryAmount",
    "Folder",
    "FileItem",
    "FileType",
]
