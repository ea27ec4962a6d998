"""Application use cases package."""

from .get_daily_agenda import DailyAgenda, GetDailyAgendaUseCase
from .get_financial_summary import (
    FinancialSummary,
    GetFinancialSummaryUseCase,
)
from .session_bootstrap import (
    ConnectivityState,
    MonthRollover,
    SessionBootstrapUseCase,
    SessionState,
)
from .set_monthly_goal import SetMonthlyGoalUseCase

__all__ = [
    "DailyAgenda",
    "GetDailyAgendaUseCase",
    "FinancialSummary",
    "GetFinancialSummaryUseCase",
    "ConnectivityState",
    "MonthRollover",
    "SessionBootstrapUseCase",
    "SessionState",
    "SetMonthlyGoalUseCase",
]
