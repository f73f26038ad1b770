"""Application use cases package."""

from .get_composition import GetCompositionUseCase
from .get_history_series import ChartSeries, GetHistorySeriesUseCase
from .get_patrimony_summary import (
    GetPatrimonySummaryUseCase,
    PatrimonySummary,
)
from .manage_accounts import ManageAccountsUseCase
from .record_balances import RecordBalancesUseCase

__all__ = [
    "GetCompositionUseCase",
    "ChartSeries",
    "GetHistorySeriesUseCase",
    "GetPatrimonySummaryUseCase",
    "PatrimonySummary",
    "ManageAccountsUseCase",
    "RecordBalancesUseCase",
]
