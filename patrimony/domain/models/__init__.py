"""Domain models package."""

from .accounts import Account
from .finance import (
    AccountChange,
    Composition,
    CompositionItem,
    SeriesRow,
    SeriesSelection,
    TotalChange,
)
from .history import Document, HistoryEntry
from .timeframes import Timeframe

__all__ = [
    "Account",
    "AccountChange",
    "Composition",
    "CompositionItem",
    "Document",
    "HistoryEntry",
    "SeriesRow",
    "SeriesSelection",
    "Timeframe",
    "TotalChange",
]
