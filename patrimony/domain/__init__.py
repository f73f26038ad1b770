"""Domain package for business rules and core models."""

from .constants import (
    ALL_TYPES,
    CHANGE_EPSILON,
    DEFAULT_ACCOUNT_TYPE,
    DEFAULT_ACCOUNT_TYPES,
    GROUP_BY_ACCOUNT,
    GROUP_BY_TYPE,
    TOTAL_ONLY,
)
from .errors import (
    NotFoundError,
    PatrimonyError,
    StorageError,
    UploadError,
    ValidationError,
)
from .models import (
    Account,
    AccountChange,
    Composition,
    CompositionItem,
    Document,
    HistoryEntry,
    SeriesRow,
    SeriesSelection,
    Timeframe,
    TotalChange,
)

__all__ = [
    "ALL_TYPES",
    "CHANGE_EPSILON",
    "DEFAULT_ACCOUNT_TYPE",
    "DEFAULT_ACCOUNT_TYPES",
    "GROUP_BY_ACCOUNT",
    "GROUP_BY_TYPE",
    "TOTAL_ONLY",
    "NotFoundError",
    "PatrimonyError",
    "StorageError",
    "UploadError",
    "ValidationError",
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
