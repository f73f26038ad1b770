"""Domain services package."""

from .aggregation import (
    HistorySeries,
    compute_account_change,
    compute_account_changes,
    compute_change_vs_previous,
    compute_current_total,
    filter_series,
    latest_and_previous,
    order_history,
    select_series,
)
from .composition import (
    build_composition,
    compose_by_account,
    compose_by_type,
    composition_total,
    share_of,
)
from .mutations import (
    add_account,
    delete_account,
    edit_account,
    new_account_id,
    record_balances,
    seed_balances,
)
from .validation import is_valid_account_name, validate_account

__all__ = [
    "HistorySeries",
    "compute_account_change",
    "compute_account_changes",
    "compute_change_vs_previous",
    "compute_current_total",
    "filter_series",
    "latest_and_previous",
    "order_history",
    "select_series",
    "build_composition",
    "compose_by_account",
    "compose_by_type",
    "composition_total",
    "share_of",
    "add_account",
    "delete_account",
    "edit_account",
    "new_account_id",
    "record_balances",
    "seed_balances",
    "is_valid_account_name",
    "validate_account",
]
