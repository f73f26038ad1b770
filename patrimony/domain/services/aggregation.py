"""Domain services for headline totals and history chart series."""

from collections.abc import Iterable, Iterator, Sequence
from datetime import datetime
from decimal import Decimal

from patrimony.domain.constants import ALL_TYPES, TOTAL_ONLY
from patrimony.domain.models import (
    Account,
    AccountChange,
    HistoryEntry,
    SeriesRow,
    SeriesSelection,
    Timeframe,
    TotalChange,
)
from patrimony.utils.date_utils import ensure_utc, to_epoch_millis, utc_now
from patrimony.utils.decimal_utils import sum_decimals

_ZERO = Decimal("0")
_HUNDRED = Decimal("100")


def compute_current_total(accounts: Iterable[Account]) -> Decimal:
    """Return the sum of current balances, 0 for no accounts."""
    return sum_decimals(account.balance for account in accounts)


def order_history(history: Iterable[HistoryEntry]) -> list[HistoryEntry]:
    """Return history entries sorted by date, ties in original order."""
    return sorted(history, key=lambda entry: entry.date)


def latest_and_previous(
    ordered_history: Sequence[HistoryEntry],
) -> tuple[HistoryEntry | None, HistoryEntry | None]:
    """Return the last and second-to-last entries of an ordered history.

    Args:
        ordered_history: Entries sorted ascending by date.

    Returns:
        tuple: ``(latest, previous)``; either is None when missing.
    """
    latest = ordered_history[-1] if ordered_history else None
    previous = ordered_history[-2] if len(ordered_history) > 1 else None
    return latest, previous


def compute_change_vs_previous(
    current_total: Decimal,
    previous_entry: HistoryEntry | None,
) -> TotalChange:
    """Compare the live total with the previous snapshot total.

    Args:
        current_total: Total computed from current balances.
        previous_entry: Second-to-last snapshot, if any.

    Returns:
        TotalChange: Delta and percentage; both 0 without a previous entry.
    """
    if previous_entry is None:
        return TotalChange(delta=_ZERO, percent=_ZERO)
    delta = current_total - previous_entry.total
    if previous_entry.total == 0:
        return TotalChange(delta=delta, percent=_ZERO)
    return TotalChange(
        delta=delta,
        percent=(delta / previous_entry.total) * _HUNDRED,
    )


def compute_account_change(
    account: Account,
    previous_entry: HistoryEntry | None,
) -> AccountChange:
    """Compare an account balance with its value in the previous snapshot.

    The percentage is returned unrounded; deciding whether a tiny change
    is worth displaying is left to ``AccountChange.is_material``.

    Args:
        account: Account with its current balance.
        previous_entry: Second-to-last snapshot, if any.

    Returns:
        AccountChange: ``percent`` is None when the account is absent from
        the previous snapshot or its previous balance is zero.
    """
    previous_balance = None
    if previous_entry is not None:
        previous_balance = previous_entry.accounts.get(account.id)
    if previous_balance is None or previous_balance == 0:
        return AccountChange(
            account_id=account.id,
            previous_balance=previous_balance,
            percent=None,
        )
    percent = ((account.balance - previous_balance) / previous_balance) * _HUNDRED
    return AccountChange(
        account_id=account.id,
        previous_balance=previous_balance,
        percent=percent,
    )


def compute_account_changes(
    accounts: Iterable[Account],
    previous_entry: HistoryEntry | None,
) -> dict[str, AccountChange]:
    """Return the per-account change keyed by account id."""
    return {
        account.id: compute_account_change(account, previous_entry)
        for account in accounts
    }


def select_series(
    accounts: Iterable[Account],
    type_filter: str = ALL_TYPES,
) -> SeriesSelection:
    """Resolve which series a history chart should plot.

    Args:
        accounts: Current accounts.
        type_filter: ``ALL_TYPES``, ``TOTAL_ONLY`` or an account type.

    Returns:
        SeriesSelection: Account ids to plot, or the total-only mode.
    """
    if type_filter == TOTAL_ONLY:
        return SeriesSelection(total_only=True)
    if type_filter == ALL_TYPES:
        return SeriesSelection(
            account_ids=tuple(account.id for account in accounts)
        )
    return SeriesSelection(
        account_ids=tuple(
            account.id
            for account in accounts
            if account.account_type == type_filter
        )
    )


class HistorySeries:
    """Chart rows for a filtered history.

    Iterating re-runs the filter from the source entries, so the series
    can be consumed any number of times and never serves stale rows.
    """

    def __init__(
        self,
        history: Iterable[HistoryEntry],
        cutoff: datetime | None,
        account_ids: Sequence[str],
    ) -> None:
        self._history = tuple(history)
        self._cutoff = cutoff
        self._account_ids = tuple(account_ids)

    @property
    def account_ids(self) -> tuple[str, ...]:
        return self._account_ids

    def __iter__(self) -> Iterator[SeriesRow]:
        for entry in order_history(self._history):
            if self._cutoff is not None and entry.date < self._cutoff:
                continue
            yield SeriesRow(
                date=entry.date,
                timestamp=to_epoch_millis(entry.date),
                total=entry.total,
                values={
                    account_id: entry.accounts.get(account_id, _ZERO)
                    for account_id in self._account_ids
                },
            )

    def records(self) -> list[dict[str, str | int | float]]:
        """Return flattened rows ready for a chart library."""
        return [row.as_record() for row in self]


def filter_series(
    history: Iterable[HistoryEntry],
    timeframe: Timeframe,
    account_ids: Sequence[str],
    now: datetime | None = None,
) -> HistorySeries:
    """Build chart rows for a timeframe and a set of accounts.

    Entries dated on or after the cutoff are kept. Every row holds a value
    for every requested id, 0 when the snapshot has none, so stacked
    charts never have gaps.

    Args:
        history: History entries in any order.
        timeframe: Preset window to keep.
        account_ids: Series keys to project each entry onto.
        now: Reference moment for the cutoff, defaults to the current time.
            Naive values are read as UTC.

    Returns:
        HistorySeries: Restartable iterable of rows in ascending date order.
    """
    reference = ensure_utc(now) if now is not None else utc_now()
    return HistorySeries(history, timeframe.cutoff(reference), account_ids)


__all__ = [
    "compute_current_total",
    "order_history",
    "latest_and_previous",
    "compute_change_vs_previous",
    "compute_account_change",
    "compute_account_changes",
    "select_series",
    "HistorySeries",
    "filter_series",
]
