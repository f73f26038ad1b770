"""Domain models for derived patrimony views."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from patrimony.domain.constants import CHANGE_EPSILON


@dataclass(frozen=True)
class TotalChange:
    """Change of the live total versus the previous snapshot.

    Attributes:
        delta: Current total minus the previous snapshot total.
        percent: Delta relative to the previous total, 0 when undefined.
    """

    delta: Decimal
    percent: Decimal


@dataclass(frozen=True)
class AccountChange:
    """Change of one account balance versus the previous snapshot.

    A ``percent`` of None means no comparison is available: the account is
    missing from the previous snapshot or its previous balance was zero.
    """

    account_id: str
    previous_balance: Decimal | None
    percent: Decimal | None

    @property
    def has_comparison(self) -> bool:
        """Return True when a percentage could be computed."""
        return self.percent is not None

    def is_material(self, epsilon: Decimal = CHANGE_EPSILON) -> bool:
        """Return True when the change is large enough to display."""
        if self.percent is None:
            return False
        return abs(self.percent) >= epsilon


@dataclass(frozen=True)
class SeriesSelection:
    """Accounts plotted in a history chart.

    Attributes:
        account_ids: Ids of the per-account series, in account order.
        total_only: When True, plot the snapshot ``total`` instead.
    """

    account_ids: tuple[str, ...] = ()
    total_only: bool = False


@dataclass(frozen=True)
class SeriesRow:
    """One chart row built from a history entry."""

    date: datetime
    timestamp: int
    total: Decimal
    values: dict[str, Decimal] = field(default_factory=dict)

    def as_record(self) -> dict[str, str | int | float]:
        """Flatten the row for chart libraries."""
        record: dict[str, str | int | float] = {
            "date": self.date.isoformat(),
            "timestamp": self.timestamp,
            "total": float(self.total),
        }
        for account_id, value in self.values.items():
            record[account_id] = float(value)
        return record


@dataclass(frozen=True)
class CompositionItem:
    """Slice of a composition view."""

    name: str
    value: Decimal
    share: Decimal = Decimal("0")


@dataclass(frozen=True)
class Composition:
    """Breakdown of current balances by account or by type."""

    group_by: str
    items: list[CompositionItem]
    total: Decimal


__all__ = [
    "TotalChange",
    "AccountChange",
    "SeriesSelection",
    "SeriesRow",
    "CompositionItem",
    "Composition",
]
