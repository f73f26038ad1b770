"""Use case to compute the headline patrimony figures."""

from dataclasses import dataclass
from decimal import Decimal

from patrimony.application.ports.snapshot_store import SnapshotStorePort
from patrimony.domain.models import AccountChange, HistoryEntry, TotalChange
from patrimony.domain.services.aggregation import (
    compute_account_changes,
    compute_change_vs_previous,
    compute_current_total,
    latest_and_previous,
    order_history,
)
from patrimony.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class PatrimonySummary:
    """Headline figures for the dashboard.

    Attributes:
        total: Live total of current balances.
        account_count: Number of tracked accounts.
        change: Live total versus the previous snapshot.
        latest: Most recent snapshot, if any.
        previous: Snapshot before the most recent one, if any.
        account_changes: Per-account change keyed by account id.
        account_names: Display name keyed by account id.
    """

    total: Decimal
    account_count: int
    change: TotalChange
    latest: HistoryEntry | None
    previous: HistoryEntry | None
    account_changes: dict[str, AccountChange]
    account_names: dict[str, str]


class GetPatrimonySummaryUseCase:
    """Compute the live total and its change versus the previous snapshot."""

    def __init__(self, store: SnapshotStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            store: Port providing the persisted document.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(self) -> PatrimonySummary:
        """Return the patrimony summary.

        Returns:
            PatrimonySummary: Live total, deltas and per-account changes.
        """
        document = self._store.load()
        total = compute_current_total(document.accounts)
        latest, previous = latest_and_previous(order_history(document.history))
        change = compute_change_vs_previous(total, previous)

        self._logger.info(
            f"Patrimony computed: total={total}, delta={change.delta}"
        )

        return PatrimonySummary(
            total=total,
            account_count=len(document.accounts),
            change=change,
            latest=latest,
            previous=previous,
            account_changes=compute_account_changes(document.accounts, previous),
            account_names={
                account.id: account.name for account in document.accounts
            },
        )


__all__ = ["GetPatrimonySummaryUseCase", "PatrimonySummary"]
