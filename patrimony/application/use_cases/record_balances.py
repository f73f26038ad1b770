"""Use case to record new balances as a history snapshot."""

from collections.abc import Mapping
from datetime import datetime
from decimal import Decimal

from patrimony.application.ports.snapshot_store import SnapshotStorePort
from patrimony.domain.models import Document
from patrimony.domain.services.mutations import record_balances
from patrimony.infrastructure.logging.logger import get_app_logger


class RecordBalancesUseCase:
    """Update account balances and append a history entry."""

    def __init__(self, store: SnapshotStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            store: Port persisting the document.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(
        self,
        balances: Mapping[str, Decimal],
        now: datetime | None = None,
    ) -> Document:
        """Record balances and save the document.

        Args:
            balances: New balances keyed by account id.
            now: Snapshot time, defaults to the current time.

        Returns:
            Document: Saved document including the new history entry.
        """
        document = record_balances(self._store.load(), balances, now=now)
        self._store.save(document)
        entry = document.history[-1]
        self._logger.info(
            f"Balances recorded: total={entry.total}, "
            f"accounts={len(entry.accounts)}"
        )
        return document


__all__ = ["RecordBalancesUseCase"]
