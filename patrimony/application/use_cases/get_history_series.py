"""Use case to build history chart series."""

from dataclasses import dataclass
from datetime import datetime

from patrimony.application.ports.snapshot_store import SnapshotStorePort
from patrimony.domain.constants import ALL_TYPES
from patrimony.domain.models import SeriesSelection, Timeframe
from patrimony.domain.services.aggregation import (
    HistorySeries,
    filter_series,
    select_series,
)


@dataclass(frozen=True)
class ChartSeries:
    """Series selection and the rows to plot."""

    selection: SeriesSelection
    rows: HistorySeries
    names: dict[str, str]


class GetHistorySeriesUseCase:
    """Filter history by timeframe and account type for charting."""

    def __init__(self, store: SnapshotStorePort) -> None:
        self._store = store

    def execute(
        self,
        timeframe: Timeframe = Timeframe.ALL,
        type_filter: str = ALL_TYPES,
        now: datetime | None = None,
    ) -> ChartSeries:
        """Return chart rows for the requested window and accounts.

        Args:
            timeframe: Preset window to keep.
            type_filter: ``ALL_TYPES``, ``TOTAL_ONLY`` or an account type.
            now: Reference moment for the cutoff.

        Returns:
            ChartSeries: Selection, rows and display names by account id.
        """
        document = self._store.load()
        selection = select_series(document.accounts, type_filter)
        rows = filter_series(
            document.history,
            timeframe,
            selection.account_ids,
            now=now,
        )
        names = {account.id: account.name for account in document.accounts}
        return ChartSeries(selection=selection, rows=rows, names=names)


__all__ = ["GetHistorySeriesUseCase", "ChartSeries"]
