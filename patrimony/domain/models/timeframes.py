"""Timeframe presets used to filter history for charting."""

from datetime import datetime, timedelta
from enum import Enum


class Timeframe(Enum):
    """Named cutoff windows for history charts."""

    ALL = "ALL"
    ONE_YEAR = "1Y"
    SIX_MONTHS = "6M"
    THREE_MONTHS = "3M"
    ONE_MONTH = "1M"

    @property
    def days(self) -> int | None:
        """Return the window length in days, or None for no cutoff."""
        return _TIMEFRAME_DAYS[self]

    def cutoff(self, now: datetime) -> datetime | None:
        """Return the earliest date kept by this timeframe.

        Args:
            now: Reference moment.

        Returns:
            datetime | None: ``now`` minus the window, or None for ALL.
        """
        if self.days is None:
            return None
        return now - timedelta(days=self.days)


_TIMEFRAME_DAYS = {
    Timeframe.ALL: None,
    Timeframe.ONE_YEAR: 365,
    Timeframe.SIX_MONTHS: 180,
    Timeframe.THREE_MONTHS: 90,
    Timeframe.ONE_MONTH: 30,
}


__all__ = ["Timeframe"]
