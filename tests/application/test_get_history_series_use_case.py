"""Tests for the GetHistorySeriesUseCase."""

from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

from patrimony.application.use_cases.get_history_series import (
    GetHistorySeriesUseCase,
)
from patrimony.domain.constants import TOTAL_ONLY
from patrimony.domain.models import Account, Document, HistoryEntry, Timeframe

NOW = datetime(2024, 6, 1, tzinfo=timezone.utc)


def _document() -> Document:
    return Document(
        accounts=(
            Account(id="a", name="Checking", balance=Decimal("100")),
            Account(id="b", name="World ETF", account_type="ETF",
                    balance=Decimal("50")),
        ),
        history=(
            HistoryEntry(
                date=datetime(2023, 1, 1, tzinfo=timezone.utc),
                total=Decimal("10"),
                accounts={"a": Decimal("10")},
            ),
            HistoryEntry(
                date=datetime(2024, 5, 20, tzinfo=timezone.utc),
                total=Decimal("150"),
                accounts={"a": Decimal("100"), "b": Decimal("50")},
            ),
        ),
    )


def test_execute_filters_by_type_and_timeframe() -> None:
    """Only ETF accounts within the last month are returned."""
    store = MagicMock()
    store.load.return_value = _document()

    result = GetHistorySeriesUseCase(store=store).execute(
        timeframe=Timeframe.ONE_MONTH,
        type_filter="ETF",
        now=NOW,
    )

    rows = list(result.rows)
    assert result.selection.account_ids == ("b",)
    assert len(rows) == 1
    assert rows[0].values == {"b": Decimal("50")}
    assert result.names["b"] == "World ETF"


def test_execute_total_only_mode() -> None:
    """Total-only keeps every entry's total without account series."""
    store = MagicMock()
    store.load.return_value = _document()

    result = GetHistorySeriesUseCase(store=store).execute(
        type_filter=TOTAL_ONLY,
        now=NOW,
    )

    rows = list(result.rows)
    assert result.selection.total_only is True
    assert [row.total for row in rows] == [Decimal("10"), Decimal("150")]
    assert all(row.values == {} for row in rows)
