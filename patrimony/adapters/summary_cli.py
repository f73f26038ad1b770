"""CLI adapter printing the headline patrimony figures.

This module wires the GetPatrimonySummaryUseCase to the configured
snapshot store and prints the live total, the change versus the previous
snapshot and the per-account changes.
"""

from decimal import Decimal

from patrimony.application.use_cases.get_patrimony_summary import (
    GetPatrimonySummaryUseCase,
    PatrimonySummary,
)
from patrimony.infrastructure.container import build_snapshot_store
from patrimony.infrastructure.logging.logger import get_app_logger


def _format_amount(value: Decimal) -> str:
    return f"{value:,.2f} €"


def _format_summary(summary: PatrimonySummary) -> list[str]:
    sign = "+" if summary.change.delta >= 0 else ""
    lines = [
        f"Total patrimony: {_format_amount(summary.total)} "
        f"across {summary.account_count} accounts",
        f"Change vs previous update: {sign}{_format_amount(summary.change.delta)} "
        f"({sign}{summary.change.percent:.2f}%)",
    ]
    for account_id, change in summary.account_changes.items():
        label = summary.account_names.get(account_id, account_id)
        if not change.has_comparison:
            lines.append(f"  {label}: no comparison available")
        elif change.is_material():
            lines.append(f"  {label}: {change.percent:+.2f}%")
        else:
            lines.append(f"  {label}: unchanged")
    return lines


def main() -> None:
    """Run the summary use case and print the result."""
    logger = get_app_logger()
    store = build_snapshot_store()
    use_case = GetPatrimonySummaryUseCase(store=store, logger=logger)

    summary = use_case.execute()
    for line in _format_summary(summary):
        print(line)


if __name__ == "__main__":  # pragma: no cover
    main()
