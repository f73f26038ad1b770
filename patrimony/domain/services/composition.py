"""Domain services for composition breakdowns of current balances."""

from collections.abc import Iterable
from decimal import Decimal

from patrimony.domain.constants import GROUP_BY_ACCOUNT, GROUP_BY_TYPE
from patrimony.domain.models import Account, Composition, CompositionItem
from patrimony.utils.decimal_utils import sum_decimals


def compose_by_account(accounts: Iterable[Account]) -> list[CompositionItem]:
    """Return one slice per account with a positive balance.

    Args:
        accounts: Current accounts.

    Returns:
        list[CompositionItem]: Slices sorted by value, largest first.
    """
    items = [
        CompositionItem(name=account.name, value=account.balance)
        for account in accounts
        if account.balance > 0
    ]
    return sorted(items, key=lambda item: item.value, reverse=True)


def compose_by_type(accounts: Iterable[Account]) -> list[CompositionItem]:
    """Return one slice per account type, summing positive balances.

    Args:
        accounts: Current accounts.

    Returns:
        list[CompositionItem]: Slices sorted by value, largest first.
    """
    totals: dict[str, Decimal] = {}
    for account in accounts:
        if account.balance <= 0:
            continue
        totals[account.account_type] = (
            totals.get(account.account_type, Decimal("0")) + account.balance
        )
    items = [
        CompositionItem(name=account_type, value=value)
        for account_type, value in totals.items()
    ]
    return sorted(items, key=lambda item: item.value, reverse=True)


def composition_total(items: Iterable[CompositionItem]) -> Decimal:
    """Return the sum of slice values."""
    return sum_decimals(item.value for item in items)


def share_of(item: CompositionItem, total: Decimal) -> Decimal:
    """Return the percentage of the total held by a slice, 0 if no total."""
    if total > 0:
        return (item.value / total) * Decimal("100")
    return Decimal("0")


def build_composition(
    accounts: Iterable[Account],
    group_by: str = GROUP_BY_ACCOUNT,
) -> Composition:
    """Build a composition view with shares filled in.

    Args:
        accounts: Current accounts.
        group_by: ``GROUP_BY_ACCOUNT`` or ``GROUP_BY_TYPE``.

    Returns:
        Composition: Sorted slices, their shares and the grand total.

    Raises:
        ValueError: If ``group_by`` is not supported.
    """
    if group_by == GROUP_BY_ACCOUNT:
        items = compose_by_account(accounts)
    elif group_by == GROUP_BY_TYPE:
        items = compose_by_type(accounts)
    else:
        raise ValueError(
            f"Unsupported composition grouping: {group_by}. "
            f"Expected {GROUP_BY_ACCOUNT} or {GROUP_BY_TYPE}."
        )
    total = composition_total(items)
    return Composition(
        group_by=group_by,
        items=[
            CompositionItem(
                name=item.name,
                value=item.value,
                share=share_of(item, total),
            )
            for item in items
        ],
        total=total,
    )


__all__ = [
    "compose_by_account",
    "compose_by_type",
    "composition_total",
    "share_of",
    "build_composition",
]
