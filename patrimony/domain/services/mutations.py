"""Domain services producing the next document from a user intent.

Every function returns a new ``Document`` and leaves its input untouched.
Errors are raised before anything is built, so a failure never yields a
partially applied document.
"""

import uuid
from collections.abc import Iterable, Mapping
from dataclasses import replace
from datetime import datetime
from decimal import Decimal

from patrimony.domain.errors import NotFoundError, ValidationError
from patrimony.domain.models import Account, Document, HistoryEntry
from patrimony.domain.services.aggregation import compute_current_total
from patrimony.domain.services.validation import (
    validate_account,
    validate_balance,
)
from patrimony.utils.date_utils import utc_now


def new_account_id() -> str:
    """Return a fresh random account id."""
    return str(uuid.uuid4())


def add_account(document: Document, account: Account) -> Document:
    """Append a new account; history is unchanged.

    Raises:
        ValidationError: If the account is malformed or its id exists.
    """
    validate_account(account)
    if document.find_account(account.id) is not None:
        raise ValidationError(f"Account id already exists: {account.id}")
    return replace(document, accounts=(*document.accounts, account))


def edit_account(document: Document, account: Account) -> Document:
    """Replace the account sharing the id of ``account``.

    Raises:
        ValidationError: If the account is malformed.
        NotFoundError: If no account has that id.
    """
    validate_account(account)
    if document.find_account(account.id) is None:
        raise NotFoundError(f"Unknown account id: {account.id}")
    return replace(
        document,
        accounts=tuple(
            account if existing.id == account.id else existing
            for existing in document.accounts
        ),
    )


def delete_account(document: Document, account_id: str) -> Document:
    """Remove an account, keeping its values in historical snapshots.

    Raises:
        NotFoundError: If no account has that id.
    """
    if document.find_account(account_id) is None:
        raise NotFoundError(f"Unknown account id: {account_id}")
    return replace(
        document,
        accounts=tuple(
            account for account in document.accounts if account.id != account_id
        ),
    )


def seed_balances(accounts: Iterable[Account]) -> dict[str, Decimal]:
    """Return the current balance of every account keyed by id."""
    return {account.id: account.balance for account in accounts}


def record_balances(
    document: Document,
    balance_by_id: Mapping[str, Decimal],
    now: datetime | None = None,
) -> Document:
    """Update balances and append a snapshot of them to the history.

    The snapshot is seeded with every current balance and then overridden
    with ``balance_by_id``, so no account is missing from it.

    Args:
        document: Current document.
        balance_by_id: New balances; accounts left out keep their balance.
        now: Snapshot time, defaults to the current time.

    Returns:
        Document: Updated accounts and the history with one more entry.

    Raises:
        ValidationError: If an id is unknown or a balance is not finite.
    """
    known_ids = {account.id for account in document.accounts}
    for account_id, balance in balance_by_id.items():
        if account_id not in known_ids:
            raise ValidationError(f"Unknown account id in balances: {account_id}")
        validate_balance(account_id, balance)

    snapshot = seed_balances(document.accounts)
    snapshot.update(balance_by_id)

    updated_accounts = tuple(
        replace(account, balance=snapshot[account.id])
        for account in document.accounts
    )
    entry = HistoryEntry(
        date=now or utc_now(),
        total=compute_current_total(updated_accounts),
        accounts=snapshot,
    )
    return Document(
        accounts=updated_accounts,
        history=(*document.history, entry),
    )


__all__ = [
    "new_account_id",
    "add_account",
    "edit_account",
    "delete_account",
    "seed_balances",
    "record_balances",
]
