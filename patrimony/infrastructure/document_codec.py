"""Conversion between the persisted JSON layout and domain models.

Persisted layout::

    {
      "accounts": [{"id", "name", "type", "iban", "logo", "balance"}],
      "history": [{"date", "total", "accounts": {"<id>": number}}]
    }
"""

from collections.abc import Mapping
from typing import Any

from patrimony.domain.constants import DEFAULT_ACCOUNT_TYPE
from patrimony.domain.errors import StorageError
from patrimony.domain.models import Account, Document, HistoryEntry
from patrimony.utils.date_utils import format_timestamp, parse_timestamp
from patrimony.utils.decimal_utils import coerce_decimal


def document_from_dict(payload: Any) -> Document:
    """Build a document from its decoded JSON payload.

    Args:
        payload: Decoded JSON value.

    Returns:
        Document: Domain document.

    Raises:
        StorageError: If the payload does not match the persisted layout,
            holds a non-finite number or repeats an account id.
    """
    if not isinstance(payload, Mapping):
        raise StorageError("Stored document must be a JSON object")
    raw_accounts = payload.get("accounts")
    raw_history = payload.get("history")
    if raw_accounts is None:
        raw_accounts = []
    if raw_history is None:
        raw_history = []
    if not isinstance(raw_accounts, list) or not isinstance(raw_history, list):
        raise StorageError("Stored accounts and history must be JSON arrays")
    try:
        accounts = tuple(_account_from_dict(item) for item in raw_accounts)
        history = tuple(_entry_from_dict(item) for item in raw_history)
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        raise StorageError(f"Malformed stored document: {exc}") from exc
    seen_ids: set[str] = set()
    for account in accounts:
        if account.id in seen_ids:
            raise StorageError(f"Duplicate stored account id: {account.id}")
        seen_ids.add(account.id)
    return Document(accounts=accounts, history=history)


def document_to_dict(document: Document) -> dict[str, list[dict[str, Any]]]:
    """Return the JSON-ready payload for a document."""
    return {
        "accounts": [_account_to_dict(account) for account in document.accounts],
        "history": [_entry_to_dict(entry) for entry in document.history],
    }


def _account_from_dict(item: Mapping[str, Any]) -> Account:
    return Account(
        id=str(item["id"]),
        name=str(item.get("name") or ""),
        account_type=str(item.get("type") or DEFAULT_ACCOUNT_TYPE),
        balance=coerce_decimal(item.get("balance")),
        iban=item.get("iban") or None,
        logo=item.get("logo") or None,
    )


def _account_to_dict(account: Account) -> dict[str, Any]:
    return {
        "id": account.id,
        "name": account.name,
        "type": account.account_type,
        "iban": account.iban or "",
        "logo": account.logo or "",
        "balance": float(account.balance),
    }


def _entry_from_dict(item: Mapping[str, Any]) -> HistoryEntry:
    raw_accounts = item.get("accounts")
    if raw_accounts is None:
        raw_accounts = {}
    if not isinstance(raw_accounts, Mapping):
        raise ValueError("history accounts must be an object")
    return HistoryEntry(
        date=parse_timestamp(item["date"]),
        total=coerce_decimal(item.get("total")),
        accounts={
            str(account_id): coerce_decimal(value)
            for account_id, value in raw_accounts.items()
        },
    )


def _entry_to_dict(entry: HistoryEntry) -> dict[str, Any]:
    return {
        "date": format_timestamp(entry.date),
        "total": float(entry.total),
        "accounts": {
            account_id: float(value)
            for account_id, value in entry.accounts.items()
        },
    }


__all__ = ["document_from_dict", "document_to_dict"]
