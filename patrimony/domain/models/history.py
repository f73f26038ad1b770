"""Domain models for balance snapshots and the persisted document."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from patrimony.domain.models.accounts import Account
from patrimony.utils.date_utils import ensure_utc


@dataclass(frozen=True)
class HistoryEntry:
    """Point-in-time snapshot of balances.

    Attributes:
        date: Moment the snapshot was recorded, stored as aware UTC.
        total: Sum of all account balances at that moment.
        accounts: Balance recorded per account id. Sparse: accounts created
            later are absent, deleted accounts stay as orphaned keys.
    """

    date: datetime
    total: Decimal
    accounts: dict[str, Decimal] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "date", ensure_utc(self.date))


@dataclass(frozen=True)
class Document:
    """Full persisted state: accounts plus history."""

    accounts: tuple[Account, ...] = ()
    history: tuple[HistoryEntry, ...] = ()

    @classmethod
    def empty(cls) -> "Document":
        """Return a document with no accounts and no history."""
        return cls()

    def find_account(self, account_id: str) -> Account | None:
        """Return the account with the given id, if any."""
        for account in self.accounts:
            if account.id == account_id:
                return account
        return None


__all__ = ["HistoryEntry", "Document"]
