"""Domain models for tracked accounts."""

from dataclasses import dataclass
from decimal import Decimal

from patrimony.domain.constants import DEFAULT_ACCOUNT_TYPE


@dataclass(frozen=True)
class Account:
    """A named financial account with its current balance.

    Attributes:
        id: Stable opaque identifier, unique across the account set.
        name: Display name.
        account_type: Category label such as "ETF" or "Funds".
        balance: Current balance.
        iban: Optional free-text identifier.
        logo: Optional reference to an uploaded image.
    """

    id: str
    name: str
    account_type: str = DEFAULT_ACCOUNT_TYPE
    balance: Decimal = Decimal("0")
    iban: str | None = None
    logo: str | None = None


__all__ = ["Account"]
