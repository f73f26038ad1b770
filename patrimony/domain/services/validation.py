"""Domain validation helpers for mutation inputs."""

from decimal import Decimal

from patrimony.domain.errors import ValidationError
from patrimony.domain.models import Account


def is_valid_account_name(name: str | None) -> bool:
    """Return True when the account name has visible characters.

    Args:
        name: Account name to evaluate.

    Returns:
        bool: True when the name should be accepted.
    """
    return bool(name and name.strip())


def validate_balance(account_id: str, balance) -> None:
    """Reject balances that are not finite Decimals.

    Args:
        account_id: Account the balance belongs to, for the message.
        balance: Candidate balance.

    Raises:
        ValidationError: If the balance is not a finite Decimal.
    """
    if not isinstance(balance, Decimal) or not balance.is_finite():
        raise ValidationError(
            f"Balance for account_id={account_id} must be a finite "
            f"decimal: {balance!r}"
        )


def validate_account(account: Account) -> None:
    """Check the fields of an account before it enters a document.

    Args:
        account: Account to check.

    Raises:
        ValidationError: If the id is empty, the name is blank or the
            balance is not a finite decimal.
    """
    if not account.id or not str(account.id).strip():
        raise ValidationError("Account id must not be empty")
    if not is_valid_account_name(account.name):
        raise ValidationError(
            f"Account name must not be blank for account_id={account.id}"
        )
    validate_balance(account.id, account.balance)


__all__ = ["is_valid_account_name", "validate_balance", "validate_account"]
