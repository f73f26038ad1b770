"""Domain constants for patrimony tracking."""

from decimal import Decimal

DEFAULT_ACCOUNT_TYPES = (
    "Checking account",
    "Funds",
    "ETF",
    "Interest account",
)

DEFAULT_ACCOUNT_TYPE = DEFAULT_ACCOUNT_TYPES[0]

# Per-account changes below this magnitude (in percent) are not material.
CHANGE_EPSILON = Decimal("0.01")

ALL_TYPES = "all"
TOTAL_ONLY = "total"

GROUP_BY_ACCOUNT = "account"
GROUP_BY_TYPE = "type"


__all__ = [
    "DEFAULT_ACCOUNT_TYPES",
    "DEFAULT_ACCOUNT_TYPE",
    "CHANGE_EPSILON",
    "ALL_TYPES",
    "TOTAL_ONLY",
    "GROUP_BY_ACCOUNT",
    "GROUP_BY_TYPE",
]
