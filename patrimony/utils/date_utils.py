"""Timestamp parsing and formatting for history entries."""

from datetime import date, datetime, time, timezone


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """Return an aware UTC datetime, reading naive values as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_timestamp(raw: str) -> datetime:
    """Parse an ISO-8601 string into an aware UTC datetime.

    Accepts a trailing ``Z`` and date-only values. Naive values are
    treated as UTC.

    Args:
        raw: ISO-8601 string.

    Returns:
        datetime: Aware datetime in UTC.

    Raises:
        ValueError: If the string is not ISO-8601.
    """
    if not isinstance(raw, str):
        raise ValueError(f"Timestamp must be a string: {raw!r}")
    cleaned = raw.strip()
    if cleaned.endswith(("Z", "z")):
        cleaned = cleaned[:-1] + "+00:00"
    if len(cleaned) == 10:
        parsed = datetime.combine(date.fromisoformat(cleaned), time())
    else:
        parsed = datetime.fromisoformat(cleaned)
    return ensure_utc(parsed)


def format_timestamp(value: datetime) -> str:
    """Format a datetime as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    utc_value = ensure_utc(value)
    return utc_value.strftime("%Y-%m-%dT%H:%M:%S.") + (
        f"{utc_value.microsecond // 1000:03d}Z"
    )


def to_epoch_millis(value: datetime) -> int:
    """Return epoch milliseconds for an aware datetime."""
    return int(value.timestamp() * 1000)


__all__ = [
    "utc_now",
    "ensure_utc",
    "parse_timestamp",
    "format_timestamp",
    "to_epoch_millis",
]
