"""Locale-independent conversion of values to their wire text."""

from datetime import datetime, timezone


def from_string(value: str) -> str:
    return value


def from_integer(value: int) -> str:
    return str(int(value))


def from_boolean(value: bool) -> str:
    """Render a boolean the way query services expect it."""
    return "true" if value else "false"


def from_date(value: datetime) -> str:
    """
    Render a datetime as ISO 8601 in UTC with millisecond precision.

    Naive datetimes are taken to already be UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"
