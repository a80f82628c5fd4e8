"""Timestamp helpers for the service's wire format.

The notification service exchanges local date-times without an offset, using
the literal pattern ``yyyy-MM-dd'T'HH:mm:ss`` (no fractional seconds, no zone).
"""

from datetime import datetime
from typing import Optional, Union

WIRE_DATETIME_FORMAT = "%Y-%m-%dT%H:%M:%S"


def format_local_datetime(dt: Optional[datetime]) -> Optional[str]:
    """Format a datetime in the service's wire pattern.

    Aware datetimes keep their wall-clock time; the offset is dropped because
    the service does not accept one. Microseconds are truncated.

    Example:
        >>> format_local_datetime(datetime(2026, 1, 15, 9, 30, 0, 123456))
        '2026-01-15T09:30:00'
    """
    if dt is None:
        return None
    return dt.replace(tzinfo=None).strftime(WIRE_DATETIME_FORMAT)


def parse_local_datetime(value: Union[str, datetime, None]) -> Optional[datetime]:
    """Parse a wire timestamp into a naive datetime.

    The exact wire pattern is tried first. Servers occasionally append
    fractional seconds, which are accepted through ``fromisoformat``; a value
    carrying a UTC offset is rejected because the wire contract has none.

    Raises:
        ValueError: If the value is not a valid wire timestamp
    """
    if value is None or isinstance(value, datetime):
        return value

    text = value.strip()
    if not text:
        return None

    try:
        return datetime.strptime(text, WIRE_DATETIME_FORMAT)
    except ValueError:
        pass

    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is not None:
        raise ValueError(f"Timestamp must not carry an offset: '{value}'")
    return parsed
