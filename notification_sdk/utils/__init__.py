"""Shared helpers."""

from .timestamps import WIRE_DATETIME_FORMAT, format_local_datetime, parse_local_datetime

__all__ = [
    "WIRE_DATETIME_FORMAT",
    "format_local_datetime",
    "parse_local_datetime",
]
