"""Duration parsing for timeout and backoff settings."""

import math
import re
from typing import Union


class DurationParseError(ValueError):
    """Raised when a duration value cannot be parsed."""

    pass


_UNIT_SECONDS = {
    "ms": 0.001,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}

_HUMAN_PART = re.compile(r"(\d+(?:\.\d+)?)\s*(ms|s|m|h)")
_ISO_PATTERN = re.compile(r"^PT(?:(\d+(?:\.\d+)?)H)?(?:(\d+(?:\.\d+)?)M)?(?:(\d+(?:\.\d+)?)S)?$")


def parse_duration(value: Union[str, int, float]) -> float:
    """Parse a duration to seconds.

    Accepts:
    - numbers, taken as seconds: 5, 0.5, "30"
    - unit strings: "500ms", "5s", "1m", "1h", combinations like "1m30s"
    - ISO-8601 time durations: "PT5S", "PT1M30S", "PT0.5S"

    Raises:
        DurationParseError: If the value is invalid or negative

    Examples:
        >>> parse_duration("500ms")
        0.5
        >>> parse_duration("PT1M")
        60.0
        >>> parse_duration(10)
        10.0
    """
    if isinstance(value, bool):
        raise DurationParseError(f"Invalid duration: {value!r}")

    if isinstance(value, (int, float)):
        seconds = float(value)
    elif isinstance(value, str):
        seconds = _parse_duration_string(value)
    else:
        raise DurationParseError(f"Invalid duration type: {type(value).__name__}")

    if not math.isfinite(seconds):
        raise DurationParseError(f"Duration must be finite: {value!r}")
    if seconds < 0:
        raise DurationParseError(f"Duration cannot be negative: {value!r}")
    return seconds


def _parse_duration_string(text: str) -> float:
    cleaned = text.strip()
    if not cleaned:
        raise DurationParseError("Duration string cannot be empty")

    try:
        return float(cleaned)
    except ValueError:
        pass

    if cleaned.upper().startswith("P"):
        return _parse_iso8601_duration(cleaned.upper())

    return _parse_unit_duration(cleaned.lower())


def _parse_iso8601_duration(text: str) -> float:
    match = _ISO_PATTERN.match(text)
    if not match or text == "PT":
        raise DurationParseError(
            f"Invalid ISO-8601 duration: '{text}'. Expected a form like 'PT5S', 'PT1M30S' or 'PT0.5S'"
        )

    hours, minutes, seconds = match.groups()
    total = 0.0
    if hours:
        total += float(hours) * 3600
    if minutes:
        total += float(minutes) * 60
    if seconds:
        total += float(seconds)
    return total


def _parse_unit_duration(text: str) -> float:
    matches = _HUMAN_PART.findall(text)
    compact = re.sub(r"\s+", "", text)

    # Reject anything the pattern did not consume ("5x", "ten seconds", ...)
    if not matches or "".join(num + unit for num, unit in matches) != compact:
        raise DurationParseError(
            f"Invalid duration: '{text}'. "
            "Use seconds (5, 0.5) or units ms, s, m, h (e.g. '500ms', '5s', '1m30s')"
        )

    return sum(float(num) * _UNIT_SECONDS[unit] for num, unit in matches)
