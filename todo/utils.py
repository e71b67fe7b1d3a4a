"""
Utility functions for the todo CLI application.
"""

import re
from datetime import datetime, timezone
from typing import Optional

from todo.constants import (
    DATE_FORMATS,
    DATE_REGEX_PATTERN,
    DISPLAY_DATE_FORMAT,
    INTEGER_REGEX_PATTERN,
    MAX_FRACTION_DIGITS,
)

_DATE_RE = re.compile(DATE_REGEX_PATTERN)
_INTEGER_RE = re.compile(INTEGER_REGEX_PATTERN)
_FRACTION_RE = re.compile(r"(\.[0-9]{%d})[0-9]+" % MAX_FRACTION_DIGITS)


def parse_date(date_string: str) -> Optional[datetime]:
    """
    Parse a task date using the supported formats, in order.

    Fields must be zero-padded. A plain calendar date is taken as midnight
    UTC; timestamps must carry a zone designator and may have up to nine
    fractional digits (anything past microseconds is dropped).

    Args:
        date_string: The date string to parse.

    Returns:
        A timezone-aware datetime if parsing succeeds, None otherwise.

    Examples:
        >>> parse_date("2025-12-02")
        >>> parse_date("2025-12-02T10:00:00Z")
        >>> parse_date("2025-12-02T10:00:00.123456789+02:00")
    """
    if not _DATE_RE.fullmatch(date_string):
        return None
    date_string = _FRACTION_RE.sub(r"\1", date_string)

    for fmt in DATE_FORMATS:
        try:
            parsed = datetime.strptime(date_string, fmt)
        except ValueError:
            continue
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed
    return None


def parse_int(value: str) -> Optional[int]:
    """Parse an optionally signed run of ASCII digits, returning None otherwise."""
    if not _INTEGER_RE.fullmatch(value):
        return None
    return int(value)


def format_date(date: datetime) -> str:
    """
    Format a datetime as YYYY-MM-DD in its own timezone.

    Args:
        date: The datetime object to format.

    Returns:
        A string in YYYY-MM-DD format.
    """
    return date.strftime(DISPLAY_DATE_FORMAT)
