"""Parsing of user supplied dates."""

import re
from datetime import datetime, timezone

from .pythonic_datetimes import get_utc_datetime

NOW = "now"

DATE_FORMAT = "%Y-%m-%d"

_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class DateParseError(ValueError):
    """Raised when a date string is neither 'now' nor YYYY-MM-DD."""

    def __init__(self, date_str: str):
        self.date_str = date_str
        super().__init__(
            f"Invalid date: {date_str!r} (expected YYYY-MM-DD or '{NOW}')"
        )


def parse_date_input(date_str: str) -> datetime:
    """Parse a date selector.

    Args:
        date_str: Either "now" (any case) for the current wall-clock time, or a
            calendar date such as "2024-03-15", taken at midnight UTC.

    Returns:
        An aware UTC datetime

    Raises:
        DateParseError: If the string matches neither form or names an
            impossible calendar date
    """
    text = date_str.strip()
    if text.lower() == NOW:
        return datetime.now(timezone.utc)

    if not _DATE_PATTERN.match(text):
        raise DateParseError(date_str)

    try:
        parsed = datetime.strptime(text, DATE_FORMAT)
    except ValueError as e:
        raise DateParseError(date_str) from e

    return get_utc_datetime(parsed.year, parsed.month, parsed.day)
