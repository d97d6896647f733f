from datetime import datetime, date, timezone
from typing import Union

import pytz

from ..constants import REFERENCE_EPOCH


class NaiveDateTimeError(Exception):
    """Raised when a datetime object has no timezone info."""

    pass


def ensure_utc(dt: datetime) -> datetime:
    """Convert datetime to UTC if it has a timezone.

    Args:
        dt: Datetime to convert

    Returns:
        datetime: UTC datetime

    Raises:
        NaiveDateTimeError: If datetime is naive
    """
    if dt.tzinfo is None:
        raise NaiveDateTimeError("Datetime must have timezone info")
    return dt.astimezone(timezone.utc)


def get_utc_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    microsecond: int = 0,
) -> datetime:
    """Create a UTC datetime object.

    Args:
        year: Year
        month: Month (1-12)
        day: Day of month
        hour: Hour (0-23)
        minute: Minute (0-59)
        second: Second (0-59)
        microsecond: Microsecond (0-999999)

    Returns:
        datetime: UTC datetime object
    """
    return datetime(
        year,
        month,
        day,
        hour,
        minute,
        second,
        microsecond,
        tzinfo=pytz.UTC,
    )


def to_utc_datetime(value: Union[datetime, date]) -> datetime:
    """Resolve a datetime or a calendar date to a UTC instant.

    A plain date has no time of day and is taken as midnight UTC.

    Raises:
        NaiveDateTimeError: If value is a naive datetime
    """
    # datetime is a subclass of date, so check it first
    if isinstance(value, datetime):
        return ensure_utc(value)
    return get_utc_datetime(value.year, value.month, value.day)


def days_between(start: datetime, end: datetime) -> int:
    """Whole days elapsed from start to end.

    Partial days are floored, so an instant one hour before start gives -1.

    Args:
        start: Aware datetime
        end: Aware datetime

    Returns:
        int: Signed day count, positive when end is after start
    """
    delta = ensure_utc(end) - ensure_utc(start)
    return delta.days


def days_since_epoch(
    value: Union[datetime, date], epoch: datetime = REFERENCE_EPOCH
) -> int:
    """Whole days from the reference epoch to value (value minus epoch)."""
    return days_between(epoch, to_utc_datetime(value))
