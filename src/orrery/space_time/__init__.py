from .pythonic_datetimes import (
    NaiveDateTimeError,
    ensure_utc,
    get_utc_datetime,
    to_utc_datetime,
    days_between,
    days_since_epoch,
)
from .date_input import DateParseError, parse_date_input, NOW

__all__ = [
    "NaiveDateTimeError",
    "ensure_utc",
    "get_utc_datetime",
    "to_utc_datetime",
    "days_between",
    "days_since_epoch",
    "DateParseError",
    "parse_date_input",
    "NOW",
]
