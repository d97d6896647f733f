"""Tests for datetime utility functions."""

import unittest
from datetime import date, datetime, timedelta, timezone

import pytz

from orrery.constants import REFERENCE_EPOCH
from orrery.space_time.pythonic_datetimes import (
    NaiveDateTimeError,
    days_between,
    days_since_epoch,
    ensure_utc,
    get_utc_datetime,
    to_utc_datetime,
)


class TestPythonicDatetimes(unittest.TestCase):
    """Test cases for datetime utility functions."""

    def test_ensure_utc(self):
        """Test ensuring datetime is in UTC."""
        # Test UTC datetime remains unchanged
        dt_utc = datetime(2025, 1, 1, tzinfo=timezone.utc)
        self.assertEqual(ensure_utc(dt_utc), dt_utc)

        # Test naive datetime raises error
        dt_naive = datetime(2025, 1, 1)
        with self.assertRaises(NaiveDateTimeError):
            ensure_utc(dt_naive)

        # Test non-UTC datetime is converted to UTC
        dt_est = datetime(2025, 1, 1, tzinfo=timezone(timedelta(hours=-5)))
        dt_utc = datetime(2025, 1, 1, 5, tzinfo=timezone.utc)
        self.assertEqual(ensure_utc(dt_est), dt_utc)
        self.assertEqual(ensure_utc(dt_est).utcoffset(), timedelta(0))

    def test_get_utc_datetime(self):
        """Test building an aware UTC datetime."""
        dt = get_utc_datetime(2024, 3, 15, 20)
        self.assertEqual(dt.tzinfo, pytz.UTC)
        self.assertEqual(dt, datetime(2024, 3, 15, 20, tzinfo=timezone.utc))

    def test_to_utc_datetime(self):
        """Test resolving dates and datetimes to UTC instants."""
        self.assertEqual(
            to_utc_datetime(date(2024, 3, 15)),
            datetime(2024, 3, 15, tzinfo=timezone.utc),
        )
        dt = datetime(2024, 3, 15, 20, tzinfo=timezone(timedelta(hours=2)))
        self.assertEqual(
            to_utc_datetime(dt), datetime(2024, 3, 15, 18, tzinfo=timezone.utc)
        )
        with self.assertRaises(NaiveDateTimeError):
            to_utc_datetime(datetime(2024, 3, 15))

    def test_days_between(self):
        """Test whole-day differences."""
        start = datetime(2000, 1, 1, tzinfo=timezone.utc)
        self.assertEqual(days_between(start, start), 0)
        self.assertEqual(days_between(start, datetime(2001, 1, 1, tzinfo=timezone.utc)), 366)
        self.assertEqual(days_between(datetime(2001, 1, 1, tzinfo=timezone.utc), start), -366)

        # Partial days floor toward the past
        self.assertEqual(
            days_between(start, datetime(2000, 1, 1, 23, 59, tzinfo=timezone.utc)), 0
        )
        self.assertEqual(
            days_between(start, datetime(1999, 12, 31, 23, 59, tzinfo=timezone.utc)), -1
        )

    def test_days_between_mixed_timezones(self):
        """Test that instants in different zones are compared in UTC."""
        start = datetime(2000, 1, 1, tzinfo=pytz.UTC)
        end = datetime(2000, 1, 3, 1, tzinfo=timezone(timedelta(hours=1)))
        self.assertEqual(days_between(start, end), 2)

    def test_days_since_epoch(self):
        """Test days elapsed since the reference epoch."""
        self.assertEqual(days_since_epoch(REFERENCE_EPOCH), 0)
        self.assertEqual(days_since_epoch(date(2000, 1, 2)), 1)
        self.assertEqual(days_since_epoch(date(1999, 12, 31)), -1)
        self.assertEqual(days_since_epoch(date(2024, 1, 1)), 8766)

    def test_days_since_custom_epoch(self):
        """Test a caller supplied epoch."""
        epoch = datetime(2020, 1, 1, tzinfo=timezone.utc)
        self.assertEqual(days_since_epoch(date(2020, 1, 11), epoch), 10)


if __name__ == "__main__":
    unittest.main()
