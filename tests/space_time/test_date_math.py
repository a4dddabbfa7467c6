"""Tests for date parsing and day differences."""

import unittest
from datetime import datetime, timezone

import dateutil.parser
import pytz

from orrery.errors import ErrorKind, InvalidDateError
from orrery.space_time import days_between, to_utc_instant


class TestToUtcInstant(unittest.TestCase):
    """Test cases for to_utc_instant."""

    def test_month_first(self):
        """Slash dates are read month first."""
        dt = to_utc_instant("1/2/2000")
        self.assertEqual(dt, datetime(2000, 1, 2, tzinfo=timezone.utc))

    def test_wall_clock_is_utc(self):
        """A string without an offset keeps its wall clock, in UTC."""
        dt = to_utc_instant("12/31/1999 18:30")
        self.assertEqual(dt.utcoffset().total_seconds(), 0)
        self.assertEqual((dt.year, dt.month, dt.day), (1999, 12, 31))
        self.assertEqual((dt.hour, dt.minute), (18, 30))

    def test_explicit_offset_converted(self):
        """A string with an offset is converted to UTC."""
        dt = to_utc_instant("2000-01-01T05:00:00+05:00")
        self.assertEqual(dt, datetime(2000, 1, 1, tzinfo=timezone.utc))
        self.assertIs(dt.tzinfo, pytz.UTC)

    def test_naive_and_offset_share_tzinfo(self):
        """Every result carries the same UTC tzinfo."""
        self.assertIs(to_utc_instant("1/1/2000").tzinfo, pytz.UTC)
        self.assertIs(to_utc_instant("2000-01-01T00:00:00-03:00").tzinfo, pytz.UTC)

    def test_missing_fields_default_to_start(self):
        """Missing month, day and time fall on the first, at midnight."""
        self.assertEqual(
            to_utc_instant("March 2000"), datetime(2000, 3, 1, tzinfo=timezone.utc)
        )
        self.assertEqual(
            to_utc_instant("2000"), datetime(2000, 1, 1, tzinfo=timezone.utc)
        )

    def test_offset_out_of_range(self):
        """An offset that pushes the date out of range is an invalid date."""
        with self.assertRaises(InvalidDateError) as ctx:
            to_utc_instant("0001-01-01T00:00:00+05:00")

        self.assertIsInstance(ctx.exception.__cause__, OverflowError)

    def test_invalid_date(self):
        """Unparsable strings raise InvalidDateError chained to the parser error."""
        with self.assertRaises(InvalidDateError) as ctx:
            to_utc_instant("not a date")

        error = ctx.exception
        self.assertEqual(error.kind, ErrorKind.INVALID_DATE)
        self.assertEqual(error.value, "not a date")
        self.assertIsInstance(error, ValueError)
        self.assertIsInstance(error.__cause__, dateutil.parser.ParserError)

    def test_empty_string(self):
        """An empty string is not a date."""
        with self.assertRaises(InvalidDateError):
            to_utc_instant("")


class TestDaysBetween(unittest.TestCase):
    """Test cases for days_between."""

    def test_one_day(self):
        """Consecutive days are exactly one day apart."""
        self.assertEqual(days_between("1/1/2000", "1/2/2000"), 1)

    def test_antisymmetric(self):
        """Reversing the arguments flips the sign."""
        self.assertEqual(days_between("1/2/2000", "1/1/2000"), -1)

    def test_leap_year(self):
        """2000 is a leap year."""
        self.assertEqual(days_between("1/1/2000", "1/1/2001"), 366)

    def test_same_date(self):
        """The same date gives zero."""
        self.assertEqual(days_between("1/1/2000", "1/1/2000"), 0)

    def test_fractional_days(self):
        """Times of day give fractional results."""
        self.assertEqual(days_between("1/1/2000", "1/1/2000 12:00"), 0.5)
        self.assertEqual(days_between("1/1/2000 18:00", "1/1/2000"), -0.75)

    def test_partial_dates(self):
        """Partial dates do not depend on the day the code runs."""
        self.assertEqual(days_between("1/1/2000", "March 2000"), 60)
        self.assertEqual(days_between("1/1/2000", "2000"), 0)

    def test_mixed_formats(self):
        """Different input formats describe the same instants."""
        self.assertEqual(days_between("1/1/2000", "2000-01-31"), 30)

    def test_invalid_end(self):
        """A bad date on either side raises."""
        with self.assertRaises(InvalidDateError):
            days_between("1/1/2000", "someday")


if __name__ == "__main__":
    unittest.main()
