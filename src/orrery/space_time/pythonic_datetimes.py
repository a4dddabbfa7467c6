from datetime import datetime, date
from typing import Optional

import dateutil.parser
import pytz

from ..errors import InvalidDateError


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
    return dt.astimezone(pytz.UTC)


def to_utc_instant(date_string: str) -> datetime:
    """Parse a calendar date string into a UTC instant.

    Month-first strings such as "1/2/2000" are read as January 2nd. Missing
    month and day default to 1 and a missing time to midnight, so "March 2000"
    is March 1st and "2000" is January 1st. The wall clock components of a
    string without an offset are taken as UTC, so the result does not depend
    on the machine's timezone. Strings that carry an explicit offset are
    converted to UTC.

    Args:
        date_string: Date string to parse (e.g. "12/31/1999", "2024-03-15T20:00")

    Returns:
        datetime: Timezone-aware datetime with pytz.UTC as its tzinfo

    Raises:
        InvalidDateError: If the string is not a recognizable date
    """
    # Only the year is taken from the current date
    default = datetime(datetime.now().year, 1, 1)
    try:
        dt = dateutil.parser.parse(date_string, default=default)
        if dt.tzinfo is None:
            return dt.replace(tzinfo=pytz.UTC)
        return ensure_utc(dt)
    except (dateutil.parser.ParserError, OverflowError) as e:
        raise InvalidDateError(date_string) from e


def format_calendar_date(day: date) -> str:
    """Format a date as zero-padded MM/DD/YYYY."""
    return f"{day.month:02d}/{day.day:02d}/{day.year}"


def today_string(today: Optional[date] = None) -> str:
    """Return the current local calendar date as MM/DD/YYYY."""
    if today is None:
        today = date.today()
    return format_calendar_date(today)
