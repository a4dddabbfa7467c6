"""Date parsing and date arithmetic."""

from .pythonic_datetimes import (
    NaiveDateTimeError,
    ensure_utc,
    to_utc_instant,
    format_calendar_date,
    today_string,
)
from .date_math import days_between

__all__ = [
    "NaiveDateTimeError",
    "ensure_utc",
    "to_utc_instant",
    "format_calendar_date",
    "today_string",
    "days_between",
]
