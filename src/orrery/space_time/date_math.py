from datetime import timedelta

from .pythonic_datetimes import to_utc_instant

ONE_DAY = timedelta(days=1)


def days_between(start: str, end: str) -> float:
    """Calculate the difference between two date strings in days.

    The result is signed: if ``start`` falls after ``end`` the value is
    negative rather than an error.

    Args:
        start: Start date string
        end: End date string

    Returns:
        float: Fractional days from start to end

    Raises:
        InvalidDateError: If either string cannot be parsed
    """
    return (to_utc_instant(end) - to_utc_instant(start)) / ONE_DAY
