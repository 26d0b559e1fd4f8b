"""
SHELFKIT - Date Utilities
Calendar-day helpers for display and comparison
"""
from typing import Union
from datetime import date, datetime

import logging


logger = logging.getLogger(__name__)

DateLike = Union[date, datetime]


def _start_of_day(value: DateLike) -> datetime:
    """Midnight of the given day, keeping tzinfo when present."""
    if isinstance(value, datetime):
        return value.replace(hour=0, minute=0, second=0, microsecond=0)
    return datetime(value.year, value.month, value.day)


# ============================================================================
# DISPLAY FORMATTERS
# ============================================================================
def format_date_for_display(value: DateLike) -> str:
    """
    Format date as day/month/year without zero-padding.

    Example:
        >>> format_date_for_display(date(2025, 3, 7))
        '7/3/2025'
    """
    return f"{value.day}/{value.month}/{value.year}"


def format_datetime_for_display(value: datetime) -> str:
    """
    Format date and time for display.

    Hour is unpadded, minute is always two digits.

    Example:
        >>> format_datetime_for_display(datetime(2025, 3, 7, 9, 5))
        '7/3/2025 9:05'
    """
    return f"{format_date_for_display(value)} {value.hour}:{value.minute:02d}"


# ============================================================================
# CALENDAR HELPERS
# ============================================================================
def today() -> datetime:
    """Current local date at midnight."""
    return _start_of_day(datetime.now())


def is_today(value: DateLike) -> bool:
    """
    Check if value falls on the current local calendar day.

    Time of day is ignored.
    """
    now = datetime.now()
    return (
        value.year == now.year
        and value.month == now.month
        and value.day == now.day
    )


def days_between(from_: DateLike, to: DateLike) -> int:
    """
    Count calendar days from one date to another.

    Both values are truncated to midnight first; the hour difference is
    then rounded to whole days, so a 23 or 25 hour day still counts as one.

    Args:
        from_: Start date
        to: End date

    Returns:
        Day count, negative when ``to`` is before ``from_``

    Example:
        >>> days_between(datetime(2025, 1, 1, 23, 59), datetime(2025, 1, 2, 0, 1))
        1
    """
    delta = _start_of_day(to) - _start_of_day(from_)
    hours = int(delta.total_seconds() / 3600)

    return round(hours / 24)
