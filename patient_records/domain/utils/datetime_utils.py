"""
Datetime utilities for consistent timezone handling.

This module provides constants and helper functions for working
with dates and times in a consistent manner across the application.
"""

import datetime
from zoneinfo import ZoneInfo

# Standard timezone for all application operations
UTC = ZoneInfo("UTC")


def now_utc() -> datetime.datetime:
    """
    Get current datetime in UTC.

    Returns:
        datetime.datetime: Current time in UTC timezone
    """
    return datetime.datetime.now(UTC)


def ensure_utc(dt: datetime.datetime) -> datetime.datetime:
    """
    Return ``dt`` as an aware UTC datetime.

    Naive values are taken to already be in UTC, which is how SQLite hands
    back timestamps stored without an offset.
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def years_before(day: datetime.date, years: int) -> datetime.date:
    """
    Shift ``day`` back by whole calendar years.

    February 29 maps to February 28 when the target year is not a leap year.
    """
    try:
        return day.replace(year=day.year - years)
    except ValueError:
        return day.replace(year=day.year - years, day=28)


def full_years_between(start: datetime.date, end: datetime.date) -> int:
    """Number of complete years from ``start`` to ``end``."""
    years = end.year - start.year
    if (end.month, end.day) < (start.month, start.day):
        years -= 1
    return years


def format_date(day: datetime.date) -> str:
    """Format a date as ``YYYY-MM-DD``."""
    return day.strftime("%Y-%m-%d")


def format_utc_timestamp(dt: datetime.datetime) -> str:
    """
    Format a timestamp as ``YYYY-MM-DDTHH:mm:ss.fffZ`` in UTC.

    Args:
        dt: Datetime to format; naive values are treated as UTC

    Returns:
        str: Millisecond-precision timestamp with a literal ``Z`` suffix
    """
    dt = ensure_utc(dt)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"
