"""
Calendar-date utilities.

Tasks carry plain calendar dates (no time of day, no time zone) encoded as
8-digit ``YYYYMMDD`` strings. That encoding sorts lexically in chronological
order, which storage relies on for ORDER BY date.
"""

from __future__ import annotations

import calendar
import re
from datetime import date, timedelta

from taskplanner.core.exceptions import DateFormatError, DateRangeError

DATE_FORMAT = "%Y%m%d"

_DATE_RE = re.compile(r"[0-9]{8}")


def parse_date(value: str) -> date:
    """
    Parse a strict ``YYYYMMDD`` string.

    Args:
        value: Date text, exactly eight ASCII digits

    Returns:
        date: The calendar date

    Raises:
        DateFormatError: If the text is not eight digits or names a day the
            calendar does not have (e.g. "20240192")
    """
    if not isinstance(value, str) or not _DATE_RE.fullmatch(value):
        raise DateFormatError(str(value))
    try:
        return date(int(value[:4]), int(value[4:6]), int(value[6:]))
    except ValueError as exc:
        raise DateFormatError(value) from exc


def format_date(value: date) -> str:
    """Format a date as ``YYYYMMDD``."""
    return f"{value.year:04d}{value.month:02d}{value.day:02d}"


def add_days(value: date, days: int) -> date:
    """
    Add a (possibly negative) number of days.

    Raises:
        DateRangeError: The result falls outside years 1 to 9999
    """
    try:
        return value + timedelta(days=days)
    except OverflowError as exc:
        raise DateRangeError(value, f"{format_date(value)} + {days} days") from exc


def add_years(value: date, years: int) -> date:
    """
    Add whole years.

    29 February moved into a non-leap year overflows into 1 March, the same
    normalization the scheduler has always applied to stored yearly tasks.

    Raises:
        DateRangeError: The result falls outside years 1 to 9999

    Example:
        >>> add_years(date(2024, 2, 29), 1)
        date(2025, 3, 1)
    """
    year = value.year + years
    try:
        if value.month == 2 and value.day == 29 and not calendar.isleap(year):
            return date(year, 3, 1)
        return value.replace(year=year)
    except ValueError as exc:
        raise DateRangeError(value, f"{format_date(value)} + {years} years") from exc


def today() -> date:
    """Current local calendar date."""
    return date.today()
