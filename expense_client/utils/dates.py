"""Date helpers for request parameters and display.

The backend exchanges dates as ISO ``YYYY-MM-DD`` strings; display dates use
the id-ID short form ("12 Jun 2025").
"""

from __future__ import annotations

import calendar
from datetime import date, datetime, timezone
from typing import NamedTuple

from dateutil import parser as dateparser
from dateutil.relativedelta import relativedelta

# id-ID abbreviated month names, January first
_SHORT_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "Mei", "Jun",
    "Jul", "Agu", "Sep", "Okt", "Nov", "Des",
)


class YearMonth(NamedTuple):
    year: int
    month: int


def parse_date(value: str) -> datetime | None:
    """Parse a date string in any common format; None if it is not a date."""
    if not value or not value.strip():
        return None
    try:
        return dateparser.parse(value)
    except (ValueError, OverflowError):
        return None


def is_valid_date(value: str) -> bool:
    return parse_date(value) is not None


def format_date(value: str | date | None) -> str:
    """Format a date or ISO date string for display, e.g. "12 Jun 2025".

    Empty or unparseable input yields an empty string.
    """
    if not value:
        return ""
    if isinstance(value, str):
        parsed = parse_date(value)
        if parsed is None:
            return ""
        value = parsed
    return f"{value.day} {_SHORT_MONTHS[value.month - 1]} {value.year}"


def format_date_to_string(value: date) -> str:
    """``YYYY-MM-DD`` form of a date; aware datetimes are converted to UTC first."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        value = value.date()
    return value.isoformat()


def get_current_date() -> str:
    """Today's date in UTC as ``YYYY-MM-DD``."""
    return format_date_to_string(datetime.now(timezone.utc))


def get_month_name(month: int) -> str:
    """Full month name for ``month`` (1-12)."""
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")
    return calendar.month_name[month]


def get_current_month(today: date | None = None) -> YearMonth:
    today = today or date.today()
    return YearMonth(today.year, today.month)


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """First and last day of the given month."""
    first = date(year, month, 1)
    last = first + relativedelta(months=1, days=-1)
    return first, last
