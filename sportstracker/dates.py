"""Helpers for ``YYYY-MM-DD`` date strings and durations."""

from __future__ import annotations

import datetime
import re

_DATE_FORMAT = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_DATE_FIELDS = re.compile(r"\s*([+-]?[0-9]+)-\s*([+-]?[0-9]+)-\s*([+-]?[0-9]+)")

_THIRTY_DAY_MONTHS = frozenset({4, 6, 9, 11})


def _is_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def is_date_valid(date: str) -> bool:
    """Check that ``date`` is ``YYYY-MM-DD`` with a real day between 1900 and 2100."""
    if not _DATE_FORMAT.fullmatch(date):
        return False
    year, month, day = (int(part) for part in date.split("-"))
    if not 1900 <= year <= 2100 or not 1 <= month <= 12 or day < 1:
        return False
    if month in _THIRTY_DAY_MONTHS:
        max_day = 30
    elif month == 2:
        max_day = 29 if _is_leap_year(year) else 28
    else:
        max_day = 31
    return day <= max_day


def is_date_in_range(date: str, start: str, end: str) -> bool:
    """Inclusive range check; ``YYYY-MM-DD`` strings compare chronologically."""
    return start <= date <= end


def _ordinal(date: str) -> int:
    match = _DATE_FIELDS.match(date)
    if match is None:
        raise ValueError(f"cannot parse date {date!r}")
    year, month, day = (int(group) for group in match.groups())
    # Out-of-range months and days roll over into neighbouring ones.
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    return datetime.date(year, month, 1).toordinal() + day - 1


def days_between(start: str, end: str) -> int:
    """Whole days from ``start`` to ``end``; 0 if either cannot be interpreted."""
    try:
        return _ordinal(end) - _ordinal(start)
    except (ValueError, OverflowError):
        return 0


def format_duration(minutes: float) -> str:
    """Render minutes as ``"<h>h <m>m"``, dropping the hours part when zero."""
    total = int(minutes)
    sign = -1 if total < 0 else 1
    hours = sign * (abs(total) // 60)
    mins = sign * (abs(total) % 60)
    if hours > 0:
        return f"{hours}h {mins}m"
    return f"{mins}m"


def current_date() -> str:
    """Today's local date as ``YYYY-MM-DD``."""
    return datetime.date.today().isoformat()