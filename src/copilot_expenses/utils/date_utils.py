"""
Date utilities for report windows and ledger dates.
"""

import calendar
from datetime import date, datetime, timedelta
from typing import Optional, Tuple, Union

DateLike = Union[str, date, datetime]

# Formats seen in ledger exports, tried after ISO 8601
_FALLBACK_FORMATS = ("%m/%d/%Y", "%m/%d/%y")

_ROLLING_PERIODS = {
    "last_7_days": 7,
    "last_30_days": 30,
    "last_90_days": 90,
}


def parse_calendar_date(value: DateLike) -> date:
    """
    Convert a date string (or date/datetime) to a calendar date.

    Any time component is dropped; windows compare whole days.

    Raises:
        ValueError: If the value cannot be read as a date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    text = str(value).strip()
    if not text:
        raise ValueError("Empty date")

    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        pass
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass

    for fmt in _FALLBACK_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue

    raise ValueError(f"Unrecognized date: {value!r}")


def parse_period(period: str, today: Optional[date] = None) -> Tuple[date, date]:
    """
    Resolve a period shorthand into an inclusive (start, end) window.

    Supported periods:
    - "this_month", "last_month"
    - "this_year", "last_year"
    - "last_7_days", "last_30_days", "last_90_days"
    - "ytd" (year to date)

    Raises:
        ValueError: If period is not recognized
    """
    if today is None:
        today = datetime.now().date()

    if period == "this_month":
        return get_month_range(today.year, today.month)
    if period == "last_month":
        previous = today.replace(day=1) - timedelta(days=1)
        return get_month_range(previous.year, previous.month)
    if period == "this_year":
        return date(today.year, 1, 1), date(today.year, 12, 31)
    if period == "last_year":
        return date(today.year - 1, 1, 1), date(today.year - 1, 12, 31)
    if period == "ytd":
        return date(today.year, 1, 1), today
    if period in _ROLLING_PERIODS:
        return today - timedelta(days=_ROLLING_PERIODS[period]), today

    raise ValueError(f"Unknown period: {period}")


def get_month_range(year: int, month: int) -> Tuple[date, date]:
    """
    First and last day of a month.

    Raises:
        ValueError: If month is not in valid range (1-12)
    """
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be between 1 and 12, got {month}")

    _, last_day = calendar.monthrange(year, month)
    return date(year, month, 1), date(year, month, last_day)
