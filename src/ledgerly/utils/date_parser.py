"""Date parsing utilities."""

from datetime import date, datetime, timedelta
from typing import Optional

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

PERIODS = ("this-month", "this-year", "this-week", "last-month", "last-year", "last-week")


def _start_of_week(day: date) -> date:
    return day - timedelta(days=day.weekday())


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports absolute dates ("2024-01-15", "January 15, 2024", ...) and the
    relative forms "today", "yesterday", "tomorrow" and "last/this/next"
    followed by "week", "month" or "year" (first day of that period).

    Args:
        date_str: Date string in various formats

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_days = {"today": 0, "yesterday": -1, "tomorrow": 1}
    if date_str in relative_days:
        return today + timedelta(days=relative_days[date_str])

    shifts = {"last": -1, "this": 0, "next": 1}
    prefix, _, period = date_str.partition(" ")
    if prefix in shifts and period in ("week", "month", "year"):
        shift = shifts[prefix]
        if period == "week":
            return _start_of_week(today) + timedelta(weeks=shift)
        if period == "month":
            return today.replace(day=1) + relativedelta(months=shift)
        return today.replace(month=1, day=1) + relativedelta(years=shift)

    try:
        return date_parser.parse(date_str).date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def get_date_range(period: str) -> tuple[date, date]:
    """Get inclusive start and end dates for a named period.

    Args:
        period: One of ``PERIODS`` (this-month, last-week, ...)

    Returns:
        Tuple of (start_date, end_date). "this-*" periods end today.

    Raises:
        ValueError: If period string is not recognized
    """
    period = period.strip().lower()
    today = date.today()

    if period == "this-month":
        return today.replace(day=1), today
    if period == "this-year":
        return today.replace(month=1, day=1), today
    if period == "this-week":
        return _start_of_week(today), today
    if period == "last-month":
        end = today.replace(day=1) - timedelta(days=1)
        return end.replace(day=1), end
    if period == "last-year":
        end = today.replace(month=1, day=1) - timedelta(days=1)
        return end.replace(month=1, day=1), end
    if period == "last-week":
        start = _start_of_week(today) - timedelta(weeks=1)
        return start, start + timedelta(days=6)

    raise ValueError(f"Unknown period: '{period}'. Supported periods: {', '.join(PERIODS)}")


def at_time_of(day: date, now: Optional[datetime] = None) -> datetime:
    """Combine a picked calendar day with the current time of day.

    Entries are dated by day, but keep the wall-clock time they were logged
    at so entries on the same day keep a meaningful order.
    """
    now = now or datetime.now()
    return datetime.combine(day, now.time())
