"""Date and timestamp parsing utilities."""

from datetime import date, datetime, time, timedelta
from typing import Optional
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

TIMESTAMP_FORMAT = "%Y/%m/%d %H:%M"
END_OF_DAY = time(23, 59, 59, 999000)

PERIODS = ("today", "this-week", "this-month", "this-year", "last-week", "last-month", "last-year")


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports absolute dates ("2024-01-15", "2024/01/15", "January 15, 2024")
    and the relative words "today", "yesterday", "tomorrow" as well as
    "this week|month|year" and "last week|month|year", which resolve to the
    first day of that period.

    Args:
        date_str: Date string in various formats

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    text = date_str.strip().lower()
    today = date.today()

    relative_days = {"today": 0, "yesterday": -1, "tomorrow": 1}
    if text in relative_days:
        return today + timedelta(days=relative_days[text])

    if text.startswith(("this ", "last ")):
        which, _, period = text.partition(" ")
        if period in ("week", "month", "year"):
            start, _ = get_date_range(f"{which}-{period}")
            return start

    try:
        return date_parser.parse(text).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def get_date_range(period: str) -> tuple[date, date]:
    """Get start and end dates for a named period.

    Args:
        period: One of today, this-week, this-month, this-year, last-week,
            last-month, last-year

    Returns:
        Tuple of (start_date, end_date); "this" periods end today

    Raises:
        ValueError: If period string is not recognized
    """
    period = period.strip().lower()
    today = date.today()
    monday = today - timedelta(days=today.weekday())
    first_of_month = today.replace(day=1)
    first_of_year = today.replace(month=1, day=1)

    if period == "today":
        return (today, today)
    if period == "this-week":
        return (monday, today)
    if period == "this-month":
        return (first_of_month, today)
    if period == "this-year":
        return (first_of_year, today)
    if period == "last-week":
        start = monday - timedelta(days=7)
        return (start, start + timedelta(days=6))
    if period == "last-month":
        return (first_of_month - relativedelta(months=1), first_of_month - timedelta(days=1))
    if period == "last-year":
        return (first_of_year - relativedelta(years=1), first_of_year - timedelta(days=1))

    raise ValueError(f"Unknown period: '{period}'. Supported periods: {', '.join(PERIODS)}")


def parse_timestamp(value: str) -> Optional[datetime]:
    """Parse a ledger date string.

    Ledger dates are written as "YYYY/MM/DD HH:MM"; other formats are parsed
    leniently.

    Returns:
        Naive datetime, or None if the value cannot be parsed
    """
    try:
        return datetime.strptime(value, TIMESTAMP_FORMAT)
    except (TypeError, ValueError):
        pass
    try:
        return date_parser.parse(value).replace(tzinfo=None)
    except (TypeError, ValueError, OverflowError):
        return None


def day_bounds(start: Optional[date], end: Optional[date]) -> tuple[Optional[datetime], Optional[datetime]]:
    """Widen a date range to the first and last millisecond of its days."""
    lower = datetime.combine(start, time.min) if start is not None else None
    upper = datetime.combine(end, END_OF_DAY) if end is not None else None
    return lower, upper


def format_timestamp(moment: datetime) -> str:
    """Format a moment the way ledger dates are stored."""
    return moment.strftime(TIMESTAMP_FORMAT)
