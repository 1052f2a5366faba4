"""Date parsing utilities."""

from datetime import date, timedelta
from typing import Optional

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

from fintrack.domain.entities import Period


def parse_date(date_str: str, today: Optional[date] = None) -> date:
    """Parse a date string into a date object.

    Supports various formats including relative dates:
    - Absolute dates: "2024-01-15", "January 15, 2024", etc.
    - Relative dates: "today", "yesterday", "this month", "last month", "this year"

    Args:
        date_str: Date string in various formats
        today: Reference date for relative dates (defaults to date.today())

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    if today is None:
        today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
        "this month": today.replace(day=1),
        "last month": (today - relativedelta(months=1)).replace(day=1),
        "this year": today.replace(month=1, day=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    try:
        # ISO first so "2024-02-03" is never read as day-first
        return date.fromisoformat(date_str)
    except ValueError:
        pass

    try:
        dt = date_parser.parse(date_str)
        return dt.date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def get_period_range(period: Period, today: Optional[date] = None) -> tuple[date, date]:
    """Get first and last calendar day of a reporting period.

    Args:
        period: Reporting period
        today: Reference date (defaults to date.today())

    Returns:
        Tuple of (start_date, end_date), both inclusive
    """
    if today is None:
        today = date.today()

    if period == Period.THIS_MONTH:
        start_date = today.replace(day=1)
        end_date = start_date + relativedelta(months=1) - timedelta(days=1)
    elif period == Period.LAST_MONTH:
        # January wraps to December of the previous year
        start_date = (today - relativedelta(months=1)).replace(day=1)
        end_date = today.replace(day=1) - timedelta(days=1)
    elif period == Period.THIS_YEAR:
        start_date = today.replace(month=1, day=1)
        end_date = today.replace(month=12, day=31)
    else:
        raise ValueError(f"Unknown period: '{period}'")

    return start_date, end_date
