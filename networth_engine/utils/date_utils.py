"""Helpers for calendar arithmetic on snapshot dates."""

from datetime import date, datetime


def coerce_date(value) -> date | None:
    """Normalize date-like values returned by database drivers.

    Args:
        value: date, datetime, ISO string, or None.

    Returns:
        date | None: Normalized date value.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def coerce_datetime(value) -> datetime | None:
    """Normalize timestamp values returned by database drivers."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value))


def month_start(day: date) -> date:
    """Return the first day of the month containing ``day``."""
    return day.replace(day=1)


def next_month_start(day: date) -> date:
    """Return the first day of the month following ``day``."""
    if day.month == 12:
        return date(day.year + 1, 1, 1)
    return date(day.year, day.month + 1, 1)


def subtract_months(day: date, months: int) -> date:
    """Move ``day`` back by a number of months, clamping the day of month.

    Args:
        day: Reference date.
        months: Number of months to subtract.

    Returns:
        date: Date ``months`` months before ``day``.
    """
    total = day.year * 12 + (day.month - 1) - months
    year, month = divmod(total, 12)
    month += 1
    first = date(year, month, 1)
    last_day = (next_month_start(first) - first).days
    return date(year, month, min(day.day, last_day))


__all__ = [
    "coerce_date",
    "coerce_datetime",
    "month_start",
    "next_month_start",
    "subtract_months",
]
