"""
Common date/time utility functions for consistent date/time handling across the application

Storage: All dates are stored in UTC in the backend
Display: Human-facing strings (estimated delivery) are formatted at the edge

SQLite hands back naive datetimes even for timezone-aware columns, so
anything read from the database goes through as_utc() before arithmetic.
"""

from datetime import datetime, timedelta, timezone


def as_utc(dt: datetime) -> datetime:
    """
    Convert dt to tz-aware UTC.
    If dt is naive, we treat it as UTC (consistent with existing behavior).

    Args:
        dt: datetime object (naive or timezone-aware)

    Returns:
        datetime object in UTC timezone
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def utc_now() -> datetime:
    """
    Get current UTC datetime.

    Returns:
        Current datetime in UTC timezone
    """
    return datetime.now(timezone.utc)


def format_display_date(dt: datetime) -> str:
    """
    Format a datetime as a long display date, e.g. "October 19, 2026".
    """
    dt = as_utc(dt)
    return f"{dt.strftime('%B')} {dt.day}, {dt.year}"


def estimated_delivery_date(created_at: datetime, days: int) -> str:
    """
    Display string for the delivery estimate shown at checkout.
    """
    return format_display_date(as_utc(created_at) + timedelta(days=days))
