"""Date helpers for day-based tracking."""

from datetime import date, timedelta

SUNDAY = 0


def shift_day(day: date, days: int) -> date:
    """Return the day ``days`` away from ``day``."""
    return day + timedelta(days=days)


def weekday_index(day: date) -> int:
    """Return the weekday with Sunday as 0 and Saturday as 6."""
    return (day.weekday() + 1) % 7


def week_start(day: date) -> date:
    """Return the Monday of the week containing ``day``."""
    return day - timedelta(days=day.weekday())


def week_bounds(day: date) -> tuple[date, date]:
    """Return the Sunday and Saturday of the week containing ``day``."""
    start = day - timedelta(days=weekday_index(day) - SUNDAY)
    return start, start + timedelta(days=6)
