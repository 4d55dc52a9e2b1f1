"""Injectable time source for token expiry and calendar windows."""

import calendar
from collections.abc import Callable
from datetime import UTC, datetime

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


def get_clock() -> Clock:
    """Dependency returning the request clock. Tests override this with a fixed clock."""
    return utcnow


def fixed_clock(moment: datetime) -> Clock:
    """Clock that always returns the given moment."""
    return lambda: moment


def month_start(moment: datetime) -> datetime:
    """Midnight on the first day of moment's month."""
    return moment.replace(day=1, hour=0, minute=0, second=0, microsecond=0)


def add_months(moment: datetime, months: int) -> datetime:
    """Shift by whole months, clamping the day to the target month's length."""
    month_index = moment.month - 1 + months
    year = moment.year + month_index // 12
    month = month_index % 12 + 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def as_utc(moment: datetime) -> datetime:
    """Convert to UTC, treating naive datetimes (as returned by SQLite) as UTC already."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC)
