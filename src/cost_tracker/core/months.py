"""Calendar month arithmetic.

A month is the half-open interval ``[month_start, next_month_start)``, so
month length never enters the calculation.
"""

from datetime import datetime

import pytz

MIN_YEAR = 1970
MAX_YEAR = 3000


def month_start(year: int, month: int, tz: pytz.BaseTzInfo) -> datetime:
    """First instant of the month, localized in ``tz``."""
    return tz.localize(datetime(year, month, 1))


def next_month_start(year: int, month: int, tz: pytz.BaseTzInfo) -> datetime:
    """First instant of the following month (exclusive end of ``month``)."""
    if month == 12:
        return month_start(year + 1, 1, tz)
    return month_start(year, month + 1, tz)


def month_bounds(year: int, month: int, tz: pytz.BaseTzInfo) -> tuple[datetime, datetime]:
    """Return ``(start, end)`` of the month's half-open interval."""
    return month_start(year, month, tz), next_month_start(year, month, tz)


def is_month_closed(year: int, month: int, now: datetime, tz: pytz.BaseTzInfo) -> bool:
    """
    Return True once the month's last instant has fully elapsed.

    The current month is never closed. Evaluated against ``now`` on every
    call; nothing about closedness is stored.
    """
    return next_month_start(year, month, tz) < now
