"""Timezone utilities for ledger timestamps.

Timestamps travel through the services as timezone-aware datetimes in the
ledger timezone (``Settings.timezone``) and are stored as naive UTC.
"""

from datetime import datetime
from typing import Callable, Optional

import pytz
from dateutil import parser as date_parser

from cost_tracker.config.settings import get_settings

Clock = Callable[[], datetime]


def get_ledger_tz() -> pytz.BaseTzInfo:
    """Return the timezone used for month boundaries."""
    return pytz.timezone(get_settings().timezone)


def now_local() -> datetime:
    """Return current time in the ledger timezone."""
    return datetime.now(get_ledger_tz())


def to_local(dt: datetime, tz: Optional[pytz.BaseTzInfo] = None) -> datetime:
    """Convert a datetime to the ledger timezone."""
    tz = tz or get_ledger_tz()
    if dt.tzinfo is None:
        # Assume naive datetime is already in ledger time
        return tz.localize(dt)
    return dt.astimezone(tz)


def parse_datetime_local(value: str, tz: Optional[pytz.BaseTzInfo] = None) -> datetime:
    """
    Parse a datetime string and return it in the ledger timezone.

    If no timezone is provided in the string, assumes the ledger timezone.
    """
    dt = date_parser.isoparse(value)
    return to_local(dt, tz)


def to_utc_naive(dt: datetime) -> datetime:
    """Convert an aware datetime to naive UTC for storage."""
    if dt.tzinfo is None:
        dt = get_ledger_tz().localize(dt)
    return dt.astimezone(pytz.utc).replace(tzinfo=None)


def from_utc_naive(dt: datetime, tz: Optional[pytz.BaseTzInfo] = None) -> datetime:
    """Convert a stored naive UTC datetime back to the ledger timezone."""
    return pytz.utc.localize(dt).astimezone(tz or get_ledger_tz())
