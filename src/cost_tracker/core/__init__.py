"""Core utilities and shared functionality."""

from cost_tracker.core.timezone import (
    Clock,
    now_local,
    to_local,
    parse_datetime_local,
    get_ledger_tz,
)
from cost_tracker.core.exceptions import (
    AppError,
    ValidationError,
    NotFoundError,
    StoreError,
)

__all__ = [
    "Clock",
    "now_local",
    "to_local",
    "parse_datetime_local",
    "get_ledger_tz",
    "AppError",
    "ValidationError",
    "NotFoundError",
    "StoreError",
]
