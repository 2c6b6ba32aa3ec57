"""Input coercion for values arriving from the HTTP layer.

Each helper either returns a clean Python value or raises ``ValidationError``
with an ``invalid <field>`` message. No helper has side effects.
"""

import math
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

import pytz
from dateutil import parser as date_parser

from cost_tracker.core.exceptions import ValidationError
from cost_tracker.core.timezone import parse_datetime_local, to_local
from cost_tracker.domain.models.enums import CostCategory

# Largest integer SQLite can store (signed 64-bit)
MAX_INT = 2**63 - 1
MIN_INT = -(2**63)


def _invalid(field: str) -> ValidationError:
    return ValidationError(f"invalid {field}")


def require_text(value: Any, field: str) -> str:
    """Return ``value`` trimmed; reject non-strings and blank text."""
    if not isinstance(value, str) or not value.strip():
        raise _invalid(field)
    return value.strip()


def parse_decimal(value: Any, field: str) -> Decimal:
    """Parse a finite number (int, float, Decimal or numeric text) exactly."""
    if value is None or isinstance(value, bool):
        raise _invalid(field)
    if isinstance(value, float):
        # str() keeps the shortest repr, so 0.1 stays 0.1 instead of its binary expansion
        value = str(value)
    if isinstance(value, str):
        value = value.strip()
    try:
        number = Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        raise _invalid(field)
    # Must also fit a finite double, since amounts leave as JSON numbers
    if not number.is_finite() or not math.isfinite(float(number)):
        raise _invalid(field)
    return number


def parse_int(value: Any, field: str) -> int:
    """Parse a finite integral number; ``12.0`` and ``"12"`` are accepted."""
    number = parse_decimal(value, field)
    if number != number.to_integral_value():
        raise _invalid(field)
    result = int(number)
    if not MIN_INT <= result <= MAX_INT:
        raise _invalid(field)
    return result


def parse_timestamp(
    value: Any,
    field: str,
    tz: Optional[pytz.BaseTzInfo] = None,
) -> datetime:
    """Parse an ISO-8601 timestamp (or datetime) into the ledger timezone."""
    if isinstance(value, datetime):
        return to_local(value, tz)
    if not isinstance(value, str) or not value.strip():
        raise _invalid(field)
    try:
        return parse_datetime_local(value.strip(), tz)
    except (ValueError, OverflowError):
        raise _invalid(field)


def parse_date(value: Any, field: str) -> date:
    """Parse a calendar date from a date, datetime or date-like text."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise _invalid(field)
    try:
        return date_parser.parse(value.strip()).date()
    except (ValueError, OverflowError):
        raise _invalid(field)


def parse_category(value: Any) -> CostCategory:
    """Return the matching ``CostCategory``; names are case-sensitive."""
    if not isinstance(value, str):
        raise _invalid("category")
    try:
        return CostCategory(value)
    except ValueError:
        raise _invalid("category")
