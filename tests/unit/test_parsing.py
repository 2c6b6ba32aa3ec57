"""
Unit tests for input coercion helpers.

Tests cover:
- Text, decimal, integer, timestamp, date and category parsing
- Rejection messages use the field name
"""

from datetime import date
from decimal import Decimal

import pytest
import pytz

from cost_tracker.core.exceptions import ValidationError
from cost_tracker.core.parsing import (
    require_text,
    parse_decimal,
    parse_int,
    parse_timestamp,
    parse_date,
    parse_category,
)
from cost_tracker.domain.models import CostCategory

from tests.conftest import utc_datetime


class TestRequireText:

    def test_strips_whitespace(self):
        assert require_text("  lunch ", "description") == "lunch"

    @pytest.mark.parametrize("value", ["", "   ", None, 3, ["lunch"]])
    def test_rejects_blank_or_non_string(self, value):
        with pytest.raises(ValidationError) as exc_info:
            require_text(value, "description")

        assert exc_info.value.message == "invalid description"


class TestParseDecimal:

    def test_int_and_numeric_string(self):
        assert parse_decimal(50, "amount") == Decimal("50")
        assert parse_decimal("50.25", "amount") == Decimal("50.25")

    def test_float_keeps_short_representation(self):
        """
        GIVEN the float 0.1
        WHEN I parse it
        THEN it is exactly Decimal("0.1"), not its binary expansion
        """
        assert parse_decimal(0.1, "amount") == Decimal("0.1")

    def test_negative_amount_allowed(self):
        assert parse_decimal(-12.5, "amount") == Decimal("-12.5")

    @pytest.mark.parametrize("value", [None, True, False, "abc", "", "NaN", "Infinity", {}, []])
    def test_rejects_non_numbers(self, value):
        with pytest.raises(ValidationError) as exc_info:
            parse_decimal(value, "amount")

        assert exc_info.value.message == "invalid amount"

    def test_rejects_float_nan(self):
        with pytest.raises(ValidationError):
            parse_decimal(float("nan"), "amount")

    @pytest.mark.parametrize("value", ["1e400", "-1e400", Decimal("1E+309"), 10**400])
    def test_rejects_values_beyond_double_range(self, value):
        """
        GIVEN a number Decimal can hold but a double cannot
        WHEN I parse it
        THEN it is rejected, since it could not be emitted as a JSON number
        """
        with pytest.raises(ValidationError) as exc_info:
            parse_decimal(value, "amount")

        assert exc_info.value.message == "invalid amount"

    def test_tiny_values_still_accepted(self):
        assert parse_decimal("1e-400", "amount") == Decimal("1e-400")


class TestParseInt:

    def test_integral_values_accepted(self):
        assert parse_int(123, "ownerId") == 123
        assert parse_int("123", "ownerId") == 123
        assert parse_int(12.0, "ownerId") == 12

    def test_fraction_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_int(12.5, "year")

        assert exc_info.value.message == "invalid year"

    def test_text_rejected(self):
        with pytest.raises(ValidationError):
            parse_int("abc", "month")

    @pytest.mark.parametrize(
        "value",
        [2**63, "9223372036854775808", -(2**63) - 1, "1e400", "1e300"],
    )
    def test_rejects_values_beyond_64_bit_range(self, value):
        with pytest.raises(ValidationError) as exc_info:
            parse_int(value, "ownerId")

        assert exc_info.value.message == "invalid ownerId"

    def test_64_bit_bounds_accepted(self):
        assert parse_int(2**63 - 1, "ownerId") == 2**63 - 1
        assert parse_int(str(-(2**63)), "ownerId") == -(2**63)


class TestParseTimestamp:

    def test_iso_with_offset(self):
        result = parse_timestamp("2024-06-20T10:00:00+02:00", "occurredAt", pytz.utc)

        assert result == utc_datetime(2024, 6, 20, 8, 0, 0)

    def test_naive_string_assumed_in_ledger_timezone(self):
        eastern = pytz.timezone("America/New_York")
        result = parse_timestamp("2024-06-20T10:00:00", "occurredAt", eastern)

        assert result.tzinfo is not None
        assert result.astimezone(pytz.utc) == utc_datetime(2024, 6, 20, 14, 0, 0)

    def test_datetime_passthrough(self):
        value = utc_datetime(2024, 6, 20)
        assert parse_timestamp(value, "occurredAt", pytz.utc) == value

    @pytest.mark.parametrize("value", ["not a date", "", 12345, None])
    def test_rejects_garbage(self, value):
        with pytest.raises(ValidationError) as exc_info:
            parse_timestamp(value, "occurredAt", pytz.utc)

        assert exc_info.value.message == "invalid occurredAt"


class TestParseDate:

    def test_iso_date(self):
        assert parse_date("1990-01-01", "birthday") == date(1990, 1, 1)

    def test_datetime_reduced_to_date(self):
        assert parse_date(utc_datetime(1990, 1, 1), "birthday") == date(1990, 1, 1)

    def test_rejects_garbage(self):
        with pytest.raises(ValidationError):
            parse_date("someday", "birthday")


class TestParseCategory:

    @pytest.mark.parametrize("name", ["food", "health", "housing", "sports", "education"])
    def test_known_categories(self, name):
        assert parse_category(name) == CostCategory(name)

    @pytest.mark.parametrize("value", ["Food", "travel", "", None, 1])
    def test_rejects_unknown(self, value):
        with pytest.raises(ValidationError) as exc_info:
            parse_category(value)

        assert exc_info.value.message == "invalid category"
