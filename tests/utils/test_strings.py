"""
Tests for query parameter formatting helpers.
"""

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest

from gateway_reporting import DepositStatus
from gateway_reporting.utils import format_date, to_numeric, to_param_value


class TestToNumeric:
    """Amounts render as minor-unit digit strings."""

    @pytest.mark.parametrize("value", [10, 10.0, "10", "10.00", Decimal("10"), Decimal("10.00")])
    def test_equivalent_amounts(self, value):
        assert to_numeric(value) == "1000"

    @pytest.mark.parametrize("value, expected", [
        (Decimal("0.5"), "050"),
        (Decimal("12.345"), "1235"),
        (Decimal("12.344"), "1234"),
        (1234567.89, "123456789"),
        (Decimal("1E+3"), "100000"),
        (0, "000"),
    ])
    def test_rendering(self, value, expected):
        assert to_numeric(value) == expected

    def test_no_scientific_notation(self):
        assert "E" not in to_numeric(Decimal("1E+10"))

    def test_none(self):
        assert to_numeric(None) is None
        assert to_numeric("") is None

    @pytest.mark.parametrize("value", [0, Decimal("0"), "0.00", 0.0])
    def test_zero_is_a_filter(self, value):
        assert to_numeric(value) == "000"

    @pytest.mark.parametrize("value", [-10, Decimal("-10.00"), "-10"])
    def test_sign_is_dropped(self, value):
        assert to_numeric(value) == "1000"


class TestFormatDate:
    """Dates render as YYYY-MM-DD."""

    def test_datetime(self):
        assert format_date(datetime(2024, 3, 5, 14, 30, 0)) == "2024-03-05"

    def test_date(self):
        assert format_date(date(2024, 12, 31)) == "2024-12-31"

    def test_no_timezone_conversion(self):
        late = datetime(2024, 3, 5, 23, 30, tzinfo=timezone(timedelta(hours=-5)))
        assert format_date(late) == "2024-03-05"

    def test_none(self):
        assert format_date(None) is None


class TestToParamValue:

    def test_enum(self):
        assert to_param_value(DepositStatus.FUNDED) == "FUNDED"

    def test_date(self):
        assert to_param_value(date(2024, 1, 2)) == "2024-01-02"

    def test_passthrough(self):
        assert to_param_value("abc") == "abc"
        assert to_param_value(5) == 5
        assert to_param_value(None) is None
