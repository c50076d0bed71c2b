"""
Unit tests for utils.py module.

Tests validation functions, rate conversions, annuity helper and
formatting utilities.
"""

import pytest

from dindin.exceptions import InvalidInputError
from dindin.utils import (
    annual_percent_to_monthly,
    check_finite,
    check_non_negative,
    format_currency,
    future_value_annuity_payment,
    thousands_formatter,
)


class TestValidation:
    """Test input validation functions."""

    def test_check_non_negative_valid(self):
        """Valid non-negative values should pass."""
        check_non_negative("test", 0)
        check_non_negative("test", 1.5)
        check_non_negative("test", 1000)

    def test_check_non_negative_invalid(self):
        """Negative values should raise InvalidInputError."""
        with pytest.raises(InvalidInputError, match="test must be non-negative"):
            check_non_negative("test", -0.1)

    def test_check_non_negative_rejects_nan(self):
        with pytest.raises(InvalidInputError, match="finite"):
            check_non_negative("test", float("nan"))

    def test_check_finite(self):
        check_finite("rate", -5.0)
        with pytest.raises(InvalidInputError, match="rate must be a finite number"):
            check_finite("rate", float("-inf"))


class TestRateConversion:
    """Test annual percent → monthly rate conversion."""

    def test_simple_division(self):
        assert annual_percent_to_monthly(12) == pytest.approx(0.01)
        assert annual_percent_to_monthly(0) == 0.0
        assert annual_percent_to_monthly(-6) == pytest.approx(-0.005)


class TestAnnuityPayment:
    """Test future_value_annuity_payment."""

    def test_reaches_target(self):
        r, n = 0.01, 60
        pmt = future_value_annuity_payment(100_000, r, n)
        assert pmt * ((1 + r) ** n - 1) / r == pytest.approx(100_000)

    def test_zero_target(self):
        assert future_value_annuity_payment(0, 0.01, 12) == 0.0
        assert future_value_annuity_payment(-10, 0.01, 12) == 0.0

    def test_zero_months_returns_target(self):
        assert future_value_annuity_payment(5000, 0.01, 0) == 5000

    def test_zero_rate_divides_evenly(self):
        assert future_value_annuity_payment(1200, 0.0, 12) == pytest.approx(100)

    def test_overflow_raises_typed_error(self):
        with pytest.raises(InvalidInputError, match="overflows"):
            future_value_annuity_payment(1000, 1.0, 2000)


class TestFormatting:
    """Test formatting utilities."""

    @pytest.mark.parametrize("value, expected", [
        (1234.5, "R$ 1.234,50"),
        (0, "R$ 0,00"),
        (1_500_000, "R$ 1.500.000,00"),
        (-20, "-R$ 20,00"),
    ])
    def test_format_currency(self, value, expected):
        assert format_currency(value) == expected

    def test_format_currency_decimals_and_symbol(self):
        assert format_currency(1_500_000, decimals=0) == "R$ 1.500.000"
        assert format_currency(99.999, symbol="US$") == "US$ 100,00"

    @pytest.mark.parametrize("value, expected", [
        (0, "0"),
        (115_000, "115k"),
        (1_500, "1.5k"),
    ])
    def test_thousands_formatter(self, value, expected):
        assert thousands_formatter(value, None) == expected
