"""
Test suite for currency module

Tests Decimal coercion, console amount parsing and currency formatting.
"""

import pytest
from decimal import Decimal

from simple_bank.currency import (
    MAX_DIGITS, Currency, exact_add, format_amount, parse_amount, to_decimal,
    validate_decimal_precision
)
from simple_bank.errors import ValidationError


class TestCurrency:
    """Test Currency enum"""

    def test_currency_attributes(self):
        """Test code, precision and symbol"""
        assert Currency.USD.code == "USD"
        assert Currency.USD.precision == 2
        assert Currency.USD.symbol == "$"
        assert Currency.JPY.precision == 0

    def test_from_code(self):
        """Test lookup by ISO code"""
        assert Currency.from_code("gbp") == Currency.GBP
        with pytest.raises(ValueError, match="Unsupported currency code"):
            Currency.from_code("XYZ")


class TestToDecimal:
    """Test monetary coercion"""

    def test_accepted_inputs(self):
        """Test Decimal, int, str and float inputs"""
        assert to_decimal(Decimal('1.50')) == Decimal('1.50')
        assert to_decimal(7) == Decimal('7')
        assert to_decimal(" 2.25 ") == Decimal('2.25')
        assert to_decimal(0.1) == Decimal('0.1')

    @pytest.mark.parametrize("value", [None, True, "abc", "", Decimal('NaN'), "Infinity"])
    def test_rejected_inputs(self, value):
        """Test that non-numeric and non-finite inputs are rejected"""
        with pytest.raises(ValidationError):
            to_decimal(value)

    def test_field_name_in_message(self):
        """Test error message wording"""
        with pytest.raises(ValidationError, match="Deposit amount must be a number"):
            to_decimal(None, "Deposit amount")

    def test_too_many_digits_rejected(self):
        """Test that amounts beyond the digit limit are refused instead of rounded"""
        assert to_decimal("9" * MAX_DIGITS) == Decimal("9" * MAX_DIGITS)
        with pytest.raises(ValidationError, match="Initial balance exceeds 28 significant digits"):
            to_decimal("1" + "0" * 29, "Initial balance")


class TestExactAdd:
    """Test unrounded balance arithmetic"""

    def test_exact_sums(self):
        """Test sums that fit within the digit limit"""
        assert exact_add(Decimal('10.50'), Decimal('0.25')) == Decimal('10.75')
        assert exact_add(Decimal('0'), Decimal('1e27')) == Decimal('1e27')
        assert exact_add(Decimal('50'), Decimal('50').copy_negate()) == Decimal('0')

    def test_inexact_sum_raises(self):
        """Test that a sum needing rounding raises instead"""
        with pytest.raises(ValidationError, match="Resulting balance exceeds"):
            exact_add(Decimal('1e27'), Decimal('0.01'))

    def test_global_context_untouched(self):
        """Test that the Inexact trap does not leak into the caller's context"""
        with pytest.raises(ValidationError):
            exact_add(Decimal('1e27'), Decimal('0.01'))
        assert Decimal('1e27') + Decimal('0.01') == Decimal('1e27')


class TestParseAmount:
    """Test console amount parsing"""

    @pytest.mark.parametrize("text,expected", [
        ("100", Decimal('100')),
        ("  40.00 ", Decimal('40.00')),
        ("-5.00", Decimal('-5.00')),
        ("$1,250.50", Decimal('1250.50')),
        ("£3", Decimal('3')),
    ])
    def test_valid_amounts(self, text, expected):
        """Test accepted formats"""
        assert parse_amount(text) == expected

    @pytest.mark.parametrize("text", ["", "   ", "abc", "12abc", "1.2.3", "NaN", "inf", None])
    def test_invalid_amounts(self, text):
        """Test that garbage is rejected"""
        with pytest.raises(ValueError):
            parse_amount(text)


class TestFormatting:
    """Test display formatting"""

    def test_format_amount(self):
        """Test currency rendering"""
        assert format_amount(Decimal('1234.5')) == "$1,234.50"
        assert format_amount(Decimal('-40')) == "-$40.00"
        assert format_amount(Decimal('0')) == "$0.00"
        assert format_amount(Decimal('1000'), Currency.JPY) == "¥1,000"

    def test_validate_decimal_precision(self):
        """Test rounding to currency precision"""
        assert validate_decimal_precision(Decimal('1.005'), Currency.USD) == Decimal('1.01')
        assert validate_decimal_precision(Decimal('99.5'), Currency.JPY) == Decimal('100')

    def test_format_large_amount(self):
        """Test that balances far above 1e26 still render to the cent"""
        assert format_amount(Decimal('1e27')) == "$1" + ",000" * 9 + ".00"
        assert format_amount(Decimal("9" * 28)) == "$" + "9" + ",999" * 9 + ".00"
        assert format_amount(Decimal('-1e27')) == "-$1" + ",000" * 9 + ".00"
