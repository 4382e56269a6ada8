"""Tests for pricebook/formatting.py"""

from pricebook.formatting import format_currency, format_weight


class TestFormatCurrency:
    def test_thousands_and_cents(self):
        assert format_currency(1234.5) == "$1,234.50"

    def test_zero(self):
        assert format_currency(0) == "$0.00"

    def test_rounds_to_cents(self):
        assert format_currency(9.999) == "$10.00"

    def test_negative(self):
        assert format_currency(-3) == "-$3.00"


class TestFormatWeight:
    def test_three_decimals(self):
        assert format_weight(8.5) == "8.500 lbs"

    def test_zero(self):
        assert format_weight(0) == "0.000 lbs"
