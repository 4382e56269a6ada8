"""Tests for pricebook/ingest/prices.py"""

import pytest

from pricebook.ingest.prices import (
    clean_price,
    parse_decimal,
    try_clean_price,
    try_parse_decimal,
)


class TestCleanPrice:
    def test_currency_and_thousands_separator(self):
        assert clean_price("$1,234.50") == 1234.5

    def test_empty_is_zero(self):
        assert clean_price("") == 0

    def test_none_is_zero(self):
        assert clean_price(None) == 0

    def test_text_is_zero(self):
        assert clean_price("n/a") == 0

    def test_inner_whitespace_is_stripped(self):
        assert clean_price(" $ 1 000.25 ") == 1000.25

    def test_plain_number(self):
        assert clean_price("42") == 42.0

    def test_trailing_text_is_ignored(self):
        assert clean_price("$12.99/ea") == pytest.approx(12.99)

    def test_negative_clamps_to_zero(self):
        assert clean_price("-$5.00") == 0

    def test_result_is_float(self):
        assert isinstance(clean_price("$3"), float)


class TestParseDecimal:
    def test_plain_decimal(self):
        assert parse_decimal("8.5") == 8.5

    def test_leading_dot(self):
        assert parse_decimal(".25") == 0.25

    def test_exponent(self):
        assert parse_decimal("1e3") == 1000.0

    def test_unit_suffix_is_ignored(self):
        assert parse_decimal("2.5 lbs") == 2.5

    def test_thousands_separator_not_stripped(self):
        # Weights are parsed as-is; the comma ends the number
        assert parse_decimal("1,200") == 1.0

    def test_currency_symbol_not_stripped(self):
        assert parse_decimal("$3") == 0

    def test_blank_and_none(self):
        assert parse_decimal("") == 0
        assert parse_decimal(None) == 0

    def test_infinity_and_nan_are_zero(self):
        assert parse_decimal("inf") == 0
        assert parse_decimal("NaN") == 0
        assert parse_decimal("1e999") == 0


class TestTryVariants:
    def test_failure_returns_none(self):
        assert try_parse_decimal("abc") is None
        assert try_clean_price("") is None

    def test_zero_is_not_a_failure(self):
        assert try_clean_price("$0.00") == 0.0
        assert try_parse_decimal("0") == 0.0
