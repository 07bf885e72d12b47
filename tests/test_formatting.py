"""
Tests for German date and number formatting
"""

from datetime import date
from decimal import Decimal

import pytest

from l10n_repair.formatting import NumberParseError, format_date, format_number, parse_number


class TestFormatDate:

    def test_day_and_month(self):
        assert format_date(date(2024, 3, 3), ("day", "month")) == "03. März"

    def test_with_year(self):
        assert format_date(date(2024, 6, 3), ("day", "month", "year")) == "03. Juni 2024"

    def test_with_weekday(self):
        assert format_date(date(2024, 6, 3), ("day", "month", "year", "weekday")) == "Montag, 03. Juni 2024"

    def test_unknown_locale(self):
        with pytest.raises(ValueError):
            format_date(date(2024, 1, 1), ("day",), locale="xx-XX")


class TestParseNumber:

    @pytest.mark.parametrize("text,expected", [
        ("19", Decimal("19")),
        ("1234.5", Decimal("1234.5")),
        ("19,99", Decimal("19.99")),
        (",99", Decimal("0.99")),
        ("1.234,56", Decimal("1234.56")),
        (" 42 ", Decimal("42")),
        ("-3,5", Decimal("-3.5")),
    ])
    def test_accepted_literals(self, text, expected):
        assert parse_number(text) == expected

    @pytest.mark.parametrize("text", ["", "abc", "Gesamt: 19,99", "5 - 10", "1,2,3"])
    def test_rejected_literals(self, text):
        with pytest.raises(NumberParseError):
            parse_number(text)

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_number("nope")

    @pytest.mark.parametrize("text,expected", [
        ("12.500", Decimal("12500")),
        ("1.234.567", Decimal("1234567")),
        ("1234.5", Decimal("1234.5")),
    ])
    def test_dots_group(self, text, expected):
        assert parse_number(text, dots_group=True) == expected


class TestFormatNumber:

    def test_grouping_and_decimal_comma(self):
        assert format_number(Decimal("1234567.89")) == "1.234.567,89"

    def test_small_numbers_untouched(self):
        assert format_number(Decimal("19.99")) == "19,99"
        assert format_number(Decimal("5")) == "5"

    def test_fraction_digits_capped_at_three(self):
        assert format_number(Decimal("1.23456")) == "1,235"

    def test_negative(self):
        assert format_number(Decimal("-1234.5")) == "-1.234,5"
