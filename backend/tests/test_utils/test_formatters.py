"""
Unit tests for formatters
Run with: pytest tests/test_utils/test_formatters.py -v
"""
from datetime import timedelta

import pytest

from shelfkit.core.exceptions import InvalidInputError
from shelfkit.utils.formatters import (
    get_locale,
    format_price,
    format_number,
    format_percentage,
    format_file_size,
    capitalize,
    capitalize_words,
    truncate_text,
    format_duration,
)


def _plain_spaces(text: str) -> str:
    """CLDR patterns use non-breaking spaces; compare against plain ones."""
    return text.replace("\xa0", " ").replace("\u202f", " ")


class TestLocale:
    """Test locale resolution"""

    def test_default_locale(self):
        assert str(get_locale()) == "es_ES"

    def test_dash_separator_accepted(self):
        assert str(get_locale("en-US")) == "en_US"

    def test_unknown_locale_raises(self):
        with pytest.raises(InvalidInputError):
            get_locale("xx_INVALID")


class TestFormatPrice:
    """Test locale currency formatting"""

    def test_spanish_default(self):
        result = _plain_spaces(format_price(1234.5))

        assert result == "1.234,50 €"

    def test_us_symbol_prefix(self):
        assert format_price(1234.5, "en_US", "$") == "$1,234.50"

    def test_custom_decimal_digits(self):
        assert format_price(9.5, "en_US", "$", decimal_digits=0) == "$10"
        assert format_price(9.5, "en_US", "$", decimal_digits=3) == "$9.500"

    def test_ties_round_away_from_zero(self):
        assert format_price(2.125, "en_US", "$") == "$2.13"
        assert format_price(0.5, "en_US", "$", decimal_digits=0) == "$1"
        assert format_price(-2.125, "en_US", "$") == "-$2.13"

    def test_spanish_tie(self):
        assert _plain_spaces(format_price(1.005)) == "1,01 €"

    def test_negative_amount(self):
        assert format_price(-3.25, "en_US", "$") == "-$3.25"

    def test_custom_symbol_replaces_locale_symbol(self):
        result = format_price(10, "es_ES", "USD")

        assert "USD" in result
        assert "€" not in result

    def test_negative_digits_raise(self):
        with pytest.raises(InvalidInputError):
            format_price(1.0, "en_US", "$", decimal_digits=-1)


class TestFormatNumber:
    """Test thousands grouping"""

    def test_us_grouping(self):
        assert format_number(1234567, "en_US") == "1,234,567"

    def test_spanish_grouping(self):
        assert format_number(1234567, "es_ES") == "1.234.567"

    def test_small_number(self):
        assert format_number(42, "en_US") == "42"

    def test_negative_number(self):
        assert format_number(-1000, "en_US") == "-1,000"


class TestFormatPercentage:
    """Test percentage formatting (value is divided by 100)"""

    def test_fraction_preserved(self):
        assert format_percentage(42.5, "en_US") == "42.5%"

    def test_whole_value(self):
        assert format_percentage(50, "en_US") == "50%"

    def test_spanish_separators(self):
        assert _plain_spaces(format_percentage(42.5, "es_ES")) == "42,5 %"

    def test_rounds_to_two_fraction_digits(self):
        assert format_percentage(33.3333, "en_US") == "33.33%"


class TestFormatFileSize:
    """Test human-readable sizes"""

    @pytest.mark.parametrize("size,expected", [
        (0, "0.0 B"),
        (512, "512.0 B"),
        (1024, "1.0 KB"),
        (1536, "1.5 KB"),
        (1280, "1.3 KB"),
        (1310720, "1.3 MB"),
        (5 * 1024 * 1024, "5.0 MB"),
        (1073741824, "1.0 GB"),
    ])
    def test_units(self, size, expected):
        assert format_file_size(size) == expected

    def test_gigabytes_is_largest_unit(self):
        assert format_file_size(2 * 1024 ** 4) == "2048.0 GB"


class TestCapitalize:
    """Test capitalization helpers"""

    def test_empty(self):
        assert capitalize("") == ""

    def test_mixed_case(self):
        assert capitalize("hELLO") == "Hello"

    def test_single_char(self):
        assert capitalize("a") == "A"

    def test_words(self):
        assert capitalize_words("fresh ORANGE juice") == "Fresh Orange Juice"

    def test_words_collapse_spaces(self):
        assert capitalize_words("  fresh   orange ") == "Fresh Orange"

    def test_words_empty(self):
        assert capitalize_words("") == ""


class TestTruncateText:
    """Test text truncation"""

    def test_short_text_unchanged(self):
        assert truncate_text("hello", 10) == "hello"

    def test_exact_length_unchanged(self):
        assert truncate_text("hello", 5) == "hello"

    def test_long_text_truncated(self):
        assert truncate_text("hello world", 5) == "hello..."

    def test_zero_length(self):
        assert truncate_text("abc", 0) == "..."

    def test_negative_length_raises(self):
        with pytest.raises(InvalidInputError):
            truncate_text("abc", -1)


class TestFormatDuration:
    """Test duration formatting"""

    @pytest.mark.parametrize("seconds,expected", [
        (0, "0s"),
        (45, "45s"),
        (60, "1m 0s"),
        (90, "1m 30s"),
        (3600, "1h 0m"),
        (3661, "1h 1m"),
        (90061, "25h 1m"),
    ])
    def test_seconds(self, seconds, expected):
        assert format_duration(seconds) == expected

    def test_timedelta(self):
        assert format_duration(timedelta(minutes=2, seconds=5)) == "2m 5s"
