"""
Tests for src.domain.shared.money

Each case comes from a cell shape found in a real statement:
- 15000.0       → numbers stored by the spreadsheet
- "1,234,567원" → text with separators and suffix
- "△3,300"      → Hyundai reversals
- "10,000원"    → manual entry typed by hand
"""

import pytest

from src.domain.shared.money import (
    format_won,
    is_bare_integer,
    largest_amount,
    parse_absolute_amount,
    parse_amount,
    parse_signed_amount,
)


class TestParseAmount:
    """Tests for parse_amount (digits and '-' only)."""

    def test_integer(self):
        assert parse_amount(15000) == 15000

    def test_float_is_floored(self):
        assert parse_amount(15000.9) == 15000

    def test_text_with_separators(self):
        assert parse_amount("1,234,567") == 1234567

    def test_text_with_suffix(self):
        assert parse_amount("1,234,567원") == 1234567

    def test_negative_text(self):
        assert parse_amount("-3,300") == -3300

    @pytest.mark.parametrize("value", [None, "", "결제완료", float("nan"), True])
    def test_unreadable_is_zero(self, value):
        assert parse_amount(value) == 0


class TestParseSignedAmount:
    """Tests for parse_signed_amount (understands triangle markers)."""

    @pytest.mark.parametrize("value", ["△3,300", "▲3,300", "-3,300", " -3,300 "])
    def test_negative_markers(self, value):
        assert parse_signed_amount(value) == -3300

    def test_positive_text(self):
        assert parse_signed_amount("3,300") == 3300

    def test_float_rounds_half_up(self):
        assert parse_signed_amount(863865.5) == 863866

    def test_float_rounds_down(self):
        assert parse_signed_amount(863865.4) == 863865

    def test_text_without_digits(self):
        assert parse_signed_amount("결제") == 0

    def test_none(self):
        assert parse_signed_amount(None) == 0


class TestParseAbsoluteAmount:
    """Tests for the amounts typed in the manual-entry sheet."""

    def test_won_suffix(self):
        assert parse_absolute_amount("10,000원") == 10000

    def test_sign_is_ignored(self):
        assert parse_absolute_amount("-5000") == 5000

    def test_spaces(self):
        assert parse_absolute_amount(" 12 000 ") == 12000

    def test_number(self):
        assert parse_absolute_amount(12000.4) == 12000

    def test_garbage(self):
        assert parse_absolute_amount("만원") == 0


class TestHelpers:
    def test_largest_amount(self):
        assert largest_amount(("일시불합계", 3, "1,200,000", 15000.0, None)) == 1200000

    def test_largest_amount_without_numbers(self):
        assert largest_amount(("합계", None)) == 0

    def test_format_won(self):
        assert format_won(6001) == "6,001"
        assert format_won(1234567) == "1,234,567"

    @pytest.mark.parametrize("text,expected", [("3", True), (" 12 ", True), ("", False), ("3개월", False)])
    def test_is_bare_integer(self, text, expected):
        assert is_bare_integer(text) is expected
