"""
Tests for src.domain.shared.date_parser

One group per issuer encoding. All readers return None (never raise) for
text that is not a date.
"""

from datetime import date

import pytest

from src.domain.shared.date_parser import (
    cell_text,
    excel_serial_to_date,
    parse_compact_date,
    parse_korean_date,
    parse_manual_date,
    parse_short_dotted_date,
    parse_timestamp_date,
)


class TestKoreanDate:
    """Hyundai: '2025년 08월 14일'."""

    def test_padded(self):
        assert parse_korean_date("2025년 08월 14일") == date(2025, 8, 14)

    def test_unpadded_without_spaces(self):
        assert parse_korean_date("2025년8월4일") == date(2025, 8, 4)

    def test_impossible_date(self):
        assert parse_korean_date("2025년 02월 30일") is None

    def test_not_a_date(self):
        assert parse_korean_date("총 합계") is None


class TestShortDottedDate:
    """KB: 'YY.MM.DD'."""

    def test_reads_20yy(self):
        assert parse_short_dotted_date("25.08.13") == date(2025, 8, 13)

    def test_full_year_is_rejected(self):
        assert parse_short_dotted_date("2025.08.13") is None

    def test_sub_header(self):
        assert parse_short_dotted_date("원금") is None


class TestCompactDate:
    """Samsung and Onnuri: 'YYYYMMDD' as text or number."""

    def test_text(self):
        assert parse_compact_date("20250912") == date(2025, 9, 12)

    def test_number(self):
        assert parse_compact_date(20250912) == date(2025, 9, 12)

    def test_float_number(self):
        assert parse_compact_date(20250912.0) == date(2025, 9, 12)

    def test_bad_month(self):
        assert parse_compact_date("20251312") is None

    def test_empty(self):
        assert parse_compact_date(None) is None


class TestTimestampDate:
    """Seongnam and Woori timestamps."""

    def test_dashes_with_time(self):
        assert parse_timestamp_date("2025-10-30 16:09:03") == date(2025, 10, 30)

    def test_dots_with_time(self):
        assert parse_timestamp_date("2025.12.31 08:39") == date(2025, 12, 31)

    def test_not_a_timestamp(self):
        assert parse_timestamp_date("거래일시") is None


class TestExcelSerial:
    """Lotte: date serials with a time part."""

    def test_with_time_part(self):
        assert excel_serial_to_date(45882.000601851854) == date(2025, 8, 13)

    def test_integer(self):
        assert excel_serial_to_date(45662) == date(2025, 1, 5)

    def test_numeric_text(self):
        assert excel_serial_to_date("45882.5") == date(2025, 8, 13)

    def test_small_numbers_are_not_dates(self):
        assert excel_serial_to_date(15000) is None

    @pytest.mark.parametrize("value", [None, "이용일", True, float("nan")])
    def test_not_a_serial(self, value):
        assert excel_serial_to_date(value) is None


class TestManualDate:
    """The four formats accepted in the manual-entry sheet."""

    @pytest.mark.parametrize(
        "value",
        [45662, "2025-01-05", "2025.1.5", "2025/01/05", "01/05/2025", "1-5-2025"],
    )
    def test_accepted_formats(self, value):
        assert parse_manual_date(value) == date(2025, 1, 5)

    @pytest.mark.parametrize("value", [None, "", "어제", "2025-1-5x"])
    def test_rejected(self, value):
        assert parse_manual_date(value) is None


class TestCellText:
    def test_integral_float_loses_decimal(self):
        assert cell_text(20250912.0) == "20250912"

    def test_none(self):
        assert cell_text(None) == ""

    def test_strips(self):
        assert cell_text("  할부 ") == "할부"
