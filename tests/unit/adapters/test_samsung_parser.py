"""
Tests for the Samsung Card parser (one sheet per kind of charge).
"""

from datetime import date

import pytest

from src.adapters.input.issuer_parsers.samsung_parser import SamsungCardParser
from src.domain.exceptions import HeaderNotFoundError, InvalidDataError
from src.domain.models.raw_workbook import RawWorkbook

HEADER = ["이용일", "이용구분", "가맹점", "이용금액", "총할부금액", "이용혜택", "혜택금액", "개월", "회차", "원금", "이자/수수료"]


def _purchase(day, merchant, principal, months=None, round_=None):
    return [day, "본인", merchant, principal, None, None, None, months, round_, principal, 0]


class TestSamsungCardParser:
    """Unit tests for SamsungCardParser."""

    @pytest.fixture
    def parser(self):
        return SamsungCardParser()

    @pytest.fixture
    def workbook(self):
        summary = [["청구요약"], ["결제하실 금액", 1219500]]
        lump_sum = [
            ["일시불"],
            HEADER,
            _purchase("20250912", "스타벅스", 4500),
            _purchase(20250913, "(주)쿠팡", 15000),
            _purchase("20250914", "미리입금", 3000),
            ["일시불합계", None, None, 19500, None, None, None, None, None, 19500, 0],
        ]
        installment = [
            ["할부"],
            HEADER,
            _purchase("20250301", "애플", 100000, months=12, round_=6),
            ["할부합계", None, None, None, None, None, None, None, None, 100000, 0],
        ]
        fees = [["연회비-기타수수료"], ["연회비", 10000]]
        return RawWorkbook.from_lists(
            summary, lump_sum, installment, fees, names=["청구요약", "일시불", "할부", "연회비"]
        )

    def test_recognises_file_name_and_headers(self, parser):
        assert parser.can_parse("samsung_202509.xlsx", [])
        assert parser.can_parse("card.xlsx", ["일시불합계", "가맹점"])
        assert not parser.can_parse("card.xlsx", ["이용가맹점"])

    def test_only_purchase_sheets_are_read(self, parser, workbook):
        result = parser.parse(workbook, "samsung_202509.xlsx")

        assert result.success
        assert [t.merchant for t in result.data] == ["스타벅스", "쿠팡", "애플"]
        assert result.total_amount == 119500

    def test_compact_dates_text_and_number(self, parser, workbook):
        result = parser.parse(workbook)
        assert result.data[0].date == date(2025, 9, 12)
        assert result.data[1].date == date(2025, 9, 13)

    def test_installment_sheet_flags_rows(self, parser, workbook):
        flags = [t.is_installment for t in parser.parse(workbook).data]
        assert flags == [False, False, True]

    def test_round_column_flags_installment(self, parser):
        wb = RawWorkbook.from_lists(
            [["일시불"], HEADER, _purchase("20250912", "하이마트", 50000, months=3, round_="2")]
        )
        assert parser.parse(wb).data[0].is_installment is True

    def test_billing_total_sums_sheet_totals(self, parser, workbook):
        assert parser.parse(workbook).billing_total == 119500

    def test_no_purchase_sheet(self, parser):
        wb = RawWorkbook.from_lists([["청구요약"], ["결제하실 금액", 0]])
        with pytest.raises(InvalidDataError):
            parser.parse(wb, "samsung.xlsx")

    def test_purchase_sheet_without_header(self, parser):
        wb = RawWorkbook.from_lists([["일시불"], ["날짜", "상호"]])
        with pytest.raises(HeaderNotFoundError):
            parser.parse(wb, "samsung.xlsx")
