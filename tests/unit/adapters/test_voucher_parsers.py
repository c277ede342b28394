"""
Tests for the gift-voucher parsers (Onnuri and Seongnam Love).

Vouchers are prepaid: every kept row is a completed payment, there are
no installments and no billing total.
"""

from datetime import date

import pytest

from src.adapters.input.issuer_parsers.onnuri_parser import OnnuriVoucherParser
from src.adapters.input.issuer_parsers.seongnam_parser import SeongnamVoucherParser
from src.domain.exceptions import HeaderNotFoundError
from src.domain.models.enums import SourceType
from src.domain.models.raw_workbook import RawWorkbook

ONNURI_HEADER = ["거래일자", "거래시각", "거래구분", "가맹점 및 상품권명", "사업자번호", "거래방식", "거래유형", "거래상태", "거래금액"]
SEONGNAM_HEADER = ["순번", "상품권명", "거래일시", "거래구분", "거래방법", "사용처", "거래금액", "잔고"]


class TestOnnuriVoucherParser:
    """Unit tests for OnnuriVoucherParser."""

    @pytest.fixture
    def parser(self):
        return OnnuriVoucherParser()

    @pytest.fixture
    def workbook(self):
        return RawWorkbook.from_lists(
            [
                ["온누리상품권 결제내역"],
                ONNURI_HEADER,
                ["20251008", "12:30", "결제", "망원시장  청과", "123-45-67890", "QR", "일반", "결제완료", 15000],
                [20251009, "13:00", "결제", "망원시장 정육", "123-45-67891", "QR", "일반", "결제취소", 22000],
                ["20251010", "09:10", "결제", "통인시장 떡집", "123-45-67892", "카드", "일반", None, "8,000"],
                ["합계", None, None, None, None, None, None, None, 45000],
            ]
        )

    def test_recognition(self, parser):
        assert parser.can_parse("온누리_결제내역.xlsx", [])
        assert parser.can_parse("export.xlsx", ONNURI_HEADER)
        assert not parser.can_parse("export.xlsx", SEONGNAM_HEADER)

    def test_completed_and_blank_status_are_kept(self, parser, workbook):
        result = parser.parse(workbook, "onnuri.xlsx")

        assert result.source_type == SourceType.ONNURI
        assert [t.merchant for t in result.data] == ["망원시장 청과", "통인시장 떡집"]
        assert [t.amount for t in result.data] == [15000, 8000]
        assert result.data[0].date == date(2025, 10, 8)

    def test_no_billing_total(self, parser, workbook):
        result = parser.parse(workbook)
        assert result.billing_total is None
        assert all(not t.is_installment for t in result.data)

    def test_header_not_found(self, parser):
        with pytest.raises(HeaderNotFoundError):
            parser.parse(RawWorkbook.from_lists([["거래일자", "금액"]]), "onnuri.xlsx")


class TestSeongnamVoucherParser:
    """Unit tests for SeongnamVoucherParser."""

    @pytest.fixture
    def parser(self):
        return SeongnamVoucherParser()

    @pytest.fixture
    def workbook(self):
        return RawWorkbook.from_lists(
            [
                ["성남사랑상품권 이용내역"],
                ["조회기간 2025.10.01 ~ 2025.10.31"],
                SEONGNAM_HEADER,
                [None, None, None, None, None, None, "(원)", "(원)"],
                [1, "성남사랑", "2025-10-30 16:09:03", "결제완료", "QR", "분식집", 8000, 42000],
                [2, "성남사랑", 45960.5, None, "카드", "약국", 12000, 30000],
                [3, "성남사랑", "2025-10-31 10:00:00", "충전", "계좌", "충전", 50000, 80000],
                ["합계", None, None, None, None, None, 70000, None],
            ]
        )

    def test_recognition(self, parser):
        assert parser.can_parse("chak_202510.xlsx", [])
        assert parser.can_parse("CHAK.xlsx", [])
        assert parser.can_parse("export.xlsx", SEONGNAM_HEADER)

    def test_rows_with_sequence_number(self, parser, workbook):
        result = parser.parse(workbook, "chak_202510.xlsx")

        assert [t.merchant for t in result.data] == ["분식집", "약국"]
        assert result.total_amount == 20000

    def test_timestamp_and_serial_dates(self, parser, workbook):
        dates = [t.date for t in parser.parse(workbook).data]
        assert dates == [date(2025, 10, 30), date(2025, 10, 30)]

    def test_data_start_fallback(self, parser):
        """Without a numbered row near the header, data starts two rows below it."""
        wb = RawWorkbook.from_lists(
            [SEONGNAM_HEADER, ["sub"], ["x"], ["x"], ["x"], ["x"], [1, "성남사랑", "2025-10-01 10:00:00", "", "", "빵집", 5000, 0]]
        )
        assert [t.merchant for t in parser.parse(wb).data] == ["빵집"]

    def test_header_within_fifteen_rows(self, parser):
        rows = [["안내"]] * 14 + [SEONGNAM_HEADER, [1, "성남사랑", "2025-10-01 10:00:00", "", "", "빵집", 5000, 0]]
        assert parser.parse(RawWorkbook.from_lists(rows)).transaction_count == 1

        rows = [["안내"]] * 15 + [SEONGNAM_HEADER]
        with pytest.raises(HeaderNotFoundError):
            parser.parse(RawWorkbook.from_lists(rows), "chak.xlsx")
