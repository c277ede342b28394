"""
Tests for the pandas workbook loader.

The .xlsx files are real, written in memory with openpyxl; the HTML
export is a literal table like the bank's.
"""

from datetime import date, datetime

import pytest

from src.adapters.input.workbook_loaders.pandas_loader import (
    PandasWorkbookLoader,
    decode_html,
    normalize_cell,
    to_serial,
)
from src.domain.exceptions import InvalidDataError


@pytest.fixture
def loader():
    return PandasWorkbookLoader()


class TestXlsx:
    def test_sheets_in_order(self, loader, xlsx_bytes):
        data = xlsx_bytes([["청구요약"]], [["일시불"]], names=["청구요약", "일시불"])

        wb = loader.load(data, "samsung.xlsx")

        assert [s.name for s in wb.sheets] == ["청구요약", "일시불"]
        assert wb.sheet(1).first_cell_text() == "일시불"

    def test_no_header_inference(self, loader, xlsx_bytes):
        wb = loader.load(xlsx_bytes([["이용일", "금액"], ["20250912", 15000]]))
        assert wb.sheet(0).rows[0] == ("이용일", "금액")

    def test_cell_types(self, loader, xlsx_bytes):
        wb = loader.load(
            xlsx_bytes(
                [
                    ["text", 15000, 45882.5],
                    [datetime(2025, 8, 13), None, "20250912"],
                ]
            )
        )
        first, second = wb.sheet(0).rows

        assert first == ("text", 15000, 45882.5)
        assert second[0] == 45882
        assert second[1] is None
        assert second[2] == "20250912"

    def test_garbage_zip(self, loader):
        with pytest.raises(InvalidDataError):
            loader.load(b"PK\x03\x04 truncated download", "broken.xlsx")

    def test_unknown_signature(self, loader):
        with pytest.raises(InvalidDataError, match="not a spreadsheet"):
            loader.load(b"%PDF-1.7", "statement.xlsx")


class TestLegacyXls:
    """Binary .xls (BIFF8), the format Hyundai and KB export, read by xlrd."""

    def test_sheets_in_order(self, loader, xls_bytes):
        data = xls_bytes([["요약"]], [["이용일자"]], names=["요약", "이용내역"])

        wb = loader.load(data, "kb_202509.xls")

        assert [s.name for s in wb.sheets] == ["요약", "이용내역"]
        assert wb.sheet(1).first_cell_text() == "이용일자"

    def test_grid_and_cell_types(self, loader, xls_bytes):
        wb = loader.load(
            xls_bytes(
                [
                    ["이용일자", "이용하신 가맹점", "원금"],
                    [date(2025, 8, 13), "스타벅스", 15000],
                    ["25.08.13", None, 1234.5],
                    [datetime(2025, 8, 13, 12, 0), "GS25", "-3,000"],
                ]
            ),
            "kb.xls",
        )
        rows = wb.sheet(0).rows

        assert rows[0] == ("이용일자", "이용하신 가맹점", "원금")
        # xls stores every number as a float; whole ones come back as int
        assert rows[1] == (45882, "스타벅스", 15000)
        assert isinstance(rows[1][2], int)
        assert rows[2] == ("25.08.13", None, 1234.5)
        assert rows[3] == (45882.5, "GS25", "-3,000")

    def test_damaged_xls(self, loader, xls_bytes):
        data = xls_bytes([["이용일자"]])
        with pytest.raises(InvalidDataError):
            loader.load(data[:600], "kb.xls")


class TestHtmlExport:
    HTML = (
        "<html><head><meta charset='utf-8'></head><body>"
        "<table>"
        "<tr><th>No.</th><th>거래일시</th><th>적요</th><th>기재내용</th></tr>"
        "<tr><td>1</td><td>2025.12.31 08:39</td><td>CD</td><td>편의점</td></tr>"
        "</table></body></html>"
    )

    def test_header_row_stays_in_grid(self, loader):
        wb = loader.load(self.HTML.encode("utf-8"), "거래내역.xls")

        sheet = wb.sheet(0)
        assert sheet.name == "Table1"
        assert sheet.rows[0] == ("No.", "거래일시", "적요", "기재내용")
        assert sheet.rows[1][1:] == ("2025.12.31 08:39", "CD", "편의점")

    def test_cp949_export(self, loader):
        wb = loader.load(self.HTML.encode("cp949"), "거래내역.xls")
        assert "거래일시" in wb.sheet(0).rows[0]

    def test_decode_html_prefers_utf8(self):
        assert decode_html("적요".encode("utf-8")) == "적요"


class TestNormalizeCell:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (None, None),
            ("", None),
            (float("nan"), None),
            (15000.0, 15000),
            (45882.5, 45882.5),
            (True, "True"),
            ("결제완료", "결제완료"),
        ],
    )
    def test_values(self, value, expected):
        assert normalize_cell(value) == expected

    def test_date(self):
        assert normalize_cell(date(2025, 1, 5)) == 45662

    def test_serial_keeps_time(self):
        assert to_serial(datetime(2025, 8, 13, 12, 0)) == 45882.5
