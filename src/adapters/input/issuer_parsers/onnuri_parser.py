"""
Input adapter: Onnuri gift-voucher payment history parser.

LAYOUT (first sheet, zero-based columns):
    0 거래일자 | 1 거래시각 | 2 거래구분 | 3 가맹점 및 상품권명 |
    4 사업자번호 | 5 거래방식 | 6 거래유형 | 7 거래상태 | 8 거래금액

Vouchers are prepaid: no installments and no billing total. Only
completed payments ("결제완료", or a blank status) are kept; cancelled
ones are left out.
"""

from src.adapters.input.issuer_parsers.base import IssuerParser
from src.domain.models.enums import SourceType
from src.domain.models.parse_result import ParseResult
from src.domain.models.raw_workbook import RawWorkbook
from src.domain.models.transaction import StatementEntry
from src.domain.services.result_assembler import assemble_success
from src.domain.shared.date_parser import parse_compact_date
from src.domain.shared.money import parse_amount
from src.domain.shared.row_walk import IndexedRow, RowWalkState, indexed_rows, walk_rows
from src.domain.shared.sheet_scan import cell_at, text_at
from src.domain.shared.text_cleaner import clean_whitespace


class OnnuriVoucherParser(IssuerParser):
    """Parser for Onnuri voucher payment histories."""

    ALIASES = ("onnuri", "온누리")
    REQUIRED_KEYWORDS = ("거래일자", "가맹점 및 상품권명", "거래금액")

    COL_DATE: int = 0
    COL_MERCHANT: int = 3
    COL_STATUS: int = 7
    COL_AMOUNT: int = 8

    HEADER_KEYWORDS: tuple[str, ...] = ("거래일자", "가맹점", "거래금액")
    HEADER_SCAN_ROWS: int = 10

    COMPLETED_STATUS: str = "결제완료"

    @property
    def source_type(self) -> SourceType:
        return SourceType.ONNURI

    def parse(self, workbook: RawWorkbook, file_name: str = "") -> ParseResult:
        sheet = self._require_sheet(workbook, 0, file_name)
        header = self._require_header(sheet, self.HEADER_KEYWORDS, self.HEADER_SCAN_ROWS, file_name)

        state = walk_rows(indexed_rows(sheet.rows, header.row_index + 1), self._step)
        return assemble_success(self.source_type, state.entries)

    def _step(self, state: RowWalkState, indexed_row: IndexedRow) -> RowWalkState:
        index, row = indexed_row

        payment_date = parse_compact_date(cell_at(row, self.COL_DATE))
        if payment_date is None:
            return state

        merchant = clean_whitespace(text_at(row, self.COL_MERCHANT))
        if not merchant:
            return state

        status = text_at(row, self.COL_STATUS)
        if status and status != self.COMPLETED_STATUS:
            return state

        amount = parse_amount(cell_at(row, self.COL_AMOUNT))
        if amount <= 0:
            return state

        return state.with_entry(
            StatementEntry(row_index=index, date=payment_date, merchant=merchant, amount=amount)
        )
