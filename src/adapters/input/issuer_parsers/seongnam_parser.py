"""
Input adapter: Seongnam Love gift-voucher payment history parser.

The file comes from the voucher app "chak" and is password protected
(the holder's 8-digit birth date); the decryptor handles that before
this parser runs.

LAYOUT (first sheet, zero-based columns):
    0 순번 | 1 상품권명 | 2 거래일시 | 3 거래구분 | 4 거래방법 |
    5 사용처 | 6 거래금액 | 7 잔고

PARSING LOGIC:
1. Header row: "거래일시" + "사용처" + "거래금액" within the first 15 rows.
   A sub-header row may follow it.
2. Data rows are the rows whose 순번 is a number.
3. 거래일시 is "2025-10-30 16:09:03" (or a date serial).
4. Only completed payments ("결제완료" or blank) are kept.
"""

from src.adapters.input.issuer_parsers.base import IssuerParser
from src.domain.models.enums import SourceType
from src.domain.models.markers import HeaderLocation
from src.domain.models.parse_result import ParseResult
from src.domain.models.raw_workbook import Cell, RawWorkbook, Sheet
from src.domain.models.transaction import StatementEntry
from src.domain.services.result_assembler import assemble_success
from src.domain.shared.date_parser import excel_serial_to_date, parse_timestamp_date
from src.domain.shared.money import parse_amount
from src.domain.shared.row_walk import IndexedRow, RowWalkState, indexed_rows, walk_rows
from src.domain.shared.sheet_scan import cell_at, text_at
from src.domain.shared.text_cleaner import clean_whitespace


def _is_number(value: Cell) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class SeongnamVoucherParser(IssuerParser):
    """Parser for Seongnam Love voucher payment histories."""

    ALIASES = ("chak", "seongnam", "성남사랑")
    REQUIRED_KEYWORDS = ("거래일시", "사용처", "거래금액")

    COL_SEQUENCE: int = 0
    COL_DATE: int = 2
    COL_STATUS: int = 3
    COL_MERCHANT: int = 5
    COL_AMOUNT: int = 6

    HEADER_KEYWORDS: tuple[str, ...] = ("거래일시", "사용처", "거래금액")
    HEADER_SCAN_ROWS: int = 15

    # Rows after the header where the first numbered row is looked for
    DATA_START_WINDOW: int = 4

    COMPLETED_STATUS: str = "결제완료"

    @property
    def source_type(self) -> SourceType:
        return SourceType.SEONGNAM

    def parse(self, workbook: RawWorkbook, file_name: str = "") -> ParseResult:
        sheet = self._require_sheet(workbook, 0, file_name)
        header = self._require_header(sheet, self.HEADER_KEYWORDS, self.HEADER_SCAN_ROWS, file_name)

        start = self._find_data_start(sheet, header)
        state = walk_rows(indexed_rows(sheet.rows, start), self._step)
        return assemble_success(self.source_type, state.entries)

    def _find_data_start(self, sheet: Sheet, header: HeaderLocation) -> int:
        """First row after the header with a numeric 순번; header + 2 when
        none shows up within DATA_START_WINDOW rows."""
        first = header.row_index + 1
        for index in range(first, min(first + self.DATA_START_WINDOW, len(sheet.rows))):
            if _is_number(cell_at(sheet.rows[index], self.COL_SEQUENCE)):
                return index
        return header.row_index + 2

    def _step(self, state: RowWalkState, indexed_row: IndexedRow) -> RowWalkState:
        index, row = indexed_row

        if not _is_number(cell_at(row, self.COL_SEQUENCE)):
            return state

        date_cell = cell_at(row, self.COL_DATE)
        if _is_number(date_cell):
            payment_date = excel_serial_to_date(date_cell)
        else:
            payment_date = parse_timestamp_date(text_at(row, self.COL_DATE))
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
