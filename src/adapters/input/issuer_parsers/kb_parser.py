"""
Input adapter: KB Kookmin Card statement parser.

LAYOUT (first sheet, zero-based columns). The header spans two rows; the
second one only carries sub-labels (원금, 수수료) and no date.
    0 이용일자 | 1 이용카드 | 2 구분 | 3 이용하신 가맹점 | 4 (blank) |
    5 이용금액 | 6 할부개월 | 7 회차 | 8 원금 | 9 수수료(이자)

PARSING LOGIC:
1. Header row: "이용일자" + "이용하신 가맹점" within the first 10 rows.
2. Dates are "YY.MM.DD" and sticky: grouped rows leave them blank. The
   sub-header row has no date before any data row, so it is skipped.
3. The billed amount is 원금 (column 8).
4. Installment when 구분 is "할부" or 할부개월 holds a bare number.
5. Benefit rows (My WE:SH, 무이자혜택, points) and subtotals are skipped,
   case-insensitively.
6. Billing total: last row whose first cell starts with "합계" (letter
   spacing ignored, "합 계 23 건"); column 8, else the largest number.
   The walk stops at that row.
"""

from src.adapters.input.issuer_parsers.base import IssuerParser
from src.domain.models.enums import DEFAULT_CATEGORY, INSTALLMENT_CATEGORY, SourceType
from src.domain.models.parse_result import ParseResult
from src.domain.models.raw_workbook import RawWorkbook, Row, Sheet
from src.domain.models.transaction import StatementEntry
from src.domain.services.result_assembler import assemble_success
from src.domain.shared.date_parser import parse_short_dotted_date
from src.domain.shared.money import is_bare_integer, largest_amount, parse_amount
from src.domain.shared.row_walk import IndexedRow, RowWalkState, indexed_rows, walk_rows
from src.domain.shared.sheet_scan import cell_at, find_last_row, text_at
from src.domain.shared.text_cleaner import clean_merchant_name, contains_any, strip_all_whitespace


class KBCardParser(IssuerParser):
    """Parser for KB Kookmin Card statements."""

    ALIASES = ("kb", "국민")
    REQUIRED_KEYWORDS = ("이용하신 가맹점",)
    EXACT_KEYWORDS = ("회차",)

    COL_DATE: int = 0
    COL_TYPE: int = 2
    COL_MERCHANT: int = 3
    COL_MONTHS: int = 6
    COL_PRINCIPAL: int = 8

    HEADER_KEYWORDS: tuple[str, ...] = ("이용일자", "이용하신 가맹점")
    HEADER_SCAN_ROWS: int = 10

    INSTALLMENT_TYPE: str = "할부"
    TOTAL_LABEL: str = "합계"

    SKIP_MERCHANT_KEYWORDS: tuple[str, ...] = (
        "My WE:SH",
        "무이자혜택",
        "할인",
        "혜택",
        "포인트",
        "소계",
        "합계",
    )

    @property
    def source_type(self) -> SourceType:
        return SourceType.KB

    def parse(self, workbook: RawWorkbook, file_name: str = "") -> ParseResult:
        sheet = self._require_sheet(workbook, 0, file_name)
        header = self._require_header(sheet, self.HEADER_KEYWORDS, self.HEADER_SCAN_ROWS, file_name)

        total_row_index = self._find_total_row(sheet, header.row_index)
        billing_total = None
        if total_row_index is not None:
            billing_total = self._read_total(sheet.rows[total_row_index])

        state = walk_rows(
            indexed_rows(sheet.rows, header.row_index + 1, total_row_index),
            self._step,
        )
        return assemble_success(self.source_type, state.entries, billing_total)

    def _step(self, state: RowWalkState, indexed_row: IndexedRow) -> RowWalkState:
        index, row = indexed_row

        date_text = text_at(row, self.COL_DATE)
        if date_text:
            state = state.with_date(parse_short_dotted_date(date_text))
        if state.current_date is None:
            return state

        merchant_text = text_at(row, self.COL_MERCHANT)
        if not merchant_text:
            return state
        if contains_any(merchant_text, self.SKIP_MERCHANT_KEYWORDS, ignore_case=True):
            return state

        amount = parse_amount(cell_at(row, self.COL_PRINCIPAL))
        if amount <= 0:
            return state

        is_installment = (
            text_at(row, self.COL_TYPE) == self.INSTALLMENT_TYPE
            or is_bare_integer(text_at(row, self.COL_MONTHS))
        )
        return state.with_entry(
            StatementEntry(
                row_index=index,
                date=state.current_date,
                merchant=clean_merchant_name(merchant_text),
                amount=amount,
                category=INSTALLMENT_CATEGORY if is_installment else DEFAULT_CATEGORY,
                is_installment=is_installment,
            )
        )

    def _find_total_row(self, sheet: Sheet, header_row: int) -> int | None:
        def is_total_row(row: Row) -> bool:
            label = strip_all_whitespace(text_at(row, 0))
            return label.startswith(self.TOTAL_LABEL) and "소계" not in label and largest_amount(row) > 0

        return find_last_row(sheet, is_total_row, start=header_row + 1)

    def _read_total(self, row: Row) -> int:
        """원금 column of the total row, else its largest number."""
        total = parse_amount(cell_at(row, self.COL_PRINCIPAL))
        if total > 0:
            return total
        return largest_amount(row)
