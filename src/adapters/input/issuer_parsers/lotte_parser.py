"""
Input adapter: Lotte Card statement parser.

Two sheets: the first is a summary (billing total), the second the
detail. Single-sheet exports put everything on the first sheet.

LAYOUT of the detail sheet (zero-based columns):
    0 이용일 | 1 이용카드 | 2 이용가맹점 | 3 이용총액 | 4 회차 |
    5 할부 | 6 원금 | 7 수수료

PARSING LOGIC:
1. Header row: "이용일" + "이용가맹점" within the first 5 rows.
2. Dates are spreadsheet serials with a time part (45882.0006).
3. Installments (column 5 holds the number of months) are billed
   principal + period fee; lump-sum rows are billed the principal only.
4. Billing total: largest number on the summary sheet's "합계" row
   (never a "소계" row). Without one, the computed total is reported.
"""

from src.adapters.input.issuer_parsers.base import IssuerParser
from src.domain.models.enums import DEFAULT_CATEGORY, INSTALLMENT_CATEGORY, SourceType
from src.domain.models.parse_result import ParseResult
from src.domain.models.raw_workbook import RawWorkbook, Row, Sheet
from src.domain.models.transaction import StatementEntry
from src.domain.services.result_assembler import assemble_success
from src.domain.shared.date_parser import excel_serial_to_date
from src.domain.shared.money import is_bare_integer, largest_amount, parse_amount
from src.domain.shared.row_walk import IndexedRow, RowWalkState, indexed_rows, walk_rows
from src.domain.shared.sheet_scan import cell_at, find_first_row, row_text, text_at
from src.domain.shared.text_cleaner import clean_merchant_name, contains_any


class LotteCardParser(IssuerParser):
    """Parser for Lotte Card statements."""

    ALIASES = ("lotte", "롯데", "이용대금명세서")
    REQUIRED_KEYWORDS = ("입금하실",)
    EXACT_KEYWORDS = ("이용가맹점",)

    COL_DATE: int = 0
    COL_MERCHANT: int = 2
    COL_INSTALLMENT: int = 5
    COL_PRINCIPAL: int = 6
    COL_FEE: int = 7

    HEADER_KEYWORDS: tuple[str, ...] = ("이용일", "이용가맹점")
    HEADER_SCAN_ROWS: int = 5

    SUMMARY_SHEET: int = 0
    DETAIL_SHEET: int = 1

    SKIP_MERCHANT_KEYWORDS: tuple[str, ...] = ("합계", "소계")

    @property
    def source_type(self) -> SourceType:
        return SourceType.LOTTE

    def parse(self, workbook: RawWorkbook, file_name: str = "") -> ParseResult:
        detail_index = self.DETAIL_SHEET if workbook.sheet_count > self.DETAIL_SHEET else self.SUMMARY_SHEET
        detail = self._require_sheet(workbook, detail_index, file_name)
        header = self._require_header(detail, self.HEADER_KEYWORDS, self.HEADER_SCAN_ROWS, file_name)

        state = walk_rows(indexed_rows(detail.rows, header.row_index + 1), self._step)

        summary = workbook.sheet(self.SUMMARY_SHEET)
        billing_total = self._billing_total(summary) if summary is not None else None
        if billing_total is None:
            billing_total = sum(entry.amount for entry in state.entries)

        return assemble_success(self.source_type, state.entries, billing_total)

    def _step(self, state: RowWalkState, indexed_row: IndexedRow) -> RowWalkState:
        index, row = indexed_row

        usage_date = excel_serial_to_date(cell_at(row, self.COL_DATE))
        if usage_date is None:
            return state

        merchant_text = text_at(row, self.COL_MERCHANT)
        if not merchant_text or contains_any(merchant_text, self.SKIP_MERCHANT_KEYWORDS):
            return state

        is_installment = is_bare_integer(text_at(row, self.COL_INSTALLMENT))
        amount = parse_amount(cell_at(row, self.COL_PRINCIPAL))
        if is_installment:
            amount += parse_amount(cell_at(row, self.COL_FEE))

        if amount <= 0:
            return state

        return state.with_entry(
            StatementEntry(
                row_index=index,
                date=usage_date,
                merchant=clean_merchant_name(merchant_text),
                amount=amount,
                category=INSTALLMENT_CATEGORY if is_installment else DEFAULT_CATEGORY,
                is_installment=is_installment,
            )
        )

    def _billing_total(self, summary: Sheet) -> int | None:
        """Largest number of the first "합계" row that has one, or None."""

        def is_total_row(row: Row) -> bool:
            text = row_text(row)
            return "합계" in text and "소계" not in text and largest_amount(row) > 0

        index = find_first_row(summary, is_total_row)
        if index is None:
            return None
        return largest_amount(summary.rows[index])
