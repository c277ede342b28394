"""
Input adapter: Samsung Card statement parser.

The workbook has one sheet per kind of charge: 청구요약, 일시불, 할부,
연회비-기타수수료. The kind is written in the top-left cell of each sheet;
only "일시불" (lump-sum) and "할부" (installment) sheets hold purchases.

LAYOUT (zero-based columns, same on both sheets):
    0 이용일 | 1 이용구분 | 2 가맹점 | 3 이용금액 | 4 총할부금액 |
    5 이용혜택 | 6 혜택금액 | 7 개월 | 8 회차 | 9 원금 | 10 이자/수수료

PARSING LOGIC:
1. Per purchase sheet, the header row contains "이용일" and "가맹점"
   within the first 10 rows.
2. Dates are compact "20250912" (text or number). Rows without a date
   are not purchases.
3. The amount billed this period is 원금 (column 9).
4. A row is an installment when it sits on the "할부" sheet or its 회차
   column holds a bare number.
5. The billing total is the sum, over the purchase sheets, of the largest
   number on their "일시불합계" / "할부합계" rows. Informational only.
"""

from src.adapters.input.issuer_parsers.base import IssuerParser
from src.domain.exceptions import InvalidDataError
from src.domain.models.enums import DEFAULT_CATEGORY, INSTALLMENT_CATEGORY, SourceType
from src.domain.models.parse_result import ParseResult
from src.domain.models.raw_workbook import RawWorkbook, Row, Sheet
from src.domain.models.transaction import StatementEntry
from src.domain.services.result_assembler import assemble_success
from src.domain.shared.date_parser import parse_compact_date
from src.domain.shared.money import is_bare_integer, largest_amount, parse_amount
from src.domain.shared.row_walk import IndexedRow, RowWalkState, indexed_rows, walk_rows
from src.domain.shared.sheet_scan import cell_at, find_last_row, row_text, text_at
from src.domain.shared.text_cleaner import clean_merchant_name, contains_any


class SamsungCardParser(IssuerParser):
    """Parser for Samsung Card statements (multi-sheet)."""

    ALIASES = ("samsung", "삼성")
    REQUIRED_KEYWORDS = ("일시불합계",)
    EXACT_KEYWORDS = ("가맹점",)

    COL_DATE: int = 0
    COL_MERCHANT: int = 2
    COL_ROUND: int = 8
    COL_PRINCIPAL: int = 9

    HEADER_KEYWORDS: tuple[str, ...] = ("이용일", "가맹점")
    HEADER_SCAN_ROWS: int = 10

    LUMP_SUM_SHEET: str = "일시불"
    INSTALLMENT_SHEET: str = "할부"

    # Summary label of each purchase sheet
    SHEET_TOTAL_LABELS: dict[str, str] = {
        LUMP_SUM_SHEET: "일시불합계",
        INSTALLMENT_SHEET: "할부합계",
    }

    SKIP_MERCHANT_KEYWORDS: tuple[str, ...] = ("합계", "소계", "미리입금")

    @property
    def source_type(self) -> SourceType:
        return SourceType.SAMSUNG

    def parse(self, workbook: RawWorkbook, file_name: str = "") -> ParseResult:
        """Accumulates the rows and billing totals of every purchase sheet."""
        purchase_sheets = [
            sheet
            for sheet in workbook.sheets
            if sheet.first_cell_text() in self.SHEET_TOTAL_LABELS
        ]
        if not purchase_sheets:
            raise InvalidDataError(
                file_name,
                f"no '{self.LUMP_SUM_SHEET}' or '{self.INSTALLMENT_SHEET}' sheet found",
            )

        entries: list[StatementEntry] = []
        billing_total = 0

        for sheet in purchase_sheets:
            billing_total += self._sheet_billing_total(sheet)

            header = self._require_header(
                sheet, self.HEADER_KEYWORDS, self.HEADER_SCAN_ROWS, file_name
            )
            is_installment_sheet = sheet.first_cell_text() == self.INSTALLMENT_SHEET

            state = walk_rows(
                indexed_rows(sheet.rows, header.row_index + 1),
                lambda s, r: self._step(is_installment_sheet, s, r),
            )
            entries.extend(state.entries)

        return assemble_success(
            self.source_type, entries, billing_total if billing_total > 0 else None
        )

    def _step(self, is_installment_sheet: bool, state: RowWalkState, indexed_row: IndexedRow) -> RowWalkState:
        index, row = indexed_row

        merchant_text = text_at(row, self.COL_MERCHANT)
        if not merchant_text or contains_any(merchant_text, self.SKIP_MERCHANT_KEYWORDS):
            return state

        usage_date = parse_compact_date(cell_at(row, self.COL_DATE))
        if usage_date is None:
            return state

        amount = parse_amount(cell_at(row, self.COL_PRINCIPAL))
        if amount <= 0:
            return state

        is_installment = is_installment_sheet or is_bare_integer(text_at(row, self.COL_ROUND))
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

    def _sheet_billing_total(self, sheet: Sheet) -> int:
        """Largest number on the sheet's summary row, 0 without one."""
        label = self.SHEET_TOTAL_LABELS[sheet.first_cell_text()]

        def is_total_row(row: Row) -> bool:
            return label in row_text(row)

        index = find_last_row(sheet, is_total_row)
        if index is None:
            return 0
        return largest_amount(sheet.rows[index])
