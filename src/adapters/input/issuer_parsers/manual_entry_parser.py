"""
Input adapter: Manual-entry spreadsheet parser.

Households keep cash spending and anything no issuer exports in a sheet of
their own, with the columns 날짜 | 이용처 | 금액 | 카테고리 | 메모 in any
order and at any position. The header row is found by exact label match;
카테고리 and 메모 are optional.

Because people type these rows by hand:
- four date formats are accepted (see parse_manual_date);
- amounts like "10,000원" are accepted, and the sign is ignored;
- the category must belong to MANUAL_CATEGORIES, otherwise it becomes
  the generic one.

An empty sheet is a valid, empty ledger.
"""

import re

from src.adapters.input.issuer_parsers.base import IssuerParser
from src.domain.exceptions import HeaderNotFoundError
from src.domain.models.enums import DEFAULT_CATEGORY, MANUAL_CATEGORIES, SourceType
from src.domain.models.parse_result import ParseResult
from src.domain.models.raw_workbook import Cell, RawWorkbook
from src.domain.models.transaction import StatementEntry
from src.domain.services.result_assembler import assemble_success
from src.domain.shared.date_parser import cell_text, parse_manual_date
from src.domain.shared.money import parse_absolute_amount
from src.domain.shared.row_walk import IndexedRow, RowWalkState, indexed_rows, walk_rows
from src.domain.shared.sheet_scan import cell_at, find_header_row


class ManualEntryParser(IssuerParser):
    """Parser for the household's own manual-entry sheet."""

    ALIASES = ("직접입력",)
    REQUIRED_KEYWORDS = ("날짜", "이용처", "금액", "카테고리", "메모")

    LABEL_DATE: str = "날짜"
    LABEL_MERCHANT: str = "이용처"
    LABEL_AMOUNT: str = "금액"
    LABEL_CATEGORY: str = "카테고리"

    HEADER_KEYWORDS: tuple[str, ...] = (LABEL_DATE, LABEL_MERCHANT, LABEL_AMOUNT)
    HEADER_SCAN_ROWS: int = 10

    @property
    def source_type(self) -> SourceType:
        return SourceType.MANUAL

    def _matches_file_name(self, file_name: str) -> bool:
        # Repeated downloads are saved as "직접입력 (1).xlsx", "직접입력(2).xlsx"
        return super()._matches_file_name(re.sub(r"\s*\(\d+\)", "", file_name))

    def parse(self, workbook: RawWorkbook, file_name: str = "") -> ParseResult:
        sheet = workbook.sheet(0)
        if sheet is None or sheet.is_empty:
            return assemble_success(self.source_type, ())

        header = find_header_row(sheet, self.HEADER_KEYWORDS, max_rows=self.HEADER_SCAN_ROWS, exact=True)
        if header is None:
            raise HeaderNotFoundError(
                self.source_type.value, file_name, list(self.HEADER_KEYWORDS), self.HEADER_SCAN_ROWS
            )

        columns = (
            header.column_of(self.LABEL_DATE),
            header.column_of(self.LABEL_MERCHANT),
            header.column_of(self.LABEL_AMOUNT),
            header.column_of(self.LABEL_CATEGORY),
        )
        state = walk_rows(
            indexed_rows(sheet.rows, header.row_index + 1),
            lambda s, r: self._step(columns, s, r),
        )
        return assemble_success(self.source_type, state.entries)

    def _step(
        self,
        columns: tuple[int, int, int, int | None],
        state: RowWalkState,
        indexed_row: IndexedRow,
    ) -> RowWalkState:
        date_col, merchant_col, amount_col, category_col = columns
        index, row = indexed_row

        entry_date = parse_manual_date(cell_at(row, date_col))
        if entry_date is None:
            return state

        merchant = cell_text(cell_at(row, merchant_col))
        if not merchant:
            return state

        amount = parse_absolute_amount(cell_at(row, amount_col))
        if amount <= 0:
            return state

        category_cell = cell_at(row, category_col) if category_col is not None else None
        return state.with_entry(
            StatementEntry(
                row_index=index,
                date=entry_date,
                merchant=merchant,
                amount=amount,
                category=self._normalize_category(category_cell),
            )
        )

    @staticmethod
    def _normalize_category(value: Cell) -> str:
        text = cell_text(value)
        return text if text in MANUAL_CATEGORIES else DEFAULT_CATEGORY
