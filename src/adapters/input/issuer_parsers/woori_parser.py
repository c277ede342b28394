"""
Input adapter: Woori Bank account history parser.

The bank exports an ".xls" that is really an HTML table; the workbook
loader reads it the same as a binary workbook.

LAYOUT (first sheet, zero-based columns):
    0 No. | 1 거래일시 | 2 적요 | 3 기재내용 | 4 찾으신금액 |
    5 맡기신금액 | 6 거래후 잔액 | 7 취급기관 | 8 메모

PARSING LOGIC:
1. Header row: "거래일시" + "적요" + "기재내용" within the first 10 rows.
2. Deposit-only rows are income; withdrawal-only rows are expenses.
   Rows with both or neither are internal movements and are skipped.
3. Small movements (below MIN_AMOUNT) are noise for a household ledger.
4. Movements already covered by another statement are skipped: voucher
   top-ups (the voucher history lists the purchases), card payments (the
   card statement lists them) and deposit interest.
5. Cash machine withdrawals (적요 contains "CD") read "ATM 인출".
"""

from fnmatch import fnmatchcase

from src.adapters.input.issuer_parsers.base import IssuerParser
from src.domain.models.enums import (
    DEFAULT_CATEGORY,
    DEFAULT_INCOME_CATEGORY,
    SourceType,
    TransactionType,
)
from src.domain.models.parse_result import ParseResult
from src.domain.models.raw_workbook import RawWorkbook
from src.domain.models.transaction import StatementEntry
from src.domain.services.result_assembler import assemble_success
from src.domain.shared.date_parser import parse_timestamp_date
from src.domain.shared.money import parse_amount
from src.domain.shared.row_walk import IndexedRow, RowWalkState, indexed_rows, walk_rows
from src.domain.shared.sheet_scan import cell_at, text_at
from src.domain.shared.text_cleaner import clean_whitespace


def matches_any(text: str, patterns: tuple[str, ...]) -> bool:
    """Case-insensitive match against "*"-wildcard patterns.

    A pattern without "*" must equal the whole text.

    Examples:
        >>> matches_any("삼성카드결제", ("*카드*",))
        True
        >>> matches_any("온누리충전2", ("온누리충전",))
        False
    """
    normalized = text.strip().lower()
    if not normalized:
        return False
    return any(fnmatchcase(normalized, pattern.strip().lower()) for pattern in patterns)


class WooriBankParser(IssuerParser):
    """Parser for Woori Bank account histories (income and expenses)."""

    ALIASES = ("woori", "우리은행")
    REQUIRED_KEYWORDS = ("거래일시", "찾으신금액", "맡기신금액")

    COL_DATE: int = 1
    COL_SUMMARY: int = 2
    COL_DESCRIPTION: int = 3
    COL_WITHDRAWAL: int = 4
    COL_DEPOSIT: int = 5

    HEADER_KEYWORDS: tuple[str, ...] = ("거래일시", "적요", "기재내용")
    HEADER_SCAN_ROWS: int = 10

    # Generic file name of the export, only trusted on .xls files
    EXPORT_FILE_NAME: str = "거래내역"
    EXPORT_TITLE: str = "거래내역조회"

    MIN_AMOUNT: int = 5000
    ATM_SUMMARY_CODE: str = "CD"
    ATM_MERCHANT: str = "ATM 인출"

    INCOME_SKIP_PATTERNS: tuple[str, ...] = ("*예금결산이자*",)
    EXPENSE_SKIP_PATTERNS: tuple[str, ...] = (
        "온누리충전",
        "온누리자동충전",
        "성남사랑상품권",
        "*카드*",
    )

    @property
    def source_type(self) -> SourceType:
        return SourceType.WOORI

    def can_parse(self, file_name: str, header_keywords: list[str]) -> bool:
        lowered = file_name.lower()
        if self.EXPORT_FILE_NAME in lowered and ".xls" in lowered:
            return True
        if any(self.EXPORT_TITLE in keyword for keyword in header_keywords):
            return True
        return super().can_parse(file_name, header_keywords)

    def parse(self, workbook: RawWorkbook, file_name: str = "") -> ParseResult:
        sheet = self._require_sheet(workbook, 0, file_name)
        header = self._require_header(sheet, self.HEADER_KEYWORDS, self.HEADER_SCAN_ROWS, file_name)

        state = walk_rows(indexed_rows(sheet.rows, header.row_index + 1), self._step)
        return assemble_success(self.source_type, state.entries)

    def _step(self, state: RowWalkState, indexed_row: IndexedRow) -> RowWalkState:
        index, row = indexed_row

        movement_date = parse_timestamp_date(text_at(row, self.COL_DATE))
        if movement_date is None:
            return state

        summary = clean_whitespace(text_at(row, self.COL_SUMMARY))
        description = clean_whitespace(text_at(row, self.COL_DESCRIPTION))
        withdrawal = parse_amount(cell_at(row, self.COL_WITHDRAWAL))
        deposit = parse_amount(cell_at(row, self.COL_DEPOSIT))

        if deposit > 0 and withdrawal == 0:
            amount = deposit
            transaction_type = TransactionType.INCOME
            category = DEFAULT_INCOME_CATEGORY
            skip_patterns = self.INCOME_SKIP_PATTERNS
        elif withdrawal > 0 and deposit == 0:
            amount = withdrawal
            transaction_type = TransactionType.EXPENSE
            category = DEFAULT_CATEGORY
            skip_patterns = self.EXPENSE_SKIP_PATTERNS
        else:
            return state

        if amount < self.MIN_AMOUNT or matches_any(description, skip_patterns):
            return state

        merchant = self._merchant_name(summary, description)
        if not merchant:
            return state

        return state.with_entry(
            StatementEntry(
                row_index=index,
                date=movement_date,
                merchant=merchant,
                amount=amount,
                category=category,
                transaction_type=transaction_type,
            )
        )

    def _merchant_name(self, summary: str, description: str) -> str:
        if self.ATM_SUMMARY_CODE in summary.upper():
            return self.ATM_MERCHANT
        return description or summary
