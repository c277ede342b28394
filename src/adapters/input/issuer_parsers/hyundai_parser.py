"""
Input adapter: Hyundai Card statement parser.

LAYOUT (first sheet, zero-based columns):
    0 이용일 | 1 이용카드 | 2 이용가맹점 | 3 이용금액 | 4 할부/회차 |
    5 적립/할인율 | 6 예상적립/할인 | 7 결제원금 | 8 결제후잔액 | 9 수수료(이자)

PARSING LOGIC:
1. Header row: contains "이용일" and "결제원금", within the first 10 rows.
2. Dates look like "2025년 08월 14일" and only appear on the first row of a
   day; following rows of the same day inherit it (sticky date).
3. Merchant cells sometimes have the amount glued to them
   ("우지커피판교w시티점3,300"); the amount is removed from the name.
4. The amount moves between columns depending on the kind of row (see
   AMOUNT_ATTEMPTS). Reversals come as "-3,300" / "△3,300".
5. Existing installments are the rows strictly between the "해외이용소계"
   and "할부소계" rows. Their 할부/회차 column is often blank, so the
   bracket is the only reliable signal.
6. The "총 합계" row near the bottom carries the billing total.

VALIDATION (strict):
The signed sum of every extracted row, negatives included, must equal the
billing total. Otherwise the file is rejected with no partial data. Rows
with amount <= 0 are dropped only after the check.
"""

from functools import partial

from src.adapters.input.issuer_parsers.base import IssuerParser
from src.domain.models.enums import DEFAULT_CATEGORY, INSTALLMENT_CATEGORY, SourceType
from src.domain.models.markers import InstallmentRange
from src.domain.models.parse_result import ParseResult
from src.domain.models.raw_workbook import RawWorkbook, Row, Sheet
from src.domain.models.transaction import StatementEntry
from src.domain.services.reconciliation import reconcile_strict
from src.domain.services.result_assembler import assemble_success
from src.domain.shared.amount_attempts import (
    AmountAttempt,
    column_attempt,
    first_nonzero,
    scan_from_end,
)
from src.domain.shared.date_parser import parse_korean_date
from src.domain.shared.money import parse_signed_amount
from src.domain.shared.row_walk import IndexedRow, RowWalkState, indexed_rows, walk_rows
from src.domain.shared.sheet_scan import (
    cell_at,
    compact_row_text,
    find_last_row,
    row_text,
    text_at,
)
from src.domain.shared.text_cleaner import clean_merchant_name, contains_any


class HyundaiCardParser(IssuerParser):
    """Parser for Hyundai Card statements. The only strict issuer."""

    ALIASES = ("hyundai", "현대")
    REQUIRED_KEYWORDS = ("결제원금", "할부/회차")

    # --- Column indices ---
    COL_DATE: int = 0
    COL_MERCHANT: int = 2
    COL_THIS_PERIOD: int = 6
    COL_PRINCIPAL: int = 7

    # --- Scan windows ---
    HEADER_KEYWORDS: tuple[str, ...] = ("이용일", "결제원금")
    HEADER_SCAN_ROWS: int = 10
    TOTAL_SCAN_ROWS: int = 15
    TOTAL_LABELS: tuple[str, ...] = ("총 합계", "총합계")

    # --- Installment bracket labels (compared without whitespace) ---
    INSTALLMENT_START_LABEL: str = "해외이용소계"
    INSTALLMENT_END_LABEL: str = "할부소계"

    # --- Rows that are not purchases ---
    # Discount programme rows and subtotal rows are left out of the rows
    # AND of the computed sum: the purchase row already carries the
    # discounted amount in 예상적립/할인.
    SKIP_MERCHANT_KEYWORDS: tuple[str, ...] = (
        "소비쿠폰",
        "청구할인",
        "상품권사용",
        "민생회복",
        "할인",
        "소계",
        "합계",
    )

    # --- Amount extraction, in order ---
    # A fully discounted purchase has zeros everywhere and yields 0: it is
    # skipped together with the discount row that cancels it.
    AMOUNT_ATTEMPTS: tuple[AmountAttempt, ...] = (
        column_attempt(
            "this_period",
            COL_THIS_PERIOD,
            assumes="plain purchases leave 결제원금 at zero and put the billed "
            "amount here; installments put this month's share here",
        ),
        column_attempt(
            "principal",
            COL_PRINCIPAL,
            assumes="rows without a this-period amount carry it in 결제원금",
        ),
        AmountAttempt(
            "scan_from_end",
            assumes="the last two columns (balance, interest) are always zero; "
            "when they are, the first non-zero value before them is the amount",
            read=scan_from_end,
        ),
    )

    @property
    def source_type(self) -> SourceType:
        return SourceType.HYUNDAI

    @property
    def validates_total(self) -> bool:
        return True

    def parse(self, workbook: RawWorkbook, file_name: str = "") -> ParseResult:
        """Parses a Hyundai Card statement and validates it against its total."""
        sheet = self._require_sheet(workbook, 0, file_name)
        header = self._require_header(
            sheet, self.HEADER_KEYWORDS, self.HEADER_SCAN_ROWS, file_name
        )

        total_row_index, billing_total = self._find_billing_total(sheet, header.row_index)
        installment_range = self._find_installment_range(sheet, header.row_index)

        end_row = total_row_index if total_row_index is not None else len(sheet.rows)
        step = partial(self._step, installment_range)
        state = walk_rows(indexed_rows(sheet.rows, header.row_index + 1, end_row), step)

        entries = reconcile_strict(
            state.entries, billing_total, self.source_type.value, file_name
        )
        return assemble_success(self.source_type, entries, billing_total)

    # =================================================================
    # Row walk
    # =================================================================

    def _step(
        self,
        installment_range: InstallmentRange | None,
        state: RowWalkState,
        indexed_row: IndexedRow,
    ) -> RowWalkState:
        """Processes one data row.

        The date is updated before anything else, so a row that is later
        skipped still moves the sticky date forward.
        """
        index, row = indexed_row

        date_text = text_at(row, self.COL_DATE)
        if date_text:
            state = state.with_date(parse_korean_date(date_text))
        if state.current_date is None:
            return state

        merchant_text = text_at(row, self.COL_MERCHANT)
        if not merchant_text:
            return state

        merchant = clean_merchant_name(merchant_text)
        if contains_any(merchant, self.SKIP_MERCHANT_KEYWORDS):
            return state

        amount = first_nonzero(row, self.AMOUNT_ATTEMPTS)
        if amount == 0:
            return state

        is_installment = installment_range is not None and installment_range.contains(index)
        return state.with_entry(
            StatementEntry(
                row_index=index,
                date=state.current_date,
                merchant=merchant,
                amount=amount,
                category=INSTALLMENT_CATEGORY if is_installment else DEFAULT_CATEGORY,
                is_installment=is_installment,
            )
        )

    # =================================================================
    # Markers
    # =================================================================

    def _find_billing_total(self, sheet: Sheet, header_row: int) -> tuple[int | None, int | None]:
        """Finds the "총 합계" row among the last rows.

        Returns:
            (row index, billing total), or (None, None) without a total row.
            The total is read from 결제원금, falling back to the from-end scan.
        """

        def is_total_row(row: Row) -> bool:
            return contains_any(row_text(row), self.TOTAL_LABELS)

        index = find_last_row(sheet, is_total_row, start=header_row + 1, window=self.TOTAL_SCAN_ROWS)
        if index is None:
            return None, None

        row = sheet.rows[index]
        total = parse_signed_amount(cell_at(row, self.COL_PRINCIPAL))
        if total == 0:
            total = scan_from_end(row)
        return index, total

    def _find_installment_range(self, sheet: Sheet, header_row: int) -> InstallmentRange | None:
        """Finds the rows bounding the existing-installment section.

        Labels may be letter-spaced ("해 외 이 용 소계"), so each row is
        compared with all whitespace removed. The last start label before
        the first end label wins.
        """
        start_row: int | None = None

        for index in range(header_row + 1, len(sheet.rows)):
            text = compact_row_text(sheet.rows[index])
            if self.INSTALLMENT_START_LABEL in text:
                start_row = index
            if self.INSTALLMENT_END_LABEL in text:
                if start_row is not None and start_row < index:
                    return InstallmentRange(start_row=start_row, end_row=index)
                return None

        return None
