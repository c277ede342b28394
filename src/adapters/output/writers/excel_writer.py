"""
Output adapter: Excel writer.

Generates Excel files with a fixed 2-sheet layout:
- Sheet 1 (Resumen): one line per statement with counts and totals.
- Sheet 2 (Transacciones): every emitted transaction.

The sheet and column names are the household ledger's own labels, so the
export can be opened next to the ledger without renaming anything.
"""

from pathlib import Path

import pandas as pd

from src.domain.exceptions import OutputError
from src.domain.models.parse_result import ParseResult
from src.domain.ports.output_writer import OutputWriter
from src.domain.shared.billing_month import installment_booking_date, resolve_billing_month

SUMMARY_SHEET = "Resumen"
TRANSACTIONS_SHEET = "Transacciones"

SUMMARY_COLUMNS = ["출처", "파일", "청구월", "상태", "건수", "합계", "청구금액", "오류"]
TRANSACTION_COLUMNS = ["날짜", "반영일", "이용처", "금액", "카테고리", "할부", "구분", "출처"]


class ExcelWriter(OutputWriter):
    """Generates Excel files with a standard layout."""

    def write_single(self, result: ParseResult, output_path: Path, file_name: str = "") -> Path:
        """Writes one statement to Excel.

        Args:
            result: Parse result of one statement file.
            output_path: Where to create the file. If it does not end in
                        .xlsx, the extension is added.
            file_name: Name of the source statement.

        Returns:
            Path of the created file.
        """
        try:
            output_path = self._prepare(output_path)
            self._write_excel([(file_name, result)], output_path)
        except Exception as e:
            raise OutputError(str(output_path), str(e)) from e

        return output_path

    def write_consolidated(self, results: list[tuple[str, ParseResult]], output_path: Path) -> Path:
        """Writes several statements into one file, transactions sorted by date."""
        if not results:
            raise OutputError(str(output_path), "No results to consolidate")

        try:
            output_path = self._prepare(output_path)
            self._write_excel(results, output_path)
        except Exception as e:
            raise OutputError(str(output_path), str(e)) from e

        return output_path

    @staticmethod
    def _prepare(output_path: Path) -> Path:
        if output_path.suffix.lower() != ".xlsx":
            output_path = output_path.with_suffix(".xlsx")
        output_path.parent.mkdir(parents=True, exist_ok=True)
        return output_path

    # =================================================================
    # PRIVATE: Excel generation
    # =================================================================

    def _write_excel(self, results: list[tuple[str, ParseResult]], output_path: Path) -> None:
        """Shared by write_single and write_consolidated: same layout, they
        only differ in how many results they receive."""
        # --- Transactions ---
        transaction_rows = []
        for file_name, result in results:
            billing_month = resolve_billing_month(file_name, result.data)
            for t in result.data:
                transaction_rows.append(
                    {
                        "날짜": t.date_text,
                        # Existing installments are booked on the billing month's 25th
                        "반영일": installment_booking_date(t, billing_month) if t.is_installment else t.date_text,
                        "이용처": t.merchant,
                        "금액": t.amount,
                        "카테고리": t.category,
                        "할부": "Y" if t.is_installment else "",
                        "구분": t.transaction_type.value,
                        "출처": result.source_type.value,
                    }
                )

        df_transactions = pd.DataFrame(transaction_rows, columns=TRANSACTION_COLUMNS)
        # Stable: rows of the same day keep statement order
        df_transactions = df_transactions.sort_values("날짜", kind="stable")

        # --- Summary ---
        summary_rows = []
        for file_name, result in results:
            summary_rows.append(
                {
                    "출처": result.source_type.value,
                    "파일": file_name,
                    "청구월": resolve_billing_month(file_name, result.data) or "",
                    "상태": "OK" if result.success else result.error_code.value,
                    "건수": result.transaction_count,
                    "합계": result.total_amount,
                    "청구금액": result.billing_total,
                    "오류": result.error or "",
                }
            )

        df_summary = pd.DataFrame(summary_rows, columns=SUMMARY_COLUMNS)

        # --- Write with xlsxwriter ---
        with pd.ExcelWriter(output_path, engine="xlsxwriter") as writer:
            df_summary.to_excel(writer, index=False, sheet_name=SUMMARY_SHEET)
            df_transactions.to_excel(writer, index=False, sheet_name=TRANSACTIONS_SHEET)

            workbook = writer.book
            ws_summary = writer.sheets[SUMMARY_SHEET]
            ws_transactions = writer.sheets[TRANSACTIONS_SHEET]

            # Won have no decimals
            money_format = workbook.add_format({"num_format": "#,##0"})

            ws_summary.set_column("A:A", 12)  # 출처
            ws_summary.set_column("B:B", 36)  # 파일
            ws_summary.set_column("C:D", 18)  # 청구월, 상태
            ws_summary.set_column("E:E", 8)  # 건수
            ws_summary.set_column("F:G", 16, money_format)  # 합계, 청구금액
            ws_summary.set_column("H:H", 60)  # 오류

            ws_transactions.set_column("A:B", 12)  # 날짜, 반영일
            ws_transactions.set_column("C:C", 40)  # 이용처
            ws_transactions.set_column("D:D", 14, money_format)  # 금액
            ws_transactions.set_column("E:H", 12)
