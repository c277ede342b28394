"""
Output adapter: Console logger.

Simple ProcessLogger implementation that prints events to stdout with a
consistent format and a final summary.

Useful for:
- Development and debugging.
- Manual runs from a terminal (the CLI).

A web upload endpoint would implement a different logger (a file, a
request log) with the same interface, without touching the domain.
"""

from pathlib import Path

from src.domain.ports.process_logger import ProcessLogger


class ConsoleLogger(ProcessLogger):
    """Logger that prints processing events to the console."""

    def __init__(self) -> None:
        self._files_received: int = 0
        self._files_processed: int = 0
        self._files_skipped: int = 0
        self._total_transactions: int = 0
        self._errors: list[dict] = []

    # --- Phase 1: Intake ---

    def log_file_received(self, file_path: Path, file_type: str) -> None:
        self._files_received += 1
        print(f"  📄 Received: {file_path.name} ({file_type})")

    def log_file_skipped(self, file_path: Path, reason: str) -> None:
        self._files_skipped += 1
        print(f"  ⏭️  Skipped: {file_path.name} ({reason})")

    def log_encryption_detected(self, file_path: Path, container: str) -> None:
        print(f"  🔒 Encrypted {container} container: {file_path.name}")

    # --- Phase 2: Parsing ---

    def log_parser_selected(self, file_path: Path, source_type: str) -> None:
        print(f"  💳 Issuer: {source_type} ({file_path.name})")

    def log_parser_not_found(self, file_path: Path) -> None:
        print(f"  ❌ Issuer NOT recognised: {file_path.name}")

    def log_parse_complete(self, file_path: Path, num_sheets: int, num_transactions: int) -> None:
        self._files_processed += 1
        self._total_transactions += num_transactions
        print(
            f"  ✅ Done: {file_path.name}: "
            f"{num_sheets} sheets, {num_transactions} transactions"
        )

    def log_error(self, file_path: Path, error: Exception) -> None:
        entry = {"file": str(file_path.name), "error": str(error)}
        error_code = getattr(error, "error_code", None)
        if error_code is not None:
            entry["error_code"] = error_code.value
        self._errors.append(entry)
        print(f"  ❌ Error: {file_path.name}: {error}")

    def log_validation_mismatch(
        self, file_path: Path, field: str, expected: str, actual: str
    ) -> None:
        print(
            f"  ⚠️  Difference in {file_path.name}: "
            f"{field} declared {expected}, computed {actual}"
        )

    # --- Phase 3: Export ---

    def log_export_complete(self, output_path: Path) -> None:
        print(f"  📁 Written: {output_path}")

    # --- Summary ---

    def get_summary(self) -> dict:
        return {
            "files_received": self._files_received,
            "files_processed": self._files_processed,
            "files_skipped": self._files_skipped,
            "files_with_error": len(self._errors),
            "total_transactions": self._total_transactions,
            "errors": self._errors,
        }

    def print_summary(self) -> None:
        """Prints the final processing summary."""
        print("\n" + "=" * 60)
        print("PROCESSING SUMMARY")
        print("=" * 60)
        print(f"  Files received:     {self._files_received}")
        print(f"  Files processed:    {self._files_processed}")
        print(f"  Files skipped:      {self._files_skipped}")
        print(f"  Files with error:   {len(self._errors)}")
        print(f"  Total transactions: {self._total_transactions}")

        if self._errors:
            print("\n  ERRORS:")
            for err in self._errors:
                code = err.get("error_code", "")
                prefix = f"[{code}] " if code else ""
                print(f"    - {err['file']}: {prefix}{err['error']}")

        print("=" * 60)
