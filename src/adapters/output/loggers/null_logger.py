"""
Output adapter: Silent logger.

Used when the engine is called as a library (one upload, one result):
the caller reads the ParseResult and has no console to print to. It still
keeps the counters so ``get_summary`` stays meaningful.
"""

from pathlib import Path

from src.domain.ports.process_logger import ProcessLogger


class NullLogger(ProcessLogger):
    """Logger that records counters and prints nothing."""

    def __init__(self) -> None:
        self._files_received = 0
        self._files_processed = 0
        self._files_skipped = 0
        self._total_transactions = 0
        self._errors: list[dict] = []

    def log_file_received(self, file_path: Path, file_type: str) -> None:
        self._files_received += 1

    def log_file_skipped(self, file_path: Path, reason: str) -> None:
        self._files_skipped += 1

    def log_encryption_detected(self, file_path: Path, container: str) -> None:
        pass

    def log_parser_selected(self, file_path: Path, source_type: str) -> None:
        pass

    def log_parser_not_found(self, file_path: Path) -> None:
        pass

    def log_parse_complete(self, file_path: Path, num_sheets: int, num_transactions: int) -> None:
        self._files_processed += 1
        self._total_transactions += num_transactions

    def log_error(self, file_path: Path, error: Exception) -> None:
        self._errors.append({"file": str(file_path.name), "error": str(error)})

    def log_validation_mismatch(
        self, file_path: Path, field: str, expected: str, actual: str
    ) -> None:
        pass

    def log_export_complete(self, output_path: Path) -> None:
        pass

    def get_summary(self) -> dict:
        return {
            "files_received": self._files_received,
            "files_processed": self._files_processed,
            "files_skipped": self._files_skipped,
            "files_with_error": len(self._errors),
            "total_transactions": self._total_transactions,
            "errors": self._errors,
        }
