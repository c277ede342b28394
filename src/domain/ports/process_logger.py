"""
Output port: Processing log (bitácora).

Defines the contract to record events while statements are processed.
Replaces ad-hoc print() calls.

Why not simply use Python's `logging` module?
Because `logging` is an infrastructure tool (HOW), while this port defines
the business EVENTS (WHAT):
- "A file was received" (not "INFO: file received")
- "No issuer parser recognised the file" (not "WARNING: unknown format")

An implementation may use `logging` internally, but the domain only knows
the business events. This allows:
- On the command line: printing to the console.
- As a library call: staying silent.
- In tests: accumulating in memory and asserting on it.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class ProcessLogger(ABC):
    """Interface for the processing log."""

    # --- Phase 1: Intake ---

    @abstractmethod
    def log_file_received(self, file_path: Path, file_type: str) -> None:
        """Records that a file was received for processing.

        Args:
            file_path: File path.
            file_type: Detected container: 'ole2', 'zip', 'other'.
        """
        ...

    @abstractmethod
    def log_file_skipped(self, file_path: Path, reason: str) -> None:
        """Records that a file was discarded (not a spreadsheet).

        Args:
            file_path: Discarded file.
            reason: Why. Example: "Extension .pdf not supported"
        """
        ...

    @abstractmethod
    def log_encryption_detected(self, file_path: Path, container: str) -> None:
        """Records that the file is password protected."""
        ...

    # --- Phase 2: Parsing ---

    @abstractmethod
    def log_parser_selected(self, file_path: Path, source_type: str) -> None:
        """Records which issuer parser will handle the file."""
        ...

    @abstractmethod
    def log_parser_not_found(self, file_path: Path) -> None:
        """Records that no issuer parser recognised the file."""
        ...

    @abstractmethod
    def log_parse_complete(self, file_path: Path, num_sheets: int, num_transactions: int) -> None:
        """Records a successful parse.

        Args:
            file_path: Processed file.
            num_sheets: Sheets in the workbook.
            num_transactions: Transactions emitted.
        """
        ...

    @abstractmethod
    def log_error(self, file_path: Path, error: Exception) -> None:
        """Records an error while processing a file.

        Implementations are expected to keep enough context (message,
        error code) to debug the file later.
        """
        ...

    @abstractmethod
    def log_validation_mismatch(
        self,
        file_path: Path,
        field: str,
        expected: str,
        actual: str,
    ) -> None:
        """Records a reconciliation difference that did not fail the parse.

        Used for the issuers whose billing total is informational.

        Args:
            file_path: File with the difference.
            field: Field compared (e.g. 'billing_total').
            expected: Value declared by the issuer.
            actual: Value computed from the parsed transactions.
        """
        ...

    # --- Phase 3: Export ---

    @abstractmethod
    def log_export_complete(self, output_path: Path) -> None:
        """Records that an export file was written."""
        ...

    # --- Summary ---

    @abstractmethod
    def get_summary(self) -> dict:
        """Returns a summary of the whole run.

        Returns:
            Dictionary with metrics:
            {
                'files_received': int,
                'files_processed': int,
                'files_skipped': int,
                'files_with_error': int,
                'total_transactions': int,
                'errors': List[dict],  # [{file, error}]
            }
        """
        ...
