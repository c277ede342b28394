"""
Output port: Result writer.

Defines the contract to write parse results in some persistent format
(Excel, CSV, etc.).

Why is it an OUTPUT port?
Because the domain (processor, parsers) neither decides nor knows the
output format. It only produces ParseResults and hands them to whoever
implements this port. Today it is Excel; tomorrow it could be CSV or a
database, with no change in the domain.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from src.domain.models.parse_result import ParseResult


class OutputWriter(ABC):
    """Interface to write parse results."""

    @abstractmethod
    def write_single(self, result: ParseResult, output_path: Path, file_name: str = "") -> Path:
        """Writes the result of one statement.

        Layout: Sheet 1 = Summary, Sheet 2 = Transactions.

        Args:
            result: Parse result of one statement file.
            output_path: Where to create the output file.
            file_name: Name of the source statement, shown in the summary.

        Returns:
            Actual path of the created file (an extension may be added).

        Raises:
            OutputError: If writing fails (permissions, full disk, etc.)
        """
        ...

    @abstractmethod
    def write_consolidated(self, results: list[tuple[str, ParseResult]], output_path: Path) -> Path:
        """Writes several statements into one file.

        Generates:
        - Sheet 1: one summary line per statement.
        - Sheet 2: every transaction of every statement, sorted by date.

        Args:
            results: (source file name, parse result) pairs. Failed results
                     appear in the summary only.
            output_path: Where to create the consolidated file.

        Returns:
            Actual path of the created file.

        Raises:
            OutputError: If writing fails.
        """
        ...
