"""
Input port: Parser selector.

Decides which issuer parser handles a workbook. The simplest
implementation asks the registered parsers in a fixed priority order and
takes the first that accepts the file.
"""

from abc import ABC, abstractmethod

from src.domain.models.raw_workbook import RawWorkbook
from src.domain.ports.statement_parser import StatementParser


class ParserSelector(ABC):
    """Interface to pick the issuer parser of a workbook."""

    @abstractmethod
    def select(self, file_name: str, workbook: RawWorkbook) -> StatementParser:
        """Returns the parser that must handle the workbook.

        Raises:
            UnsupportedFormatError: If no parser accepts the file.
        """
        ...
