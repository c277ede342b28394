"""
Input port: Issuer statement parser.

Defines the contract every issuer parser must fulfil. There is exactly
one StatementParser per supported issuer/format:

    StatementParser (interface)
    ├── ManualEntryParser
    ├── HyundaiCardParser
    ├── SamsungCardParser
    ├── LotteCardParser
    ├── KBCardParser
    ├── OnnuriVoucherParser
    ├── SeongnamVoucherParser
    └── WooriBankParser

Why does it receive a RawWorkbook and not a DataFrame?
Because the domain must not depend on pandas. The loader adapter turns the
file into plain sheets/rows/cells and every parser works on those.

Why does it return a full ParseResult?
Because each parser is responsible for:
1. Extracting the rows (date, merchant, amount, installment flag)
2. Extracting the billing total the issuer declares
3. Deciding which rows survive (after reconciliation, for strict issuers)
"""

from abc import ABC, abstractmethod

from src.domain.models.enums import SourceType
from src.domain.models.parse_result import ParseResult
from src.domain.models.raw_workbook import RawWorkbook


class StatementParser(ABC):
    """Interface to parse the statement of one specific issuer."""

    @property
    @abstractmethod
    def source_type(self) -> SourceType:
        """Issuer this parser handles.

        Used as the key in the parser registry and copied into every
        ParseResult it produces.
        """
        ...

    @abstractmethod
    def can_parse(self, file_name: str, header_keywords: list[str]) -> bool:
        """Decides whether this parser recognises the file.

        True when the filename contains one of the issuer's aliases OR all
        of the issuer's required keywords appear in the header corpus.

        Args:
            file_name: Original file name (extension included).
            header_keywords: Non-empty text cells from the first rows of
                             every sheet (see RawWorkbook.header_keywords).
        """
        ...

    @abstractmethod
    def parse(self, workbook: RawWorkbook, file_name: str = "") -> ParseResult:
        """Parses the workbook and returns the complete result.

        Args:
            workbook: Sheets of the (already decrypted) file.
            file_name: Original file name. For traceability and messages.

        Returns:
            A successful ParseResult.

        Raises:
            HeaderNotFoundError: If the header row is not where expected.
            TotalMismatchError: If a strict issuer's rows do not add up to
                                its declared billing total.
            InvalidDataError: If the sheet the issuer needs is empty.
        """
        ...

    @property
    def validates_total(self) -> bool:
        """True when ``parse`` itself rejects a file whose rows do not add
        up to the billing total. For the other issuers the comparison is
        informational and left to the caller."""
        return False
