"""
Common behaviour of the issuer parsers.

Every issuer is recognised the same way: by an alias in the file name, or
by the presence of all of its header keywords. Each subclass only declares
its constants and implements ``parse``.
"""

from src.domain.exceptions import HeaderNotFoundError, InvalidDataError
from src.domain.models.markers import HeaderLocation
from src.domain.models.raw_workbook import RawWorkbook, Sheet
from src.domain.ports.statement_parser import StatementParser
from src.domain.shared.sheet_scan import find_header_row


class IssuerParser(StatementParser):
    """Base class with the alias/keyword recognition rule."""

    # Lower-case substrings of the file name that identify the issuer.
    ALIASES: tuple[str, ...] = ()

    # Keywords that must each be a substring of some header cell.
    REQUIRED_KEYWORDS: tuple[str, ...] = ()

    # Keywords that must each be a whole header cell.
    EXACT_KEYWORDS: tuple[str, ...] = ()

    def can_parse(self, file_name: str, header_keywords: list[str]) -> bool:
        return self._matches_file_name(file_name) or self._matches_headers(header_keywords)

    def _matches_file_name(self, file_name: str) -> bool:
        lowered = file_name.lower()
        return any(alias in lowered for alias in self.ALIASES)

    def _matches_headers(self, header_keywords: list[str]) -> bool:
        if not self.REQUIRED_KEYWORDS and not self.EXACT_KEYWORDS:
            return False

        cells = [keyword.strip() for keyword in header_keywords]
        has_required = all(
            any(keyword in cell for cell in cells) for keyword in self.REQUIRED_KEYWORDS
        )
        has_exact = all(keyword in cells for keyword in self.EXACT_KEYWORDS)
        return has_required and has_exact

    # =================================================================
    # Helpers for subclasses
    # =================================================================

    def _require_sheet(self, workbook: RawWorkbook, index: int, file_name: str) -> Sheet:
        """Sheet at ``index``; InvalidDataError when missing or empty."""
        sheet = workbook.sheet(index)
        if sheet is None or sheet.is_empty:
            raise InvalidDataError(file_name, f"sheet {index + 1} is empty or missing")
        return sheet

    def _require_header(
        self,
        sheet: Sheet,
        keywords: tuple[str, ...],
        max_rows: int,
        file_name: str,
    ) -> HeaderLocation:
        """Header row of the sheet; HeaderNotFoundError when absent."""
        header = find_header_row(sheet, keywords, max_rows=max_rows)
        if header is None:
            raise HeaderNotFoundError(
                self.source_type.value, file_name, list(keywords), max_rows
            )
        return header
