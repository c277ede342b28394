"""
Input port: Workbook loader.

Defines the contract to turn the (decrypted) bytes of a spreadsheet file
into a RawWorkbook. The adapter decides which library reads which
container (.xlsx, binary .xls, HTML-table .xls).
"""

from abc import ABC, abstractmethod

from src.domain.models.raw_workbook import RawWorkbook


class WorkbookLoader(ABC):
    """Interface to read a spreadsheet into sheets of rows of cells."""

    @abstractmethod
    def load(self, data: bytes, file_name: str = "") -> RawWorkbook:
        """Reads every sheet of the file.

        Args:
            data: Unencrypted file content.
            file_name: Original file name. Only used in error messages.

        Returns:
            RawWorkbook with the sheets in file order.

        Raises:
            InvalidDataError: If the content is not a readable spreadsheet.
        """
        ...
