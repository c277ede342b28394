"""
Domain model: Raw workbook grid.

This model is the bridge between the workbook loader (pandas) and the
issuer parsers, the same way the text of a page bridges an extractor and a
parser: parsers never see DataFrames, only sheets of rows of cells.

A cell is one of:
- ``None``   → empty cell
- ``str``    → text exactly as stored in the file
- ``int``    → integral number
- ``float``  → non-integral number (date serials with a time part, rates)

No coercion beyond what the container encodes: "20250912" stays text and
20250912 stays a number. Each parser decides how to read its columns.
"""

from dataclasses import dataclass, field

Cell = str | int | float | None
Row = tuple[Cell, ...]


@dataclass(frozen=True)
class Sheet:
    """One worksheet: its name and its rows in file order."""

    name: str
    """Sheet name as stored in the workbook ("Sheet1", "일시불", ...)."""

    rows: tuple[Row, ...] = field(default_factory=tuple)
    """Rows in file order. Blank rows are kept so row indices match the
    spreadsheet (minus one)."""

    @property
    def is_empty(self) -> bool:
        return not self.rows

    def row(self, index: int) -> Row:
        """Returns the row at ``index`` or an empty tuple when out of range."""
        if 0 <= index < len(self.rows):
            return self.rows[index]
        return ()

    def first_cell_text(self) -> str:
        """Text of the top-left cell, stripped. Empty string if none.

        Some issuers mark the sheet kind there (Samsung: "일시불"/"할부").
        """
        first_row = self.row(0)
        if not first_row or first_row[0] is None:
            return ""
        return str(first_row[0]).strip()


@dataclass(frozen=True)
class RawWorkbook:
    """Ordered sheets of a spreadsheet file, ready to be parsed."""

    sheets: tuple[Sheet, ...]

    @property
    def sheet_count(self) -> int:
        return len(self.sheets)

    def sheet(self, index: int) -> Sheet | None:
        """Returns the sheet at ``index`` or None when it does not exist."""
        if 0 <= index < len(self.sheets):
            return self.sheets[index]
        return None

    def header_keywords(self, max_rows: int = 10) -> list[str]:
        """Collects the non-empty text cells of the first ``max_rows`` rows
        of every sheet.

        This is the corpus the parser selector matches issuer keywords
        against. Numbers are left out: only labels identify a layout.
        """
        keywords: list[str] = []
        for sheet in self.sheets:
            for row in sheet.rows[:max_rows]:
                for cell in row:
                    if isinstance(cell, str) and cell:
                        keywords.append(cell)
        return keywords

    @classmethod
    def from_lists(cls, *sheets: list[list[Cell]], names: list[str] | None = None) -> "RawWorkbook":
        """Builds a workbook from plain nested lists.

        Convenience for callers that already hold a grid in memory (and for
        tests). Sheet names default to "Sheet1", "Sheet2", ...
        """
        if names is None:
            names = [f"Sheet{i + 1}" for i in range(len(sheets))]
        return cls(
            sheets=tuple(
                Sheet(name=name, rows=tuple(tuple(row) for row in rows))
                for name, rows in zip(names, sheets)
            )
        )
