"""
Row scanning helpers shared by the issuer parsers.

Statements have no fixed layout: titles, card-holder blocks and notices sit
above the header row, and summary rows sit below the data. These helpers
find the interesting rows by their text.
"""

from collections.abc import Callable, Iterable

from src.domain.models.markers import HeaderLocation
from src.domain.models.raw_workbook import Cell, Row, Sheet
from src.domain.shared.date_parser import cell_text
from src.domain.shared.text_cleaner import strip_all_whitespace


def row_text(row: Row, separator: str = " ") -> str:
    """Joins the text of every cell of a row (empty cells as "")."""
    return separator.join(cell_text(cell) for cell in row)


def compact_row_text(row: Row) -> str:
    """Row text with every whitespace removed ("해 외 이 용 소계" → "해외이용소계")."""
    return strip_all_whitespace(row_text(row, separator=""))


def cell_at(row: Row, index: int) -> Cell:
    """Cell at ``index``, or None when the row is shorter."""
    if 0 <= index < len(row):
        return row[index]
    return None


def text_at(row: Row, index: int) -> str:
    """Stripped text of the cell at ``index`` ("" when missing)."""
    return cell_text(cell_at(row, index))


def find_header_row(
    sheet: Sheet,
    keywords: Iterable[str],
    max_rows: int = 10,
    exact: bool = False,
) -> HeaderLocation | None:
    """Finds the first row, among the first ``max_rows``, holding every keyword.

    Args:
        sheet: Sheet to scan.
        keywords: Labels that must all appear in the row.
        max_rows: Size of the scan window from the top of the sheet.
        exact: When True each keyword must equal a whole cell; otherwise
               it may appear anywhere in the joined row text.

    Returns:
        HeaderLocation with the row index and the stripped cell labels,
        or None when no row in the window matches.
    """
    required = tuple(keywords)

    for index, row in enumerate(sheet.rows[:max_rows]):
        labels = tuple(cell_text(cell) for cell in row)
        if exact:
            found = all(keyword in labels for keyword in required)
        else:
            joined = " ".join(labels)
            found = all(keyword in joined for keyword in required)
        if found:
            return HeaderLocation(row_index=index, labels=labels)

    return None


def find_last_row(
    sheet: Sheet,
    predicate: Callable[[Row], bool],
    start: int = 0,
    window: int | None = None,
) -> int | None:
    """Index of the LAST row at or after ``start`` satisfying ``predicate``.

    Summary rows live at the bottom of a statement, so the scan runs from
    the end. ``window`` limits it to that many rows from the bottom.
    """
    lower = start
    if window is not None:
        lower = max(start, len(sheet.rows) - window)

    for index in range(len(sheet.rows) - 1, lower - 1, -1):
        if predicate(sheet.rows[index]):
            return index
    return None


def find_first_row(
    sheet: Sheet,
    predicate: Callable[[Row], bool],
    start: int = 0,
    stop: int | None = None,
) -> int | None:
    """Index of the FIRST row in ``[start, stop)`` satisfying ``predicate``."""
    end = len(sheet.rows) if stop is None else min(stop, len(sheet.rows))
    for index in range(start, end):
        if predicate(sheet.rows[index]):
            return index
    return None
