"""
Input adapter: Workbook loading with pandas.

Reads every sheet with no header inference and no dtype inference
(``header=None, dtype=object``), so the grid matches the spreadsheet
row for row. The engine depends on the container:

- zip (.xlsx)             → openpyxl
- OLE2 (binary .xls)      → xlrd
- HTML table (bank .xls)  → pandas.read_html (lxml)

Cells are then normalised to the RawWorkbook cell types:
- NaN / None / ""             → None
- integral floats             → int
- dates and datetimes         → spreadsheet date serials, the encoding the
                                 file itself uses (days since 1899-12-30)
- anything else non-numeric   → its text
"""

import io
import numbers
from datetime import date, datetime, time

import pandas as pd

from src.domain.exceptions import InvalidDataError
from src.domain.models.raw_workbook import Cell, RawWorkbook, Row, Sheet
from src.domain.ports.workbook_loader import WorkbookLoader

OLE2_MAGIC = b"\xD0\xCF\x11\xE0\xA1\xB1\x1A\xE1"
ZIP_MAGIC = b"PK\x03\x04"
HTML_MARKERS = (b"<html", b"<table", b"<!doctype", b"<meta")

EXCEL_EPOCH = datetime(1899, 12, 30)
SECONDS_PER_DAY = 86400


class PandasWorkbookLoader(WorkbookLoader):
    """Reads .xlsx, .xls and HTML-table .xls files into a RawWorkbook."""

    def load(self, data: bytes, file_name: str = "") -> RawWorkbook:
        try:
            frames = self._read_frames(data, file_name)
        except InvalidDataError:
            raise
        except Exception as e:
            raise InvalidDataError(file_name, f"cannot read workbook: {e}") from e

        if not frames:
            raise InvalidDataError(file_name, "the workbook has no sheets")

        return RawWorkbook(
            sheets=tuple(
                Sheet(name=str(name), rows=frame_to_rows(frame)) for name, frame in frames.items()
            )
        )

    def _read_frames(self, data: bytes, file_name: str) -> dict[str, pd.DataFrame]:
        if data[:4] == ZIP_MAGIC:
            return self._read_excel(data, engine="openpyxl")
        if data[:8] == OLE2_MAGIC:
            return self._read_excel(data, engine="xlrd")
        if looks_like_html(data):
            return self._read_html(data)
        raise InvalidDataError(file_name, "not a spreadsheet (unknown file signature)")

    @staticmethod
    def _read_excel(data: bytes, engine: str) -> dict[str, pd.DataFrame]:
        return pd.read_excel(
            io.BytesIO(data),
            sheet_name=None,
            header=None,
            dtype=object,
            engine=engine,
        )

    @staticmethod
    def _read_html(data: bytes) -> dict[str, pd.DataFrame]:
        """Every <table> becomes a sheet ("Table1", "Table2", ...)."""
        tables = pd.read_html(io.StringIO(decode_html(data)), flavor="lxml")
        return {f"Table{i + 1}": with_header_rows(table) for i, table in enumerate(tables)}


# ============================================================
# Cell normalisation
# ============================================================


def frame_to_rows(frame: pd.DataFrame) -> tuple[Row, ...]:
    """Rows of a DataFrame as tuples of normalised cells."""
    return tuple(
        tuple(normalize_cell(value) for value in values)
        for values in frame.itertuples(index=False, name=None)
    )


def normalize_cell(value: object) -> Cell:
    """Maps a pandas cell value to a RawWorkbook cell."""
    if value is None or value is pd.NaT:
        return None
    if isinstance(value, str):
        return value if value != "" else None
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, datetime):
        return to_serial(value)
    if isinstance(value, date):
        return to_serial(datetime(value.year, value.month, value.day))
    if isinstance(value, time):
        return value.isoformat()
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Real):
        number = float(value)
        if number != number:  # NaN
            return None
        return int(number) if number.is_integer() else number
    if pd.isna(value):
        return None
    return str(value)


def to_serial(moment: datetime) -> int | float:
    """Spreadsheet serial of a datetime; an int at midnight."""
    days = (moment.replace(tzinfo=None) - EXCEL_EPOCH).total_seconds() / SECONDS_PER_DAY
    return int(days) if float(days).is_integer() else days


# ============================================================
# HTML exports
# ============================================================


def looks_like_html(data: bytes) -> bool:
    head = data[:2048].lstrip(b"\xef\xbb\xbf \t\r\n").lower()
    return any(marker in head for marker in HTML_MARKERS)


def decode_html(data: bytes) -> str:
    """UTF-8 first; Korean bank exports are often CP949."""
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return data.decode("cp949", errors="replace")


def with_header_rows(table: pd.DataFrame) -> pd.DataFrame:
    """Puts the header rows pandas lifted from <th> cells back in the grid.

    Parsers look for their header row themselves, so it must stay a row.
    """
    if isinstance(table.columns, pd.RangeIndex):
        return table

    if isinstance(table.columns, pd.MultiIndex):
        header_rows = [list(level_values) for level_values in zip(*table.columns.tolist())]
    else:
        header_rows = [list(table.columns)]

    header_rows = [
        [None if str(label).startswith("Unnamed:") else label for label in row]
        for row in header_rows
    ]
    body = table.astype(object).values.tolist()
    return pd.DataFrame(header_rows + body, dtype=object)
