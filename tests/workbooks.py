"""Builds real workbook bytes in memory for tests: .xlsx, legacy .xls and
password-protected .xlsx."""

import io
from datetime import date

import pandas as pd
import xlwt
from msoffcrypto.format.ooxml import OOXMLFile

XLS_DATE_STYLE = xlwt.easyxf(num_format_str="YYYY-MM-DD")


def build_xlsx(*sheets: list[list], names: list[str] | None = None) -> bytes:
    """Writes the given grids to .xlsx bytes with openpyxl, no header row."""
    if names is None:
        names = [f"Sheet{i + 1}" for i in range(len(sheets))]
    buffer = io.BytesIO()
    with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
        for name, rows in zip(names, sheets):
            pd.DataFrame(rows, dtype=object).to_excel(writer, sheet_name=name, index=False, header=False)
    return buffer.getvalue()


def build_xls(*sheets: list[list], names: list[str] | None = None) -> bytes:
    """Writes the given grids to binary .xls (BIFF8) bytes with xlwt.

    Dates get a date number format, so readers see them as dates and not
    as plain serial numbers. Empty cells are left blank.
    """
    if names is None:
        names = [f"Sheet{i + 1}" for i in range(len(sheets))]
    workbook = xlwt.Workbook(encoding="utf-8")
    for name, rows in zip(names, sheets):
        sheet = workbook.add_sheet(name)
        for r, row in enumerate(rows):
            for c, value in enumerate(row):
                if value is None or value == "":
                    continue
                if isinstance(value, date):
                    sheet.write(r, c, value, XLS_DATE_STYLE)
                else:
                    sheet.write(r, c, value)
    buffer = io.BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()


def encrypt_xlsx(data: bytes, password: str) -> bytes:
    """Wraps .xlsx bytes in an ECMA-376 encrypted compound document, the
    container Excel writes for a password-protected workbook."""
    encrypted = io.BytesIO()
    OOXMLFile(io.BytesIO(data)).encrypt(password, encrypted)
    return encrypted.getvalue()
