"""
Unified date reading for statement cells.

Every issuer prints dates differently:

- Hyundai:   "2025년 08월 14일"            → parse_korean_date
- KB:        "25.08.13"                    → parse_short_dotted_date
- Samsung:   "20250912" (text or number)   → parse_compact_date
- Onnuri:    "20251008"                    → parse_compact_date
- Seongnam:  "2025-10-30 16:09:03"         → parse_timestamp_date
- Woori:     "2025.12.31 08:39"            → parse_timestamp_date
- Lotte:     45882.0006 (date serial)      → excel_serial_to_date
- Manual:    any of four formats           → parse_manual_date

All functions return a ``date`` or None. None is not an error: rows
without a readable date are normal (sub-headers, grouped rows that inherit
the previous date, summary lines), and each parser decides what to do.
"""

import re
from datetime import date, timedelta

from src.domain.models.raw_workbook import Cell

EXCEL_EPOCH = date(1899, 12, 30)
"""Day zero of spreadsheet date serials. Day 1 is 1899-12-31 because of
the 1900 leap-year bug every spreadsheet program reproduces."""

MIN_SERIAL = 40000
"""Serials below this (before 2009-07-06) are not statement dates. Keeps
amounts and sequence numbers from being read as dates."""


def parse_korean_date(text: str) -> date | None:
    """Reads "2025년 08월 14일" (spaces optional, 1-2 digit month/day).

    Examples:
        >>> parse_korean_date("2025년 8월 4일")
        datetime.date(2025, 8, 4)
    """
    match = re.search(r"(\d{4})년\s*(\d{1,2})월\s*(\d{1,2})일", text)
    if not match:
        return None
    return _build_date(int(match.group(1)), int(match.group(2)), int(match.group(3)))


def parse_short_dotted_date(text: str) -> date | None:
    """Reads "YY.MM.DD" with a 20YY year.

    Examples:
        >>> parse_short_dotted_date("25.08.13")
        datetime.date(2025, 8, 13)
    """
    match = re.fullmatch(r"(\d{2})\.(\d{2})\.(\d{2})", text.strip())
    if not match:
        return None
    return _build_date(2000 + int(match.group(1)), int(match.group(2)), int(match.group(3)))


def parse_compact_date(value: Cell) -> date | None:
    """Reads "YYYYMMDD", either as text or as the number 20250912."""
    text = cell_text(value)
    match = re.fullmatch(r"(\d{4})(\d{2})(\d{2})", text)
    if not match:
        return None
    return _build_date(int(match.group(1)), int(match.group(2)), int(match.group(3)))


def parse_timestamp_date(text: str) -> date | None:
    """Reads the date part of a timestamp.

    Accepts "YYYY-MM-DD HH:MM:SS" and "YYYY.MM.DD HH:MM" (the time part is
    optional and ignored).
    """
    match = re.match(r"(\d{4})[-.](\d{2})[-.](\d{2})", text.strip())
    if not match:
        return None
    return _build_date(int(match.group(1)), int(match.group(2)), int(match.group(3)))


def excel_serial_to_date(value: Cell) -> date | None:
    """Converts a spreadsheet date serial to a date.

    The fractional part (time of day) is dropped. Numeric text ("45882.5")
    is accepted too, because some exports store the serial as text.
    Values below MIN_SERIAL are rejected.

    Examples:
        >>> excel_serial_to_date(45882.000601851854)
        datetime.date(2025, 8, 13)
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return None
    if value != value or value < MIN_SERIAL:  # NaN or too small
        return None
    return EXCEL_EPOCH + timedelta(days=int(value))


def parse_manual_date(value: Cell) -> date | None:
    """Reads the date column of the manual-entry sheet.

    Accepted formats:
        1. Date serial (number)            45662
        2. "YYYY-MM-DD"                    "2025-01-05"
        3. "YYYY.MM.DD" or "YYYY/MM/DD"    "2025.1.5"
        4. "MM/DD/YYYY" or "MM-DD-YYYY"    "01/05/2025"
    """
    if value is None or value == "":
        return None
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return excel_serial_to_date(value)

    text = str(value).strip()

    match = re.fullmatch(r"(\d{4})-(\d{2})-(\d{2})", text)
    if match:
        return _build_date(int(match.group(1)), int(match.group(2)), int(match.group(3)))

    match = re.fullmatch(r"(\d{4})[./](\d{1,2})[./](\d{1,2})", text)
    if match:
        return _build_date(int(match.group(1)), int(match.group(2)), int(match.group(3)))

    match = re.fullmatch(r"(\d{1,2})[./-](\d{1,2})[./-](\d{4})", text)
    if match:
        return _build_date(int(match.group(3)), int(match.group(1)), int(match.group(2)))

    return None


def cell_text(value: Cell) -> str:
    """Text form of a cell for pattern matching, stripped.

    Integral numbers lose the ".0" pandas would print (20250912.0 →
    "20250912"); empty cells become "".
    """
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


# ============================================================
# INTERNAL FUNCTIONS
# ============================================================


def _build_date(year: int, month: int, day: int) -> date | None:
    """Builds a date, or None for impossible ones (2025-02-30, month 13)."""
    try:
        return date(year, month, day)
    except ValueError:
        return None
