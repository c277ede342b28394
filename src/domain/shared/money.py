"""
Helpers for amounts in won.

Korean statements print integer amounts only (no minor unit), but the cells
arrive in several shapes:

- numbers stored by the spreadsheet: 15000, 15000.0, -3300
- text with separators/suffixes: "15,000", "10,000원", "₩1,234,567"
- text with a sign marker: "-34,540", "△3,300", "▲3,300"

Two readings exist because issuers disagree on signs:

- ``parse_amount``: digits and "-" only. Used by issuers whose amount
  columns never carry reversals.
- ``parse_signed_amount``: also understands the triangle markers some
  issuers use for negative values. Used where reversals must survive
  until reconciliation.

Both are "safe": an unreadable cell counts as 0, because an empty amount
column is normal in these layouts (the amount lives in another column).
"""

import math
import re

from src.domain.models.raw_workbook import Cell

_NEGATIVE_MARKERS = ("-", "△", "▲")


def parse_amount(value: Cell) -> int:
    """Reads an amount cell as an integer number of won.

    Numbers are floored. For text, every character other than digits and
    "-" is dropped and the leading integer is read.

    Examples:
        >>> parse_amount("1,234,567원")
        1234567
        >>> parse_amount(15000.0)
        15000
        >>> parse_amount("-3,300")
        -3300
        >>> parse_amount("")
        0
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        if math.isnan(value):
            return 0
        return math.floor(value)

    cleaned = re.sub(r"[^0-9-]", "", str(value))
    match = re.match(r"-?\d+", cleaned)
    if not match:
        return 0
    return int(match.group())


def parse_signed_amount(value: Cell) -> int:
    """Reads an amount cell keeping its sign.

    Numbers are rounded half up. Text is negative when it starts with "-",
    "△" or "▲"; the magnitude is every digit in the text.

    Examples:
        >>> parse_signed_amount("△3,300")
        -3300
        >>> parse_signed_amount(863865.5)
        863866
        >>> parse_signed_amount("결제")
        0
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        if math.isnan(value):
            return 0
        return math.floor(value + 0.5)

    text = str(value).strip()
    if not text:
        return 0

    digits = re.sub(r"\D", "", text)
    if not digits:
        return 0

    amount = int(digits)
    return -amount if text.startswith(_NEGATIVE_MARKERS) else amount


def parse_absolute_amount(value: Cell) -> int:
    """Reads an amount typed by a person ("10,000원", "-5000", 12000.4).

    The sign is ignored: in the manual-entry sheet every row is an expense.
    Text keeps only digits and "-", numbers are rounded half up.
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        if math.isnan(value):
            return 0
        return abs(math.floor(value + 0.5))

    cleaned = re.sub(r"[,원\s]", "", str(value))
    match = re.match(r"-?\d+", cleaned)
    if not match:
        return 0
    return abs(int(match.group()))


def largest_amount(row: tuple[Cell, ...] | list[Cell]) -> int:
    """Largest positive amount found in a row, 0 if there is none.

    Summary rows ("합계", "일시불합계") print several numbers (counts, fees,
    partial totals); the billing total is the largest of them.
    """
    largest = 0
    for cell in row:
        amount = parse_amount(cell)
        if amount > largest:
            largest = amount
    return largest


def format_won(amount: int) -> str:
    """Formats an amount with thousands separators.

    Examples:
        >>> format_won(6001)
        '6,001'
        >>> format_won(-34540)
        '-34,540'
    """
    return f"{amount:,}"


def is_bare_integer(text: str) -> bool:
    """True when the text is only digits ("3", "12"). Installment columns
    print the number of months that way."""
    return bool(re.fullmatch(r"\d+", text.strip())) if text else False
