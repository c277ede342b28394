"""
Explicit amount extraction sequences.

Some layouts do not keep the amount in one fixed column: it moves between
columns depending on the kind of row, or the sheet has extra columns. A
parser declares the places to look as an ordered tuple of
``AmountAttempt``, each one documenting the layout fact it relies on.
The first attempt producing a non-zero amount wins.
"""

from collections.abc import Callable
from dataclasses import dataclass

from src.domain.models.raw_workbook import Row
from src.domain.shared.money import parse_signed_amount


@dataclass(frozen=True)
class AmountAttempt:
    """One place where the amount of a row may be found."""

    name: str
    assumes: str
    """Layout fact the attempt relies on."""

    read: Callable[[Row], int]


def column_attempt(name: str, index: int, assumes: str) -> AmountAttempt:
    """Reads the signed amount at a fixed column."""

    def read(row: Row) -> int:
        if index >= len(row):
            return 0
        return parse_signed_amount(row[index])

    return AmountAttempt(name=name, assumes=assumes, read=read)


def scan_from_end(row: Row, trailing_zero_columns: int = 2, min_index: int = 4, depth: int = 6) -> int:
    """Scans a row backwards for the first non-zero amount.

    Only applies when the last ``trailing_zero_columns`` cells are zero:
    that is the signature of the rows this scan is meant for, and a row
    that breaks it is not trusted. The scan starts just before those
    columns and stops at ``max(min_index, len(row) - depth)`` so it never
    reaches the merchant column.

    Returns:
        The first non-zero signed amount found, or 0.
    """
    if len(row) < trailing_zero_columns + 2:
        return 0

    tail = row[len(row) - trailing_zero_columns:]
    if any(parse_signed_amount(cell) != 0 for cell in tail):
        return 0

    lowest = max(min_index, len(row) - depth)
    for index in range(len(row) - trailing_zero_columns - 1, lowest - 1, -1):
        amount = parse_signed_amount(row[index])
        if amount != 0:
            return amount
    return 0


def first_nonzero(row: Row, attempts: tuple[AmountAttempt, ...]) -> int:
    """Runs the attempts in order and returns the first non-zero amount."""
    for attempt in attempts:
        amount = attempt.read(row)
        if amount != 0:
            return amount
    return 0
