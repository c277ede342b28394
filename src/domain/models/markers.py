"""
Transient row markers recomputed on every parse. Never persisted.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class HeaderLocation:
    """Where the header row of a sheet was found."""

    row_index: int
    """Zero-based index of the header row."""

    labels: tuple[str, ...]
    """Text of every header cell, stripped. Empty cells are ""."""

    def column_of(self, label: str) -> int | None:
        """Index of the first header cell equal to ``label``, if any."""
        for index, text in enumerate(self.labels):
            if text == label:
                return index
        return None


@dataclass(frozen=True)
class InstallmentRange:
    """Rows strictly between two boundary rows hold existing installments.

    The boundaries are the rows themselves (labels such as "해외이용소계" and
    "할부소계"); neither boundary is part of the range.
    """

    start_row: int
    end_row: int

    def __post_init__(self) -> None:
        if self.start_row >= self.end_row:
            raise ValueError(
                f"start_row ({self.start_row}) must be lower than end_row ({self.end_row})"
            )

    def contains(self, row_index: int) -> bool:
        return self.start_row < row_index < self.end_row
