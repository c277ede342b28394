"""
Row walk: a left fold over the data rows of a sheet.

Several issuers print the date only on the first row of a group and leave
it blank on the following rows of the same day. Instead of a mutable
"current date" variable captured by a loop, the walk threads an immutable
accumulator through ``functools.reduce``:

    state₀ = RowWalkState()
    stateₙ₊₁ = step(stateₙ, (row_index, row))

Each issuer supplies a pure ``step`` function, so a single step can be
tested on its own with a hand-built state.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, replace
from datetime import date
from functools import reduce

from src.domain.models.raw_workbook import Row
from src.domain.models.transaction import StatementEntry

IndexedRow = tuple[int, Row]
StepFunction = Callable[["RowWalkState", IndexedRow], "RowWalkState"]


@dataclass(frozen=True)
class RowWalkState:
    """Accumulator of the row walk."""

    current_date: date | None = None
    """Last valid date seen. Rows without their own date inherit it."""

    entries: tuple[StatementEntry, ...] = ()

    def with_date(self, new_date: date | None) -> "RowWalkState":
        """Moves the sticky date forward. None keeps the previous date."""
        if new_date is None:
            return self
        return replace(self, current_date=new_date)

    def with_entry(self, entry: StatementEntry) -> "RowWalkState":
        return replace(self, entries=self.entries + (entry,))


def walk_rows(
    rows: Iterable[IndexedRow],
    step: StepFunction,
    initial: RowWalkState | None = None,
) -> RowWalkState:
    """Folds ``step`` over the indexed rows and returns the final state."""
    return reduce(step, rows, initial or RowWalkState())


def indexed_rows(rows: tuple[Row, ...], start: int, stop: int | None = None) -> list[IndexedRow]:
    """(index, row) pairs for ``rows[start:stop]``, keeping sheet indices."""
    end = len(rows) if stop is None else min(stop, len(rows))
    return [(index, rows[index]) for index in range(max(start, 0), end)]
