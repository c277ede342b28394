"""
Tests for the row walk (sticky date fold) and the amount attempts.
"""

from datetime import date

from src.domain.models.transaction import StatementEntry
from src.domain.shared.amount_attempts import (
    AmountAttempt,
    column_attempt,
    first_nonzero,
    scan_from_end,
)
from src.domain.shared.date_parser import parse_korean_date
from src.domain.shared.row_walk import RowWalkState, indexed_rows, walk_rows
from src.domain.shared.sheet_scan import text_at


def _sticky_step(state, indexed_row):
    """Minimal step: date in column 0, merchant in 1, amount in 2."""
    index, row = indexed_row
    state = state.with_date(parse_korean_date(text_at(row, 0)))
    if state.current_date is None:
        return state
    return state.with_entry(
        StatementEntry(row_index=index, date=state.current_date, merchant=row[1], amount=row[2])
    )


class TestRowWalkState:
    def test_none_keeps_previous_date(self):
        state = RowWalkState().with_date(date(2025, 8, 14)).with_date(None)
        assert state.current_date == date(2025, 8, 14)

    def test_with_entry_does_not_mutate(self):
        entry = StatementEntry(row_index=0, date=date(2025, 8, 14), merchant="A", amount=1)
        original = RowWalkState()
        updated = original.with_entry(entry)
        assert original.entries == ()
        assert updated.entries == (entry,)


class TestWalkRows:
    def test_date_on_first_row_propagates(self):
        """A date on the first of three rows reaches all three entries."""
        rows = (
            ("2025년 08월 14일", "A", 1000),
            ("", "B", 2000),
            (None, "C", 3000),
        )
        state = walk_rows(indexed_rows(rows, 0), _sticky_step)

        assert [e.date for e in state.entries] == [date(2025, 8, 14)] * 3

    def test_new_date_replaces_sticky_date(self):
        rows = (
            ("2025년 08월 14일", "A", 1000),
            ("", "B", 2000),
            ("2025년 08월 15일", "C", 3000),
            ("", "D", 4000),
        )
        state = walk_rows(indexed_rows(rows, 0), _sticky_step)

        assert [e.date.day for e in state.entries] == [14, 14, 15, 15]

    def test_rows_before_any_date_are_skipped(self):
        rows = (("", "orphan", 1000), ("2025년 08월 14일", "A", 2000))
        state = walk_rows(indexed_rows(rows, 0), _sticky_step)
        assert [e.merchant for e in state.entries] == ["A"]

    def test_indexed_rows_keep_sheet_indices(self):
        rows = (("h",), ("a",), ("b",), ("c",))
        assert [i for i, _ in indexed_rows(rows, 1, 3)] == [1, 2]

    def test_indexed_rows_stop_beyond_end(self):
        rows = (("h",), ("a",))
        assert [i for i, _ in indexed_rows(rows, 1, 10)] == [1]


class TestAmountAttempts:
    def test_column_attempt_out_of_range(self):
        attempt = column_attempt("far", 20, assumes="test")
        assert attempt.read(("a", 1)) == 0

    def test_scan_from_end_finds_amount(self):
        row = ("2025년 08월 14일", "", "A", "", "", 2000, "", "", 0, 0)
        assert scan_from_end(row) == 2000

    def test_scan_from_end_requires_zero_tail(self):
        row = ("2025년 08월 14일", "", "A", "", "", 2000, "", "", 500, 0)
        assert scan_from_end(row) == 0

    def test_scan_from_end_does_not_reach_merchant_columns(self):
        row = ("2025년 08월 14일", "", "3,300", "", "", "", "", "", 0, 0)
        assert scan_from_end(row) == 0

    def test_scan_from_end_short_row(self):
        assert scan_from_end((0, 0, 0)) == 0

    def test_first_nonzero_order(self):
        attempts = (
            AmountAttempt("first", assumes="", read=lambda row: 0),
            AmountAttempt("second", assumes="", read=lambda row: 7),
            AmountAttempt("third", assumes="", read=lambda row: 9),
        )
        assert first_nonzero((), attempts) == 7

    def test_first_nonzero_all_zero(self):
        assert first_nonzero((), (AmountAttempt("x", assumes="", read=lambda row: 0),)) == 0
