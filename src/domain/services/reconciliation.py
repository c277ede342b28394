"""
Domain service: Reconciliation of parsed rows against the billing total.

Two strengths, on purpose:

- STRICT (Hyundai): the signed sum of every extracted row, reversals and
  discounts included, must equal the billing total printed on the
  statement. Any difference rejects the whole file. This guards against
  rows silently lost or duplicated by a layout change, which happened
  with that issuer's export.

- INFORMATIONAL (every other issuer): the difference is reported to the
  process log and the parse still succeeds. Their declared totals include
  fees, previous balances or payments the detail sheets do not itemise,
  so a difference is expected.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from src.domain.exceptions import TotalMismatchError
from src.domain.models.parse_result import ParseResult
from src.domain.models.transaction import StatementEntry


@dataclass(frozen=True)
class ReconciliationReport:
    """Comparison of a computed total with the issuer's declared total."""

    computed: int
    declared: int | None

    @property
    def difference(self) -> int:
        """declared - computed (0 when the issuer declares nothing)."""
        if self.declared is None:
            return 0
        return self.declared - self.computed

    @property
    def matches(self) -> bool:
        return self.difference == 0


def reconcile_strict(
    entries: Iterable[StatementEntry],
    billing_total: int | None,
    issuer: str,
    file_name: str,
) -> tuple[StatementEntry, ...]:
    """Validates the signed sum and returns the entries that may be emitted.

    The sum is taken over ALL entries, negative ones included, because the
    billing total nets them. Only once it matches are non-positive entries
    dropped.

    When the statement has no summary row (``billing_total`` is None) the
    check is skipped.

    Raises:
        TotalMismatchError: If the signed sum differs from the billing
                            total, by any amount.
    """
    entries = tuple(entries)
    computed = sum(entry.amount for entry in entries)

    if billing_total is not None and computed != billing_total:
        raise TotalMismatchError(issuer, file_name, computed=computed, declared=billing_total)

    return tuple(entry for entry in entries if entry.amount > 0)


def report_for(result: ParseResult) -> ReconciliationReport:
    """Informational comparison of a successful result."""
    return ReconciliationReport(computed=result.total_amount, declared=result.billing_total)
