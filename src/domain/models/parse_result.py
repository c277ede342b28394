"""
Domain model: Result of parsing one statement file.

This is the contract between the engine and everything outside it (the
upload endpoint, the Excel export, the persistence layer). Success and
failure share the same shape so a batch can collect results without
try/except around every file.

Invariants enforced on construction:
- ``total_amount`` equals the sum of the emitted amounts.
- A failure carries no transactions and has an error message and code.
"""

from dataclasses import dataclass, field

from src.domain.models.enums import ErrorCode, SourceType
from src.domain.models.transaction import ParsedTransaction


@dataclass(frozen=True)
class ParseResult:
    """Outcome of one parse invocation."""

    success: bool
    source_type: SourceType
    data: tuple[ParsedTransaction, ...] = field(default_factory=tuple)
    total_amount: int = 0
    billing_total: int | None = None
    """Grand total the issuer declares on the statement, when it has one."""

    error: str | None = None
    error_code: ErrorCode | None = None

    @property
    def transaction_count(self) -> int:
        return len(self.data)

    def to_dict(self) -> dict:
        """Caller-facing mapping. Optional fields are left out when absent."""
        result: dict = {
            "success": self.success,
            "data": [t.to_dict() for t in self.data],
            "source_type": self.source_type.value,
            "total_amount": self.total_amount,
        }
        if self.billing_total is not None:
            result["billing_total"] = self.billing_total
        if self.error is not None:
            result["error"] = self.error
        if self.error_code is not None:
            result["error_code"] = self.error_code.value
        return result

    def __post_init__(self) -> None:
        computed = sum(t.amount for t in self.data)
        if self.total_amount != computed:
            raise ValueError(
                f"total_amount ({self.total_amount}) does not match the sum "
                f"of the transactions ({computed})"
            )
        if not self.success:
            if self.data:
                raise ValueError("A failed result cannot carry transactions")
            if not self.error or self.error_code is None:
                raise ValueError("A failed result needs an error message and code")
