"""
Domain model: Parsed transactions.

Two shapes of the same record:

- ``StatementEntry``: what the row walk produces. The amount is SIGNED:
  reversals and discounts come out negative, and they must survive until
  reconciliation because the issuer's declared total includes them.

- ``ParsedTransaction``: what the engine emits. The amount is always a
  positive integer in won. Creating one with amount <= 0 fails, so a
  result can never carry a non-positive row.
"""

from dataclasses import dataclass
from datetime import date

from src.domain.models.enums import DEFAULT_CATEGORY, TransactionType


@dataclass(frozen=True)
class StatementEntry:
    """A row extracted from a statement, before validation."""

    row_index: int
    """Zero-based index of the source row inside its sheet."""

    date: date
    merchant: str
    amount: int
    """Signed amount in won. May be zero or negative at this stage."""

    category: str = DEFAULT_CATEGORY
    is_installment: bool = False
    transaction_type: TransactionType = TransactionType.EXPENSE

    def to_transaction(self) -> "ParsedTransaction":
        """Promotes the entry to an emitted transaction.

        Raises:
            ValueError: If the amount is not positive.
        """
        return ParsedTransaction(
            date=self.date,
            merchant=self.merchant,
            amount=self.amount,
            category=self.category,
            is_installment=self.is_installment,
            transaction_type=self.transaction_type,
        )


@dataclass(frozen=True)
class ParsedTransaction:
    """Canonical transaction record handed to the caller."""

    date: date
    """Transaction (usage) date."""

    merchant: str
    """Merchant display text, already cleaned of pasted amounts and legal
    entity markers. Refined later by the caller's mapping service."""

    amount: int
    """Amount in won. Always > 0."""

    category: str = DEFAULT_CATEGORY
    """Provisional tag: INSTALLMENT_CATEGORY or a placeholder (manual
    entries carry the user's category)."""

    is_installment: bool = False
    transaction_type: TransactionType = TransactionType.EXPENSE

    @property
    def date_text(self) -> str:
        """Zero-padded ``YYYY-MM-DD``."""
        return self.date.isoformat()

    def to_dict(self) -> dict:
        return {
            "date": self.date_text,
            "merchant": self.merchant,
            "amount": self.amount,
            "category": self.category,
            "is_installment": self.is_installment,
            "transaction_type": self.transaction_type.value,
        }

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise ValueError(f"amount must be an integer number of won: {self.amount!r}")
        if self.amount <= 0:
            raise ValueError(f"amount must be positive: {self.amount}")
        if not self.merchant.strip():
            raise ValueError("merchant cannot be empty")
