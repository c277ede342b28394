"""
Billing month ("YYYY-MM") of a statement.

A card statement covers purchases from several calendar months; what the
household cares about is the month it is billed in. It is taken from the
file name when the issuer puts it there, otherwise from the transactions.
"""

import re
from collections.abc import Iterable

from src.domain.models.transaction import ParsedTransaction

_FILENAME_PATTERNS = (
    re.compile(r"(\d{4})(\d{2})"),  # 202512
    re.compile(r"(\d{4})[-_](\d{2})"),  # 2025-12, 2025_12
    re.compile(r"(\d{4})년\s*(\d{1,2})월"),  # 2025년 12월
)

INSTALLMENT_BILLING_DAY = 25


def billing_month_from_filename(file_name: str) -> str | None:
    """Billing month found in a file name, or None.

    Patterns are tried in order; a match with an impossible month
    ("202599") is ignored and the next pattern is tried.

    Examples:
        >>> billing_month_from_filename("hyundai_202512.xls")
        '2025-12'
        >>> billing_month_from_filename("2025년 3월 명세서.xlsx")
        '2025-03'
    """
    for pattern in _FILENAME_PATTERNS:
        match = pattern.search(file_name)
        if not match:
            continue
        month = int(match.group(2))
        if 1 <= month <= 12:
            return f"{match.group(1)}-{month:02d}"
    return None


def billing_month_from_transactions(transactions: Iterable[ParsedTransaction]) -> str | None:
    """Month of the most recent non-installment transaction.

    Existing installments keep the date of the original purchase, often
    months old, so they are left out.
    """
    dates = [t.date for t in transactions if not t.is_installment]
    if not dates:
        return None
    return max(dates).strftime("%Y-%m")


def resolve_billing_month(file_name: str, transactions: Iterable[ParsedTransaction]) -> str | None:
    """File name first, transactions second."""
    return billing_month_from_filename(file_name) or billing_month_from_transactions(transactions)


def installment_booking_date(transaction: ParsedTransaction, billing_month: str | None) -> str:
    """Date an existing installment is booked on: the 25th of the billing month.

    Without a billing month, the 25th of the purchase month is used.
    """
    month = billing_month or transaction.date.strftime("%Y-%m")
    return f"{month}-{INSTALLMENT_BILLING_DAY}"
