"""
Domain service: Assembly of ParseResult values.

Success and failure share one shape. Every issuer parser ends with
``assemble_success``; the processing boundary turns any exception into
``assemble_failure``.
"""

from collections.abc import Iterable

from src.domain.exceptions import ParserBaseError
from src.domain.models.enums import ErrorCode, SourceType
from src.domain.models.parse_result import ParseResult
from src.domain.models.transaction import StatementEntry


def assemble_success(
    source_type: SourceType,
    entries: Iterable[StatementEntry],
    billing_total: int | None = None,
) -> ParseResult:
    """Builds a successful result from the walked entries.

    Entries with amount <= 0 never reach the output. For the strict issuer
    they were already removed after reconciliation; for the others they
    are removed here.
    """
    transactions = tuple(entry.to_transaction() for entry in entries if entry.amount > 0)
    return ParseResult(
        success=True,
        source_type=source_type,
        data=transactions,
        total_amount=sum(t.amount for t in transactions),
        billing_total=billing_total,
    )


def assemble_failure(error: Exception, source_type: SourceType = SourceType.OTHER) -> ParseResult:
    """Builds a failure result from an exception.

    Domain exceptions keep their own error code and message. Anything else
    is an unexpected fault and maps to INVALID_DATA, keeping the original
    text so it can still be debugged.
    """
    if isinstance(error, ParserBaseError):
        code = error.error_code
        message = str(error)
    else:
        code = ErrorCode.INVALID_DATA
        message = f"Unexpected error while parsing: {type(error).__name__}: {error}"

    return ParseResult(
        success=False,
        source_type=source_type,
        error=message,
        error_code=code,
    )
