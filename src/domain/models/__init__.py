"""
Domain models of the statement-parser project.

All models are immutable dataclasses (frozen=True) with no external
dependencies, so one parse invocation can never alter another one's data.

Usage:
    from src.domain.models import ParsedTransaction, ParseResult, RawWorkbook
"""

from src.domain.models.enums import ErrorCode, SourceType, TransactionType
from src.domain.models.markers import HeaderLocation, InstallmentRange
from src.domain.models.parse_result import ParseResult
from src.domain.models.raw_workbook import RawWorkbook, Sheet
from src.domain.models.transaction import ParsedTransaction, StatementEntry

__all__ = [
    "ErrorCode",
    "HeaderLocation",
    "InstallmentRange",
    "ParseResult",
    "ParsedTransaction",
    "RawWorkbook",
    "Sheet",
    "SourceType",
    "StatementEntry",
    "TransactionType",
]
