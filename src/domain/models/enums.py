"""
Closed vocabularies of the domain: issuers, error codes, transaction types
and the provisional categories the engine is allowed to emit.

The enum values are the strings the caller stores and displays, so they
are kept exactly as the household ledger uses them (Korean labels).
"""

from enum import Enum


class SourceType(str, Enum):
    """Issuer (card company, voucher programme, bank or manual convention)
    whose statement format a parser handles."""

    HYUNDAI = "현대카드"
    SAMSUNG = "삼성카드"
    LOTTE = "롯데카드"
    KB = "KB국민카드"
    ONNURI = "온누리"
    SEONGNAM = "성남사랑"
    WOORI = "우리은행"
    MANUAL = "직접입력"
    OTHER = "기타"


class ErrorCode(str, Enum):
    """Closed set of failure codes exposed in ParseResult.error_code."""

    PASSWORD_REQUIRED = "PASSWORD_REQUIRED"
    WRONG_PASSWORD = "WRONG_PASSWORD"
    UNSUPPORTED_FORMAT = "UNSUPPORTED_FORMAT"
    INVALID_DATA = "INVALID_DATA"
    TOTAL_MISMATCH = "TOTAL_MISMATCH"


class TransactionType(str, Enum):
    EXPENSE = "expense"
    INCOME = "income"


INSTALLMENT_CATEGORY = "기존할부"
"""Tag for charges already being paid off across several periods."""

DEFAULT_CATEGORY = "기타"
"""Placeholder for expenses. The external classifier refines it later."""

DEFAULT_INCOME_CATEGORY = "기타소득"
"""Placeholder for income rows (bank deposits)."""

MANUAL_CATEGORIES: frozenset[str] = frozenset(
    {
        "식료품",
        "외식/커피",
        "쇼핑",
        "관리비",
        "통신/교통",
        "육아",
        "병원/미용",
        "기존할부",
        "대출이자",
        "양육비",
        "세금",
        "여행",
        "부모님",
        "친구/동료",
        "경조사/선물",
        "가전/가구",
        "기타",
    }
)
"""Categories a user may type in the manual-entry spreadsheet. Anything
else falls back to DEFAULT_CATEGORY."""
