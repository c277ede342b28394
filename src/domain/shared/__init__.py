"""
Shared domain utilities.

These functions are used by several issuer parsers and depend on no
external library. They only operate on native Python types and the
domain models.

Usage:
    from src.domain.shared.money import parse_amount, parse_signed_amount
    from src.domain.shared.date_parser import parse_korean_date, excel_serial_to_date
    from src.domain.shared.text_cleaner import clean_merchant_name, strip_all_whitespace
    from src.domain.shared.row_walk import RowWalkState, walk_rows
"""
