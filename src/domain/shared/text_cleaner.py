"""
Text cleanup utilities.

Reusable functions to normalise the text of statement cells before the
issuer parsers look at it.

These functions carry NO business logic (they know nothing about issuers
or totals). They only operate on plain strings.
"""

import re

_TRAILING_AMOUNT = re.compile(r"-?\d{1,3}(?:,\d{3})+\.{0,3}$|-\d+$")
"""An amount glued to the end of a merchant cell: "3,300", "-34,540",
"4,500,000...", "-3300". A bare trailing number without separators
("GS25", "7ELEVEN 1234") is part of the name and stays."""

_LEGAL_ENTITY_MARKERS = re.compile(r"\((?:주|유|사)\)|㈜|^주식회사\s*|\s*주식회사$")

_BRANCH_NAMES = (
    "강남",
    "홍대",
    "신촌",
    "잠실",
    "판교",
    "분당",
    "서울",
    "부산",
    "대구",
    "인천",
    "광주",
    "대전",
    "본점",
    "지점",
    "직영점",
)

_BRANCH_SUFFIX = re.compile(
    r"[\s_\-]+(?:" + "|".join(_BRANCH_NAMES) + r")(?:역?점)?$"
)
"""A branch or city name only counts as a suffix when a separator precedes
it: "스타벅스_판교" loses "_판교", "판교정육점" keeps its name."""


def clean_whitespace(text: str) -> str:
    """Collapses runs of spaces/tabs/newlines into one space and strips.

    The most basic cleanup, used by practically every parser. Spreadsheet
    cells often carry line breaks inside merchant names.

    Examples:
        >>> clean_whitespace("  스타벅스   판교점  ")
        '스타벅스 판교점'
        >>> clean_whitespace("\\t쿠팡\\n(쿠페이)")
        '쿠팡 (쿠페이)'
    """
    return re.sub(r"\s+", " ", text).strip()


def strip_all_whitespace(text: str) -> str:
    """Removes every whitespace character.

    Statement labels are sometimes letter-spaced for layout
    ("해 외 이 용 소계", "합  계"); comparing without spaces finds them.

    Examples:
        >>> strip_all_whitespace("해 외 이 용 소계")
        '해외이용소계'
    """
    return re.sub(r"\s+", "", text)


def strip_trailing_amount(text: str) -> str:
    """Removes an amount accidentally concatenated to the end of a cell.

    Examples:
        >>> strip_trailing_amount("우지커피판교w시티점3,300")
        '우지커피판교w시티점'
        >>> strip_trailing_amount("네이버페이-34,540")
        '네이버페이'
    """
    return _TRAILING_AMOUNT.sub("", text).strip()


def clean_merchant_name(raw: str) -> str:
    """Produces the display name of a merchant from its raw cell text.

    Sequence:
    1. Collapse whitespace.
    2. Drop an amount glued to the end ("…점3,300").
    3. Drop legal-entity markers: "(주)", "㈜", "(유)", "(사)", and a
       leading or trailing "주식회사".
    4. Drop a known branch/city suffix separated by "_", "-" or a space.

    If the cleanup leaves nothing, the whitespace-collapsed raw text is
    returned instead, so a merchant is never empty.

    Examples:
        >>> clean_merchant_name("(주)우아한형제들")
        '우아한형제들'
        >>> clean_merchant_name("스타벅스_판교")
        '스타벅스'
        >>> clean_merchant_name("1,000")
        '1,000'
    """
    original = clean_whitespace(raw)

    cleaned = strip_trailing_amount(original)
    cleaned = _LEGAL_ENTITY_MARKERS.sub("", cleaned).strip()
    cleaned = _BRANCH_SUFFIX.sub("", cleaned).strip()
    cleaned = clean_whitespace(cleaned)

    return cleaned or original


def contains_any(text: str, keywords: tuple[str, ...], ignore_case: bool = False) -> bool:
    """True when any keyword is a substring of the text.

    Used for deny-lists of subtotal labels and discount programmes.
    """
    if ignore_case:
        text = text.lower()
        return any(keyword.lower() in text for keyword in keywords)
    return any(keyword in text for keyword in keywords)
