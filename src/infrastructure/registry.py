"""
Registry of the available issuer parsers.

Centralises the relation source_type → parser instance AND the priority
order in which parsers are asked whether they recognise a file. Adding an
issuer to the system takes 2 steps:
1. Create the XxxParser class implementing StatementParser.
2. Register it in create_default_registry() at the right position.

Why does the order matter?
Because recognition is not exclusive: a manual-entry file named
"현대카드_직접입력.xlsx" matches both the manual and the Hyundai rules. The
first registered parser that accepts the file wins, so the registration
order IS the tie-break.
"""

from collections.abc import Iterator

from src.domain.models.enums import SourceType
from src.domain.ports.statement_parser import StatementParser


class IssuerParserRegistry:
    """Ordered registry of issuer parsers."""

    def __init__(self) -> None:
        self._parsers: dict[SourceType, StatementParser] = {}

    def register(self, parser: StatementParser) -> None:
        """Registers a parser after the ones already registered.

        Args:
            parser: Instance of a concrete StatementParser.

        Raises:
            ValueError: If a parser for that issuer already exists.
        """
        key = parser.source_type
        if key in self._parsers:
            raise ValueError(
                f"A parser is already registered for '{key.value}': "
                f"{type(self._parsers[key]).__name__}. "
                f"Cannot register {type(parser).__name__}."
            )
        self._parsers[key] = parser

    def get(self, source_type: SourceType) -> StatementParser | None:
        """Parser of an issuer, or None when it has none."""
        return self._parsers.get(source_type)

    @property
    def priority(self) -> list[SourceType]:
        """Issuers in the order their parsers are asked."""
        return list(self._parsers.keys())

    def __iter__(self) -> Iterator[StatementParser]:
        return iter(self._parsers.values())

    def __len__(self) -> int:
        return len(self._parsers)


def create_default_registry() -> IssuerParserRegistry:
    """Creates a registry with every available parser, in priority order.

    Priority:
        1. Manual entry: a household file may carry an issuer's name.
        2. Card issuers: Hyundai, Samsung, Lotte, KB.
        3. Voucher programmes: Onnuri, Seongnam.
        4. Woori Bank: its generic "거래내역" file name is the weakest hint.

    Returns:
        IssuerParserRegistry with all parsers registered.
    """
    registry = IssuerParserRegistry()

    from src.adapters.input.issuer_parsers.manual_entry_parser import ManualEntryParser

    registry.register(ManualEntryParser())

    from src.adapters.input.issuer_parsers.hyundai_parser import HyundaiCardParser

    registry.register(HyundaiCardParser())

    from src.adapters.input.issuer_parsers.samsung_parser import SamsungCardParser

    registry.register(SamsungCardParser())

    from src.adapters.input.issuer_parsers.lotte_parser import LotteCardParser

    registry.register(LotteCardParser())

    from src.adapters.input.issuer_parsers.kb_parser import KBCardParser

    registry.register(KBCardParser())

    from src.adapters.input.issuer_parsers.onnuri_parser import OnnuriVoucherParser

    registry.register(OnnuriVoucherParser())

    from src.adapters.input.issuer_parsers.seongnam_parser import SeongnamVoucherParser

    registry.register(SeongnamVoucherParser())

    from src.adapters.input.issuer_parsers.woori_parser import WooriBankParser

    registry.register(WooriBankParser())

    return registry
