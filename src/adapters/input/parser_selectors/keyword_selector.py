"""
Input adapter: Parser selection by file name and header keywords.

Statements carry no reliable issuer marker: the file name is whatever the
user saved, and titles vary between export versions. What is stable is the
set of column labels, so the selector gathers every text cell of the first
rows of every sheet and lets each parser decide.

Parsers are asked in registry order and the first one that accepts the
file wins (see IssuerParserRegistry for the priority).
"""

from src.domain.exceptions import UnsupportedFormatError
from src.domain.models.raw_workbook import RawWorkbook
from src.domain.ports.parser_selector import ParserSelector
from src.domain.ports.statement_parser import StatementParser
from src.infrastructure.registry import IssuerParserRegistry


class KeywordParserSelector(ParserSelector):
    """Picks the first registered parser whose can_parse accepts the file."""

    # Rows per sheet that form the header corpus
    HEADER_ROWS: int = 10

    def __init__(self, registry: IssuerParserRegistry) -> None:
        self._registry = registry

    def select(self, file_name: str, workbook: RawWorkbook) -> StatementParser:
        header_keywords = workbook.header_keywords(max_rows=self.HEADER_ROWS)

        for parser in self._registry:
            if parser.can_parse(file_name, header_keywords):
                return parser

        raise UnsupportedFormatError(
            file_name,
            f"no parser recognises it. Supported: "
            f"{', '.join(source.value for source in self._registry.priority)}",
        )
