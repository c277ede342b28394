"""
Composition of the statement processor.

The CLI and library callers need the same wiring (decryptor, loader,
selector over the default registry); it lives here once. Library callers
that hold the bytes of one upload use ``parse_statement``.
"""

from pathlib import Path

from src.domain.models.parse_result import ParseResult
from src.domain.ports.password_vault import PasswordVault
from src.domain.ports.process_logger import ProcessLogger
from src.domain.services.statement_processor import StatementProcessor
from src.infrastructure.registry import IssuerParserRegistry, create_default_registry


def create_processor(
    logger: ProcessLogger,
    vault: PasswordVault | None = None,
    registry: IssuerParserRegistry | None = None,
) -> StatementProcessor:
    """Builds a StatementProcessor with the concrete adapters.

    Args:
        logger: Where processing events go.
        vault: Optional saved-password store.
        registry: Issuer parsers to select from. Defaults to every
                  available parser in priority order.
    """
    from src.adapters.input.decryption.office_decryptor import OfficeDecryptor
    from src.adapters.input.parser_selectors.keyword_selector import KeywordParserSelector
    from src.adapters.input.workbook_loaders.pandas_loader import PandasWorkbookLoader

    return StatementProcessor(
        decryptor=OfficeDecryptor(),
        loader=PandasWorkbookLoader(),
        selector=KeywordParserSelector(registry or create_default_registry()),
        logger=logger,
        vault=vault,
    )


def parse_statement(data: bytes, file_name: str, password: str | None = None) -> ParseResult:
    """Parses the content of one statement file.

    This is the engine's single entry point for callers that are not the
    CLI (an upload endpoint, a notebook). It never raises for a bad file.

    Example:
        result = parse_statement(upload_bytes, "hyundai_202508.xls", password)
        if result.success:
            result.to_dict()  # {"success", "data": [{"date", "merchant", "amount",
                              #   "category", "is_installment", "transaction_type"}],
                              #  "source_type", "total_amount", "billing_total"?}
        else:
            result.error_code  # ErrorCode.PASSWORD_REQUIRED, TOTAL_MISMATCH, ...
    """
    from src.adapters.output.loggers.null_logger import NullLogger

    return create_processor(NullLogger()).parse_bytes(data, file_name, password, Path(file_name))
