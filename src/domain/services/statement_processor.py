"""
Domain service: Statement processor.

Orchestrates the pipeline for one file:
1. Detects encryption and decrypts with the given (or saved) password.
2. Loads the workbook into sheets of rows of cells.
3. Selects the issuer parser (file name + header keywords).
4. Parses, reconciles and returns a ParseResult.

Why not put this logic in the CLI?
Because this orchestration is BUSINESS LOGIC: "given the bytes of a
statement, produce transactions" is a domain rule. The CLI only decides
WHICH files to process and WHERE to write the results.

Every failure ends here as a failed ParseResult: callers never handle the
pipeline's internal exceptions, and one bad file never stops a batch.
"""

from pathlib import Path

from src.domain.exceptions import InvalidDataError, UnsupportedFormatError
from src.domain.models.enums import SourceType
from src.domain.models.parse_result import ParseResult
from src.domain.ports.container_decryptor import ContainerDecryptor
from src.domain.ports.parser_selector import ParserSelector
from src.domain.ports.password_vault import PasswordVault
from src.domain.ports.process_logger import ProcessLogger
from src.domain.ports.statement_parser import StatementParser
from src.domain.ports.workbook_loader import WorkbookLoader
from src.domain.services.reconciliation import report_for
from src.domain.services.result_assembler import assemble_failure
from src.domain.shared.money import format_won


class StatementProcessor:
    """Processes statement files and produces ParseResults.

    Receives its dependencies through the constructor (Dependency
    Injection). It does not know which decryptor, loader or parsers are
    in use, only the interfaces (ports).
    """

    SUPPORTED_EXTENSIONS: tuple[str, ...] = (".xls", ".xlsx")

    def __init__(
        self,
        decryptor: ContainerDecryptor,
        loader: WorkbookLoader,
        selector: ParserSelector,
        logger: ProcessLogger,
        vault: PasswordVault | None = None,
    ) -> None:
        """
        Args:
            decryptor: Removes password protection.
            loader: Reads the decrypted bytes into a RawWorkbook.
            selector: Picks the issuer parser.
            logger: Processing log.
            vault: Saved passwords. Optional; without it only explicit
                   passwords are used.
        """
        self._decryptor = decryptor
        self._loader = loader
        self._selector = selector
        self._logger = logger
        self._vault = vault

    def parse_bytes(
        self,
        data: bytes,
        file_name: str,
        password: str | None = None,
        file_path: Path | None = None,
    ) -> ParseResult:
        """Runs the whole pipeline on the content of one file.

        Args:
            data: Raw file content, possibly encrypted.
            file_name: Original file name (used for issuer detection).
            password: Password for encrypted files.
            file_path: Path for the processing log. Defaults to file_name.

        Returns:
            ParseResult. Never raises for a bad file: failures come back
            with success=False and an error code.
        """
        path = file_path or Path(file_name)
        source_type = SourceType.OTHER

        try:
            if self._decryptor.is_encrypted(data):
                self._logger.log_encryption_detected(path, self._decryptor.container_kind(data))
            plain = self._decryptor.decrypt(data, password, file_name)

            workbook = self._loader.load(plain, file_name)

            parser = self._select(path, file_name, workbook)
            source_type = parser.source_type

            result = parser.parse(workbook, file_name)
        except Exception as e:
            # Boundary: domain errors keep their code, anything else is INVALID_DATA
            self._logger.log_error(path, e)
            return assemble_failure(e, source_type)

        self._logger.log_parse_complete(path, workbook.sheet_count, result.transaction_count)
        self._report_reconciliation(path, parser, result)
        return result

    def process_file(self, file_path: Path, password: str | None = None) -> ParseResult:
        """Reads a file from disk and parses it.

        When no password is given, the vault is asked for one. A password
        that opened the file is offered back to the vault.
        """
        data: bytes | None = None
        try:
            data = file_path.read_bytes()
        except OSError as e:
            error = InvalidDataError(file_path.name, f"cannot read file: {e}")
            self._logger.log_error(file_path, error)
            return assemble_failure(error)

        self._logger.log_file_received(file_path, self._decryptor.container_kind(data))

        effective_password = password
        if effective_password is None and self._vault is not None:
            effective_password = self._vault.lookup(file_path.name)

        result = self.parse_bytes(data, file_path.name, effective_password, file_path)

        if result.success and effective_password and self._vault is not None:
            self._vault.save(file_path.name, effective_password)

        return result

    def process_directory(
        self, dir_path: Path, password: str | None = None
    ) -> list[tuple[Path, ParseResult]]:
        """Processes every spreadsheet of a directory (recursive, sorted).

        Args:
            dir_path: Directory with statement files.
            password: Offered to every encrypted file of the batch. Without
                      it, each file asks the vault.

        Returns:
            (path, result) pairs, failures included.

        Raises:
            ValueError: If dir_path is not a directory.
        """
        if not dir_path.is_dir():
            raise ValueError(f"Not a directory: {dir_path}")

        results: list[tuple[Path, ParseResult]] = []
        for file_path in sorted(p for p in dir_path.glob("**/*") if p.is_file()):
            if file_path.suffix.lower() not in self.SUPPORTED_EXTENSIONS:
                self._logger.log_file_skipped(
                    file_path, f"Extension '{file_path.suffix}' not supported"
                )
                continue
            results.append((file_path, self.process_file(file_path, password)))

        return results

    def _select(self, path: Path, file_name: str, workbook) -> StatementParser:
        try:
            parser = self._selector.select(file_name, workbook)
        except UnsupportedFormatError:
            self._logger.log_parser_not_found(path)
            raise
        self._logger.log_parser_selected(path, parser.source_type.value)
        return parser

    def _report_reconciliation(self, path: Path, parser: StatementParser, result: ParseResult) -> None:
        """Logs a billing-total difference for issuers that do not enforce it."""
        if parser.validates_total:
            return
        report = report_for(result)
        if not report.matches:
            self._logger.log_validation_mismatch(
                path,
                "billing_total",
                expected=format_won(report.declared),
                actual=format_won(report.computed),
            )
