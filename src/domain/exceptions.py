"""
Domain exceptions of the statement-parser project.

Each exception carries the error code that ends up in
``ParseResult.error_code``, so the processing boundary can turn any of them
into a failure result without a lookup table.

Hierarchy:
    ParserBaseError
    ├── PasswordRequiredError     → encrypted file, no password supplied
    ├── WrongPasswordError        → encrypted file, password rejected
    ├── UnsupportedFormatError    → no issuer parser recognises the file
    ├── InvalidDataError          → container unreadable / sheet empty
    ├── ParseError                → an issuer parser could not parse rows
    │   ├── HeaderNotFoundError   → the header row is missing
    │   └── TotalMismatchError    → computed sum != declared billing total
    └── OutputError               → export file could not be written
"""

from src.domain.models.enums import ErrorCode
from src.domain.shared.money import format_won


class ParserBaseError(Exception):
    """Base exception of the project. Every other one inherits from it.

    Catching ``ParserBaseError`` at the processor boundary covers every
    expected failure; unexpected ones are handled separately.
    """

    error_code: ErrorCode = ErrorCode.INVALID_DATA


class PasswordRequiredError(ParserBaseError):
    """Raised when the file is encrypted and no password was supplied.

    Recoverable: the caller asks the user for a password (or looks one up
    in the vault) and invokes the whole pipeline again.
    """

    error_code = ErrorCode.PASSWORD_REQUIRED

    def __init__(self, file_name: str):
        self.file_name = file_name
        super().__init__(f"Password required to open '{file_name}'")


class WrongPasswordError(ParserBaseError):
    """Raised when decryption fails because the password is wrong."""

    error_code = ErrorCode.WRONG_PASSWORD

    def __init__(self, file_name: str, detail: str = ""):
        self.file_name = file_name
        self.detail = detail
        message = f"Incorrect password for '{file_name}'"
        if detail:
            message += f": {detail}"
        super().__init__(message)


class UnsupportedFormatError(ParserBaseError):
    """Raised when no registered issuer parser accepts the file.

    This can happen because:
    - The filename carries no issuer alias and the headers match no issuer.
    - The file is a statement from an issuer that has no parser yet.
    """

    error_code = ErrorCode.UNSUPPORTED_FORMAT

    def __init__(self, file_name: str, detail: str = ""):
        self.file_name = file_name
        self.detail = detail
        message = f"Unsupported file format: {file_name}"
        if detail:
            message += f": {detail}"
        super().__init__(message)


class InvalidDataError(ParserBaseError):
    """Raised when the bytes cannot be read as a spreadsheet, or the sheet
    an issuer needs is empty.

    Examples:
    - A .docx renamed to .xlsx.
    - A truncated download.
    - A workbook without sheets.
    """

    error_code = ErrorCode.INVALID_DATA

    def __init__(self, file_name: str, cause: str):
        self.file_name = file_name
        self.cause = cause
        super().__init__(f"Invalid data in '{file_name}': {cause}")


class ParseError(ParserBaseError):
    """Raised when an issuer parser cannot extract the transactions."""

    error_code = ErrorCode.INVALID_DATA

    def __init__(self, issuer: str, file_name: str, cause: str):
        self.issuer = issuer
        self.file_name = file_name
        self.cause = cause
        super().__init__(f"Error parsing {issuer} in '{file_name}': {cause}")


class HeaderNotFoundError(ParseError):
    """Raised when the issuer's header row is not in the scanned rows."""

    def __init__(self, issuer: str, file_name: str, keywords: list[str], rows: int):
        self.keywords = keywords
        self.rows = rows
        super().__init__(
            issuer,
            file_name,
            f"Header row not found (looked for {', '.join(keywords)} "
            f"in the first {rows} rows)",
        )


class TotalMismatchError(ParseError):
    """Raised when the signed sum of the parsed rows differs from the
    billing total printed by the issuer.

    The whole file is rejected: a mismatch means rows were lost or
    duplicated, and a partial import would silently corrupt the ledger.
    """

    error_code = ErrorCode.TOTAL_MISMATCH

    def __init__(self, issuer: str, file_name: str, computed: int, declared: int):
        self.computed = computed
        self.declared = declared
        super().__init__(
            issuer,
            file_name,
            f"loaded data does not match the statement. "
            f"Statement total: {format_won(declared)} won, "
            f"loaded total: {format_won(computed)} won",
        )


class OutputError(ParserBaseError):
    """Raised when an export file cannot be written.

    This can happen because:
    - There is no write permission on the output directory.
    - The disk is full.
    """

    def __init__(self, output_path: str, cause: str):
        self.output_path = output_path
        self.cause = cause
        super().__init__(f"Error writing output to '{output_path}': {cause}")
