"""
Input port: Container decryptor.

Card issuers email their statements as password-protected spreadsheets
(the password is usually the holder's birth date). This port detects the
protection and removes it before the workbook loader sees the bytes.
"""

from abc import ABC, abstractmethod


class ContainerDecryptor(ABC):
    """Interface to detect and remove spreadsheet encryption."""

    @abstractmethod
    def container_kind(self, data: bytes) -> str:
        """Kind of container, from its signature: 'ole2', 'zip' or 'other'."""
        ...

    @abstractmethod
    def is_encrypted(self, data: bytes) -> bool:
        """True when the content is password protected."""
        ...

    @abstractmethod
    def decrypt(self, data: bytes, password: str | None, file_name: str = "") -> bytes:
        """Returns the unencrypted content.

        Content that is not encrypted is returned unchanged, whatever the
        password.

        Raises:
            PasswordRequiredError: If the content is encrypted and no
                                   password was given.
            WrongPasswordError: If the password is rejected.
            InvalidDataError: If the container is damaged.
        """
        ...
