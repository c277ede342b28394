"""
Output port: Password vault.

Voucher programmes send every statement with the same password, so a
password that opened one file is offered again for the next file with the
same name pattern. The engine never stores passwords by itself; it asks
and tells this port.
"""

from abc import ABC, abstractmethod


class PasswordVault(ABC):
    """Interface to look up and remember statement passwords."""

    @abstractmethod
    def lookup(self, file_name: str) -> str | None:
        """Saved password for the pattern the file name matches, if any."""
        ...

    @abstractmethod
    def save(self, file_name: str, password: str) -> None:
        """Remembers a password that worked, when the file name matches a
        known pattern. Other file names are ignored."""
        ...
