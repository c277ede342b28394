"""
Output adapter: In-memory password vault.

Passwords are remembered per file-name PATTERN, not per file: the
Seongnam voucher app ("chak") exports every statement with the same
password (the holder's 8-digit birth date), so one that worked for
"chak_202508.xlsx" is offered again for "chak_202509.xlsx".

Card issuers change passwords or use none, so their files match no
pattern and nothing is stored for them.
"""

from src.domain.ports.password_vault import PasswordVault

PASSWORD_PATTERNS: tuple[str, ...] = ("chak",)


def password_pattern(file_name: str) -> str | None:
    """First known pattern contained in the file name (case-insensitive)."""
    lower_name = file_name.lower()
    for pattern in PASSWORD_PATTERNS:
        if pattern in lower_name:
            return pattern
    return None


class InMemoryPasswordVault(PasswordVault):
    """Vault that lives as long as the process (one CLI run, one test)."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        """
        Args:
            initial: Passwords already known, keyed by pattern.
        """
        self._passwords: dict[str, str] = dict(initial or {})

    def lookup(self, file_name: str) -> str | None:
        pattern = password_pattern(file_name)
        if pattern is None:
            return None
        return self._passwords.get(pattern)

    def save(self, file_name: str, password: str) -> None:
        pattern = password_pattern(file_name)
        if pattern is not None and password:
            self._passwords[pattern] = password
