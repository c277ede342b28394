"""
Input adapter: Spreadsheet decryption with msoffcrypto-tool.

Card statements arrive password protected in two containers:

- OLE2 compound document (magic D0 CF 11 E0 A1 B1 1A E1). This is both
  the legacy binary .xls (RC4/XOR protection when encrypted) and the
  wrapper Excel puts around an encrypted .xlsx (ECMA-376). msoffcrypto
  tells them apart and decrypts both.
- Zip (magic "PK\\x03\\x04") whose members carry the zip encryption flag.
  The members are read with the password and packed again unencrypted.

Anything else (plain .xlsx, plain .xls, HTML-table .xls) is passed
through untouched.
"""

import io
import zipfile
import zlib

import msoffcrypto
from msoffcrypto.exceptions import DecryptionError, FileFormatError, InvalidKeyError

from src.domain.exceptions import InvalidDataError, PasswordRequiredError, WrongPasswordError
from src.domain.ports.container_decryptor import ContainerDecryptor

OLE2_MAGIC = b"\xD0\xCF\x11\xE0\xA1\xB1\x1A\xE1"
ZIP_MAGIC = b"PK\x03\x04"

# Bit 0 of the general-purpose flags: the member is encrypted
ZIP_ENCRYPTED_FLAG = 0x1


class OfficeDecryptor(ContainerDecryptor):
    """Detects and removes the password protection of spreadsheets."""

    def container_kind(self, data: bytes) -> str:
        if data[:8] == OLE2_MAGIC:
            return "ole2"
        if data[:4] == ZIP_MAGIC:
            return "zip"
        return "other"

    def is_encrypted(self, data: bytes) -> bool:
        kind = self.container_kind(data)
        if kind == "ole2":
            return self._ole2_is_encrypted(data)
        if kind == "zip":
            return self._zip_is_encrypted(data)
        return False

    def decrypt(self, data: bytes, password: str | None, file_name: str = "") -> bytes:
        if not self.is_encrypted(data):
            return data

        if not password:
            raise PasswordRequiredError(file_name)

        if self.container_kind(data) == "ole2":
            decrypted = self._decrypt_ole2(data, password, file_name)
        else:
            decrypted = self._decrypt_zip(data, password, file_name)

        # A wrong key can "succeed" and produce noise; a workbook must come out
        if self.container_kind(decrypted) == "other":
            raise WrongPasswordError(file_name, "decrypted content is not a workbook")
        return decrypted

    # =================================================================
    # OLE2 (msoffcrypto)
    # =================================================================

    @staticmethod
    def _ole2_is_encrypted(data: bytes) -> bool:
        """Asks msoffcrypto. A compound document it cannot read is treated
        as not encrypted; the workbook loader will report it as invalid."""
        try:
            return bool(msoffcrypto.OfficeFile(io.BytesIO(data)).is_encrypted())
        except (FileFormatError, OSError):
            return False

    @staticmethod
    def _decrypt_ole2(data: bytes, password: str, file_name: str) -> bytes:
        output = io.BytesIO()
        try:
            office_file = msoffcrypto.OfficeFile(io.BytesIO(data))
            office_file.load_key(password=password)
            office_file.decrypt(output)
        except InvalidKeyError as e:
            raise WrongPasswordError(file_name) from e
        except DecryptionError as e:
            message = str(e).lower()
            if "password" in message or "key" in message:
                raise WrongPasswordError(file_name, str(e)) from e
            raise InvalidDataError(file_name, f"cannot decrypt: {e}") from e
        except Exception as e:
            raise InvalidDataError(file_name, f"cannot decrypt: {e}") from e
        return output.getvalue()

    # =================================================================
    # Zip (stdlib zipfile)
    # =================================================================

    @staticmethod
    def _zip_is_encrypted(data: bytes) -> bool:
        try:
            with zipfile.ZipFile(io.BytesIO(data)) as archive:
                return any(info.flag_bits & ZIP_ENCRYPTED_FLAG for info in archive.infolist())
        except zipfile.BadZipFile:
            return False

    @staticmethod
    def _decrypt_zip(data: bytes, password: str, file_name: str) -> bytes:
        output = io.BytesIO()
        secret = password.encode("utf-8")
        try:
            with zipfile.ZipFile(io.BytesIO(data)) as source, zipfile.ZipFile(
                output, "w", compression=zipfile.ZIP_DEFLATED
            ) as target:
                for info in source.infolist():
                    target.writestr(info.filename, source.read(info, pwd=secret))
        except RuntimeError as e:
            if "password" in str(e).lower():
                raise WrongPasswordError(file_name) from e
            raise InvalidDataError(file_name, f"cannot decrypt: {e}") from e
        except (zipfile.BadZipFile, zlib.error) as e:
            # Bad CRC or inflate errors after decryption mean a wrong key
            raise WrongPasswordError(file_name, str(e)) from e
        return output.getvalue()
