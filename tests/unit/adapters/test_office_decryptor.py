"""
Tests for the decryption inspector.

Zip containers are built with zipfile and flagged as encrypted by hand.
Compound documents are encrypted for real with msoffcrypto-tool; a fake
OfficeFile is used only for failures a real container cannot produce.
"""

import io
import zipfile

import pytest
from msoffcrypto.exceptions import DecryptionError

from src.adapters.input.decryption import office_decryptor
from src.adapters.input.decryption.office_decryptor import ZIP_ENCRYPTED_FLAG, OfficeDecryptor
from src.domain.exceptions import InvalidDataError, PasswordRequiredError, WrongPasswordError

PASSWORD = "19901225"


def _plain_zip() -> bytes:
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_STORED) as archive:
        archive.writestr("xl/workbook.xml", "<workbook/>")
    return buffer.getvalue()


def _flag_encrypted(data: bytes) -> bytes:
    """Sets the encryption bit in the local and central headers."""
    patched = bytearray(data)
    for signature, flag_offset in ((b"PK\x03\x04", 6), (b"PK\x01\x02", 8)):
        start = patched.find(signature)
        while start != -1:
            patched[start + flag_offset] |= ZIP_ENCRYPTED_FLAG
            start = patched.find(signature, start + 4)
    return bytes(patched)


@pytest.fixture
def decryptor():
    return OfficeDecryptor()


class TestContainerKind:
    def test_kinds(self, decryptor):
        assert decryptor.container_kind(_plain_zip()) == "zip"
        assert decryptor.container_kind(office_decryptor.OLE2_MAGIC + b"\x00") == "ole2"
        assert decryptor.container_kind(b"<html><table></table></html>") == "other"


class TestPlainFiles:
    def test_plain_zip_passes_through(self, decryptor):
        data = _plain_zip()
        assert decryptor.is_encrypted(data) is False
        assert decryptor.decrypt(data, None, "a.xlsx") is data

    def test_html_passes_through(self, decryptor):
        data = b"<html><table><tr><td>1</td></tr></table></html>"
        assert decryptor.decrypt(data, "ignored", "a.xls") == data


class TestEncryptedZip:
    def test_flag_is_detected(self, decryptor):
        assert decryptor.is_encrypted(_flag_encrypted(_plain_zip())) is True

    def test_password_required(self, decryptor):
        with pytest.raises(PasswordRequiredError):
            decryptor.decrypt(_flag_encrypted(_plain_zip()), None, "chak_202510.xlsx")

    def test_empty_password_counts_as_missing(self, decryptor):
        with pytest.raises(PasswordRequiredError):
            decryptor.decrypt(_flag_encrypted(_plain_zip()), "", "chak_202510.xlsx")


class TestEncryptedCompoundDocument:
    """Real ECMA-376 encryption, as Excel writes a protected .xlsx."""

    @pytest.fixture
    def payload(self, xlsx_bytes):
        return xlsx_bytes([["이용일", "결제원금"]])

    @pytest.fixture
    def data(self, payload, encrypted_xlsx):
        return encrypted_xlsx(payload, PASSWORD)

    def test_detected(self, decryptor, data):
        assert decryptor.container_kind(data) == "ole2"
        assert decryptor.is_encrypted(data) is True

    def test_correct_password(self, decryptor, data, payload):
        assert decryptor.decrypt(data, PASSWORD, "chak.xlsx") == payload

    def test_wrong_password(self, decryptor, data):
        with pytest.raises(WrongPasswordError):
            decryptor.decrypt(data, "00000000", "chak.xlsx")

    def test_no_password(self, decryptor, data):
        with pytest.raises(PasswordRequiredError):
            decryptor.decrypt(data, None, "chak.xlsx")


class _FakeOfficeFile:
    """Stands in for msoffcrypto.OfficeFile where a real container cannot
    produce the condition under test."""

    output = b""
    error: Exception | None = None

    def __init__(self, file):
        pass

    def is_encrypted(self):
        return True

    def load_key(self, password=None):
        pass

    def decrypt(self, output):
        if self.error is not None:
            raise self.error
        output.write(self.output)


class TestDecryptionFailures:
    @pytest.fixture
    def ole2(self):
        return office_decryptor.OLE2_MAGIC + b"\x00" * 504

    def test_noise_after_decryption_is_a_wrong_password(self, decryptor, ole2, monkeypatch):
        fake = type("NoiseOfficeFile", (_FakeOfficeFile,), {"output": b"\x13\x37 not a workbook"})
        monkeypatch.setattr(office_decryptor.msoffcrypto, "OfficeFile", fake)

        with pytest.raises(WrongPasswordError):
            decryptor.decrypt(ole2, PASSWORD, "chak.xlsx")

    def test_unsupported_encryption_is_invalid_data(self, decryptor, ole2, monkeypatch):
        fake = type(
            "BrokenOfficeFile",
            (_FakeOfficeFile,),
            {"error": DecryptionError("Unsupported EncryptionInfo version")},
        )
        monkeypatch.setattr(office_decryptor.msoffcrypto, "OfficeFile", fake)

        with pytest.raises(InvalidDataError):
            decryptor.decrypt(ole2, PASSWORD, "a.xls")
