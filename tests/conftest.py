"""
Shared fixtures: real workbook bytes built in memory.
"""

import pytest

from tests.workbooks import build_xls, build_xlsx, encrypt_xlsx


@pytest.fixture
def xlsx_bytes():
    return build_xlsx


@pytest.fixture
def xls_bytes():
    return build_xls


@pytest.fixture
def encrypted_xlsx():
    """``encrypted_xlsx(payload, password)``: a real password-protected
    workbook that decrypts to ``payload``."""
    return encrypt_xlsx
