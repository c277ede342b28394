"""
Domain ports (interfaces).

Ports define WHAT the domain needs, without saying HOW it is done.
Each port has one or more adapters implementing it.

Usage:
    from src.domain.ports import StatementParser, WorkbookLoader, OutputWriter
"""

from src.domain.ports.container_decryptor import ContainerDecryptor
from src.domain.ports.output_writer import OutputWriter
from src.domain.ports.parser_selector import ParserSelector
from src.domain.ports.password_vault import PasswordVault
from src.domain.ports.process_logger import ProcessLogger
from src.domain.ports.statement_parser import StatementParser
from src.domain.ports.workbook_loader import WorkbookLoader

__all__ = [
    "ContainerDecryptor",
    "OutputWriter",
    "ParserSelector",
    "PasswordVault",
    "ProcessLogger",
    "StatementParser",
    "WorkbookLoader",
]
