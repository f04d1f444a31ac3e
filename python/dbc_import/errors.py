"""Exceptions raised while importing DBC files"""

from __future__ import annotations


# ============================================================================
# CUSTOM EXCEPTIONS
# ============================================================================

class DbcImportError(Exception):
    """Base exception for all dbc_import errors"""


class DbcParseError(DbcImportError):
    """A line carries a known tag but does not satisfy its grammar.

    Parsing stops at the first such line; no partial result is produced.

    Attributes:
        line_number: 1-based line number of the offending line
        line: Raw text of the offending line
        construct: Human-readable name of the construct being parsed
    """

    def __init__(self, line_number: int, line: str, construct: str) -> None:
        self.line_number: int = line_number
        self.line: str = line
        self.construct: str = construct
        super().__init__(f"line {line_number}: invalid {construct}: {line!r}")


class DbcReadError(DbcImportError):
    """DBC file could not be read (missing, unreadable, bad encoding)"""
