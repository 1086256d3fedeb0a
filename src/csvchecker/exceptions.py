"""
Fatal exceptions raised by csvchecker.

Defects found in the data are never raised; they are returned as
``CheckError`` values. The exceptions below abort a check entirely.
"""

from typing import Optional


class CheckerError(Exception):
    """Base class for every fatal csvchecker exception."""


class SourceReadError(CheckerError):
    """The source could not be read (missing file, unknown encoding, ...)."""


class CsvParseError(SourceReadError):
    """
    The CSV stream itself is malformed or cannot be decoded.

    Attributes:
        line: Physical line at which parsing failed, if known
    """

    def __init__(self, message: str, line: Optional[int] = None):
        super().__init__(message)
        self.line = line

    def __str__(self) -> str:
        message = super().__str__()

        if self.line is None:
            return message

        return f'{message} (at line: {self.line})'


class ColumnConfigurationError(CheckerError, ValueError):
    """A column binding cannot be applied to the rows being checked."""
