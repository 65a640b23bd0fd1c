"""
Exceptions raised while converting a bank export into a QIF file.

Every error is fatal to the run; nothing is retried or skipped.
"""
from typing import Any, Dict, Optional


class Csv2QifError(Exception):
    """Base exception for all conversion errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(Csv2QifError):
    """Raised when configuration values or files are invalid."""
    pass


class InputError(Csv2QifError):
    """Raised when the input file cannot be used."""
    pass


class InputNotFound(InputError):
    """Raised when the input file does not exist."""
    pass


class InputEmpty(InputError):
    """Raised when the input file has no content."""
    pass


class InputIOError(InputError):
    """Raised when the input file cannot be opened or read."""
    pass


class OutputIOError(Csv2QifError):
    """Raised when the output file cannot be created or written."""
    pass


class ParseError(Csv2QifError):
    """Raised when a row cannot be turned into a transaction record.

    ``row_number`` and ``source`` are filled in by the conversion loop so the
    rendered message points at the offending line.
    """

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        *,
        row_number: Optional[int] = None,
        source: Optional[str] = None,
    ):
        super().__init__(message, details)
        self.row_number = row_number
        self.source = source

    def at(self, row_number: int, source: str) -> "ParseError":
        self.row_number = row_number
        self.source = source
        return self

    def __str__(self) -> str:
        if self.row_number is None:
            return self.message
        return f"line {self.row_number} of {self.source} has an error: {self.message}"


class RowShapeError(ParseError):
    """Raised when a row does not have exactly nine columns."""
    pass


class DateFormatError(ParseError):
    """Raised when the date column is not a valid YYYYMMDD date."""
    pass


class AmountFormatError(ParseError):
    """Raised when the amount column is not a number."""
    pass
