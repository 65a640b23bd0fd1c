"""Convert ING bank CSV exports into QIF files for budgeting software."""

from csv2qif.config import ConversionConfig, MemoOptions
from csv2qif.convert import convert, convert_file
from csv2qif.parse import parse_record
from csv2qif.qif import QIF_HEADER, QifWriter, format_record
from csv2qif.record import TransactionRecord

__all__: list[str] = [
    "ConversionConfig",
    "MemoOptions",
    "QIF_HEADER",
    "QifWriter",
    "TransactionRecord",
    "convert",
    "convert_file",
    "format_record",
    "parse_record",
]
