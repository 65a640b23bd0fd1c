"""Render transaction records as QIF (Quicken Interchange Format) text.

A QIF bank file is a ``!Type:Bank`` header followed by one block per
transaction. Each block is a run of single-letter tagged lines closed by
``^``::

    D10/03/2016
    T-12.34
    U-12.34
    PAlbert Heijn
    MDiversen
    Cc
    N
    ^
"""

from typing import List, TextIO

from csv2qif.config import MemoOptions
from csv2qif.errors import OutputIOError
from csv2qif.record import TransactionRecord


QIF_HEADER = "!Type:Bank"

_QIF_DATE_FORMAT = "%m/%d/%Y"


def build_memo(record: TransactionRecord, options: MemoOptions) -> str:
    fragments: List[str] = []
    if options.include_code:
        fragments.append(record.code)
    if options.include_kind:
        fragments.append(record.transaction_kind)
    if options.include_comment:
        fragments.append(record.comments)
    return " ".join(fragments)


def format_record(record: TransactionRecord, options: MemoOptions) -> str:
    """Return the QIF block for *record*, newline terminated."""

    lines = [
        f"D{record.date.strftime(_QIF_DATE_FORMAT)}",
        f"T{record.amount:.2f}",
        f"U{record.amount:.2f}",
        f"P{record.name}",
        f"M{build_memo(record, options)}",
        "Cc",  # cleared status, always cleared
        "N",
        "^",
    ]
    return "\n".join(lines) + "\n"


class QifWriter:
    """Append QIF text to an open stream.

    The writer owns nothing but the stream reference; opening and closing the
    file is the caller's job. Write failures surface as
    :class:`OutputIOError` naming ``name``.
    """

    def __init__(self, stream: TextIO, name: str = "<stream>"):
        self.stream = stream
        self.name = name
        self._header_written = False

    def _write(self, text: str) -> None:
        try:
            self.stream.write(text)
        except OSError as exc:
            raise OutputIOError(
                f"Error writing file '{self.name}': {exc}",
                details={"path": self.name},
            ) from exc

    def write_header(self) -> None:
        if self._header_written:
            return
        self._write(QIF_HEADER + "\n")
        self._header_written = True

    def write_record(self, record: TransactionRecord, options: MemoOptions) -> None:
        self.write_block(format_record(record, options))

    def write_block(self, block: str) -> None:
        if not self._header_written:
            self.write_header()
        self._write(block)

    def flush(self) -> None:
        try:
            self.stream.flush()
        except OSError as exc:
            raise OutputIOError(
                f"Error writing file '{self.name}': {exc}",
                details={"path": self.name},
            ) from exc
