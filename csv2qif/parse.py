"""Parse raw CSV rows into :class:`TransactionRecord` values."""

import math
import re
from datetime import date, datetime
from typing import Sequence

from csv2qif.errors import AmountFormatError, DateFormatError, RowShapeError
from csv2qif.record import COLUMNS, OUTGOING_MARKER, TransactionRecord


_DATE_PATTERN = re.compile(r"\d{8}", re.ASCII)
_AMOUNT_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def parse_date(value: str) -> date:
    """Parse a strict ``YYYYMMDD`` date.

    ``datetime.strptime`` alone accepts unpadded fields such as ``2016103``,
    so the shape is checked first.
    """

    if not _DATE_PATTERN.fullmatch(value):
        raise DateFormatError(
            f"Error parsing date: {value!r} is not in YYYYMMDD format",
            details={"value": value},
        )
    try:
        return datetime.strptime(value, "%Y%m%d").date()
    except ValueError as exc:
        raise DateFormatError(
            f"Error parsing date: {exc}", details={"value": value}
        ) from exc


def parse_amount(value: str) -> float:
    """Parse a comma-decimal amount; only the first comma becomes a period."""

    text = value.replace(",", ".", 1)
    if not _AMOUNT_PATTERN.fullmatch(text):
        raise AmountFormatError(
            f"Error parsing amount: {value!r} is not a number", details={"value": value}
        )
    amount = float(text)
    if not math.isfinite(amount):
        raise AmountFormatError(
            f"Error parsing amount: {value!r} is not a finite number",
            details={"value": value},
        )
    return amount


def parse_record(raw: Sequence[str]) -> TransactionRecord:
    """Build a record from the nine columns of one export row.

    Raises :class:`RowShapeError`, :class:`DateFormatError` or
    :class:`AmountFormatError`; a record is only returned when every field
    parsed.
    """

    if len(raw) != len(COLUMNS):
        raise RowShapeError(
            f"Wrong number of columns in record, expected {len(COLUMNS)}, got {len(raw)}",
            details={"columns": len(raw)},
        )

    record_date = parse_date(raw[0])
    amount = parse_amount(raw[6])
    direction = raw[5].strip()

    if OUTGOING_MARKER in direction:
        amount = -abs(amount)

    return TransactionRecord(
        date=record_date,
        name=raw[1].strip(),
        iban=raw[2].strip(),
        other_iban=raw[3].strip(),
        code=raw[4].strip(),
        direction=direction,
        amount=amount,
        transaction_kind=raw[7].strip(),
        comments=raw[8].strip(),
        raw_fields=tuple(raw),
    )
