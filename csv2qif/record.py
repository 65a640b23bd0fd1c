"""Transaction record parsed from one row of an ING CSV export."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Tuple

# Column order of the export.
COLUMNS: Tuple[str, ...] = (
    "date",
    "name",
    "iban",
    "other_iban",
    "code",
    "direction",
    "amount",
    "transaction_kind",
    "comments",
)

# "Af" moves money from ``iban`` to ``other_iban``; "Bij" is the reverse.
OUTGOING_MARKER = "Af"


@dataclass(frozen=True)
class TransactionRecord:
    """Fields of one export row, by name.

    ``amount`` is signed: negative for outgoing transactions. ``raw_fields``
    keeps the columns exactly as read for diagnostics.
    """

    date: date
    name: str
    iban: str
    other_iban: str
    code: str
    direction: str
    amount: float
    transaction_kind: str
    comments: str
    raw_fields: Tuple[str, ...] = field(default=(), compare=False, repr=False)


__all__ = [
    "COLUMNS",
    "OUTGOING_MARKER",
    "TransactionRecord",
]
