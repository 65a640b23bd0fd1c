"""Conversion loop: read rows, parse, format and write QIF blocks."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List

from csv2qif.config import ConversionConfig
from csv2qif.errors import OutputIOError, ParseError
from csv2qif.io import check_input, iter_rows
from csv2qif.parse import parse_record
from csv2qif.qif import QifWriter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionResult:
    input_path: Path
    output_path: Path
    records_written: int


def convert(
    config: ConversionConfig,
    rows: Iterable[tuple[int, List[str]]],
    writer: QifWriter,
) -> int:
    """Write the QIF header and one block per data row to *writer*.

    ``rows`` yields ``(row_number, columns)`` pairs. Row 1 is dropped
    unparsed when ``config.skip_first_row`` is set. The first row that fails
    to parse aborts the conversion; blocks already written stay written.

    Returns the number of records written.
    """

    source = str(config.input_path)
    writer.write_header()

    written = 0
    for row_number, raw in rows:
        if row_number == 1 and config.skip_first_row:
            logger.debug("Skipping header row of %s: %r", source, raw)
            continue
        try:
            record = parse_record(raw)
        except ParseError as exc:
            raise exc.at(row_number, source)
        writer.write_record(record, config.memo)
        written += 1
    return written


def convert_file(config: ConversionConfig) -> ConversionResult:
    """Convert ``config.input_path`` into ``config.output_path``.

    The output file is created (or truncated) before the first row is read.
    On failure it is left as is, possibly holding a partial conversion.
    """

    input_path = config.input_path
    output_path = config.output_path
    check_input(input_path)

    rows = iter_rows(config)

    try:
        handle = open(output_path, "w", encoding="utf-8", newline="")
    except OSError as exc:
        raise OutputIOError(
            f"Error opening output file '{output_path}': {exc}",
            details={"path": str(output_path)},
        ) from exc

    logger.debug("Converting %s to %s", input_path, output_path)
    with handle:
        writer = QifWriter(handle, name=str(output_path))
        written = convert(config, rows, writer)
        writer.flush()

    logger.info("Wrote %d records from %s to %s", written, input_path, output_path)
    return ConversionResult(
        input_path=input_path,
        output_path=output_path,
        records_written=written,
    )
