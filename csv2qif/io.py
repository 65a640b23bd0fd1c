import csv
import logging
from pathlib import Path
from typing import Iterator, List, Tuple

from csv2qif.config import ConversionConfig
from csv2qif.errors import InputEmpty, InputIOError, InputNotFound

logger = logging.getLogger(__name__)

Row = Tuple[int, List[str]]


def check_input(path: Path) -> None:
    """Fail early when *path* is missing, empty or not a regular file."""

    try:
        stat = path.stat()
    except FileNotFoundError as exc:
        raise InputNotFound(
            f"Input file '{path}' does not exist", details={"path": str(path)}
        ) from exc
    except OSError as exc:
        raise InputIOError(
            f"Error opening input file '{path}': {exc}", details={"path": str(path)}
        ) from exc

    if not path.is_file():
        raise InputIOError(
            f"Error opening input file '{path}': not a regular file",
            details={"path": str(path)},
        )
    if stat.st_size < 1:
        raise InputEmpty(f"Input file '{path}' is empty", details={"path": str(path)})


def iter_rows(config: ConversionConfig) -> Iterator[Row]:
    """Yield ``(row_number, columns)`` pairs from the configured CSV file.

    Row numbers are 1-based and count records, not physical lines; blank
    records are dropped without being counted.
    """

    path = config.input_path
    try:
        handle = open(path, encoding=config.encoding, newline="")
    except OSError as exc:
        raise InputIOError(
            f"Error opening input file '{path}': {exc}", details={"path": str(path)}
        ) from exc

    with handle:
        reader = csv.reader(handle, delimiter=config.delimiter, strict=True)
        row_number = 0
        while True:
            try:
                raw = next(reader)
            except StopIteration:
                return
            except (csv.Error, UnicodeDecodeError) as exc:
                raise InputIOError(
                    f"line {row_number + 1} of {path} has an error: {exc}",
                    details={"path": str(path), "row_number": row_number + 1},
                ) from exc
            except OSError as exc:
                raise InputIOError(
                    f"Error reading input file '{path}': {exc}",
                    details={"path": str(path)},
                ) from exc

            if not raw:
                logger.debug("Ignoring blank line after row %d of %s", row_number, path)
                continue
            row_number += 1
            yield row_number, raw
