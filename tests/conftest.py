import logging

import pytest

from csv2qif import logging_setup


@pytest.fixture(autouse=True)
def _reset_package_logging():
    """Drop handlers the CLI attached so they never outlive a test's streams."""

    yield
    logger = logging.getLogger("csv2qif")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
    logging_setup._handler = None


@pytest.fixture
def ing_row():
    def _row(**overrides):
        row = {
            "date": "20161003",
            "name": " Albert Heijn 1234 ",
            "iban": "NL09INGB1234567890",
            "other_iban": "",
            "code": "BA",
            "direction": "Af",
            "amount": "12,34",
            "transaction_kind": "Diversen",
            "comments": " Lunch ",
        }
        row.update(overrides)
        return list(row.values())

    return _row


@pytest.fixture
def write_csv(tmp_path):
    def _write(lines, name="export.csv"):
        path = tmp_path / name
        path.write_text("".join(line + "\n" for line in lines), encoding="utf-8")
        return path

    return _write
