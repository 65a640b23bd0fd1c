import pytest
from typer.testing import CliRunner

from csv2qif import cli

HEADER = "Datum,Naam,Rekening,Tegenrekening,Code,Af Bij,Bedrag,MutatieSoort,Mededelingen"
ROW = '20161003,Albert Heijn,NL09INGB1234567890,,BA,Af,"12,34",Diversen,Lunch'

runner = CliRunner()


@pytest.fixture
def sleeps(monkeypatch):
    calls = []
    monkeypatch.setattr(cli.time, "sleep", calls.append)
    return calls


def test_positional_path_converts_file(write_csv):
    csv_path = write_csv([HEADER, ROW])

    result = runner.invoke(cli.app, [str(csv_path)])

    qif_path = csv_path.with_suffix(".qif")
    assert result.exit_code == 0, result.output
    assert f"Wrote {qif_path}" in result.output
    assert qif_path.read_text(encoding="utf-8").startswith("!Type:Bank\nD10/03/2016\nT-12.34\n")


def test_options_shape_memo_and_output(write_csv, tmp_path):
    csv_path = write_csv([HEADER, ROW])
    out_path = tmp_path / "export.qif"

    result = runner.invoke(
        cli.app,
        ["-i", str(csv_path), "--out-file", str(out_path), "--use-code", "--use-comment"],
    )

    assert result.exit_code == 0, result.output
    assert "MBA Diversen Lunch\n" in out_path.read_text(encoding="utf-8")


def test_no_skip_headers_reports_header_row(write_csv, sleeps):
    csv_path = write_csv([HEADER, ROW])

    result = runner.invoke(cli.app, [str(csv_path), "--no-skip-headers"])

    assert result.exit_code == 1
    assert "line 1 of" in result.output
    assert "Error parsing date" in result.output
    assert sleeps == [cli.DEFAULT_EXIT_DELAY]


def test_parse_error_exits_after_delay(write_csv, sleeps):
    csv_path = write_csv([HEADER, ROW, "20161003,too,few"])

    result = runner.invoke(cli.app, [str(csv_path), "--exit-delay", "2.5"])

    assert result.exit_code == 1
    assert "line 3 of" in result.output
    assert "expected 9, got 3" in result.output
    assert sleeps == [2.5]


def test_zero_exit_delay_does_not_sleep(write_csv, sleeps):
    csv_path = write_csv([HEADER, "bad"])

    result = runner.invoke(cli.app, [str(csv_path), "--exit-delay", "0"])

    assert result.exit_code == 1
    assert sleeps == []


def test_missing_input_argument_prints_usage():
    result = runner.invoke(cli.app, [])

    assert result.exit_code == 2
    assert "no input file given" in result.output


def test_missing_input_file_prints_usage(tmp_path, sleeps):
    result = runner.invoke(cli.app, [str(tmp_path / "missing.csv")])

    assert result.exit_code == 2
    assert "does not exist" in result.output
    assert sleeps == []


def test_empty_input_file_fails(tmp_path, sleeps):
    csv_path = tmp_path / "empty.csv"
    csv_path.touch()

    result = runner.invoke(cli.app, [str(csv_path), "--exit-delay", "0"])

    assert result.exit_code == 1
    assert "is empty" in result.output


def test_config_file_values_are_overridden_by_options(write_csv, tmp_path):
    csv_path = write_csv([HEADER, ROW])
    settings = tmp_path / "settings.yaml"
    settings.write_text("include_comment: true\ninclude_code: true\n")

    result = runner.invoke(
        cli.app, [str(csv_path), "--config", str(settings), "--no-use-code"]
    )

    assert result.exit_code == 0, result.output
    assert "MDiversen Lunch\n" in csv_path.with_suffix(".qif").read_text(encoding="utf-8")


def test_invalid_config_file_fails(write_csv, tmp_path):
    csv_path = write_csv([HEADER, ROW])
    settings = tmp_path / "settings.json"
    settings.write_text('{"colour": "blue"}')

    result = runner.invoke(
        cli.app, [str(csv_path), "--config", str(settings), "--exit-delay", "0"]
    )

    assert result.exit_code == 1
    assert "Unknown configuration keys" in result.output


def test_unknown_log_level_is_a_usage_error(write_csv):
    csv_path = write_csv([HEADER, ROW])

    result = runner.invoke(cli.app, [str(csv_path), "--log-level", "chatty"])

    assert result.exit_code == 2
    assert "Unknown log level" in result.output


def test_log_level_from_environment(write_csv, monkeypatch):
    monkeypatch.setenv("CSV2QIF_LOG_LEVEL", "DEBUG")
    csv_path = write_csv([HEADER, ROW])

    result = runner.invoke(cli.app, [str(csv_path)])

    assert result.exit_code == 0, result.output
    assert "Skipping header row" in result.output


@pytest.mark.parametrize(
    "setting",
    ["delimiter: 5\n", "output_path: 5\n", "encoding: bogus\n"],
)
def test_bad_config_values_fail_before_writing(write_csv, tmp_path, setting):
    csv_path = write_csv([HEADER, ROW])
    settings = tmp_path / "settings.yaml"
    settings.write_text(setting)

    result = runner.invoke(
        cli.app, [str(csv_path), "--config", str(settings), "--exit-delay", "0"]
    )

    assert result.exit_code == 1
    assert not isinstance(result.exception, (TypeError, LookupError))
    assert not csv_path.with_suffix(".qif").exists()
