"""Command line interface for converting ING CSV exports to QIF.

Simple use is drag and drop: the operating system starts the program with the
CSV path as the only argument. Options customize the memo line, header
handling and output location; any of them can also come from a JSON or YAML
file passed with ``--config``.
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import Annotated, NoReturn, Optional

import typer

from csv2qif.config import build_config, load_config_file
from csv2qif.convert import convert_file
from csv2qif.errors import Csv2QifError, InputNotFound
from csv2qif.logging_setup import configure_logging

DEFAULT_EXIT_DELAY = 10.0

EXAMPLES = (
    "Example: csv2qif NL09INGB1234567890_03-10-2016_03-11-2016.csv\n\n"
    "Example: csv2qif -i NL09INGB1234567890_03-10-2016_03-11-2016.csv "
    "--out-file export.qif --use-code --use-comment"
)

app = typer.Typer(
    add_completion=False,
    help=(
        "Convert an ING bank transaction CSV file to a QIF file that can be "
        "imported into You Need A Budget (YNAB).\n\n" + EXAMPLES
    ),
)


def _usage_error(ctx: typer.Context, message: str) -> NoReturn:
    typer.echo(ctx.get_help(), err=True)
    typer.echo(f"\nError: {message}", err=True)
    raise typer.Exit(2)


def _fail(message: str, exit_delay: float) -> NoReturn:
    typer.echo(message, err=True)
    # keep a drag-and-drop console window open long enough to read the error
    if exit_delay > 0:
        time.sleep(exit_delay)
    raise typer.Exit(1)


@app.command()
def convert(
    ctx: typer.Context,
    input_file: Annotated[
        Optional[Path],
        typer.Argument(help="CSV file to read (same as --in-file).", show_default=False),
    ] = None,
    in_file: Annotated[
        Optional[Path], typer.Option("-i", "--in-file", help="The CSV file to read.")
    ] = None,
    out_file: Annotated[
        Optional[Path],
        typer.Option(
            "-o",
            "--out-file",
            help="The QIF file to write. Defaults to the CSV name with a .qif suffix.",
        ),
    ] = None,
    skip_headers: Annotated[
        Optional[bool],
        typer.Option(
            "--skip-headers/--no-skip-headers",
            help="Skip the first line of the CSV file.  [default: skip]",
            show_default=False,
        ),
    ] = None,
    use_code: Annotated[
        Optional[bool],
        typer.Option(
            "--use-code/--no-use-code",
            help="Use the ING code in the QIF memo.  [default: no]",
            show_default=False,
        ),
    ] = None,
    use_kind: Annotated[
        Optional[bool],
        typer.Option(
            "--use-kind/--no-use-kind",
            help="Use the ING transaction kind in the QIF memo.  [default: yes]",
            show_default=False,
        ),
    ] = None,
    use_comment: Annotated[
        Optional[bool],
        typer.Option(
            "--use-comment/--no-use-comment",
            help="Use the ING comment in the QIF memo.  [default: no]",
            show_default=False,
        ),
    ] = None,
    delimiter: Annotated[
        Optional[str], typer.Option(help="Column delimiter of the CSV file.  [default: ,]")
    ] = None,
    config: Annotated[
        Optional[Path], typer.Option(help="JSON or YAML file with default settings.")
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option(help="Log level (falls back to CSV2QIF_LOG_LEVEL, then INFO)."),
    ] = None,
    exit_delay: Annotated[
        float, typer.Option(help="Seconds to wait before exiting after an error.")
    ] = DEFAULT_EXIT_DELAY,
) -> None:
    """Convert one ING CSV file to QIF."""

    try:
        configure_logging(log_level)
    except ValueError as exc:
        _usage_error(ctx, str(exc))

    path = in_file or input_file
    if path is None:
        _usage_error(ctx, "no input file given")

    try:
        file_settings = load_config_file(config) if config is not None else None
        conversion = build_config(
            path,
            file_settings,
            {
                "output_path": out_file,
                "skip_first_row": skip_headers,
                "include_code": use_code,
                "include_kind": use_kind,
                "include_comment": use_comment,
                "delimiter": delimiter,
            },
        )
        result = convert_file(conversion)
    except InputNotFound as exc:
        _usage_error(ctx, str(exc))
    except Csv2QifError as exc:
        _fail(str(exc), exit_delay)

    typer.echo(f"Wrote {result.output_path}")


def main() -> None:
    app(prog_name="csv2qif")


if __name__ == "__main__":  # pragma: no cover
    main()
