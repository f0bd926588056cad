"""Typer CLI interface for Mixed Units."""

import json
import logging
from pathlib import Path

import typer

from mixedunits.config import DEFAULT_INPUT, LOG_LEVEL_ENVVAR
from mixedunits.exceptions import MixedUnitsError
from mixedunits.models.entries import NormalizedEntry
from mixedunits.models.enums import ReportFormat

BANNER = r"""
     _________
    /  .---.  \
   |  | $ ¢ |  |
   |  | .00 |  |
    \  '---'  /
     ---------

  Mixed Units
  "Dollars or cents? Yes."
"""


def show_banner() -> None:
    typer.echo(BANNER)


app = typer.Typer(
    name="mixedunits",
    help="Mixed Units — normalize mixed dollar and cent amounts.",
)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        envvar=LOG_LEVEL_ENVVAR,
        help="Logging level: DEBUG, INFO, WARNING, ERROR",
    ),
) -> None:
    """Mixed Units — normalize mixed dollar and cent amounts."""
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        typer.echo(f"Error: Invalid log level '{log_level}'", err=True)
        raise typer.Exit(1)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    if ctx.invoked_subcommand is None:
        show_banner()
        raise typer.Exit()


def _read_source(file: Path | None, input_text: str | None) -> str | bytes:
    """Return the JSON buffer from FILE, --input, or stdin, in that order.

    Files and stdin are read as bytes; decoding happens in the parser so a
    bad encoding is reported as invalid input.
    """
    if file is not None and input_text is not None:
        typer.echo("Error: Use either FILE or --input, not both.", err=True)
        raise typer.Exit(1)
    if file is not None:
        if not file.exists() or not file.is_file():
            typer.echo(f"Error: File not found: {file}", err=True)
            raise typer.Exit(1)
        return file.read_bytes()
    if input_text is not None:
        return input_text
    return typer.get_binary_stream("stdin").read()


def _convert(text: str | bytes) -> list[NormalizedEntry]:
    """Run the normalizer, turning conversion errors into exit code 1."""
    from mixedunits.normalization.normalizer import MoneyNormalizer

    try:
        return MoneyNormalizer().convert(text)
    except MixedUnitsError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)


@app.command()
def convert(
    file: Path | None = typer.Argument(None, help="JSON file to convert (reads stdin if omitted)"),
    input_text: str | None = typer.Option(None, "--input", "-i", help="JSON object given inline"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Convert a JSON object of mixed amounts to normalized minor units.

    Values written with a decimal point are read as dollars and scaled to
    cents. Values without one are read as cents already.

    \b
    Example:
      mixedunits convert --input '{"a": "0.445454", "b": 34343}'
    """
    entries = _convert(_read_source(file, input_text))

    if json_output:
        typer.echo(json.dumps([e.to_record() for e in entries], indent=2))
        return

    if not entries:
        typer.echo("No entries.")
        return

    from rich.console import Console

    from mixedunits.session import build_results_table

    Console().print(build_results_table(entries))


@app.command()
def example() -> None:
    """Print the example input object."""
    typer.echo(DEFAULT_INPUT)


@app.command()
def report(
    file: Path | None = typer.Argument(None, help="JSON file to convert (reads stdin if omitted)"),
    input_text: str | None = typer.Option(None, "--input", "-i", help="JSON object given inline"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write the report to this file"),
    fmt: ReportFormat = typer.Option(ReportFormat.TXT, "--format", "-f", help="Report format: txt or html"),
) -> None:
    """Render converted amounts as a text or HTML report."""
    from mixedunits.reports import ResultsReportGenerator

    entries = _convert(_read_source(file, input_text))
    content = ResultsReportGenerator().render(entries, fmt)

    if output is None:
        typer.echo(content, nl=False)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(content, encoding="utf-8")
    typer.echo(f"Report written to {output}")


@app.command()
def session() -> None:
    """Interactive session: paste JSON objects and convert them one by one."""
    from mixedunits.session import run_session

    run_session()


if __name__ == "__main__":
    app()
