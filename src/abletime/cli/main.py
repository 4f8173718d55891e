"""abletime command line.

Parses flags, builds a `ScanConfig` and hands it to the pipeline. Every
`AbletimeError` stops here: message on stderr, non-zero exit code.
"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.text import Text

from abletime import __version__
from abletime.cli.ui_components import build_report_table, render_report
from abletime.core.config import AppSettings, configure_logging
from abletime.core.errors import AbletimeError, IoError
from abletime.core.services.time_pipeline import scan_project

app = typer.Typer(
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
    help="Calculate time spent on a project from the timestamps of its saved project files.",
)

_console = Console()
_err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"abletime {__version__}")
        raise typer.Exit()


def _print_error(exc: Exception) -> None:
    _err_console.print(Text.assemble(("Error: ", "bold red"), str(exc)), soft_wrap=True)


def _emit(lines: list[str]) -> None:
    try:
        typer.echo("\n".join(lines))
    except OSError as exc:
        raise IoError(f"cannot write output ({exc.strerror or exc})") from exc


@app.command()
def main(
    directory: Annotated[
        Optional[Path],
        typer.Argument(help="Directory to inspect. Defaults to current directory.", show_default=False),
    ] = None,
    max_minutes_between_saves: Annotated[
        Optional[int],
        typer.Option(
            "--max-minutes-between-saves",
            "-m",
            help="Maximum number of minutes allowed between saves for time to be counted. "
            "Values <= 0 will disable this feature. [default: 60]",
            show_default=False,
        ),
    ] = None,
    suffix: Annotated[
        Optional[str],
        typer.Option(
            "--suffix",
            "-s",
            help="Project file suffix. Default value works for Ableton projects. [default: .als]",
            show_default=False,
        ),
    ] = None,
    pretty: Annotated[
        bool,
        typer.Option("--pretty", help="Render the report as a table."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log pipeline steps to stderr."),
    ] = False,
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-V",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit.",
        ),
    ] = None,
) -> None:
    """Estimate time spent on a project from its saved snapshots."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        raise typer.BadParameter(f"invalid ABLETIME_* environment variable: {exc}") from exc

    configure_logging("DEBUG" if verbose else settings.log_level)
    config = settings.scan_config(
        directory=directory,
        suffix=suffix,
        max_minutes_between_saves=max_minutes_between_saves,
    )

    try:
        report = scan_project(config)
        if pretty and not report.is_empty:
            try:
                _console.print(build_report_table(report))
            except OSError as exc:
                raise IoError(f"cannot write output ({exc.strerror or exc})") from exc
        else:
            _emit(render_report(report))
    except AbletimeError as exc:
        logger.debug("aborting", exc_info=True)
        _print_error(exc)
        raise typer.Exit(code=exc.exit_code) from exc


def run() -> None:
    """Console-script entry point."""

    app()
