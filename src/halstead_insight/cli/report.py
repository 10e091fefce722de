"""Report command: scan a tree and write the HTML report."""

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from ..core import HalsteadAnalyzer
from ..exceptions import HalsteadInsightError
from ..logging_config import get_logger, setup_logging
from ..visualization.report import generate_report
from . import app
from ._common import console, print_skip_warning, print_summary, resolve_config

logger = get_logger(__name__)


@app.callback(invoke_without_command=True, no_args_is_help=False)
def main(
    path: Optional[Path] = typer.Option(
        None,
        "-C",
        "--path",
        help="Directory to scan (default: directory of the running program)",
        file_okay=False,
        dir_okay=True,
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output HTML file (default: output.html in the scanned directory)",
        dir_okay=False,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors and skip the summary table",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Also append log records (INFO and up) to this file",
        dir_okay=False,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
):
    """
    Scan a directory tree and write an HTML report of every readable file:
    line count, classes and functions with their leading comments, and
    Halstead difficulty and effort.

    Files that cannot be read are reported on stdout and skipped.

    [bold cyan]Examples:[/bold cyan]

      halstead-insight

      halstead-insight -C ./src -o report.html
    """
    from .. import __version__

    if version:
        console.print(
            f"[bold cyan]Halstead Insight[/bold cyan] version [green]{__version__}[/green]"
        )
        raise typer.Exit(0)

    try:
        settings = resolve_config(
            config=config,
            path=path,
            output=output,
            log_file=log_file,
            verbose=verbose,
            quiet=quiet,
        )
        setup_logging(settings.verbosity, settings.log_file)

        analyzer = HalsteadAnalyzer(settings, on_skip=print_skip_warning)
        report = analyzer.analyze()
        written = generate_report(report, settings.output_file)
        logger.info(f"Report written to {written}")

        if settings.verbosity != "quiet":
            print_summary(report, written)

    except HalsteadInsightError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        raise typer.Exit(1)

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        raise typer.Exit(130)

    except OSError as e:
        logger.error(f"I/O error: {e}")
        console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        raise typer.Exit(1)
