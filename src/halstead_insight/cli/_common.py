"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..config import ReportConfig, load_config
from ..models import SkippedFile, TreeReport

console = Console()


def resolve_config(
    config: Optional[Path] = None,
    path: Optional[Path] = None,
    output: Optional[Path] = None,
    log_file: Optional[Path] = None,
    verbose: bool = False,
    quiet: bool = False,
) -> ReportConfig:
    """Build a ReportConfig from CLI options."""
    overrides = {}
    if path is not None:
        overrides["root"] = str(path)
    if output is not None:
        overrides["output_path"] = str(output)
    if log_file is not None:
        overrides["log_file"] = str(log_file)
    if verbose:
        overrides["verbose"] = True
    if quiet:
        overrides["quiet"] = True
    return load_config(config_file=config, **overrides)


def print_skip_warning(skipped: SkippedFile) -> None:
    """Stdout diagnostic for a file that could not be read."""
    console.print(
        f"Warning: Unable to read file {skipped.path}",
        markup=False,
        highlight=False,
        soft_wrap=True,
    )


def print_summary(report: TreeReport, output_file: str) -> None:
    table = Table(title="Halstead Insight", show_header=False, title_justify="left")
    table.add_column("", style="cyan")
    table.add_column("", justify="right")
    table.add_row("Root", escape(str(report.root)))
    table.add_row("Files analyzed", str(report.file_count))
    table.add_row("Files skipped", str(len(report.skipped)))
    table.add_row("Lines", str(report.total_lines))
    table.add_row("Report", escape(output_file))
    console.print(table)
