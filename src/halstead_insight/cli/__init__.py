"""CLI entry point."""

import typer

from .. import __version__  # noqa: F401
from ._common import console  # noqa: F401

app = typer.Typer(
    name="halstead-insight",
    help="Halstead Insight - per-file declarations, comments and Halstead metrics as HTML",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import commands to register them
from .report import main as _main_callback  # noqa: F401, E402
