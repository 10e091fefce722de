"""
Logging configuration for Halstead Insight.

Log records go to stderr through rich, so they never mix with the report
diagnostics and summary table on stdout. An optional log file keeps the
per-file skip records even when the terminal shows only warnings.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "halstead_insight"

# Terminal level for each ReportConfig.verbosity
VERBOSITY_LEVELS = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}

LOG_FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging(verbosity: str = "normal", log_file: Optional[str] = None) -> logging.Logger:
    """
    Install the stderr handler and, if asked, a file handler.

    Args:
        verbosity: quiet (errors only), normal (warnings) or verbose (debug)
        log_file: Path to append records to. The file receives INFO and up,
            or DEBUG when verbose, whatever the terminal level.

    Returns:
        The halstead_insight package logger

    Raises:
        OSError: If the log file cannot be opened
    """
    console_level = VERBOSITY_LEVELS[verbosity]
    verbose = verbosity == "verbose"

    handlers: list[logging.Handler] = [
        RichHandler(
            level=console_level,
            console=Console(stderr=True),
            rich_tracebacks=True,
            tracebacks_show_locals=verbose,
            markup=False,
            show_time=True,
            show_path=verbose,
        )
    ]
    lowest = console_level

    if log_file:
        file_level = min(console_level, logging.INFO)
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setLevel(file_level)
        file_handler.setFormatter(logging.Formatter(LOG_FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        handlers.append(file_handler)
        lowest = min(lowest, file_level)

    # force=True: each CLI invocation in the same process replaces the last set of handlers
    logging.basicConfig(
        level=lowest, format="%(message)s", datefmt="[%X]", handlers=handlers, force=True
    )

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(lowest)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger under the ``halstead_insight`` namespace (the package logger for None)."""
    if name is None:
        return logging.getLogger(PACKAGE_LOGGER)
    if not name.startswith(PACKAGE_LOGGER):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
