"""Report pipeline for Halstead Insight.

Per file: read -> scan declarations -> count tokens -> Halstead metrics.
Files are handled one at a time, in depth-first traversal order, and
nothing carries over from one file to the next.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

from .config import DEFAULT_EFFORT_DIVISOR, ReportConfig
from .exceptions import FileUnreadableError, InvalidRootError
from .logging_config import get_logger
from .math.halstead import compute_halstead
from .models import FileReport, SkippedFile, TreeReport
from .scanning.declarations import scan_declarations
from .scanning.lexical import count_tokens
from .scanning.models import SourceFile
from .scanning.walker import TreeWalker, read_source_file

logger = get_logger(__name__)

SkipCallback = Callable[[SkippedFile], None]


def analyze_source(
    source: SourceFile, effort_divisor: float = DEFAULT_EFFORT_DIVISOR
) -> FileReport:
    """Analyze an already-read file."""
    classes, functions = scan_declarations(source.lines)
    counts = count_tokens(source.content)
    metrics = compute_halstead(counts, effort_divisor=effort_divisor)

    if not metrics.is_finite:
        logger.debug(f"Non-finite Halstead metrics for {source.path}: {metrics}")

    return FileReport(
        path=source.path,
        line_count=source.line_count,
        classes=classes,
        functions=functions,
        counts=counts,
        metrics=metrics,
    )


def analyze_file(filepath: Path, effort_divisor: float = DEFAULT_EFFORT_DIVISOR) -> FileReport:
    """
    Read and analyze a single file.

    Raises:
        FileUnreadableError: If the file cannot be read or decoded
    """
    return analyze_source(read_source_file(filepath), effort_divisor=effort_divisor)


class HalsteadAnalyzer:
    """Walks a directory tree and analyzes every readable file in it."""

    def __init__(
        self,
        config: Optional[ReportConfig] = None,
        on_skip: Optional[SkipCallback] = None,
    ):
        self.config = config or ReportConfig()
        self.root_dir = self.config.root_dir
        self.on_skip = on_skip

        if not self.root_dir.exists():
            raise InvalidRootError(self.root_dir, "does not exist")
        if not self.root_dir.is_dir():
            raise InvalidRootError(self.root_dir, "not a directory")

        logger.info(f"Scanning: {self.root_dir}")

    def analyze(self) -> TreeReport:
        """
        Analyze every file under the root.

        Unreadable files are recorded as SkippedFile and passed to
        ``on_skip``; the walk continues.

        Raises:
            DirectoryUnreadableError: If a directory cannot be listed
        """
        report = TreeReport(root=self.root_dir)
        walker = TreeWalker(
            self.root_dir,
            exclude_patterns=self.config.exclude_patterns,
            follow_symlinks=self.config.follow_symlinks,
            ignore={self.config.output_file},
        )

        for filepath in walker.walk():
            try:
                file_report = analyze_file(filepath, effort_divisor=self.config.effort_divisor)
            except FileUnreadableError as e:
                skipped = SkippedFile(path=filepath, reason=e.reason)
                report.skipped.append(skipped)
                logger.info(f"Skipping {filepath}: {e.reason}")
                if self.on_skip is not None:
                    self.on_skip(skipped)
                continue

            report.files.append(file_report)
            logger.debug(
                f"Analyzed: {filepath} ({file_report.line_count} lines, "
                f"{len(file_report.classes)} classes, {len(file_report.functions)} functions)"
            )

        logger.info(
            f"Scan complete: {report.file_count} analyzed, {len(report.skipped)} skipped"
        )
        return report


def analyze_tree(
    config: Optional[ReportConfig] = None, on_skip: Optional[SkipCallback] = None
) -> TreeReport:
    """Shortcut for ``HalsteadAnalyzer(config, on_skip).analyze()``."""
    return HalsteadAnalyzer(config, on_skip=on_skip).analyze()
