"""Result models for a report run."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .math.halstead import HalsteadMetrics
from .scanning.lexical import LexicalCounts
from .scanning.models import ClassDeclaration, FunctionDeclaration


@dataclass
class FileReport:
    """Everything the report shows for one file."""

    path: Path
    line_count: int
    classes: list[ClassDeclaration]
    functions: list[FunctionDeclaration]
    counts: LexicalCounts
    metrics: HalsteadMetrics

    @property
    def file_name(self) -> str:
        return self.path.name


@dataclass(frozen=True)
class SkippedFile:
    """A file left out of the report because it could not be read."""

    path: Path
    reason: str


@dataclass
class TreeReport:
    """Outcome of scanning one directory tree, in traversal order."""

    root: Path
    files: list[FileReport] = field(default_factory=list)
    skipped: list[SkippedFile] = field(default_factory=list)

    @property
    def file_count(self) -> int:
        return len(self.files)

    @property
    def total_lines(self) -> int:
        return sum(f.line_count for f in self.files)
