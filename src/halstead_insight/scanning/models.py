"""Data models for the scanning layer.

SourceFile is the immutable input to one analysis. Declarations are what
the declaration scanner finds in it:
    - ClassDeclaration: name, line, leading comments, nested functions
    - FunctionDeclaration: name, raw argument text, line, leading comments
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


def split_lines(content: str) -> tuple[str, ...]:
    """Split text into lines on ``\\n``.

    A trailing ``\\r`` is dropped from each line and the empty segment after
    a final newline is not a line, so ``"a\\nb\\n"`` has two lines and
    ``""`` has none.
    """
    if not content:
        return ()
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return tuple(line[:-1] if line.endswith("\r") else line for line in lines)


@dataclass(frozen=True)
class SourceFile:
    """A file's decoded text, read once and never mutated.

    Attributes:
        path: Location on disk
        content: Full decoded text (used by the lexical counter)
        lines: Ordered lines (used by the declaration scanner)
    """

    path: Path
    content: str
    lines: tuple[str, ...]

    @classmethod
    def from_text(cls, path: Path, content: str) -> SourceFile:
        return cls(path=path, content=content, lines=split_lines(content))

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def line_count(self) -> int:
        return len(self.lines)


@dataclass
class FunctionDeclaration:
    """A matched function declaration.

    Attributes:
        name: Function name (the identifier right before the parentheses)
        signature_args: Raw text between the parentheses, unparsed
        line_number: 1-based line of the match
        documentation: Leading comment lines joined with ``<br>``, or None
    """

    name: str
    signature_args: str
    line_number: int
    documentation: str | None = None


@dataclass
class ClassDeclaration:
    """A matched class declaration.

    ``functions`` is never populated by the scanner: functions are only
    collected in the flat per-file list.
    """

    name: str
    line_number: int
    documentation: str | None = None
    functions: list[FunctionDeclaration] = field(default_factory=list)
