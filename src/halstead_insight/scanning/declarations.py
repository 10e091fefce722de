"""Regex-based declaration scanner.

Finds class and function declarations line by line and attaches the run
of comment lines sitting directly above each one as its documentation.

This is pattern matching over raw text, not parsing: there is no notion of
scope, nesting, or signatures spanning several lines. Both patterns are
tested on every line, class first, and a line may match both.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

from .models import ClassDeclaration, FunctionDeclaration

# Joins consecutive comment lines in a documentation string.
LINE_BREAK = "<br>"

CLASS_PATTERN = re.compile(r"class (\w+)")

# return-type-ish token (optionally followed by * / & or <T>), whitespace,
# function name, then a parenthesised argument list without nested parens
FUNCTION_PATTERN = re.compile(r"(\w+(?:\s*[*&]|\s*<\w+>)?)\s+(\w+)\s*\(([^)]*)\)")

LINE_COMMENT_PATTERN = re.compile(r"^\s*//(.*)$")
BLOCK_COMMENT_PATTERN = re.compile(r"/\*(.*?)\*/")


@dataclass
class DeclarationScanner:
    """Line-oriented scanner for class and function declarations."""

    def scan(
        self, lines: Sequence[str]
    ) -> tuple[list[ClassDeclaration], list[FunctionDeclaration]]:
        """Scan ordered lines and return (classes, functions) in file order.

        Every matched function lands in the flat function list; none is
        ever filed under a class.
        """
        classes: list[ClassDeclaration] = []
        functions: list[FunctionDeclaration] = []

        for index, line in enumerate(lines):
            class_match = CLASS_PATTERN.search(line)
            if class_match:
                classes.append(
                    ClassDeclaration(
                        name=class_match.group(1),
                        line_number=index + 1,
                        documentation=self.leading_comments(lines, index),
                    )
                )

            func_match = FUNCTION_PATTERN.search(line)
            if func_match:
                functions.append(
                    FunctionDeclaration(
                        name=func_match.group(2),
                        signature_args=func_match.group(3),
                        line_number=index + 1,
                        documentation=self.leading_comments(lines, index),
                    )
                )

        return classes, functions

    def leading_comments(self, lines: Sequence[str], index: int) -> str | None:
        """Collect the comment run directly above ``lines[index]``.

        Walks upward while each line is a ``//`` comment or contains a
        single-line ``/* ... */`` block. Texts are gathered bottom-to-top,
        then reversed and joined with LINE_BREAK. Returns None if the line
        right above is not a comment (or there is no line above).
        """
        comments: list[str] = []

        i = index
        while i > 0:
            text = self._comment_text(lines[i - 1])
            if text is None:
                break
            comments.append(text)
            i -= 1

        if not comments:
            return None

        comments.reverse()
        return LINE_BREAK.join(comments)

    def _comment_text(self, line: str) -> str | None:
        """Trimmed comment text if the line is comment-shaped, else None."""
        match = LINE_COMMENT_PATTERN.match(line)
        if match:
            return match.group(1).strip()
        match = BLOCK_COMMENT_PATTERN.search(line)
        if match:
            return match.group(1).strip()
        return None


def scan_declarations(
    lines: Sequence[str],
) -> tuple[list[ClassDeclaration], list[FunctionDeclaration]]:
    """Module-level shortcut for ``DeclarationScanner().scan(lines)``."""
    return DeclarationScanner().scan(lines)
