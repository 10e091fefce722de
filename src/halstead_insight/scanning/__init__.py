"""Scanning layer: file reading, declaration matching, lexical counts."""

from .declarations import LINE_BREAK, DeclarationScanner, scan_declarations
from .lexical import LexicalCounts, count_tokens, tally_tokens
from .models import ClassDeclaration, FunctionDeclaration, SourceFile, split_lines
from .walker import TreeWalker, read_source_file, should_skip_file, walk_files

__all__ = [
    "LINE_BREAK",
    "DeclarationScanner",
    "scan_declarations",
    "LexicalCounts",
    "count_tokens",
    "tally_tokens",
    "ClassDeclaration",
    "FunctionDeclaration",
    "SourceFile",
    "split_lines",
    "TreeWalker",
    "read_source_file",
    "should_skip_file",
    "walk_files",
]
