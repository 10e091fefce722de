"""
Halstead Insight - per-file source metrics as an HTML report.

Scans a directory tree, finds class and function declarations with their
leading comments, and computes Halstead difficulty and effort per file.
"""

__version__ = "0.1.0"
__author__ = "Naman Agarwal"

from .core import HalsteadAnalyzer, analyze_file, analyze_source, analyze_tree
from .math.halstead import HalsteadMetrics, compute_halstead
from .models import FileReport, SkippedFile, TreeReport
from .scanning.lexical import LexicalCounts, count_tokens
from .scanning.declarations import scan_declarations

__all__ = [
    "analyze_tree",  # Main entry point
    "analyze_file",
    "analyze_source",
    "HalsteadAnalyzer",
    "FileReport",
    "SkippedFile",
    "TreeReport",
    "HalsteadMetrics",
    "compute_halstead",
    "LexicalCounts",
    "count_tokens",
    "scan_declarations",
]
