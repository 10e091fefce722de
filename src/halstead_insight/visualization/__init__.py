"""Visualization layer: static HTML report generation."""

from .report import generate_report, render_file, render_report

__all__ = [
    "generate_report",
    "render_file",
    "render_report",
]
