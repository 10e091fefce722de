"""Render a TreeReport as a single static HTML document.

One section per analyzed file, in traversal order. The document has no
timestamps or other run-dependent content, so rendering the same tree
twice yields identical bytes.
"""

from html import escape
from pathlib import Path
from typing import Optional

from ..models import FileReport, TreeReport
from ..scanning.declarations import LINE_BREAK
from ..scanning.models import ClassDeclaration


def generate_report(report: TreeReport, output_path: "Path | str") -> str:
    """Render ``report`` and write it to ``output_path``, replacing any existing file.

    Parameters
    ----------
    report:
        The scanned tree to render.
    output_path:
        Where to write the HTML file.

    Returns
    -------
    str
        Absolute path to the generated HTML file.
    """
    out = Path(output_path).resolve()
    out.write_text(render_report(report), encoding="utf-8")
    return str(out)


def render_report(report: TreeReport) -> str:
    """Build the full HTML document for a tree."""
    sections = "\n".join(render_file(f) for f in report.files)
    return _build_html(sections)


def render_file(file_report: FileReport) -> str:
    """HTML fragment for one file.

    Order: name, line count, difficulty, effort, classes (each with its
    nested functions), then the flat listing of every matched function.
    """
    metrics = file_report.metrics
    parts = [
        '<section class="file">',
        f"<h1>{escape(file_report.file_name)}</h1>",
        f"<h2>Line Count: {file_report.line_count}</h2>",
        f"<h3>Halstead Difficulty: {format_metric(metrics.difficulty)}</h3>",
        f"<h3>Halstead Effort: {format_metric(metrics.effort)}</h3>",
    ]

    for cls in file_report.classes:
        parts.append(_render_class(cls))

    for fn in file_report.functions:
        parts.append(f"<h3>Function: {escape(fn.name)} - Line:{fn.line_number}</h3>")
        parts.append(f"<p><strong>Arguments:</strong> {escape(fn.signature_args)}</p>")
        parts.append(f"<p><strong>Comments:</strong> {render_documentation(fn.documentation)}</p>")

    parts.append("</section>")
    return "\n".join(parts)


def format_metric(value: float) -> str:
    """Two decimals; non-finite values come out as inf / -inf / nan."""
    return f"{value:.2f}"


def render_documentation(documentation: Optional[str]) -> str:
    """Escape each comment line, keeping the line breaks between them."""
    if not documentation:
        return ""
    return LINE_BREAK.join(escape(part) for part in documentation.split(LINE_BREAK))


# ── Private helpers ──────────────────────────────────────────────────


def _render_class(cls: ClassDeclaration) -> str:
    # Nested functions show the class's documentation in their Comments
    # field, not their own.
    parts = [f"<h2>Class: {escape(cls.name)} - Line:{cls.line_number}</h2>"]
    for fn in cls.functions:
        parts.append(
            f"<h3><strong>Function:</strong> {escape(fn.name)}</h3>"
            f"<p>{render_documentation(fn.documentation)}</p>"
        )
        parts.append(
            f"<p><strong>Comments:</strong> {render_documentation(cls.documentation)}</p>"
        )
    return "\n".join(parts)


def _build_html(sections: str) -> str:
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>Halstead Insight Report</title>
<style>
body {{ font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, sans-serif; margin: 24px 32px; color: #24292f; }}
section.file {{ border-bottom: 1px solid #d0d7de; padding-bottom: 16px; margin-bottom: 24px; }}
h1 {{ font-size: 22px; color: #0969da; }}
h2 {{ font-size: 17px; }}
h3 {{ font-size: 15px; }}
p {{ font-size: 14px; margin: 4px 0; }}
footer {{ text-align: center; color: #8c959f; font-size: 12px; }}
</style>
</head>
<body>
{sections}
<footer>Generated by Halstead Insight</footer>
</body>
</html>
"""
