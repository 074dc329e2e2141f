"""Assemble the notification from the captured run output."""

from .render_html import render_html
from .Report import Report
from .trim_log import trim_log


def build_report(subject: str, output: str, verbose: bool = False) -> Report:
    """Build the report: a leading subject heading, then the (trimmed) run log.

    Args:
        subject: Classified subject line
        output: Everything the run wrote to its output file
        verbose: Keep DIFF and TOUCH tool output
    """
    body = output if verbose else trim_log(output)
    text = f"## {subject}\n{body}"
    return Report(subject=subject, text=text, html=render_html(text))
