"""Reporting Context - Presenting solver output.

Core abstractions:
- Reporter: Protocol for formatting solutions
- ConsoleReporter: Terminal output with colors
- JSONReporter: Machine-readable JSON format
- MarkdownReporter: Human-readable markdown
- TableReporter: Rich table
"""

from jugsolver.reporting.console import ConsoleReporter
from jugsolver.reporting.json import JSONReporter
from jugsolver.reporting.markdown import MarkdownReporter
from jugsolver.reporting.protocol import Reporter
from jugsolver.reporting.table import TableReporter

REPORTERS: dict[str, type] = {
    "console": ConsoleReporter,
    "json": JSONReporter,
    "markdown": MarkdownReporter,
    "table": TableReporter,
}


def get_reporter(output_format: str, color: bool = True) -> Reporter:
    """Build the reporter registered under ``output_format``."""
    if output_format == "console":
        return ConsoleReporter(color=color)
    if output_format == "table":
        return TableReporter(color=color)
    try:
        return REPORTERS[output_format]()
    except KeyError:
        raise ValueError(f"Unknown output format: {output_format!r}") from None


__all__ = [
    "Reporter",
    "ConsoleReporter",
    "JSONReporter",
    "MarkdownReporter",
    "TableReporter",
    "REPORTERS",
    "get_reporter",
]
