"""
Output formatters for scan reports.

Provides multiple output formats including:
- JSON, the canonical machine-readable report
- Human-readable CLI output
- SARIF for code-scanning integration

The ``Reporter`` pairs the formatted text with the process exit code.
"""

from typing import Tuple

from svgscanner.core.findings import ScanReport
from svgscanner.formatters.cli import CLIFormatter
from svgscanner.formatters.json_formatter import JSONFormatter
from svgscanner.formatters.sarif import SARIFFormatter

__all__ = [
    "CLIFormatter",
    "JSONFormatter",
    "SARIFFormatter",
    "Reporter",
    "exit_code_for",
    "get_formatter",
]


def get_formatter(format_name: str):
    """Get a formatter by name."""
    formatters = {
        "json": JSONFormatter,
        "text": CLIFormatter,
        "cli": CLIFormatter,
        "sarif": SARIFFormatter,
    }

    formatter_class = formatters.get(format_name.lower())
    if formatter_class:
        return formatter_class()

    raise ValueError(f"Unknown format: {format_name}")


def exit_code_for(report: ScanReport) -> int:
    """0 when the report has no errors, 1 otherwise."""
    return 0 if report.totals.errors == 0 else 1


class Reporter:
    """Serializes a report and selects the exit code."""

    def __init__(self, formatter=None):
        self.formatter = formatter or JSONFormatter()

    def emit(self, report: ScanReport) -> Tuple[str, int]:
        return self.formatter.format_result(report), exit_code_for(report)
