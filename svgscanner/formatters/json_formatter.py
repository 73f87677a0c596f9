"""
JSON output formatter for machine-readable results.

This is the canonical output of the scanner. Key order is fixed:
``totals`` (errors, warnings, fixable), then ``files`` in input order, then
``messages`` when no input files were given.
"""

import json

from svgscanner.core.findings import FileResult, ScanReport


class JSONFormatter:
    """
    Formats scan reports as pretty-printed JSON for machine consumption.
    """

    def __init__(self, indent: int = 4):
        self.indent = indent

    def format_result(self, report: ScanReport) -> str:
        """Format a complete scan report as JSON."""
        return json.dumps(report.to_dict(), indent=self.indent)

    def format_file(self, result: FileResult) -> str:
        """Format a single file result as JSON."""
        return json.dumps(result.to_dict(), indent=self.indent)
