"""
CLI output formatter for human-readable results.
"""

import sys

from svgscanner.core.findings import FileResult, ScanReport
from svgscanner.utils import truncate_string


# ANSI color codes
class Colors:
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[91m"
    GREEN = "\033[92m"
    CYAN = "\033[96m"


def supports_color() -> bool:
    """Check if the terminal supports color output."""
    if not hasattr(sys.stdout, "isatty"):
        return False
    if not sys.stdout.isatty():
        return False
    return True


class CLIFormatter:
    """
    Formats scan reports for human-readable CLI output.
    """

    def __init__(self, use_color: bool = True, max_message_length: int = 120):
        self.use_color = use_color and supports_color()
        self.max_message_length = max_message_length

    def _color(self, text: str, color: str) -> str:
        """Apply color to text if colors are enabled."""
        if self.use_color:
            return f"{color}{text}{Colors.RESET}"
        return text

    def format_result(self, report: ScanReport) -> str:
        """Format a complete scan report."""
        lines = []

        # Header
        lines.append("")
        lines.append(self._color("=" * 70, Colors.DIM))
        lines.append(self._color(" SVG SCAN RESULTS ", Colors.BOLD))
        lines.append(self._color("=" * 70, Colors.DIM))
        lines.append("")

        # Per-file results
        for result in report.files.values():
            lines.extend(self._format_file(result))

        # Top-level messages (no input files)
        for message in report.messages:
            lines.append(self._color(f"  {' '.join(message)}", Colors.RED))

        # Summary
        lines.append("")
        lines.append(self._color("Summary", Colors.BOLD))
        lines.append(self._color("-" * 40, Colors.DIM))
        lines.append(f"  Files:    {len(report.files)}")
        lines.append(f"  Errors:   {report.totals.errors}")
        lines.append(f"  Warnings: {report.totals.warnings}")
        lines.append(f"  Fixable:  {report.totals.fixable}")
        lines.append("")

        if report.has_errors:
            lines.append(self._color("  Problems found.", Colors.RED))
        else:
            lines.append(self._color("  No issues found!", Colors.GREEN))

        return "\n".join(lines)

    def _format_file(self, result: FileResult) -> list:
        """Format a single file result."""
        if result.is_clean:
            return [f"{self._color('OK  ', Colors.GREEN)} {result.path}"]

        label = "error" if result.error_count == 1 else "errors"
        lines = [
            f"{self._color('FAIL', Colors.RED)} {self._color(result.path, Colors.CYAN)}"
            f" ({result.error_count} {label})"
        ]

        for issue in result.issues:
            location = f"line {issue.line}" if issue.line is not None else "-"
            message = truncate_string(issue.message, self.max_message_length)
            lines.append(f"    {self._color(f'{location:>9}', Colors.DIM)}  {message}")

        return lines

    def format_file(self, result: FileResult) -> str:
        """Format a single file result."""
        return "\n".join(self._format_file(result))
