"""Core result structures, scanning and aggregation."""

from svgscanner.core.findings import Issue, FileResult, ScanTotals, ScanReport

__all__ = [
    "Issue",
    "FileResult",
    "ScanTotals",
    "ScanReport",
]
