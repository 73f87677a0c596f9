"""
SVG Security Scanner

A batch scanner for SVG files that applies an allow-list policy to tags and
attributes, strips remote references, and reports every file as clean or
problematic with an exit code suitable for CI gating.
"""

__version__ = "1.0.0"
__author__ = "SVG Scanner Team"

from svgscanner.core.findings import Issue, FileResult, ScanReport
from svgscanner.core.scanner import FileScanner
from svgscanner.core.aggregator import ScanAggregator, create_aggregator
from svgscanner.policy import AllowlistPolicy
from svgscanner.config import ScanConfig
from svgscanner.formatters import Reporter

__all__ = [
    "Issue",
    "FileResult",
    "ScanReport",
    "FileScanner",
    "ScanAggregator",
    "create_aggregator",
    "AllowlistPolicy",
    "ScanConfig",
    "Reporter",
]
