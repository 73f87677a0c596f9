"""
Scan orchestration.

Runs the file scanner over every input path in order and folds the
per-file results into a single ``ScanReport``.
"""

import logging
from typing import Iterable, Optional

from svgscanner.config import ScanConfig
from svgscanner.core.findings import ScanReport
from svgscanner.core.scanner import FileScanner
from svgscanner.policy.allowlist import AllowlistPolicy


logger = logging.getLogger(__name__)


class ScanAggregator:
    """
    Runs a batch scan and builds the report.

    Files are scanned sequentially in input order. A path given twice is
    scanned twice: the second result replaces the first in ``files`` while
    both count towards the error total.
    """

    def __init__(self, scanner: FileScanner):
        self.scanner = scanner

    def run_all(self, paths: Iterable[str]) -> ScanReport:
        """
        Scan every path and return the aggregated report.

        An empty path list is an input-validation error: the report carries
        one error and a top-level message, and nothing is scanned.
        """
        paths = list(paths)

        if not paths:
            logger.debug("No paths given")
            return ScanReport.no_input()

        report = ScanReport()
        for path in paths:
            report.add(self.scanner.scan(path))

        logger.debug(
            "Scanned %d paths, %d errors in total",
            len(paths), report.totals.errors,
        )
        return report


def create_aggregator(config: Optional[ScanConfig] = None) -> ScanAggregator:
    """
    Create an aggregator with the policy and engine described by ``config``.

    Args:
        config: Scan configuration. Defaults to ``ScanConfig()``.

    Returns:
        A ready-to-use ScanAggregator.
    """
    config = config or ScanConfig()
    policy = AllowlistPolicy.build(
        extra_tags=config.extra_tags,
        extra_attributes=config.extra_attributes,
    )
    return ScanAggregator(FileScanner(policy))
