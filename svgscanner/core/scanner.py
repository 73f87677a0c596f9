"""
Per-file scanning.

The ``FileScanner`` reads one file, runs it through the sanitization engine
once and classifies the outcome as a read failure, a sanitize failure or a
normal result with zero or more issues.
"""

import logging
from typing import Optional

from svgscanner.core.findings import FileResult
from svgscanner.policy.allowlist import AllowlistPolicy
from svgscanner.sanitizer import BaseSanitizer, SanitizeStatus, create_sanitizer
from svgscanner.utils import read_file_bytes


logger = logging.getLogger(__name__)


class FileScanner:
    """
    Scans a single file against the allow-list policy.

    The scanner holds no per-file state. Failures are local to the file
    being scanned and nothing is retried.
    """

    def __init__(self, policy: AllowlistPolicy, sanitizer: Optional[BaseSanitizer] = None):
        self.policy = policy
        self.sanitizer = sanitizer or create_sanitizer(policy)

    def scan(self, path: str) -> FileResult:
        """
        Scan one file.

        Args:
            path: Path of the file to scan, reported verbatim.

        Returns:
            FileResult describing the outcome.
        """
        try:
            data = read_file_bytes(path)
        except OSError as e:
            logger.debug("Could not read %s: %s", path, e)
            return FileResult.read_failure(path)

        outcome = self.sanitizer.run(data)

        if outcome.status is SanitizeStatus.FAILED:
            # Issues reported alongside a failure are discarded.
            logger.debug("Could not sanitize %s (%d issues dropped)", path, len(outcome.issues))
            return FileResult.sanitize_failure(path)

        if outcome.status is SanitizeStatus.CLEAN:
            logger.debug("%s is clean", path)
            return FileResult.from_issues(path, [])

        logger.debug("%s has %d issues", path, len(outcome.issues))
        return FileResult.from_issues(path, list(outcome.issues))
