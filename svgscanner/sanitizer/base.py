"""
Contract between the scanner and a sanitization engine.

An engine is configured once with the allowed tags, the allowed attributes
and the remote-reference flag, then called once per document. It reports
failure with an empty or ``None`` result and exposes the issues found by
its most recent call through ``get_issues()``.

``BaseSanitizer.run`` is the adapter the scanner uses. It turns those two
signals into a single explicit ``SanitizeOutcome`` so that callers never
have to compare falsy values themselves.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional, Tuple
import logging

from svgscanner.core.findings import Issue


logger = logging.getLogger(__name__)


class SanitizerError(Exception):
    """Raised by an engine when a document cannot be sanitized at all."""


class SanitizeStatus(Enum):
    """Tri-state result of one sanitize call."""
    CLEAN = "clean"
    ISSUES = "issues"
    FAILED = "failed"


@dataclass(frozen=True)
class SanitizeOutcome:
    status: SanitizeStatus
    issues: Tuple[Issue, ...] = field(default_factory=tuple)

    @property
    def failed(self) -> bool:
        return self.status is SanitizeStatus.FAILED


class BaseSanitizer(ABC):
    """
    Base class for sanitization engines.

    Subclasses implement ``sanitize`` and record their issues in
    ``self._issues``. Allow-list names are stored lower-cased and compared
    case-insensitively.
    """

    def __init__(self):
        self.allowed_tags: frozenset = frozenset()
        self.allowed_attrs: frozenset = frozenset()
        self.remove_remote: bool = False
        self._issues: List[Issue] = []

    def set_allowed_tags(self, tags: Iterable[str]) -> None:
        self.allowed_tags = frozenset(t.lower() for t in tags)

    def set_allowed_attrs(self, attrs: Iterable[str]) -> None:
        self.allowed_attrs = frozenset(a.lower() for a in attrs)

    def remove_remote_references(self, enabled: bool = True) -> None:
        self.remove_remote = enabled

    def get_issues(self) -> List[Issue]:
        """Issues found by the most recent ``sanitize`` call."""
        return list(self._issues)

    @abstractmethod
    def sanitize(self, data: bytes) -> Optional[bytes]:
        """
        Sanitize a document.

        Args:
            data: Raw document bytes.

        Returns:
            The cleaned document, or ``None``/``b""`` if it could not be
            sanitized.
        """
        pass

    def run(self, data: bytes) -> SanitizeOutcome:
        """
        Sanitize ``data`` once and classify the result.

        Decoding errors raised by an engine (unknown or unsupported
        encoding declarations) fail this document only.
        """
        try:
            output = self.sanitize(data)
        except (SanitizerError, ValueError, LookupError) as e:
            logger.debug("Sanitizer raised: %s", e)
            output = None

        issues = tuple(self.get_issues())

        if not output:
            return SanitizeOutcome(SanitizeStatus.FAILED, issues)
        if issues:
            return SanitizeOutcome(SanitizeStatus.ISSUES, issues)
        return SanitizeOutcome(SanitizeStatus.CLEAN)
