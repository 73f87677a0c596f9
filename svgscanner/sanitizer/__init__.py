"""
Sanitization engines.

The scanner only depends on the ``BaseSanitizer`` contract; ``SVGSanitizer``
is the lxml-based engine used by default.
"""

from svgscanner.policy.allowlist import AllowlistPolicy
from svgscanner.sanitizer.base import (
    BaseSanitizer,
    SanitizeOutcome,
    SanitizeStatus,
    SanitizerError,
)
from svgscanner.sanitizer.svg import SVGSanitizer


def create_sanitizer(policy: AllowlistPolicy) -> BaseSanitizer:
    """
    Create an engine configured from a policy.

    Remote-reference stripping is always enabled; there is no per-file or
    per-run override.
    """
    sanitizer = SVGSanitizer()
    sanitizer.set_allowed_tags(policy.allowed_tags)
    sanitizer.set_allowed_attrs(policy.allowed_attributes)
    sanitizer.remove_remote_references(True)
    return sanitizer


__all__ = [
    "BaseSanitizer",
    "SanitizeOutcome",
    "SanitizeStatus",
    "SanitizerError",
    "SVGSanitizer",
    "create_sanitizer",
]
