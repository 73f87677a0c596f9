"""Allow-list policy applied by the sanitization engine."""

from svgscanner.policy.allowlist import (
    AllowlistPolicy,
    BASE_ATTRIBUTES,
    BASE_TAGS,
    EXTENSION_ATTRIBUTES,
    EXTENSION_TAGS,
    FORBIDDEN_TAGS,
    compose_attributes,
    compose_tags,
)

__all__ = [
    "AllowlistPolicy",
    "BASE_ATTRIBUTES",
    "BASE_TAGS",
    "EXTENSION_ATTRIBUTES",
    "EXTENSION_TAGS",
    "FORBIDDEN_TAGS",
    "compose_attributes",
    "compose_tags",
]
