"""
Utility functions for the SVG scanner.
"""

from pathlib import Path


def read_file_bytes(file_path: str) -> bytes:
    """Read a whole file. Raises OSError if it cannot be read."""
    return Path(file_path).read_bytes()


def truncate_string(s: str, max_length: int = 100, suffix: str = "...") -> str:
    """Truncate a string to a maximum length."""
    if len(s) <= max_length:
        return s
    return s[:max_length - len(suffix)] + suffix
