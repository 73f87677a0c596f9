"""
Result data structures for the SVG scanner.

This module defines the issue records reported by the sanitization
engine, the per-file result built from them, and the aggregated report
that is serialized at the end of a run.
"""

from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any


NO_FILES_MESSAGE = "No files to scan specified"


@dataclass(frozen=True)
class Issue:
    """A single policy violation or removal found during sanitization."""
    message: str
    line: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "line": self.line,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Issue":
        return cls(message=data["message"], line=data.get("line"))


@dataclass
class FileResult:
    """
    Outcome of scanning one input path.

    A result has one of three shapes:

    - read-failure: the file could not be read, one synthetic issue
    - sanitize-failure: the engine could not process the bytes, one synthetic issue
    - normal: one error per engine-reported issue (zero means clean)
    """
    path: str
    error_count: int
    issues: List[Issue] = field(default_factory=list)

    @classmethod
    def read_failure(cls, path: str) -> "FileResult":
        return cls(
            path=path,
            error_count=1,
            issues=[Issue(f"File specified could not be read ({path})", None)],
        )

    @classmethod
    def sanitize_failure(cls, path: str) -> "FileResult":
        return cls(
            path=path,
            error_count=1,
            issues=[Issue(f"Unable to sanitize file '{path}'", None)],
        )

    @classmethod
    def from_issues(cls, path: str, issues: List[Issue]) -> "FileResult":
        return cls(path=path, error_count=len(issues), issues=list(issues))

    @property
    def is_clean(self) -> bool:
        return self.error_count == 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "errors": self.error_count,
            "messages": [issue.to_dict() for issue in self.issues],
        }

    @classmethod
    def from_dict(cls, path: str, data: Dict[str, Any]) -> "FileResult":
        return cls(
            path=path,
            error_count=data["errors"],
            issues=[Issue.from_dict(m) for m in data.get("messages", [])],
        )


@dataclass
class ScanTotals:
    """Running totals. ``warnings`` and ``fixable`` are reserved and stay 0."""
    errors: int = 0
    warnings: int = 0
    fixable: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            "errors": self.errors,
            "warnings": self.warnings,
            "fixable": self.fixable,
        }


@dataclass
class ScanReport:
    """
    Aggregated results for one invocation.

    ``files`` keeps input order. When a path is scanned twice the later
    result replaces the earlier entry, but the totals keep the error count
    of every scan, so totals and the visible entries can disagree.
    """
    totals: ScanTotals = field(default_factory=ScanTotals)
    files: Dict[str, FileResult] = field(default_factory=dict)
    messages: List[List[str]] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return self.totals.errors > 0

    def add(self, result: FileResult) -> None:
        """Record a file result and add its errors to the totals."""
        self.totals.errors += result.error_count
        self.files[result.path] = result

    @classmethod
    def no_input(cls) -> "ScanReport":
        """The report for an invocation with no paths to scan."""
        return cls(totals=ScanTotals(errors=1), messages=[[NO_FILES_MESSAGE]])

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "totals": self.totals.to_dict(),
            "files": {path: r.to_dict() for path, r in self.files.items()},
        }

        if self.messages:
            result["messages"] = [list(m) for m in self.messages]

        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScanReport":
        """Rebuild a report from its serialized form."""
        totals = ScanTotals(**data.get("totals", {}))
        files = {
            path: FileResult.from_dict(path, entry)
            for path, entry in data.get("files", {}).items()
        }
        messages = [list(m) for m in data.get("messages", [])]
        return cls(totals=totals, files=files, messages=messages)
