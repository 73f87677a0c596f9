"""
SARIF output formatter for CI integration.

SARIF (Static Analysis Results Interchange Format) is a standard
format for static analysis tool output, accepted by code-scanning
dashboards such as GitHub Code Scanning.
"""

import json
from datetime import datetime, timezone
from typing import Dict, Any, List

from svgscanner import __version__
from svgscanner.core.findings import FileResult, Issue, ScanReport


# Rules keyed by the message prefix the engine or scanner produces.
RULES: List[Dict[str, str]] = [
    {
        "id": "SVG-READ",
        "prefix": "File specified could not be read",
        "name": "UnreadableFile",
        "description": "The input file could not be read.",
    },
    {
        "id": "SVG-SANITIZE",
        "prefix": "Unable to sanitize file",
        "name": "UnsanitizableFile",
        "description": "The document could not be parsed or sanitized.",
    },
    {
        "id": "SVG-TAG",
        "prefix": "Suspicious tag",
        "name": "DisallowedTag",
        "description": "The document contains a tag outside the allow-list.",
    },
    {
        "id": "SVG-ATTR",
        "prefix": "Suspicious attribute",
        "name": "DisallowedAttribute",
        "description": "The document contains a disallowed, unsafe or remote-referencing attribute.",
    },
]

FALLBACK_RULE = {
    "id": "SVG-ISSUE",
    "prefix": "",
    "name": "SanitizerIssue",
    "description": "The sanitizer reported an issue.",
}


def rule_for(issue: Issue) -> Dict[str, str]:
    """Find the rule an issue belongs to."""
    for rule in RULES:
        if issue.message.startswith(rule["prefix"]):
            return rule
    return FALLBACK_RULE


class SARIFFormatter:
    """
    Formats scan reports in SARIF format.

    Every issue becomes an ``error`` level result; the scanner has no
    notion of severity.
    """

    SARIF_VERSION = "2.1.0"
    SCHEMA_URI = "https://raw.githubusercontent.com/oasis-tcs/sarif-spec/master/Schemata/sarif-schema-2.1.0.json"

    def format_result(self, report: ScanReport) -> str:
        """Format a complete scan report in SARIF format."""
        sarif = {
            "$schema": self.SCHEMA_URI,
            "version": self.SARIF_VERSION,
            "runs": [self._create_run(report)],
        }

        return json.dumps(sarif, indent=2)

    def _create_run(self, report: ScanReport) -> Dict[str, Any]:
        """Create a SARIF run object."""
        results = []
        for file_result in report.files.values():
            results.extend(self._create_results(file_result))

        return {
            "tool": self._create_tool(),
            "results": results,
            "invocations": [self._create_invocation(report)],
        }

    def _create_tool(self) -> Dict[str, Any]:
        """Create a SARIF tool object."""
        return {
            "driver": {
                "name": "svgscanner",
                "version": __version__,
                "rules": [
                    self._create_rule(rule)
                    for rule in RULES + [FALLBACK_RULE]
                ],
            }
        }

    def _create_rule(self, rule: Dict[str, str]) -> Dict[str, Any]:
        return {
            "id": rule["id"],
            "name": rule["name"],
            "shortDescription": {
                "text": rule["description"],
            },
            "defaultConfiguration": {
                "level": "error",
            },
        }

    def _create_results(self, file_result: FileResult) -> List[Dict[str, Any]]:
        """Create SARIF result objects for one file."""
        results = []

        for issue in file_result.issues:
            location: Dict[str, Any] = {
                "physicalLocation": {
                    "artifactLocation": {
                        "uri": file_result.path,
                    },
                },
            }
            if issue.line is not None:
                location["physicalLocation"]["region"] = {
                    "startLine": issue.line,
                }

            results.append({
                "ruleId": rule_for(issue)["id"],
                "level": "error",
                "message": {
                    "text": issue.message,
                },
                "locations": [location],
            })

        return results

    def _create_invocation(self, report: ScanReport) -> Dict[str, Any]:
        """Create a SARIF invocation object."""
        return {
            "executionSuccessful": not report.messages,
            "endTimeUtc": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
            "toolExecutionNotifications": [
                {
                    "message": {
                        "text": " ".join(message),
                    },
                    "level": "error",
                }
                for message in report.messages
            ],
        }
