"""
Tests for the SVG sanitization engine and the outcome adapter.
"""

import pytest
import os
import sys

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from svgscanner.core.findings import Issue
from svgscanner.policy import AllowlistPolicy
from svgscanner.sanitizer import (
    BaseSanitizer,
    SanitizeStatus,
    SanitizerError,
    SVGSanitizer,
    create_sanitizer,
)
from svgscanner.sanitizer.svg import has_remote_reference, is_unsafe_href


SVG_HEAD = (
    '<svg xmlns="http://www.w3.org/2000/svg" '
    'xmlns:xlink="http://www.w3.org/1999/xlink" width="10" height="10">'
)


def svg(body: str) -> bytes:
    return f"{SVG_HEAD}\n{body}\n</svg>".encode("utf-8")


@pytest.fixture
def sanitizer():
    return create_sanitizer(AllowlistPolicy.build())


class FakeSanitizer(BaseSanitizer):
    """Engine returning canned results."""

    def __init__(self, output, issues=(), error=None):
        super().__init__()
        self.output = output
        self.issues = list(issues)
        self.error = error

    def sanitize(self, data):
        self._issues = list(self.issues)
        if self.error:
            raise self.error
        return self.output


class TestSVGSanitizer:
    """Tests for the lxml-based engine."""

    def test_configured_from_policy(self, sanitizer):
        assert isinstance(sanitizer, SVGSanitizer)
        assert sanitizer.remove_remote is True
        assert "svg" in sanitizer.allowed_tags
        # Names are stored lower-cased
        assert "fillrule" in sanitizer.allowed_attrs

    def test_clean_document(self, sanitizer):
        data = svg('<circle cx="5" cy="5" r="4" fill="#000"/>')

        output = sanitizer.sanitize(data)

        assert output
        assert sanitizer.get_issues() == []
        assert b"circle" in output

    def test_script_tag_removed(self, sanitizer):
        data = svg("<script>alert(1)</script>")

        output = sanitizer.sanitize(data)

        assert b"script" not in output
        assert sanitizer.get_issues() == [Issue("Suspicious tag 'script'", 2)]

    def test_event_handler_removed(self, sanitizer):
        data = svg('<rect width="1" height="1" onclick="alert(1)"/>')

        output = sanitizer.sanitize(data)

        assert b"onclick" not in output
        assert sanitizer.get_issues() == [Issue("Suspicious attribute 'onclick'", 2)]

    def test_unknown_attribute_removed(self, sanitizer):
        sanitizer.sanitize(svg('<rect data-secret="1"/>'))

        assert sanitizer.get_issues() == [Issue("Suspicious attribute 'data-secret'", 2)]

    def test_case_insensitive_match(self, sanitizer):
        sanitizer.sanitize(svg(
            '<linearGradient id="g" gradientUnits="userSpaceOnUse"/>'
            '<rect viewBox="0 0 1 1"/>'
        ))

        assert sanitizer.get_issues() == []

    def test_remote_href_removed(self, sanitizer):
        data = svg('<image xlink:href="https://example.com/a.png"/>')

        output = sanitizer.sanitize(data)

        assert b"example.com" not in output
        assert sanitizer.get_issues() == [Issue("Suspicious attribute 'xlink:href'", 2)]

    def test_remote_css_url_removed(self, sanitizer):
        sanitizer.sanitize(svg('<rect style="fill: url( \'//evil.example/x\' )"/>'))

        assert sanitizer.get_issues() == [Issue("Suspicious attribute 'style'", 2)]

    def test_local_references_kept(self, sanitizer):
        sanitizer.sanitize(svg(
            '<defs><linearGradient id="g"/></defs>'
            '<rect fill="url(#g)"/><use xlink:href="#g"/>'
        ))

        assert sanitizer.get_issues() == []

    def test_javascript_href_removed(self, sanitizer):
        sanitizer.sanitize(svg('<use href="java\tscript:alert(1)"/>'))

        assert sanitizer.get_issues() == [Issue("Suspicious attribute 'href'", 2)]

    def test_extension_cannot_unblock_script(self):
        policy = AllowlistPolicy.build(extra_tags=["script"], extra_attributes=["onload"])
        sanitizer = create_sanitizer(policy)

        sanitizer.sanitize(svg('<script/><rect onload="x()"/>'))

        assert [i.message for i in sanitizer.get_issues()] == [
            "Suspicious tag 'script'",
            "Suspicious attribute 'onload'",
        ]

    def test_issues_in_document_order(self, sanitizer):
        data = (
            SVG_HEAD + "\n"
            '<rect onmouseover="a()"/>\n'
            "<foreignObject><div/></foreignObject>\n"
            '<g><circle onclick="b()"/></g>\n'
            "</svg>"
        ).encode("utf-8")

        sanitizer.sanitize(data)

        assert sanitizer.get_issues() == [
            Issue("Suspicious attribute 'onmouseover'", 2),
            Issue("Suspicious tag 'foreignObject'", 3),
            Issue("Suspicious attribute 'onclick'", 4),
        ]

    def test_malformed_document_fails(self, sanitizer):
        assert sanitizer.sanitize(b"<svg><g></svg>") is None

    def test_empty_document_fails(self, sanitizer):
        assert sanitizer.sanitize(b"") is None

    def test_entity_expansion_fails(self, sanitizer):
        data = (
            b'<?xml version="1.0"?>'
            b'<!DOCTYPE svg [<!ENTITY a "aaaaaaaaaa">]>'
            b'<svg xmlns="http://www.w3.org/2000/svg">&a;</svg>'
        )

        assert sanitizer.sanitize(data) is None

    def test_unknown_encoding_fails(self, sanitizer):
        data = b'<?xml version="1.0" encoding="bogus"?><svg xmlns="http://www.w3.org/2000/svg"/>'

        assert sanitizer.sanitize(data) is None
        assert sanitizer.run(data).status is SanitizeStatus.FAILED

    def test_multibyte_encoding_fails(self, sanitizer):
        data = '<?xml version="1.0" encoding="shift_jis"?><svg xmlns="http://www.w3.org/2000/svg"/>'.encode("shift_jis")

        assert sanitizer.sanitize(data) is None
        assert sanitizer.run(data).status is SanitizeStatus.FAILED

    def test_declared_utf8_is_clean(self, sanitizer):
        data = b'<?xml version="1.0" encoding="UTF-8"?>' + svg('<rect width="1" height="1"/>')

        assert sanitizer.sanitize(data)
        assert sanitizer.get_issues() == []

    def test_svg_prefixed_elements_allowed(self, sanitizer):
        data = (
            b'<svg:svg xmlns:svg="http://www.w3.org/2000/svg" width="10" height="10">'
            b'<svg:rect width="1" height="1"/>'
            b"</svg:svg>"
        )

        output = sanitizer.sanitize(data)

        assert output
        assert b"rect" in output
        assert sanitizer.get_issues() == []

    def test_svg_prefixed_script_reported_by_local_name(self, sanitizer):
        data = (
            b'<svg:svg xmlns:svg="http://www.w3.org/2000/svg">\n'
            b"<svg:script/>\n"
            b"</svg:svg>"
        )

        sanitizer.sanitize(data)

        assert sanitizer.get_issues() == [Issue("Suspicious tag 'script'", 2)]

    def test_disallowed_root_fails_with_issue(self, sanitizer):
        output = sanitizer.sanitize(b"<html><body/></html>")

        assert output is None
        assert sanitizer.get_issues() == [Issue("Suspicious tag 'html'", 1)]

    def test_issues_reset_between_calls(self, sanitizer):
        sanitizer.sanitize(svg("<script/>"))
        sanitizer.sanitize(svg("<g/>"))

        assert sanitizer.get_issues() == []


class TestReferenceChecks:
    """Tests for the href and remote reference helpers."""

    def test_unsafe_href(self):
        assert is_unsafe_href("javascript:alert(1)")
        assert is_unsafe_href(" JaVaScRiPt:alert(1)")
        assert is_unsafe_href("data:image/svg+xml;base64,PHN2Zz4=")
        assert not is_unsafe_href("data:image/png;base64,iVBORw0=")
        assert not is_unsafe_href("#local")

    def test_remote_reference(self):
        assert has_remote_reference("https://example.com/x.png")
        assert has_remote_reference("//example.com/x.png")
        assert has_remote_reference("url(http://example.com/x.png)")
        assert has_remote_reference('fill: red; filter: url("ftp://example.com/f")')
        assert not has_remote_reference("url(#gradient)")
        assert not has_remote_reference("M0 0 L10 10")


class TestSanitizeOutcome:
    """Tests for the tri-state adapter in BaseSanitizer.run."""

    def test_clean(self):
        outcome = FakeSanitizer(b"<svg/>").run(b"x")

        assert outcome.status is SanitizeStatus.CLEAN
        assert outcome.issues == ()
        assert not outcome.failed

    def test_issues(self):
        issues = [Issue("Suspicious tag 'script'", 3)]
        outcome = FakeSanitizer(b"<svg/>", issues).run(b"x")

        assert outcome.status is SanitizeStatus.ISSUES
        assert outcome.issues == tuple(issues)

    @pytest.mark.parametrize("marker", [None, b""])
    def test_failure_marker_wins_over_issues(self, marker):
        outcome = FakeSanitizer(marker, [Issue("Suspicious tag 'a'", 1)]).run(b"x")

        assert outcome.status is SanitizeStatus.FAILED
        assert outcome.failed

    def test_engine_error_is_failure(self):
        outcome = FakeSanitizer(b"<svg/>", error=SanitizerError("boom")).run(b"x")

        assert outcome.status is SanitizeStatus.FAILED

    @pytest.mark.parametrize("error", [
        LookupError("unknown encoding: bogus"),
        ValueError("multi-byte encodings are not supported"),
    ])
    def test_decoding_error_is_failure(self, error):
        outcome = FakeSanitizer(b"<svg/>", error=error).run(b"x")

        assert outcome.status is SanitizeStatus.FAILED

    def test_unexpected_error_propagates(self):
        with pytest.raises(RuntimeError):
            FakeSanitizer(b"<svg/>", error=RuntimeError("bug")).run(b"x")
