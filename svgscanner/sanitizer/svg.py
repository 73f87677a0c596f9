"""
SVG sanitization engine.

Parses the document with defusedxml first to reject entity expansion and
external entity attacks, then re-parses it with lxml to walk and rewrite the
tree. Elements and attributes outside the allow-list are removed, as are
event handlers, unsafe link schemes and (when enabled) remote references.
Every removal is recorded as an ``Issue`` carrying the source line.
"""

import logging
import re
from io import BytesIO
from typing import Optional
from xml.etree.ElementTree import ParseError

from defusedxml import DefusedXmlException
from defusedxml import ElementTree as DefusedET
from lxml import etree

from svgscanner.core.findings import Issue
from svgscanner.policy.allowlist import EVENT_HANDLER_PREFIX, FORBIDDEN_TAGS
from svgscanner.sanitizer.base import BaseSanitizer, SanitizerError


logger = logging.getLogger(__name__)

XLINK_NS = "http://www.w3.org/1999/xlink"
XML_NS = "http://www.w3.org/XML/1998/namespace"
SVG_NS = "http://www.w3.org/2000/svg"

KNOWN_PREFIXES = {
    XLINK_NS: "xlink",
    XML_NS: "xml",
    # Elements in the SVG namespace are named without a prefix.
    SVG_NS: "",
}

# Control characters and whitespace browsers ignore inside a URL scheme,
# e.g. "java\tscript:".
_IGNORED_URL_CHARS = re.compile(r"[\x00-\x20\x7f]+")

_UNSAFE_SCHEME = re.compile(r"^(?:javascript|vbscript|livescript|data):", re.IGNORECASE)
_SAFE_DATA_URI = re.compile(r"^data:image/(?:png|gif|jpe?g|webp|bmp);", re.IGNORECASE)

_NETWORK_URL = re.compile(r"^(?:(?:https?|ftp|file):)?//", re.IGNORECASE)
_CSS_URL = re.compile(r"url\s*\(\s*['\"]?\s*([^'\")]*)", re.IGNORECASE)


def is_unsafe_href(value: str) -> bool:
    """Check whether a link value uses a scheme that can run code."""
    compact = _IGNORED_URL_CHARS.sub("", value)
    if _SAFE_DATA_URI.match(compact):
        return False
    return bool(_UNSAFE_SCHEME.match(compact))


def has_remote_reference(value: str) -> bool:
    """
    Check whether a value makes the renderer fetch an external resource.

    Covers bare network URLs (``https://``, ``//host``) and CSS ``url()``
    references that do not point at a local ``#fragment``.
    """
    compact = _IGNORED_URL_CHARS.sub("", value)
    if _NETWORK_URL.match(compact):
        return True

    for target in _CSS_URL.findall(value):
        target = _IGNORED_URL_CHARS.sub("", target).strip("'\"")
        if _NETWORK_URL.match(target):
            return True

    return False


class SVGSanitizer(BaseSanitizer):
    """Allow-list based SVG sanitizer built on lxml."""

    def sanitize(self, data: bytes) -> Optional[bytes]:
        self._issues = []

        try:
            root = self._parse(data)
        except SanitizerError as e:
            logger.debug("Could not parse document: %s", e)
            return None

        if not self._clean_element(root):
            return None

        return etree.tostring(root, encoding="utf-8", xml_declaration=True)

    def _parse(self, data: bytes) -> etree._Element:
        try:
            DefusedET.fromstring(data)
        except (DefusedXmlException, ParseError, ValueError, LookupError) as e:
            raise SanitizerError(f"Malformed or dangerous XML structure: {e}") from e

        parser = etree.XMLParser(
            remove_comments=True,
            remove_pis=True,
            resolve_entities=False,
            no_network=True,
            load_dtd=False,
        )
        try:
            return etree.parse(BytesIO(data), parser).getroot()
        except (etree.XMLSyntaxError, ValueError, LookupError) as e:
            raise SanitizerError(f"Failed to parse SVG: {e}") from e

    def _clean_element(self, element: etree._Element) -> bool:
        """
        Clean an element and its subtree in document order.

        Returns False if the element itself must be removed.
        """
        name = self._qualified_name(element, element.tag)

        if not self._tag_allowed(name):
            self._report(f"Suspicious tag '{name}'", element)
            return False

        for attr_name in list(element.attrib):
            qualified = self._qualified_name(element, attr_name)
            if not self._attribute_safe(qualified, element.attrib[attr_name]):
                del element.attrib[attr_name]
                self._report(f"Suspicious attribute '{qualified}'", element)

        for child in list(element):
            if not isinstance(child.tag, str):
                continue
            if not self._clean_element(child):
                self._remove(child)

        return True

    def _tag_allowed(self, name: str) -> bool:
        name = name.lower()
        return name not in FORBIDDEN_TAGS and name in self.allowed_tags

    def _attribute_safe(self, name: str, value: str) -> bool:
        lowered = name.lower()
        local = lowered.split(":")[-1]

        if local.startswith(EVENT_HANDLER_PREFIX):
            return False
        if lowered not in self.allowed_attrs:
            return False
        if local == "href" and is_unsafe_href(value):
            return False
        if self.remove_remote and has_remote_reference(value):
            return False
        return True

    def _report(self, message: str, element: etree._Element) -> None:
        self._issues.append(Issue(message, element.sourceline))

    @staticmethod
    def _remove(element: etree._Element) -> None:
        # Keep the text that followed the removed element.
        parent = element.getparent()
        if element.tail:
            previous = element.getprevious()
            if previous is not None:
                previous.tail = (previous.tail or "") + element.tail
            else:
                parent.text = (parent.text or "") + element.tail
        parent.remove(element)

    @staticmethod
    def _qualified_name(element: etree._Element, name: str) -> str:
        """Turn lxml's ``{uri}local`` form into ``prefix:local``."""
        qname = etree.QName(name)
        if not qname.namespace:
            return qname.localname

        prefix = KNOWN_PREFIXES.get(qname.namespace)
        if prefix is None:
            for candidate, uri in element.nsmap.items():
                if uri == qname.namespace:
                    prefix = candidate
                    break

        # The default namespace (e.g. SVG) has no prefix.
        if not prefix:
            return qname.localname
        return f"{prefix}:{qname.localname}"
