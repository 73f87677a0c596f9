"""
Allow-list policy for the SVG sanitizer.

The policy is fail-closed: any tag or attribute that is not listed here is
removed by the sanitization engine. A deployment may extend the base lists
with extra entries, but composition is a plain set union so an extension
can only ever widen what is permitted. It never drops a base entry.

Some constructs stay blocked no matter what the lists say. The engine
always removes the tags in ``FORBIDDEN_TAGS``, event-handler attributes
(``on*``) and remote references.
"""

from dataclasses import dataclass
from typing import FrozenSet, Iterable


# Base security policy: SVG structure, shapes, text, paint servers and filters.
BASE_TAGS: FrozenSet[str] = frozenset([
    # Structure
    "svg", "g", "defs", "desc", "metadata", "switch", "symbol", "title",
    "use", "view",
    # Shapes
    "circle", "ellipse", "line", "path", "polygon", "polyline", "rect",
    # Text and fonts
    "altglyph", "altglyphdef", "altglyphitem", "font", "glyph", "glyphref",
    "hkern", "text", "textpath", "tref", "tspan", "vkern",
    # Paint servers, clipping and markers
    "clippath", "image", "lineargradient", "marker", "mask", "pattern",
    "radialgradient", "stop",
    # Animation
    "animatecolor", "animatemotion", "animatetransform", "mpath",
    # Filters
    "filter", "feblend", "fecolormatrix", "fecomponenttransfer",
    "fecomposite", "feconvolvematrix", "fediffuselighting",
    "fedisplacementmap", "fedistantlight", "fedropshadow", "feflood",
    "fefunca", "fefuncb", "fefuncg", "fefuncr", "fegaussianblur", "feimage",
    "femerge", "femergenode", "femorphology", "feoffset", "fepointlight",
    "fespecularlighting", "fespotlight", "fetile", "feturbulence",
])

BASE_ATTRIBUTES: FrozenSet[str] = frozenset([
    # Core
    "class", "id", "lang", "style", "tabindex", "type", "xml:id",
    "xml:space", "xmlns", "xmlns:xlink",
    # Links (values are still checked for unsafe schemes and remote targets)
    "href", "xlink:href", "xlink:title",
    # Presentation
    "alignment-baseline", "baseline-shift", "clip", "clip-path", "clip-rule",
    "color", "color-interpolation", "color-interpolation-filters",
    "color-profile", "color-rendering", "direction", "display", "fill",
    "fill-opacity", "fill-rule", "filter", "flood-color", "flood-opacity",
    "font-family", "font-size", "font-size-adjust", "font-stretch",
    "font-style", "font-variant", "font-weight", "image-rendering",
    "kerning", "letter-spacing", "lighting-color", "marker-end",
    "marker-mid", "marker-start", "mask", "opacity", "overflow",
    "paint-order", "shape-rendering", "stop-color", "stop-opacity",
    "stroke", "stroke-dasharray", "stroke-dashoffset", "stroke-linecap",
    "stroke-linejoin", "stroke-miterlimit", "stroke-opacity",
    "stroke-width", "text-anchor", "text-decoration", "text-rendering",
    "visibility", "word-spacing", "writing-mode",
    # Geometry
    "cx", "cy", "d", "dx", "dy", "fx", "fy", "height", "pathlength",
    "points", "preserveaspectratio", "r", "rotate", "rx", "ry", "transform",
    "viewbox", "width", "x", "x1", "x2", "y", "y1", "y2",
    # Gradients, patterns, markers, masks
    "gradienttransform", "gradientunits", "markerheight", "markerunits",
    "markerwidth", "maskcontentunits", "maskunits", "offset", "orient",
    "patterncontentunits", "patterntransform", "patternunits", "refx",
    "refy", "spreadmethod",
    # Filter primitives
    "azimuth", "basefrequency", "bias", "diffuseconstant", "divisor",
    "edgemode", "elevation", "filterunits", "in", "in2", "k1", "k2", "k3",
    "k4", "kernelmatrix", "kernelunitlength", "mode", "numoctaves",
    "operator", "order", "preservealpha", "primitiveunits", "radius",
    "result", "scale", "seed", "specularconstant", "specularexponent",
    "stddeviation", "stitchtiles", "surfacescale", "xchannelselector",
    "ychannelselector",
    # Text and fonts
    "ascent", "glyph-name", "lengthadjust", "textlength", "u1", "u2",
    "unicode", "vert-adv-y", "vert-origin-x", "vert-origin-y",
    # Animation timing and values
    "accumulate", "additive", "attributename", "attributetype", "begin",
    "by", "calcmode", "dur", "end", "keypoints", "keysplines", "keytimes",
    "max", "min", "repeatcount", "repeatdur", "restart", "values",
])

# Deployment extension: constructs our asset pipeline relies on that the
# base policy leaves out (icon fonts and simple animations).
EXTENSION_TAGS: FrozenSet[str] = frozenset([
    "font-face",
    "missing-glyph",
    "animate",
])

EXTENSION_ATTRIBUTES: FrozenSet[str] = frozenset([
    "bbox",  # Deprecated but still in use.
    "cy",
    "cx",
    "descent",
    "enable-background",
    "fill",
    "fillRule",
    "from",
    "horiz-adv-x",
    "panose-1",  # Deprecated but still in use.
    "rx",
    "ry",
    "space",
    "to",
    "unicode-range",  # Deprecated but still in use.
    "underline-position",
    "underline-thickness",
    "units-per-em",
    "y",
    "x",
    "vector-effect",
    "version",
])

# Removed by the engine even if an extension lists them.
FORBIDDEN_TAGS: FrozenSet[str] = frozenset(["script"])
EVENT_HANDLER_PREFIX = "on"


def compose_tags(base: Iterable[str], extension: Iterable[str]) -> FrozenSet[str]:
    """Merge a base tag list with an extension. Additive only."""
    return frozenset(base) | frozenset(extension)


def compose_attributes(base: Iterable[str], extension: Iterable[str]) -> FrozenSet[str]:
    """Merge a base attribute list with an extension. Additive only."""
    return frozenset(base) | frozenset(extension)


@dataclass(frozen=True)
class AllowlistPolicy:
    """
    Immutable set of permitted tag and attribute names.

    Built once at start-up and shared read-only by every scan.
    """
    allowed_tags: FrozenSet[str]
    allowed_attributes: FrozenSet[str]

    @classmethod
    def build(
        cls,
        extra_tags: Iterable[str] = (),
        extra_attributes: Iterable[str] = (),
    ) -> "AllowlistPolicy":
        """
        Compose the base policy with the deployment extension.

        ``extra_tags`` and ``extra_attributes`` come from the configuration
        file and are merged on top, again additively.
        """
        tags = compose_tags(compose_tags(BASE_TAGS, EXTENSION_TAGS), extra_tags)
        attributes = compose_attributes(
            compose_attributes(BASE_ATTRIBUTES, EXTENSION_ATTRIBUTES),
            extra_attributes,
        )
        return cls(allowed_tags=tags, allowed_attributes=attributes)
