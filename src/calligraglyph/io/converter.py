"""Conversion between SVG elements and domain models.

This module converts ElementTree path elements into StrokeCandidate domain
models. It is the only place that knows which attributes carry stroke
metadata.
"""

import re
from xml.etree.ElementTree import Element

from calligraglyph.domain import StrokeCandidate

INKSCAPE_NS = "http://www.inkscape.org/namespaces/inkscape"

ATTR_PATH_DATA = "d"
ATTR_STROKE_ORDER = "data-stroke-order"
ATTR_STROKE_DIRECTION = "data-stroke-direction"
ATTR_STROKE_TAGS = "data-stroke-tags"
ATTR_INKSCAPE_LABEL = f"{{{INKSCAPE_NS}}}label"

_TAG_SPLIT_RE = re.compile(r"[,\s]+")


def local_name(tag: object) -> str:
    """Strip the namespace from an ElementTree tag.

    Args:
        tag: Element tag, e.g. "{http://www.w3.org/2000/svg}path"

    Returns:
        Local tag name ("path"), or "" for comments and processing instructions
    """
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


def has_path_data(element: Element) -> bool:
    """Check if a path element carries non-blank path data."""
    path_data = element.get(ATTR_PATH_DATA)
    return path_data is not None and bool(path_data.strip())


def parse_tags(raw: str | None) -> tuple[str, ...]:
    """Split a comma/whitespace separated tag list."""
    if not raw:
        return ()
    return tuple(tag for tag in _TAG_SPLIT_RE.split(raw.strip()) if tag)


def element_to_candidate(element: Element, document_index: int) -> StrokeCandidate:
    """Convert a <path> element into a stroke candidate.

    Args:
        element: Path element with usable path data
        document_index: 1-based position among usable paths

    Returns:
        StrokeCandidate with the element's ordering metadata
    """
    return StrokeCandidate(
        path_data=element.get(ATTR_PATH_DATA, ""),
        document_index=document_index,
        order_hint=element.get(ATTR_STROKE_ORDER),
        element_id=element.get("id"),
        label=element.get("label"),
        name=element.get("name"),
        inkscape_label=element.get(ATTR_INKSCAPE_LABEL),
        direction=element.get(ATTR_STROKE_DIRECTION),
        tags=parse_tags(element.get(ATTR_STROKE_TAGS)),
    )
