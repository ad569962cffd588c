"""Stroke order resolution.

Authors record stroke order in several ways, none of them required:

1. An explicit ``data-stroke-order`` attribute holding a number
2. A numeric prefix on the element id or one of its labels ("01_stem",
   "2-bowl", "3 tail")
3. Nothing at all, in which case document order is trusted

Resolution is a pure function per candidate. The fallback to document order is
all-or-nothing: it applies only when no candidate carries any order metadata.
"""

import math
import re

from calligraglyph.domain import OrderedStroke, OrderHint, StrokeCandidate
from calligraglyph.io.converter import ATTR_STROKE_ORDER

ORDER_PREFIX_RE = re.compile(r"^([0-9]{1,3})[_\-\s]")
ORDER_NUMBER_RE = re.compile(r"^[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?$")


def parse_order_attribute(raw: str) -> float | None:
    """Parse an explicit order attribute.

    Args:
        raw: Attribute text

    Returns:
        The order as a float, or None if the text is not a plain finite
        decimal number
    """
    text = raw.strip()
    if not ORDER_NUMBER_RE.match(text):
        return None
    value = float(text)
    if not math.isfinite(value):
        return None
    return value


def match_order_prefix(text: str) -> int | None:
    """Extract a 1-3 digit order prefix followed by a separator.

    Args:
        text: Identifier or label text

    Returns:
        The prefix as an int, or None if the text has no order prefix
    """
    match = ORDER_PREFIX_RE.match(text)
    if match is None:
        return None
    return int(match.group(1))


def resolve_order_hint(candidate: StrokeCandidate) -> OrderHint:
    """Resolve a candidate's draw order from its metadata.

    The explicit attribute wins over label prefixes. A non-numeric explicit
    attribute is skipped and remembered so it can be reported.

    Args:
        candidate: Stroke candidate

    Returns:
        OrderHint; ``value`` is ``math.inf`` when nothing matched
    """
    rejected: str | None = None

    if candidate.order_hint is not None:
        value = parse_order_attribute(candidate.order_hint)
        if value is not None:
            return OrderHint(value=value, source=ATTR_STROKE_ORDER)
        rejected = candidate.order_hint

    for field_name, text in candidate.label_fields():
        if text is None:
            continue
        prefix = match_order_prefix(text)
        if prefix is not None:
            return OrderHint(value=float(prefix), source=field_name, rejected_hint=rejected)

    return OrderHint(rejected_hint=rejected)


def format_order(value: float) -> str:
    """Format an order value for use in a generated stroke id."""
    if value.is_integer():
        return str(int(value))
    return f"{value:g}"


def stroke_id_for(candidate: StrokeCandidate, hint: OrderHint) -> str:
    """Choose the identifier of a stroke.

    Uses the element id when present, otherwise ``s<order>`` for ordered
    strokes and ``s<document position>`` for unordered ones.
    """
    if candidate.element_id:
        return candidate.element_id
    if hint.explicit:
        return f"s{format_order(hint.value)}"
    return f"s{candidate.document_index}"


def order_strokes(candidates: list[StrokeCandidate]) -> list[OrderedStroke]:
    """Put candidates in final draw order.

    When at least one candidate has an order, all candidates are sorted by
    (order, id); unordered ones sort last. When none has an order, document
    order is kept as-is. Either way the result is renumbered 1..N.

    Args:
        candidates: Candidates in document order

    Returns:
        OrderedStroke list with dense 1-based orders
    """
    entries = [
        (candidate, hint, stroke_id_for(candidate, hint))
        for candidate, hint in ((c, resolve_order_hint(c)) for c in candidates)
    ]

    if any(hint.explicit for _, hint, _ in entries):
        entries.sort(key=lambda entry: (entry[1].value, entry[2]))

    return [
        OrderedStroke(stroke_id=stroke_id, order=position, candidate=candidate, hint=hint)
        for position, (candidate, hint, stroke_id) in enumerate(entries, start=1)
    ]


def has_explicit_order(strokes: list[OrderedStroke]) -> bool:
    """Check if any stroke's order came from metadata."""
    return any(stroke.hint.explicit for stroke in strokes)
