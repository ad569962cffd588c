"""Stroke types flowing through the conversion pipeline.

This module defines the stroke domain models, from the raw candidate read out
of the SVG document to the timed stroke persisted in the glyph record:
- StrokeCandidate: A drawable <path> with its optional ordering metadata
- OrderHint: Result of resolving a candidate's draw order
- OrderedStroke: A candidate with its final order and measured length
- TimedStroke: A stroke with animation timing, as written to JSON
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class StrokeDirection(str, Enum):
    """Direction in which the pen travels along the path."""

    FORWARD = "forward"
    REVERSE = "reverse"


class GuideMarker(str, Enum):
    """Marker drawn at the start of a stroke by guide renderers."""

    DOT = "dot"
    ARROW = "arrow"


@dataclass(frozen=True, slots=True)
class StrokeCandidate:
    """A drawable path element extracted from the source document.

    Attributes:
        path_data: SVG path data (the element's ``d`` attribute)
        document_index: 1-based position among usable paths in document order
        order_hint: Raw ``data-stroke-order`` value, if present
        element_id: Element ``id``
        label: Element ``label`` attribute
        name: Element ``name`` attribute
        inkscape_label: Inkscape layer/object label
        direction: Raw ``data-stroke-direction`` value
        tags: Tags parsed from ``data-stroke-tags``
    """

    path_data: str
    document_index: int
    order_hint: str | None = None
    element_id: str | None = None
    label: str | None = None
    name: str | None = None
    inkscape_label: str | None = None
    direction: str | None = None
    tags: tuple[str, ...] = ()

    def label_fields(self) -> list[tuple[str, str | None]]:
        """Return the textual fields that may carry a numeric order prefix.

        Returns:
            (field name, value) pairs in lookup priority order
        """
        return [
            ("id", self.element_id),
            ("label", self.label),
            ("name", self.name),
            ("inkscape:label", self.inkscape_label),
        ]


@dataclass(frozen=True, slots=True)
class OrderHint:
    """Draw order resolved for a single candidate.

    Attributes:
        value: Resolved order, ``math.inf`` when nothing matched
        source: Field that produced the value (None when unordered)
        rejected_hint: Non-numeric ``data-stroke-order`` that was skipped
    """

    value: float = math.inf
    source: str | None = None
    rejected_hint: str | None = None

    @property
    def explicit(self) -> bool:
        """Whether the order came from metadata rather than the fallback."""
        return not math.isinf(self.value)


@dataclass
class OrderedStroke:
    """A candidate placed in final draw order.

    Attributes:
        stroke_id: Identifier written to the record
        order: 1-based final position
        candidate: Source candidate
        hint: Order hint the position was derived from
        length: Measured arc length in logical units
    """

    stroke_id: str
    order: int
    candidate: StrokeCandidate
    hint: OrderHint = field(default_factory=OrderHint)
    length: float = 0.0

    @property
    def path_data(self) -> str:
        """Get path data from the candidate."""
        return self.candidate.path_data


@dataclass(frozen=True)
class StrokeGuide:
    """Rendering hints for stroke-order guides."""

    arrows: bool | None = None
    start_marker: GuideMarker | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with only the fields that are set
        """
        data: dict[str, Any] = {}
        if self.arrows is not None:
            data["arrows"] = self.arrows
        if self.start_marker is not None:
            data["startMarker"] = self.start_marker.value
        return data


@dataclass
class TimedStroke:
    """A stroke as persisted in the glyph record.

    Attributes:
        id: Stroke identifier
        order: 1-based draw order, equal to array position + 1
        path: SVG path data
        duration_ms: Time to draw the stroke
        delay_ms: Pause before the stroke starts
        direction: Pen direction along the path
        pressure: (t, pressure) samples, both in [0, 1]
        guide: Rendering hints for guides
        tags: Free-form tags
    """

    id: str
    order: int
    path: str
    duration_ms: int
    delay_ms: int = 0
    direction: StrokeDirection | None = None
    pressure: list[tuple[float, float]] | None = None
    guide: StrokeGuide | None = None
    tags: list[str] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the JSON stroke layout.

        Returns:
            Dictionary with camelCase keys; unset optional fields are omitted
        """
        data: dict[str, Any] = {
            "id": self.id,
            "order": self.order,
            "path": self.path,
            "durationMs": self.duration_ms,
            "delayMs": self.delay_ms,
        }
        if self.direction is not None:
            data["direction"] = self.direction.value
        if self.pressure is not None:
            data["pressure"] = [[t, p] for t, p in self.pressure]
        if self.guide is not None:
            data["guide"] = self.guide.to_dict()
        if self.tags:
            data["tags"] = list(self.tags)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TimedStroke":
        """Deserialize from the JSON stroke layout.

        Args:
            data: Dictionary representation of a stroke

        Returns:
            TimedStroke instance
        """
        guide_data = data.get("guide")
        guide = None
        if guide_data is not None:
            marker = guide_data.get("startMarker")
            guide = StrokeGuide(
                arrows=guide_data.get("arrows"),
                start_marker=GuideMarker(marker) if marker is not None else None,
            )
        pressure = data.get("pressure")
        return cls(
            id=data["id"],
            order=data["order"],
            path=data["path"],
            duration_ms=data["durationMs"],
            delay_ms=data.get("delayMs", 0),
            direction=(
                StrokeDirection(data["direction"]) if "direction" in data else None
            ),
            pressure=[(t, p) for t, p in pressure] if pressure is not None else None,
            guide=guide,
            tags=data.get("tags"),
        )
