"""Domain models for calligraglyph.

This module contains the core domain models representing strokes and glyph
records. All models are designed to be:

- Plain dataclasses, immutable where the pipeline never changes them
- Serializable to the calligraglyph/v1 JSON layout
- Independent of the SVG parser and the schema validator

Key classes:
- StrokeCandidate: A drawable path read from the SVG document
- OrderHint: Resolved draw order for a candidate
- OrderedStroke: A candidate in final order with its measured length
- TimedStroke: A stroke with animation timing
- BBox: The glyph's coordinate frame
- GlyphRecord: The complete persisted record
"""

from calligraglyph.domain.glyph import (
    ID_SEPARATOR,
    ID_VERSION,
    SCHEMA_TAG,
    Attribution,
    BBox,
    Case,
    GlyphRecord,
    Nib,
)
from calligraglyph.domain.stroke import (
    GuideMarker,
    OrderedStroke,
    OrderHint,
    StrokeCandidate,
    StrokeDirection,
    StrokeGuide,
    TimedStroke,
)

__all__: list[str] = [
    # Constants
    "ID_SEPARATOR",
    "ID_VERSION",
    "SCHEMA_TAG",
    # Enums
    "Case",
    "GuideMarker",
    "StrokeDirection",
    # Core types
    "Attribution",
    "BBox",
    "GlyphRecord",
    "Nib",
    "OrderHint",
    "OrderedStroke",
    "StrokeCandidate",
    "StrokeGuide",
    "TimedStroke",
]
