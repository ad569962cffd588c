"""Core conversion algorithms for calligraglyph.

This module contains the pipeline stages:

- Order resolution (explicit attribute, label prefix, document order)
- Geometry measurement (arc length via fontTools pens)
- Timing model (clamped duration, constant inter-stroke delay)
- Frame normalization (viewBox size and typographic metrics)
- Record assembly and schema validation

All stages except the orchestrator are:
- Stateless
- Pure (no I/O, no logging)

Key functions:
- order_strokes: Put candidates in final draw order
- path_length: Arc length of SVG path data
- measure_stroke_length: Arc length with fallback
- time_strokes: Apply the timing model
- normalize_frame: Derive the glyph frame
- assemble_glyph: Compose the glyph record
- validate_glyph_record: Check a record against the schema

Key classes:
- GlyphConverter: Runs the complete conversion
"""

from calligraglyph.core.assembler import assemble_glyph, fold_case, glyph_id
from calligraglyph.core.frame import FrameResult, Viewport, normalize_frame, parse_viewport
from calligraglyph.core.geometry import LengthMeasurement, measure_stroke_length, path_length
from calligraglyph.core.ordering import order_strokes, resolve_order_hint
from calligraglyph.core.processor import ConversionResult, GlyphConverter
from calligraglyph.core.timing import stroke_delay_ms, stroke_duration_ms, time_strokes
from calligraglyph.core.validator import (
    GlyphSchema,
    find_violations,
    validate_glyph_record,
)

__all__ = [
    # Processor classes
    "ConversionResult",
    "GlyphConverter",
    # Frame
    "FrameResult",
    "Viewport",
    "normalize_frame",
    "parse_viewport",
    # Geometry
    "LengthMeasurement",
    "measure_stroke_length",
    "path_length",
    # Ordering
    "order_strokes",
    "resolve_order_hint",
    # Timing
    "stroke_delay_ms",
    "stroke_duration_ms",
    "time_strokes",
    # Assembly and validation
    "GlyphSchema",
    "assemble_glyph",
    "find_violations",
    "fold_case",
    "glyph_id",
    "validate_glyph_record",
]
