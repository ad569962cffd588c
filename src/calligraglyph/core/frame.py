"""Glyph coordinate frame normalization.

The frame's width and height come from the SVG viewBox. A viewBox that does
not parse, or declares a non-positive size, is replaced dimension by
dimension with the default size. The typographic metrics always come from
configuration.
"""

import math
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from calligraglyph.config import MetricsConfig
from calligraglyph.domain import BBox

_VIEWBOX_SPLIT_RE = re.compile(r"[\s,]+")


@dataclass(frozen=True)
class Viewport:
    """Parsed viewBox. Unparseable components are NaN."""

    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class FrameResult:
    """Result of frame normalization.

    Attributes:
        bbox: Normalized frame with metrics
        viewport: Viewport as declared
        substituted: True if width or height was replaced by the default
    """

    bbox: BBox
    viewport: Viewport
    substituted: bool = False


def compact_number(value: float) -> float | int:
    """Return integral floats as ints so JSON output reads 1000, not 1000.0."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _to_float(value: Any) -> float:
    if isinstance(value, bool):
        return math.nan
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def parse_viewport(declaration: str | Mapping[str, Any], default_size: float = 1000.0) -> Viewport:
    """Parse a viewBox declaration.

    Accepts the attribute string "x y width height" (whitespace or comma
    separated, read by position; missing positions are NaN and extra tokens
    are ignored) or a mapping with the keys x, y, width and height. Missing
    mapping keys default to the origin and the default size.

    Args:
        declaration: Raw viewBox
        default_size: Size assumed for missing mapping dimensions

    Returns:
        Viewport with NaN for components that do not parse
    """
    if isinstance(declaration, Mapping):
        return Viewport(
            x=_to_float(declaration.get("x", 0)),
            y=_to_float(declaration.get("y", 0)),
            width=_to_float(declaration.get("width", default_size)),
            height=_to_float(declaration.get("height", default_size)),
        )

    tokens = [token for token in _VIEWBOX_SPLIT_RE.split(str(declaration).strip()) if token]
    tokens += [""] * (4 - len(tokens))
    x, y, width, height = (_to_float(token) for token in tokens[:4])
    return Viewport(x=x, y=y, width=width, height=height)


def _is_positive(value: float) -> bool:
    return math.isfinite(value) and value > 0


def normalize_frame(
    declaration: str | Mapping[str, Any],
    metrics: MetricsConfig,
    default_size: float = 1000.0,
) -> FrameResult:
    """Derive the glyph frame from the viewBox and configured metrics.

    Args:
        declaration: Raw viewBox (string or mapping)
        metrics: Operator-supplied typographic metrics
        default_size: Width/height substituted for invalid dimensions

    Returns:
        FrameResult; ``substituted`` reports a degenerate viewBox
    """
    viewport = parse_viewport(declaration, default_size)

    width_ok = _is_positive(viewport.width)
    height_ok = _is_positive(viewport.height)
    width = viewport.width if width_ok else default_size
    height = viewport.height if height_ok else default_size

    bbox = BBox(
        w=compact_number(width),
        h=compact_number(height),
        baseline=compact_number(metrics.baseline),
        x_height=_optional_number(metrics.x_height),
        ascender=_optional_number(metrics.ascender),
        descender=_optional_number(metrics.descender),
    )
    return FrameResult(bbox=bbox, viewport=viewport, substituted=not (width_ok and height_ok))


def _optional_number(value: float | None) -> float | int | None:
    return None if value is None else compact_number(value)
