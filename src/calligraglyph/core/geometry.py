"""Stroke geometry measurement.

Arc length is computed by replaying the SVG path into a fontTools
PerimeterPen: lines are measured exactly, quadratic and cubic curves by the
pen's integration, and elliptical arcs after fontTools converts them to
cubics.
"""

import math
import re
from dataclasses import dataclass

from fontTools.pens.perimeterPen import PerimeterPen
from fontTools.svgLib.path import parse_path

from calligraglyph.config import GeometryConfig
from calligraglyph.exceptions import PathDataError

_DRAW_COMMAND_RE = re.compile(r"[MmLlHhVvCcSsQqTtAaZz]")


@dataclass(frozen=True)
class LengthMeasurement:
    """Result of measuring one stroke.

    Attributes:
        length: Arc length in logical units (fallback value on failure)
        fallback_reason: Why the fallback was used, None if measured
    """

    length: float
    fallback_reason: str | None = None

    @property
    def used_fallback(self) -> bool:
        """Whether the length is the fallback constant."""
        return self.fallback_reason is not None


def path_length(path_data: str, tolerance: float = 0.005) -> float:
    """Compute the total arc length of SVG path data.

    Closing segments (Z) count toward the length.

    Args:
        path_data: SVG path data string
        tolerance: Curve approximation tolerance passed to PerimeterPen

    Returns:
        Total arc length

    Raises:
        PathDataError: If the path data cannot be parsed or measured
    """
    if not _DRAW_COMMAND_RE.search(path_data):
        raise PathDataError("no drawing commands")

    pen = PerimeterPen(tolerance=tolerance)
    try:
        parse_path(path_data, pen)
    except Exception as e:
        raise PathDataError(str(e) or type(e).__name__) from e

    length = float(pen.value)
    if not math.isfinite(length):
        raise PathDataError(f"non-finite length {length}")
    return length


def measure_stroke_length(path_data: str, config: GeometryConfig) -> LengthMeasurement:
    """Measure a stroke, substituting the fallback length on failure.

    A malformed stroke never aborts the conversion.

    Args:
        path_data: SVG path data string
        config: Geometry configuration with tolerance and fallback length

    Returns:
        LengthMeasurement
    """
    try:
        return LengthMeasurement(length=path_length(path_data, config.length_tolerance))
    except PathDataError as e:
        return LengthMeasurement(length=config.fallback_length, fallback_reason=e.reason)
