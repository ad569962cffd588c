"""Stroke timing model.

Duration models ink time: proportional to stroke length, clamped so tiny
strokes stay visible and long strokes do not dominate. Delay models a constant
pen lift between strokes and never depends on geometry.
"""

import math

from calligraglyph.config import TimingConfig
from calligraglyph.domain import OrderedStroke, StrokeDirection, TimedStroke


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounding up."""
    return math.floor(value + 0.5)


def clamp(minimum: int, maximum: int, value: int) -> int:
    """Clamp a value into [minimum, maximum]."""
    return max(minimum, min(maximum, value))


def stroke_duration_ms(length: float, config: TimingConfig) -> int:
    """Compute the draw duration of a stroke.

    Args:
        length: Stroke arc length
        config: Timing configuration

    Returns:
        Duration in milliseconds within the configured bounds
    """
    return clamp(
        config.min_duration_ms,
        config.max_duration_ms,
        round_half_up(length * config.speed_factor),
    )


def stroke_delay_ms(position: int, config: TimingConfig) -> int:
    """Compute the pause before a stroke.

    Args:
        position: 0-based position in final draw order
        config: Timing configuration

    Returns:
        0 for the first stroke, the configured delay otherwise
    """
    return 0 if position == 0 else config.delay_ms


def parse_direction(raw: str | None) -> StrokeDirection | None:
    """Parse a stroke direction, ignoring unknown values."""
    if raw is None:
        return None
    try:
        return StrokeDirection(raw.strip().lower())
    except ValueError:
        return None


def time_strokes(strokes: list[OrderedStroke], config: TimingConfig) -> list[TimedStroke]:
    """Apply the timing model to strokes in final order.

    Args:
        strokes: Measured strokes in final draw order
        config: Timing configuration

    Returns:
        TimedStroke list; ``order`` is array position + 1
    """
    timed: list[TimedStroke] = []
    for position, stroke in enumerate(strokes):
        candidate = stroke.candidate
        timed.append(
            TimedStroke(
                id=stroke.stroke_id,
                order=position + 1,
                path=candidate.path_data,
                duration_ms=stroke_duration_ms(stroke.length, config),
                delay_ms=stroke_delay_ms(position, config),
                direction=parse_direction(candidate.direction),
                tags=list(candidate.tags) or None,
            )
        )
    return timed
