"""Configuration settings for Calligraglyph."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class NibType(str, Enum):
    """Pen nib shape recorded alongside the glyph."""

    BROAD = "broad"
    POINTED = "pointed"
    CHISEL = "chisel"
    SPLIT = "split"


class GlyphConfig(BaseModel):
    """Identity of the glyph being converted."""

    style: str = Field(
        default="gothic",
        description="Free-form style tag (e.g., gothic, italic)",
    )
    char: str = Field(
        default="C",
        min_length=1,
        description="Character or characters this glyph draws",
    )
    case: str = Field(
        default="upper",
        description="Letter case; anything other than 'lower' is treated as upper",
    )
    alternates: list[str] = Field(
        default_factory=list,
        description="Identifiers of alternate glyph variants",
    )


class NibConfig(BaseModel):
    """Pen metadata passed through to the record."""

    enabled: bool = Field(
        default=True,
        description="Include the nib section in the record",
    )
    width: float = Field(
        default=60.0,
        description="Nib width in logical units",
    )
    angle_deg: float = Field(
        default=35.0,
        description="Nib angle in degrees",
    )
    type: NibType | None = Field(
        default=None,
        description="Nib shape",
    )


class MetricsConfig(BaseModel):
    """Typographic metrics in viewBox units.

    These are always operator-supplied and never derived from geometry.
    """

    baseline: float = Field(
        default=800.0,
        description="Baseline Y",
    )
    x_height: float | None = Field(
        default=500.0,
        description="x-height Y",
    )
    ascender: float | None = Field(
        default=900.0,
        description="Ascender Y",
    )
    descender: float | None = Field(
        default=150.0,
        description="Descender depth",
    )


class TimingConfig(BaseModel):
    """Configuration for the stroke timing model."""

    speed_factor: float = Field(
        default=1.2,
        gt=0.0,
        description="Milliseconds of drawing time per unit of stroke length",
    )
    min_duration_ms: int = Field(
        default=280,
        ge=0,
        description="Minimum per-stroke duration",
    )
    max_duration_ms: int = Field(
        default=1600,
        ge=0,
        description="Maximum per-stroke duration",
    )
    delay_ms: int = Field(
        default=60,
        ge=0,
        description="Pause before every stroke except the first",
    )

    @model_validator(mode="after")
    def _check_duration_bounds(self) -> "TimingConfig":
        if self.min_duration_ms > self.max_duration_ms:
            raise ValueError(
                f"min_duration_ms ({self.min_duration_ms}) must not exceed "
                f"max_duration_ms ({self.max_duration_ms})"
            )
        return self


class GeometryConfig(BaseModel):
    """Configuration for path measurement and frame defaults."""

    fallback_length: float = Field(
        default=400.0,
        ge=0.0,
        description="Length used for strokes whose path data cannot be measured",
    )
    length_tolerance: float = Field(
        default=0.005,
        gt=0.0,
        le=1.0,
        description="Curve length approximation tolerance",
    )
    default_viewport_size: float = Field(
        default=1000.0,
        gt=0.0,
        description="Width/height substituted for a degenerate viewBox",
    )


class AttributionConfig(BaseModel):
    """Authorship information written to the record."""

    license: str | None = Field(
        default=None,
        description="License of the source drawing",
    )
    author: str | None = Field(
        default=None,
        description="Author of the source drawing",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str | None = Field(
        default=None,
        description="Console log level (None = no console logging)",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )

    @field_validator("log_level", "file_log_level")
    @classmethod
    def _check_level(cls, value: str | None) -> str | None:
        if value is None:
            return None
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"unknown log level {value!r}; expected one of {', '.join(LOG_LEVELS)}"
            )
        return level


class ConverterSettings(BaseModel):
    """Main application settings."""

    glyph: GlyphConfig = Field(default_factory=GlyphConfig)
    nib: NibConfig = Field(default_factory=NibConfig)
    metrics: MetricsConfig = Field(default_factory=MetricsConfig)
    timing: TimingConfig = Field(default_factory=TimingConfig)
    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    attribution: AttributionConfig = Field(default_factory=AttributionConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> ConverterSettings:
    """Get default application settings."""
    return ConverterSettings()
