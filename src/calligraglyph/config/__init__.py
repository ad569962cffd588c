"""Configuration management for calligraglyph.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- GlyphConfig: Glyph identity (style, char, case)
- NibConfig: Pen metadata
- MetricsConfig: Baseline and other typographic metrics
- TimingConfig: Stroke duration and delay model
- GeometryConfig: Path measurement and viewport defaults
- ConverterSettings: Main application settings
"""

from calligraglyph.config.settings import (
    AttributionConfig,
    ConverterSettings,
    GeometryConfig,
    GlyphConfig,
    LoggingConfig,
    MetricsConfig,
    NibConfig,
    NibType,
    TimingConfig,
    get_default_settings,
)

__all__ = [
    "AttributionConfig",
    "ConverterSettings",
    "GeometryConfig",
    "GlyphConfig",
    "LoggingConfig",
    "MetricsConfig",
    "NibConfig",
    "NibType",
    "TimingConfig",
    "get_default_settings",
]
