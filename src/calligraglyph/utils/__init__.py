"""Utility functions for calligraglyph.

This module provides utility functions including:

- Logging setup and configuration
- Conversion statistics and warning collection
"""

from calligraglyph.utils.logging import (
    ConversionLogger,
    ConversionStats,
    configure_logging,
)

__all__ = [
    "ConversionLogger",
    "ConversionStats",
    "configure_logging",
]
