"""SVG and JSON I/O layer for calligraglyph.

This module handles reading stroke drawings and writing glyph records.
It provides a clean abstraction layer between the XML tree and the
domain models.

Key responsibilities:
- Load SVG files safely (defusedxml)
- Walk the document and convert <path> elements to stroke candidates
- Write validated glyph records as JSON
- Derive the default output path

Key classes:
- SvgReader: Load drawings and extract stroke candidates
- GlyphWriter: Save glyph records
"""

from calligraglyph.io.reader import SvgReader
from calligraglyph.io.writer import GlyphWriter

__all__ = [
    "GlyphWriter",
    "SvgReader",
]
