"""Calligraglyph - Convert stroke-per-path SVG drawings into animatable glyphs.

Calligraglyph is a CLI tool that reads a hand-authored SVG where every pen stroke
is its own <path>, recovers the intended stroke order, measures each stroke and
writes a calligraglyph/v1 JSON record with per-stroke timing.

Example:
    $ calligraglyph C.svg --style gothic --char C

This will create C.json next to the input with one animated stroke per path.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
