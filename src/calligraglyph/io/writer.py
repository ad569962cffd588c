"""Glyph writer for saving validated glyph records.

This module provides the GlyphWriter class for writing glyph records as
pretty-printed UTF-8 JSON.
"""

import json
from pathlib import Path
from typing import Any

from calligraglyph.exceptions import OutputError

JSON_INDENT = 2


def serialize_record(record: dict[str, Any]) -> str:
    """Serialize a glyph record to JSON text.

    Non-ASCII characters are written as-is so multi-script glyphs stay
    readable. NaN and infinities are rejected because they are not JSON.

    Args:
        record: Glyph record dictionary

    Returns:
        JSON text with a trailing newline
    """
    return json.dumps(record, indent=JSON_INDENT, ensure_ascii=False, allow_nan=False) + "\n"


class GlyphWriter:
    """Writes glyph records to disk.

    Example:
        writer = GlyphWriter(Path("C.json"))
        writer.write(record)
    """

    def __init__(self, output_path: Path) -> None:
        """Initialize the glyph writer.

        Args:
            output_path: Path where the record will be saved
        """
        self._output_path = output_path

    @property
    def output_path(self) -> Path:
        """Return the destination path."""
        return self._output_path

    def write(self, record: dict[str, Any]) -> None:
        """Write the record as JSON.

        Args:
            record: Validated glyph record dictionary

        Raises:
            OutputError: If the record cannot be serialized or the file written
        """
        try:
            text = serialize_record(record)
        except ValueError as e:
            raise OutputError(str(self._output_path), str(e)) from e

        try:
            self._output_path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise OutputError(str(self._output_path), str(e)) from e

    @staticmethod
    def get_output_path(input_path: Path) -> Path:
        """Generate the default output path for an input drawing.

        Converts: C.svg -> C.json
                  /path/to/gothic-a.svg -> /path/to/gothic-a.json

        Args:
            input_path: Source SVG path

        Returns:
            Path beside the input with a .json extension
        """
        return input_path.parent / f"{input_path.stem}.json"
