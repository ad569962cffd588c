"""SVG reader for loading stroke drawings.

This module provides the SvgReader class for loading SVG files and
extracting stroke candidates into domain models.
"""

from collections.abc import Iterator
from pathlib import Path
from xml.etree.ElementTree import Element

import defusedxml.ElementTree as ET
from defusedxml import DefusedXmlException

from calligraglyph.domain import StrokeCandidate
from calligraglyph.exceptions import InputError
from calligraglyph.io.converter import element_to_candidate, has_path_data, local_name

DEFAULT_VIEWBOX = "0 0 1000 1000"


class SvgReader:
    """Loads SVG drawings and extracts stroke candidates.

    Paths are collected in document order by a pre-order walk that descends
    into <g> containers. Every other element is ignored.

    Example:
        reader = SvgReader(Path("C.svg"))
        reader.load()
        for candidate in reader.extract_candidates():
            print(candidate.path_data)
    """

    def __init__(self, svg_path: Path) -> None:
        """Initialize the SVG reader.

        Args:
            svg_path: Path to the SVG file
        """
        self._svg_path = svg_path
        self._root: Element | None = None

    @classmethod
    def from_string(cls, svg_text: str, source: str = "<string>") -> "SvgReader":
        """Create a loaded reader from in-memory SVG markup.

        Args:
            svg_text: SVG document text
            source: Name used in error messages and attribution

        Returns:
            Loaded SvgReader

        Raises:
            InputError: If the markup is not an SVG document
        """
        reader = cls(Path(source))
        reader._root = _parse_svg(svg_text.encode("utf-8"), source)
        return reader

    def load(self) -> None:
        """Load and parse the SVG file.

        Raises:
            InputError: If the file is missing, malformed, or not an SVG document
        """
        if not self._svg_path.is_file():
            raise InputError(str(self._svg_path), "file not found")

        try:
            data = self._svg_path.read_bytes()
        except OSError as e:
            raise InputError(str(self._svg_path), str(e)) from e

        self._root = _parse_svg(data, str(self._svg_path))

    @property
    def root(self) -> Element:
        """Return the <svg> root element.

        Raises:
            RuntimeError: If the document has not been loaded yet
        """
        if self._root is None:
            raise RuntimeError("SVG not loaded. Call load() first.")
        return self._root

    @property
    def source_name(self) -> str:
        """Return the file name of the source document."""
        return self._svg_path.name

    @property
    def viewbox(self) -> str:
        """Return the raw viewBox declaration.

        Some editors write the attribute in lowercase. A missing declaration
        is reported as the default 1000x1000 frame.
        """
        root = self.root
        return root.get("viewBox") or root.get("viewbox") or DEFAULT_VIEWBOX

    def iter_path_elements(self) -> Iterator[Element]:
        """Iterate over <path> elements in document order.

        Yields:
            Path elements reachable through nested <g> containers
        """
        yield from _walk_paths(self.root)

    def iter_candidates(self) -> Iterator[StrokeCandidate]:
        """Iterate over usable stroke candidates.

        Paths without path data are skipped silently and do not consume a
        document position.

        Yields:
            StrokeCandidate domain models
        """
        index = 0
        for element in self.iter_path_elements():
            if not has_path_data(element):
                continue
            index += 1
            yield element_to_candidate(element, index)

    def extract_candidates(self) -> list[StrokeCandidate]:
        """Collect all usable stroke candidates.

        Returns:
            Candidates in document order

        Raises:
            InputError: If the document has no usable <path> elements
        """
        candidates = list(self.iter_candidates())
        if not candidates:
            raise InputError(
                str(self._svg_path),
                "No <path> elements found. Make sure each stroke is a separate <path>.",
            )
        return candidates

    def close(self) -> None:
        """Release the parsed document."""
        self._root = None

    def __enter__(self) -> "SvgReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()


def _parse_svg(data: bytes, source: str) -> Element:
    """Parse SVG bytes and check for the <svg> root marker."""
    try:
        root = ET.fromstring(data)
    except ET.ParseError as e:
        raise InputError(source, f"not well-formed XML ({e})") from e
    except DefusedXmlException as e:
        raise InputError(source, f"unsafe XML rejected ({e})") from e

    if local_name(root.tag) != "svg":
        raise InputError(source, "Not an SVG file (missing <svg> root)")
    return root


def _walk_paths(node: Element) -> Iterator[Element]:
    for child in node:
        name = local_name(child.tag)
        if name == "path":
            yield child
        elif name == "g":
            yield from _walk_paths(child)
