"""Unit tests for the SVG/JSON I/O layer.

Tests for SvgReader, GlyphWriter, and converter functions.
"""

import json
from pathlib import Path
from xml.etree.ElementTree import Element

import pytest

from calligraglyph.exceptions import InputError, OutputError
from calligraglyph.io.converter import (
    ATTR_INKSCAPE_LABEL,
    element_to_candidate,
    has_path_data,
    local_name,
    parse_tags,
)
from calligraglyph.io.reader import DEFAULT_VIEWBOX, SvgReader
from calligraglyph.io.writer import GlyphWriter, serialize_record

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"

SVG_NS = 'xmlns="http://www.w3.org/2000/svg"'


def svg(body: str, attrs: str = 'viewBox="0 0 1000 1000"') -> str:
    """Wrap markup in an <svg> root."""
    return f"<svg {SVG_NS} {attrs}>{body}</svg>"


class TestConverterFunctions:
    """Tests for element conversion helpers."""

    def test_local_name(self) -> None:
        """Test namespace stripping."""
        assert local_name("{http://www.w3.org/2000/svg}path") == "path"
        assert local_name("g") == "g"
        assert local_name(None) == ""

    def test_has_path_data(self) -> None:
        """Test blank or missing path data is not usable."""
        assert has_path_data(Element("path", {"d": "M 0 0 L 1 1"}))
        assert not has_path_data(Element("path", {"d": "  "}))
        assert not has_path_data(Element("path"))

    def test_parse_tags(self) -> None:
        """Test comma and whitespace separated tags."""
        assert parse_tags("main, bowl  flourish") == ("main", "bowl", "flourish")
        assert parse_tags("") == ()
        assert parse_tags(None) == ()

    def test_element_to_candidate(self) -> None:
        """Test attribute extraction."""
        element = Element(
            "path",
            {
                "d": "M 0 0 L 10 0",
                "id": "stem",
                "data-stroke-order": "2",
                "label": "l",
                "name": "n",
                ATTR_INKSCAPE_LABEL: "2 stem",
                "data-stroke-direction": "reverse",
                "data-stroke-tags": "main",
            },
        )
        candidate = element_to_candidate(element, 5)

        assert candidate.path_data == "M 0 0 L 10 0"
        assert candidate.document_index == 5
        assert candidate.order_hint == "2"
        assert candidate.element_id == "stem"
        assert candidate.label == "l"
        assert candidate.name == "n"
        assert candidate.inkscape_label == "2 stem"
        assert candidate.direction == "reverse"
        assert candidate.tags == ("main",)


class TestSvgReader:
    """Tests for SvgReader class."""

    def test_init(self) -> None:
        """Test SvgReader initialization."""
        path = Path("C.svg")
        reader = SvgReader(path)
        assert reader._svg_path == path
        assert reader._root is None
        assert reader.source_name == "C.svg"

    def test_load_nonexistent_file(self) -> None:
        """Test loading a nonexistent file raises InputError."""
        reader = SvgReader(Path("nonexistent.svg"))
        with pytest.raises(InputError, match="file not found"):
            reader.load()

    def test_root_before_load(self) -> None:
        """Test accessing the root before loading raises RuntimeError."""
        reader = SvgReader(Path("C.svg"))
        with pytest.raises(RuntimeError, match="SVG not loaded"):
            _ = reader.root

    def test_not_svg(self) -> None:
        """Test a document without an <svg> root is rejected."""
        reader = SvgReader(FIXTURES_DIR / "not_svg.xml")
        with pytest.raises(InputError, match="missing <svg> root"):
            reader.load()

    def test_malformed_xml(self) -> None:
        """Test malformed markup is rejected."""
        with pytest.raises(InputError, match="not well-formed"):
            SvgReader.from_string("<svg><path></svg>")

    def test_entity_expansion_rejected(self) -> None:
        """Test entity declarations are refused."""
        markup = (
            '<?xml version="1.0"?>'
            '<!DOCTYPE svg [<!ENTITY a "aaaa">]>'
            f"<svg {SVG_NS}><path d=\"M 0 0 L &a; 0\"/></svg>"
        )
        with pytest.raises(InputError, match="unsafe XML"):
            SvgReader.from_string(markup)

    def test_context_manager(self) -> None:
        """Test the reader loads on entry and releases on exit."""
        with SvgReader(FIXTURES_DIR / "unordered.svg") as reader:
            assert local_name(reader.root.tag) == "svg"
        assert reader._root is None

    def test_viewbox(self) -> None:
        """Test the raw viewBox is returned."""
        reader = SvgReader.from_string(svg("", 'viewBox="0 0 800 600"'))
        assert reader.viewbox == "0 0 800 600"

    def test_lowercase_viewbox(self) -> None:
        """Test the lowercase attribute spelling is accepted."""
        reader = SvgReader.from_string(svg("", 'viewbox="0 0 64 64"'))
        assert reader.viewbox == "0 0 64 64"

    def test_missing_viewbox(self) -> None:
        """Test a missing viewBox defaults to the 1000x1000 frame."""
        reader = SvgReader.from_string(svg("", ""))
        assert reader.viewbox == DEFAULT_VIEWBOX == "0 0 1000 1000"

    def test_document_order_walk(self) -> None:
        """Test paths are collected pre-order through nested groups."""
        reader = SvgReader(FIXTURES_DIR / "unordered.svg")
        reader.load()
        ids = [c.element_id for c in reader.extract_candidates()]
        assert ids == ["zeta", "alpha", "mid", "beta"]

    def test_only_groups_are_descended(self) -> None:
        """Test paths inside non-group containers are ignored."""
        reader = SvgReader.from_string(
            svg(
                '<defs><path id="hidden" d="M 0 0 L 1 1"/></defs>'
                '<g><path id="kept" d="M 0 0 L 2 2"/></g>'
                '<symbol><path id="symbol" d="M 0 0 L 3 3"/></symbol>'
            )
        )
        assert [c.element_id for c in reader.extract_candidates()] == ["kept"]

    def test_blank_paths_skipped(self) -> None:
        """Test paths without data do not take a document position."""
        reader = SvgReader.from_string(
            svg('<path id="a" d=""/><path d="M 0 0 L 1 1"/><path/><path d="M 0 0 L 2 2"/>')
        )
        candidates = reader.extract_candidates()
        assert [c.document_index for c in candidates] == [1, 2]
        assert [c.path_data for c in candidates] == ["M 0 0 L 1 1", "M 0 0 L 2 2"]

    def test_no_paths(self) -> None:
        """Test a drawing without usable paths is rejected."""
        reader = SvgReader(FIXTURES_DIR / "no_paths.svg")
        reader.load()
        with pytest.raises(InputError, match="No <path> elements found"):
            reader.extract_candidates()

    def test_inkscape_label(self) -> None:
        """Test namespaced Inkscape labels are read."""
        reader = SvgReader(FIXTURES_DIR / "prefixed_ids.svg")
        reader.load()
        labels = {c.element_id: c.inkscape_label for c in reader.extract_candidates()}
        assert labels["tail"] == "3-tail"
        assert labels["01_stem"] is None


class TestGlyphWriter:
    """Tests for GlyphWriter class."""

    def test_init(self) -> None:
        """Test GlyphWriter initialization."""
        writer = GlyphWriter(Path("C.json"))
        assert writer.output_path == Path("C.json")

    def test_get_output_path(self) -> None:
        """Test default output path generation."""
        assert GlyphWriter.get_output_path(Path("C.svg")) == Path("C.json")
        assert GlyphWriter.get_output_path(Path("/fonts/gothic-a.svg")) == Path(
            "/fonts/gothic-a.json"
        )

    def test_write(self, tmp_path: Path) -> None:
        """Test the record is written as indented UTF-8 JSON."""
        output = tmp_path / "glyph.json"
        record = {"char": "ß", "strokes": [{"id": "s1"}]}
        GlyphWriter(output).write(record)

        text = output.read_text(encoding="utf-8")
        assert json.loads(text) == record
        assert '"char": "ß"' in text
        assert text.endswith("\n")
        assert '\n  "strokes"' in text

    def test_write_rejects_nan(self, tmp_path: Path) -> None:
        """Test non-finite numbers are refused and nothing is written."""
        output = tmp_path / "glyph.json"
        with pytest.raises(OutputError):
            GlyphWriter(output).write({"w": float("nan")})
        assert not output.exists()

    def test_write_missing_directory(self, tmp_path: Path) -> None:
        """Test writing into a missing directory raises OutputError."""
        output = tmp_path / "missing" / "glyph.json"
        with pytest.raises(OutputError, match="Failed to write glyph"):
            GlyphWriter(output).write({"id": "x"})

    def test_serialize_key_order(self) -> None:
        """Test keys are serialized in insertion order."""
        text = serialize_record({"schema": "calligraglyph/v1", "id": "a", "bbox": {}})
        assert text.index('"schema"') < text.index('"id"') < text.index('"bbox"')
