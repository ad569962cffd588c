"""End-to-end tests that convert fixture drawings and verify the written JSON."""

import json
import shutil
from pathlib import Path
from typing import Any

import pytest

from calligraglyph.config import ConverterSettings, GlyphConfig
from calligraglyph.core.processor import GlyphConverter
from calligraglyph.core.validator import find_violations
from calligraglyph.exceptions import InputError

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"


def convert_fixture(
    name: str, tmp_path: Path, settings: ConverterSettings | None = None
) -> dict[str, Any]:
    """Convert a fixture drawing and load the written record."""
    output = tmp_path / f"{Path(name).stem}.json"
    GlyphConverter(settings).convert(FIXTURES_DIR / name, output)
    return json.loads(output.read_text(encoding="utf-8"))


class TestConversionOutput:
    """Test records written for each ordering scheme."""

    def test_prefixed_ids(self, tmp_path: Path) -> None:
        """Test id and Inkscape label prefixes drive the order."""
        record = convert_fixture("prefixed_ids.svg", tmp_path)

        strokes = record["strokes"]
        assert [s["id"] for s in strokes] == ["01_stem", "02_bowl", "tail"]
        assert [s["order"] for s in strokes] == [1, 2, 3]
        assert [s["durationMs"] for s in strokes] == [280, 1200, 1600]
        assert [s["delayMs"] for s in strokes] == [0, 60, 60]
        assert record["bbox"]["w"] == 1000
        assert record["bbox"]["h"] == 1200

    def test_explicit_order(self, tmp_path: Path) -> None:
        """Test data-stroke-order drives the order and ids are generated."""
        record = convert_fixture("explicit_order.svg", tmp_path)

        strokes = record["strokes"]
        assert [s["id"] for s in strokes] == ["s1", "crossbar", "s3"]
        assert [s["path"] for s in strokes] == [
            "M 0 0 H 500",
            "m 10 10 l 30 40",
            "M 0 0 L 300 0 L 300 400 Z",
        ]
        assert [s["durationMs"] for s in strokes] == [600, 280, 1440]

    def test_document_order_fallback(self, tmp_path: Path) -> None:
        """Test document order is kept when nothing carries order metadata."""
        record = convert_fixture("unordered.svg", tmp_path)
        assert [s["id"] for s in record["strokes"]] == ["zeta", "alpha", "mid", "beta"]

    def test_mixed_order(self, tmp_path: Path) -> None:
        """Test unordered strokes follow ordered ones, tie-broken by id."""
        record = convert_fixture("mixed_order.svg", tmp_path)
        assert [s["id"] for s in record["strokes"]] == [
            "1_stem",
            "2_bowl",
            "aa-dot",
            "zz-flourish",
        ]

    def test_degenerate_viewbox_and_bad_path(self, tmp_path: Path) -> None:
        """Test recoverable input problems still produce a record."""
        record = convert_fixture("degenerate_viewbox.svg", tmp_path)

        assert record["bbox"]["w"] == 1000
        assert record["bbox"]["h"] == 1000
        assert [s["durationMs"] for s in record["strokes"]] == [280, 480]

    def test_full_record_layout(self, tmp_path: Path) -> None:
        """Test the complete record for a small drawing."""
        record = convert_fixture("prefixed_ids.svg", tmp_path)

        assert list(record) == [
            "schema",
            "id",
            "style",
            "char",
            "case",
            "bbox",
            "nib",
            "strokes",
            "attribution",
        ]
        assert record["schema"] == "calligraglyph/v1"
        assert record["id"] == "gothic/C/upper/v1"
        assert record["bbox"] == {
            "w": 1000,
            "h": 1200,
            "baseline": 800,
            "xHeight": 500,
            "ascender": 900,
            "descender": 150,
        }
        assert record["nib"] == {"width": 60, "angleDeg": 35}
        assert record["strokes"][0] == {
            "id": "01_stem",
            "order": 1,
            "path": "M 0 0 L 100 0",
            "durationMs": 280,
            "delayMs": 0,
        }
        assert record["attribution"] == {"source": "prefixed_ids.svg"}


class TestRecordInvariants:
    """Test properties every written record satisfies."""

    @pytest.mark.parametrize(
        "fixture",
        [
            "prefixed_ids.svg",
            "explicit_order.svg",
            "unordered.svg",
            "mixed_order.svg",
            "degenerate_viewbox.svg",
        ],
    )
    def test_invariants(self, fixture: str, tmp_path: Path) -> None:
        """Test dense orders, bounded durations, delays and schema validity."""
        record = convert_fixture(fixture, tmp_path)
        strokes = record["strokes"]

        assert [s["order"] for s in strokes] == list(range(1, len(strokes) + 1))
        assert all(280 <= s["durationMs"] <= 1600 for s in strokes)
        assert strokes[0]["delayMs"] == 0
        assert all(s["delayMs"] == 60 for s in strokes[1:])
        assert record["bbox"]["w"] > 0
        assert record["bbox"]["h"] > 0
        assert find_violations(record) == []

    def test_deterministic_output(self, tmp_path: Path) -> None:
        """Test converting the same drawing twice gives identical bytes."""
        source = tmp_path / "C.svg"
        shutil.copy(FIXTURES_DIR / "mixed_order.svg", source)
        first = tmp_path / "first.json"
        second = tmp_path / "second.json"

        GlyphConverter().convert(source, first)
        GlyphConverter().convert(source, second)

        assert first.read_bytes() == second.read_bytes()

    def test_identity_options(self, tmp_path: Path) -> None:
        """Test style, char, case and alternates flow into the record."""
        settings = ConverterSettings(
            glyph=GlyphConfig(
                style="italic", char="ä", case="LOWER", alternates=["italic/ä/lower/v1-b"]
            )
        )
        record = convert_fixture("unordered.svg", tmp_path, settings)

        assert record["id"] == "italic/ä/lower/v1"
        assert record["case"] == "lower"
        assert record["variants"] == {"alt": ["italic/ä/lower/v1-b"]}


class TestFatalInputs:
    """Test inputs that must not produce output."""

    @pytest.mark.parametrize(
        ("fixture", "message"),
        [
            ("no_paths.svg", "No <path> elements found"),
            ("not_svg.xml", "missing <svg> root"),
        ],
    )
    def test_no_output_written(self, fixture: str, message: str, tmp_path: Path) -> None:
        """Test the converter raises before writing anything."""
        output = tmp_path / "out.json"
        with pytest.raises(InputError, match=message):
            GlyphConverter().convert(FIXTURES_DIR / fixture, output)
        assert not output.exists()
