"""Glyph record representation.

This module defines the glyph domain model: the complete, animatable
description of one handwritten character as it is written to JSON.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from calligraglyph.domain.stroke import TimedStroke

SCHEMA_TAG = "calligraglyph/v1"
ID_VERSION = "v1"
ID_SEPARATOR = "/"


class Case(str, Enum):
    """Letter case of the glyph."""

    UPPER = "upper"
    LOWER = "lower"


@dataclass
class BBox:
    """Logical coordinate frame of the glyph.

    Attributes:
        w: Frame width (always positive)
        h: Frame height (always positive)
        baseline: Baseline Y
        x_height: x-height Y
        ascender: Ascender Y
        descender: Descender depth
    """

    w: float
    h: float
    baseline: float
    x_height: float | None = None
    ascender: float | None = None
    descender: float | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with camelCase keys; unset metrics are omitted
        """
        data: dict[str, Any] = {"w": self.w, "h": self.h, "baseline": self.baseline}
        if self.x_height is not None:
            data["xHeight"] = self.x_height
        if self.ascender is not None:
            data["ascender"] = self.ascender
        if self.descender is not None:
            data["descender"] = self.descender
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BBox":
        """Deserialize from dictionary."""
        return cls(
            w=data["w"],
            h=data["h"],
            baseline=data["baseline"],
            x_height=data.get("xHeight"),
            ascender=data.get("ascender"),
            descender=data.get("descender"),
        )


@dataclass
class Nib:
    """Pen nib the glyph was designed for."""

    width: float
    angle_deg: float
    type: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        data: dict[str, Any] = {"width": self.width, "angleDeg": self.angle_deg}
        if self.type is not None:
            data["type"] = self.type
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Nib":
        """Deserialize from dictionary."""
        return cls(width=data["width"], angle_deg=data["angleDeg"], type=data.get("type"))


@dataclass
class Attribution:
    """Provenance of the source drawing."""

    source: str | None = None
    license: str | None = None
    author: str | None = None

    def is_empty(self) -> bool:
        """Check if no attribution field is set."""
        return self.source is None and self.license is None and self.author is None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary, omitting unset fields."""
        return {
            key: value
            for key, value in (
                ("source", self.source),
                ("license", self.license),
                ("author", self.author),
            )
            if value is not None
        }


@dataclass
class GlyphRecord:
    """A complete glyph record.

    Attributes:
        id: Content-addressing identifier (style/char/case/v1)
        style: Style tag
        char: Character(s) drawn by the glyph
        case: Letter case
        bbox: Coordinate frame
        strokes: Timed strokes in draw order
        nib: Pen metadata
        alternates: Identifiers of alternate variants
        attribution: Provenance of the source drawing
        schema: Schema tag
    """

    id: str
    style: str
    char: str
    case: Case
    bbox: BBox
    strokes: list[TimedStroke]
    nib: Nib | None = None
    alternates: list[str] = field(default_factory=list)
    attribution: Attribution | None = None
    schema: str = SCHEMA_TAG

    @property
    def stroke_count(self) -> int:
        """Get number of strokes."""
        return len(self.strokes)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the JSON record layout.

        Key order is fixed so that serialized output is stable across runs.

        Returns:
            Dictionary representation of the glyph record
        """
        data: dict[str, Any] = {
            "schema": self.schema,
            "id": self.id,
            "style": self.style,
            "char": self.char,
            "case": self.case.value,
            "bbox": self.bbox.to_dict(),
        }
        if self.nib is not None:
            data["nib"] = self.nib.to_dict()
        data["strokes"] = [stroke.to_dict() for stroke in self.strokes]
        if self.alternates:
            data["variants"] = {"alt": list(self.alternates)}
        if self.attribution is not None and not self.attribution.is_empty():
            data["attribution"] = self.attribution.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GlyphRecord":
        """Deserialize from the JSON record layout.

        Args:
            data: Dictionary representation of a glyph record

        Returns:
            GlyphRecord instance
        """
        nib = Nib.from_dict(data["nib"]) if "nib" in data else None
        attribution = None
        if "attribution" in data:
            attribution = Attribution(**data["attribution"])
        return cls(
            id=data["id"],
            style=data["style"],
            char=data["char"],
            case=Case(data["case"]),
            bbox=BBox.from_dict(data["bbox"]),
            strokes=[TimedStroke.from_dict(s) for s in data["strokes"]],
            nib=nib,
            alternates=list(data.get("variants", {}).get("alt", [])),
            attribution=attribution,
            schema=data.get("schema", SCHEMA_TAG),
        )
