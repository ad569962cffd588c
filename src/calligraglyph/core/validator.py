"""Structural validation of glyph records.

The calligraglyph/v1 schema is declared as Pydantic models over the JSON
layout. Scalars are strict (no string-to-number coercion, no booleans as
numbers), numbers must be finite and unknown keys are rejected. Pydantic
collects every failing field, so a rejected record reports all of its
violations at once.
"""

from collections.abc import Mapping
from typing import Annotated, Any, Literal

from pydantic import (
    AllowInfNan,
    BaseModel,
    ConfigDict,
    Field,
    Strict,
    StrictBool,
    StrictInt,
    StrictStr,
    ValidationError,
    field_validator,
)

from calligraglyph.exceptions import SchemaValidationError, SchemaViolation

FiniteFloat = Annotated[float, Strict(), AllowInfNan(False)]
PositiveFloat = Annotated[FiniteFloat, Field(gt=0)]
NonNegativeFloat = Annotated[FiniteFloat, Field(ge=0)]
UnitFloat = Annotated[FiniteFloat, Field(ge=0, le=1)]
NonBlankStr = Annotated[StrictStr, Field(min_length=1, pattern=r"\S")]


class _SchemaModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class BBoxSchema(_SchemaModel):
    w: PositiveFloat
    h: PositiveFloat
    baseline: FiniteFloat
    x_height: FiniteFloat | None = Field(default=None, alias="xHeight")
    ascender: FiniteFloat | None = None
    descender: FiniteFloat | None = None


class NibSchema(_SchemaModel):
    width: FiniteFloat
    angle_deg: FiniteFloat = Field(alias="angleDeg")
    type: Literal["broad", "pointed", "chisel", "split"] | None = None


class GuideSchema(_SchemaModel):
    arrows: StrictBool | None = None
    start_marker: Literal["dot", "arrow"] | None = Field(default=None, alias="startMarker")


class StrokeSchema(_SchemaModel):
    id: StrictStr
    order: Annotated[StrictInt, Field(ge=1)]
    path: NonBlankStr
    duration_ms: NonNegativeFloat = Field(alias="durationMs")
    delay_ms: NonNegativeFloat | None = Field(default=None, alias="delayMs")
    direction: Literal["forward", "reverse"] | None = None
    pressure: list[tuple[UnitFloat, UnitFloat]] | None = None
    guide: GuideSchema | None = None
    tags: list[StrictStr] | None = None


class VariantsSchema(_SchemaModel):
    alt: list[StrictStr] | None = None


class AttributionSchema(_SchemaModel):
    source: StrictStr | None = None
    license: StrictStr | None = None
    author: StrictStr | None = None


class GlyphSchema(_SchemaModel):
    """calligraglyph/v1 glyph record."""

    schema_tag: Literal["calligraglyph/v1"] = Field(alias="schema")
    id: StrictStr
    style: StrictStr
    char: StrictStr
    case: Literal["upper", "lower"]
    bbox: BBoxSchema
    nib: NibSchema | None = None
    strokes: Annotated[list[StrokeSchema], Field(min_length=1)]
    variants: VariantsSchema | None = None
    attribution: AttributionSchema | None = None

    @field_validator("strokes")
    @classmethod
    def _orders_match_positions(cls, strokes: list[StrokeSchema]) -> list[StrokeSchema]:
        for position, stroke in enumerate(strokes, start=1):
            if stroke.order != position:
                raise ValueError(
                    f"stroke orders must be 1..{len(strokes)} in array order; "
                    f"found order {stroke.order} at position {position}"
                )
        return strokes


def _format_location(loc: tuple[int | str, ...]) -> str:
    return ".".join(str(part) for part in loc) or "<record>"


def collect_violations(error: ValidationError) -> list[SchemaViolation]:
    """Convert a Pydantic ValidationError into schema violations.

    Args:
        error: Error raised by GlyphSchema validation

    Returns:
        One SchemaViolation per failing field, in Pydantic's report order
    """
    return [
        SchemaViolation(path=_format_location(detail["loc"]), reason=detail["msg"])
        for detail in error.errors()
    ]


def find_violations(record: Mapping[str, Any]) -> list[SchemaViolation]:
    """Check a record and list every violation without raising.

    Args:
        record: Glyph record dictionary

    Returns:
        Violations; empty if the record is valid
    """
    try:
        GlyphSchema.model_validate(record)
    except ValidationError as e:
        return collect_violations(e)
    return []


def validate_glyph_record(record: Mapping[str, Any]) -> Mapping[str, Any]:
    """Validate a glyph record against the calligraglyph/v1 schema.

    Args:
        record: Fully assembled glyph record dictionary

    Returns:
        The same record, unchanged

    Raises:
        SchemaValidationError: With the complete list of violations
    """
    violations = find_violations(record)
    if violations:
        raise SchemaValidationError(violations)
    return record
