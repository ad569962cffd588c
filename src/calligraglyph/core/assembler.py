"""Glyph record assembly.

Pure composition of the normalized frame, the glyph identity, pen metadata
and the timed strokes into a GlyphRecord.
"""

from calligraglyph.config import AttributionConfig, GlyphConfig, NibConfig
from calligraglyph.core.frame import compact_number
from calligraglyph.domain import (
    ID_SEPARATOR,
    ID_VERSION,
    Attribution,
    BBox,
    Case,
    GlyphRecord,
    Nib,
    TimedStroke,
)


def fold_case(case: str) -> Case:
    """Fold a case option to the binary case enumeration.

    Comparison ignores letter case; every value other than "lower" becomes
    upper.
    """
    return Case.LOWER if case.lower() == Case.LOWER.value else Case.UPPER


def glyph_id(style: str, char: str, case: str) -> str:
    """Build the content-addressing identifier ``style/char/case/v1``.

    The case segment is the lower-cased option as given, not the folded
    enumeration value. Identical style, char and case always produce the
    same id.
    """
    return ID_SEPARATOR.join([style, char, case.lower(), ID_VERSION])


def build_nib(config: NibConfig) -> Nib | None:
    """Build the nib section, or None when disabled."""
    if not config.enabled:
        return None
    return Nib(
        width=compact_number(config.width),
        angle_deg=compact_number(config.angle_deg),
        type=config.type.value if config.type is not None else None,
    )


def assemble_glyph(
    bbox: BBox,
    strokes: list[TimedStroke],
    glyph: GlyphConfig,
    nib: NibConfig,
    attribution: AttributionConfig,
    source: str | None = None,
) -> GlyphRecord:
    """Compose the glyph record.

    Args:
        bbox: Normalized frame
        strokes: Timed strokes in final order
        glyph: Glyph identity configuration
        nib: Pen configuration
        attribution: Authorship configuration
        source: Name of the source drawing

    Returns:
        GlyphRecord ready for validation
    """
    case = fold_case(glyph.case)
    return GlyphRecord(
        id=glyph_id(glyph.style, glyph.char, glyph.case),
        style=glyph.style,
        char=glyph.char,
        case=case,
        bbox=bbox,
        strokes=strokes,
        nib=build_nib(nib),
        alternates=list(glyph.alternates),
        attribution=Attribution(
            source=source,
            license=attribution.license,
            author=attribution.author,
        ),
    )
