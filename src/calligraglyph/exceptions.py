"""Exception hierarchy for Calligraglyph."""

from dataclasses import dataclass


class CalligraGlyphError(Exception):
    """Base exception for all Calligraglyph errors."""

    pass


class InputError(CalligraGlyphError):
    """Input document is missing, unreadable, or has no usable strokes."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid input '{path}': {reason}")


class OutputError(CalligraGlyphError):
    """Error writing the glyph record."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write glyph '{path}': {reason}")


class GeometryError(CalligraGlyphError):
    """Errors in geometric calculations."""

    pass


class PathDataError(GeometryError):
    """Path data could not be parsed or measured."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Unusable path data: {reason}")


@dataclass(frozen=True)
class SchemaViolation:
    """A single field that failed schema validation.

    Attributes:
        path: Dotted location of the field (e.g., "strokes.0.path")
        reason: Human-readable description of the failure
    """

    path: str
    reason: str

    def __str__(self) -> str:
        return f"{self.path}: {self.reason}"


class SchemaValidationError(CalligraGlyphError):
    """Assembled glyph record does not satisfy the glyph schema."""

    def __init__(self, violations: list[SchemaViolation]) -> None:
        self.violations = violations
        count = len(violations)
        plural = "violation" if count == 1 else "violations"
        super().__init__(f"Glyph record failed validation with {count} {plural}")
