"""Logging utilities for Calligraglyph."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from calligraglyph.exceptions import SchemaViolation

# Marks handlers installed here so repeated configuration replaces them
_HANDLER_MARKER = "_calligraglyph_handler"


@dataclass
class ConversionStats:
    """Statistics from a conversion run."""

    stroke_count: int = 0
    ordered_count: int = 0
    length_fallback_count: int = 0
    rejected_hint_count: int = 0
    viewport_substituted: bool = False
    warnings: list[str] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def used_document_order(self) -> bool:
        """Whether stroke order fell back to document order."""
        return self.stroke_count > 0 and self.ordered_count == 0

    @property
    def duration_seconds(self) -> float:
        """Calculate conversion duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def _install(handler: logging.Handler, root_logger: logging.Logger) -> None:
    setattr(handler, _HANDLER_MARKER, True)
    root_logger.addHandler(handler)


def configure_logging(
    log_file: Path | None = None,
    console_level: str | None = None,
    file_level: str = "DEBUG",
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging.

    Console output belongs to the CLI, so log records only reach the console
    when a console level is requested explicitly.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for console output (None disables it)
        file_level: Logging level for file output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            root_logger.removeHandler(handler)
            handler.close()

    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        _install(file_handler, root_logger)

    if console_level is not None:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        _install(console_handler, root_logger)

    if log_file is None and console_level is None:
        # Keeps the stdlib last-resort handler from echoing warnings to stderr
        _install(logging.NullHandler(), root_logger)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("calligraglyph")
    logger.debug("Logging initialized", log_file=str(log_file) if log_file else None)

    return logger


class ConversionLogger:
    """Logger for pipeline events and conversion statistics.

    Recoverable conditions are logged as warnings and also kept in
    ``stats.warnings`` so the CLI can show them.
    """

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ConversionStats()

    def _warn(self, message: str, event: str, **context: object) -> None:
        self._logger.warning(event, **context)
        self._stats.warnings.append(message)

    def log_conversion_start(self, source: str) -> None:
        """Log start of a conversion."""
        self._logger.info("Converting drawing", source=source)

    def log_candidates_found(self, count: int) -> None:
        """Log number of usable path elements."""
        self._logger.debug("Stroke candidates extracted", count=count)
        self._stats.stroke_count = count

    def log_order_resolved(self, stroke_id: str, order: int, source: str | None) -> None:
        """Log the final order of a stroke."""
        self._logger.debug("Stroke ordered", stroke=stroke_id, order=order, source=source)
        if source is not None:
            self._stats.ordered_count += 1

    def log_order_hint_rejected(self, stroke_id: str, raw_hint: str) -> None:
        """Log a non-numeric explicit order attribute."""
        self._warn(
            f"Ignoring non-numeric stroke order {raw_hint!r} on stroke {stroke_id}",
            "Order hint rejected",
            stroke=stroke_id,
            hint=raw_hint,
        )
        self._stats.rejected_hint_count += 1

    def log_document_order_fallback(self, count: int) -> None:
        """Log that no stroke carried order metadata."""
        self._logger.info("No stroke order metadata; using document order", strokes=count)

    def log_stroke_measured(self, stroke_id: str, length: float) -> None:
        """Log a measured stroke length."""
        self._logger.debug("Stroke measured", stroke=stroke_id, length=round(length, 3))

    def log_length_fallback(self, stroke_id: str, reason: str, fallback: float) -> None:
        """Log a stroke whose length could not be computed."""
        self._warn(
            f"Could not compute length for path {stroke_id}; using fallback {fallback:g}",
            "Stroke length fallback",
            stroke=stroke_id,
            reason=reason,
            fallback=fallback,
        )
        self._stats.length_fallback_count += 1

    def log_viewport_fallback(self, declaration: object, width: float, height: float) -> None:
        """Log a degenerate viewBox."""
        self._warn(
            f"Invalid viewBox {declaration!r}; defaulting to {width:g}x{height:g}",
            "Viewport fallback",
            viewbox=str(declaration),
            w=width,
            h=height,
        )
        self._stats.viewport_substituted = True

    def log_record_validated(self, glyph_id: str, stroke_count: int) -> None:
        """Log a record that passed schema validation."""
        self._logger.info("Glyph record validated", glyph=glyph_id, strokes=stroke_count)

    def log_validation_failed(self, glyph_id: str, violations: list[SchemaViolation]) -> None:
        """Log schema violations of a rejected record."""
        self._logger.error(
            "Glyph record failed validation",
            glyph=glyph_id,
            violations=[str(v) for v in violations],
        )

    @property
    def stats(self) -> ConversionStats:
        """Get current conversion statistics."""
        return self._stats
