"""Conversion orchestration for the glyph pipeline.

This module coordinates one conversion run: extract stroke candidates, resolve
their order, measure them, apply the timing model, normalize the frame,
assemble the record, validate it and write it.

Key components:
- ConversionResult: Validated record plus run statistics
- GlyphConverter: Main orchestrator class
"""

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from calligraglyph.config import ConverterSettings, get_default_settings
from calligraglyph.core.assembler import assemble_glyph
from calligraglyph.core.frame import normalize_frame
from calligraglyph.core.geometry import measure_stroke_length
from calligraglyph.core.ordering import has_explicit_order, order_strokes
from calligraglyph.core.timing import time_strokes
from calligraglyph.core.validator import validate_glyph_record
from calligraglyph.domain import GlyphRecord, OrderedStroke
from calligraglyph.exceptions import SchemaValidationError
from calligraglyph.io import GlyphWriter, SvgReader
from calligraglyph.utils import ConversionLogger, ConversionStats, configure_logging


@dataclass
class ConversionResult:
    """Outcome of a successful conversion.

    Attributes:
        glyph: Assembled glyph record
        record: Validated JSON layout of the record
        stats: Run statistics and warnings
        output_path: Where the record was written (None if not written)
    """

    glyph: GlyphRecord
    record: dict[str, Any]
    stats: ConversionStats
    output_path: Path | None = None


class GlyphConverter:
    """Orchestrates SVG to glyph record conversion.

    Manages the complete workflow:
    1. Load the SVG drawing
    2. Extract stroke candidates in document order
    3. Resolve draw order and measure each stroke
    4. Apply the timing model and normalize the frame
    5. Assemble and validate the record
    6. Write JSON

    Fatal conditions raise before anything is written; recoverable ones are
    logged and reported in the returned statistics.

    Example:
        settings = ConverterSettings()
        converter = GlyphConverter(settings)
        result = converter.convert(Path("C.svg"))
        print(result.stats.stroke_count)
    """

    def __init__(self, config: ConverterSettings | None = None) -> None:
        """Initialize the converter with configuration.

        Args:
            config: Converter settings (defaults if None)
        """
        self.config = config if config is not None else get_default_settings()
        self.logger = configure_logging(
            log_file=self.config.logging.log_file,
            console_level=self.config.logging.log_level,
            file_level=self.config.logging.file_log_level,
        )

    def build(self, reader: SvgReader) -> ConversionResult:
        """Run the pipeline on a loaded drawing without writing output.

        Args:
            reader: Loaded SVG reader

        Returns:
            ConversionResult with the validated record

        Raises:
            InputError: If the drawing has no usable paths
            SchemaValidationError: If the assembled record is invalid
        """
        conversion_logger = ConversionLogger(self.logger)
        stats = conversion_logger.stats
        stats.start_time = time.time()
        conversion_logger.log_conversion_start(reader.source_name)

        candidates = reader.extract_candidates()
        conversion_logger.log_candidates_found(len(candidates))

        strokes = order_strokes(candidates)
        self._log_ordering(strokes, conversion_logger)
        self._measure(strokes, conversion_logger)

        timed = time_strokes(strokes, self.config.timing)

        default_size = self.config.geometry.default_viewport_size
        frame = normalize_frame(reader.viewbox, self.config.metrics, default_size)
        if frame.substituted:
            conversion_logger.log_viewport_fallback(
                reader.viewbox, frame.bbox.w, frame.bbox.h
            )

        glyph = assemble_glyph(
            bbox=frame.bbox,
            strokes=timed,
            glyph=self.config.glyph,
            nib=self.config.nib,
            attribution=self.config.attribution,
            source=reader.source_name,
        )
        record = glyph.to_dict()

        try:
            validate_glyph_record(record)
        except SchemaValidationError as e:
            conversion_logger.log_validation_failed(glyph.id, e.violations)
            raise

        conversion_logger.log_record_validated(glyph.id, glyph.stroke_count)
        stats.end_time = time.time()

        return ConversionResult(glyph=glyph, record=record, stats=stats)

    def convert(self, input_path: Path, output_path: Path | None = None) -> ConversionResult:
        """Convert an SVG file and write the glyph record.

        Args:
            input_path: Path to the SVG drawing
            output_path: Destination JSON path (``<input>.json`` if None)

        Returns:
            ConversionResult with ``output_path`` set

        Raises:
            InputError: If the input is missing, not an SVG, or has no paths
            SchemaValidationError: If the assembled record is invalid
            OutputError: If the record cannot be written
        """
        if output_path is None:
            output_path = GlyphWriter.get_output_path(input_path)

        with SvgReader(input_path) as reader:
            result = self.build(reader)

        GlyphWriter(output_path).write(result.record)
        result.output_path = output_path

        self.logger.info(
            "Glyph written",
            output=str(output_path),
            strokes=result.stats.stroke_count,
            warnings=len(result.stats.warnings),
            duration_seconds=round(result.stats.duration_seconds, 3),
        )
        return result

    def _log_ordering(self, strokes: list[OrderedStroke], conversion_logger: ConversionLogger) -> None:
        for stroke in strokes:
            if stroke.hint.rejected_hint is not None:
                conversion_logger.log_order_hint_rejected(stroke.stroke_id, stroke.hint.rejected_hint)
            conversion_logger.log_order_resolved(stroke.stroke_id, stroke.order, stroke.hint.source)

        if not has_explicit_order(strokes):
            conversion_logger.log_document_order_fallback(len(strokes))

    def _measure(self, strokes: list[OrderedStroke], conversion_logger: ConversionLogger) -> None:
        for stroke in strokes:
            measurement = measure_stroke_length(stroke.path_data, self.config.geometry)
            stroke.length = measurement.length
            if measurement.fallback_reason is not None:
                conversion_logger.log_length_fallback(
                    stroke.stroke_id, measurement.fallback_reason, measurement.length
                )
            else:
                conversion_logger.log_stroke_measured(stroke.stroke_id, measurement.length)
