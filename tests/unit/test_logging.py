"""Unit tests for logging utilities."""

import logging
from pathlib import Path

from calligraglyph.exceptions import SchemaViolation
from calligraglyph.utils import ConversionLogger, ConversionStats, configure_logging


def marked_handlers() -> list[logging.Handler]:
    """Handlers installed by configure_logging."""
    return [
        h for h in logging.getLogger().handlers if getattr(h, "_calligraglyph_handler", False)
    ]


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_silent_by_default(self) -> None:
        """Test only a null handler is installed without file or console level."""
        configure_logging()
        handlers = marked_handlers()
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.NullHandler)

    def test_reconfigure_replaces_handlers(self) -> None:
        """Test repeated configuration does not stack handlers."""
        configure_logging(console_level="INFO")
        configure_logging(console_level="INFO")
        handlers = marked_handlers()
        assert len(handlers) == 1
        assert handlers[0].level == logging.INFO
        configure_logging()

    def test_file_logging(self, tmp_path: Path) -> None:
        """Test events are written to the log file."""
        log_file = tmp_path / "run.log"
        logger = configure_logging(log_file=log_file)
        logger.warning("Stroke length fallback", stroke="s1")
        for handler in marked_handlers():
            handler.flush()

        text = log_file.read_text(encoding="utf-8")
        assert "Stroke length fallback" in text
        assert '"stroke": "s1"' in text
        configure_logging()


class TestConversionLogger:
    """Tests for ConversionLogger class."""

    def make_logger(self) -> ConversionLogger:
        """Create a conversion logger on a silent configuration."""
        return ConversionLogger(configure_logging())

    def test_initial_stats(self) -> None:
        """Test fresh statistics."""
        stats = self.make_logger().stats
        assert stats == ConversionStats()
        assert stats.duration_seconds == 0.0
        assert not stats.used_document_order

    def test_order_counts(self) -> None:
        """Test ordered strokes are counted by source."""
        conversion_logger = self.make_logger()
        conversion_logger.log_candidates_found(3)
        conversion_logger.log_order_resolved("a", 1, "id")
        conversion_logger.log_order_resolved("b", 2, "data-stroke-order")
        conversion_logger.log_order_resolved("c", 3, None)

        assert conversion_logger.stats.stroke_count == 3
        assert conversion_logger.stats.ordered_count == 2

    def test_document_order(self) -> None:
        """Test document order is reported when nothing was ordered."""
        conversion_logger = self.make_logger()
        conversion_logger.log_candidates_found(2)
        conversion_logger.log_order_resolved("a", 1, None)
        conversion_logger.log_order_resolved("b", 2, None)
        conversion_logger.log_document_order_fallback(2)

        assert conversion_logger.stats.used_document_order
        assert conversion_logger.stats.warnings == []

    def test_warnings_collected(self) -> None:
        """Test recoverable conditions are collected as warnings."""
        conversion_logger = self.make_logger()
        conversion_logger.log_order_hint_rejected("s1", "abc")
        conversion_logger.log_length_fallback("s2", "no drawing commands", 400.0)
        conversion_logger.log_viewport_fallback("0 0 0 0", 1000, 1000)

        stats = conversion_logger.stats
        assert stats.warnings == [
            "Ignoring non-numeric stroke order 'abc' on stroke s1",
            "Could not compute length for path s2; using fallback 400",
            "Invalid viewBox '0 0 0 0'; defaulting to 1000x1000",
        ]
        assert stats.rejected_hint_count == 1
        assert stats.length_fallback_count == 1
        assert stats.viewport_substituted

    def test_validation_failure_is_not_a_warning(self) -> None:
        """Test validation failures are logged without adding warnings."""
        conversion_logger = self.make_logger()
        conversion_logger.log_validation_failed(
            "gothic/C/upper/v1", [SchemaViolation(path="id", reason="Field required")]
        )
        assert conversion_logger.stats.warnings == []
