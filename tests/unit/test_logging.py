"""Tests for logging setup."""

from __future__ import annotations

import io
import json
import logging
import sys
from collections.abc import Iterator

import pytest

from skillbank.config import LoggingConfig
from skillbank.observability import StructuredFormatter, setup_logging


@pytest.fixture(autouse=True)
def restore_skillbank_logger() -> Iterator[None]:
    """Restore the skillbank logger after each test."""
    logger = logging.getLogger("skillbank")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_text_output(self) -> None:
        """Test text format writes formatted lines to the stream."""
        stream = io.StringIO()
        config = LoggingConfig(level="DEBUG", text_format="%(levelname)s %(name)s %(message)s")

        setup_logging(config, stream=stream)
        logging.getLogger("skillbank.skills.registry").debug("hello %s", "world")

        assert stream.getvalue() == "DEBUG skillbank.skills.registry hello world\n"

    def test_json_output(self) -> None:
        """Test json format writes one JSON object per record."""
        stream = io.StringIO()

        setup_logging(LoggingConfig(format="json"), stream=stream)
        logging.getLogger("skillbank.skills.loader").warning("skipped %d", 2)

        record = json.loads(stream.getvalue())
        assert record["level"] == "WARNING"
        assert record["logger"] == "skillbank.skills.loader"
        assert record["message"] == "skipped 2"
        assert "timestamp" in record

    def test_level_filters(self) -> None:
        """Test records below the configured level are dropped."""
        stream = io.StringIO()

        setup_logging(LoggingConfig(level="WARNING"), stream=stream)
        logging.getLogger("skillbank").info("quiet")

        assert stream.getvalue() == ""

    def test_idempotent(self) -> None:
        """Test repeated setup keeps a single installed handler."""
        logger = setup_logging(stream=io.StringIO())
        setup_logging(stream=io.StringIO())

        installed = [h for h in logger.handlers if getattr(h, "_skillbank_handler", False)]
        assert len(installed) == 1

    def test_defaults(self) -> None:
        """Test the default configuration."""
        logger = setup_logging(stream=io.StringIO())

        assert logger.name == "skillbank"
        assert logger.level == logging.INFO
        assert logger.propagate is False


class TestStructuredFormatter:
    """Tests for StructuredFormatter."""

    def test_includes_exception(self) -> None:
        """Test exception info is rendered into the payload."""
        formatter = StructuredFormatter()
        try:
            raise ValueError("bad")
        except ValueError:
            record = logging.LogRecord(
                "skillbank", logging.ERROR, __file__, 1, "failed", None, sys.exc_info()
            )

        payload = json.loads(formatter.format(record))

        assert payload["message"] == "failed"
        assert "ValueError: bad" in payload["exception"]

    def test_invalid_level_rejected(self) -> None:
        """Test LoggingConfig rejects unknown levels."""
        with pytest.raises(ValueError):
            LoggingConfig(level="LOUD")  # type: ignore[arg-type]
