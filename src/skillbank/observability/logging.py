"""Logging setup for the ``skillbank`` logger hierarchy."""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import TextIO

from skillbank.config.logging_config import LoggingConfig

_LOGGER_NAME = "skillbank"
_CONFIGURED_ATTR = "_skillbank_handler"


class StructuredFormatter(logging.Formatter):
    """Format log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def setup_logging(
    config: LoggingConfig | None = None,
    *,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Configure the ``skillbank`` logger.

    Calling this again replaces the handler it installed previously, so it is
    safe to call more than once.

    Args:
        config: Logging configuration. Uses defaults if not provided.
        stream: Stream for the handler. Defaults to ``sys.stderr``.

    Returns:
        The configured ``skillbank`` logger.
    """
    config = config or LoggingConfig()
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(config.level)
    logger.propagate = config.propagate

    for handler in list(logger.handlers):
        if getattr(handler, _CONFIGURED_ATTR, False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    if config.format == "json":
        handler.setFormatter(StructuredFormatter())
    else:
        handler.setFormatter(logging.Formatter(config.text_format))
    setattr(handler, _CONFIGURED_ATTR, True)
    logger.addHandler(handler)

    return logger
