"""Logging configuration."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class LoggingConfig(BaseModel):
    """Configuration for skillbank logging.

    Attributes:
        level: Log level for the ``skillbank`` logger.
        format: ``"text"`` for human-readable lines, ``"json"`` for one JSON
            object per record.
        text_format: Format string used when ``format`` is ``"text"``.
        propagate: Whether records also reach the root logger.
    """

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level",
    )
    format: Literal["text", "json"] = Field(
        default="text",
        description="Output format",
    )
    text_format: str = Field(
        default="%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="Format string for text output",
    )
    propagate: bool = Field(
        default=False,
        description="Propagate records to the root logger",
    )
