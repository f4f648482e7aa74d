"""Logging utilities.

Exports:
- StructuredFormatter, setup_logging
"""

from skillbank.observability.logging import StructuredFormatter, setup_logging

__all__ = [
    "StructuredFormatter",
    "setup_logging",
]
