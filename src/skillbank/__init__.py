"""
skillbank - A registry of SKILL.md instruction documents.

Quick Start:
    >>> from skillbank import SkillKind, SkillRegistry
    >>> registry = SkillRegistry.new()
    >>> for entry in registry.get_by_kind(SkillKind.EVALUATOR):
    ...     print(entry.name)

Skills come from documents bundled with the package and from SKILL.md files
in the managed, workspace, user, and proposed skill directories. Bodies are
loaded lazily and cached per registry.
"""

from skillbank.config import LoggingConfig
from skillbank.observability import setup_logging
from skillbank.skills import (
    SkillBodyNotFoundError,
    SkillConfig,
    SkillEntry,
    SkillError,
    SkillKind,
    SkillLoadError,
    SkillMetadata,
    SkillParseError,
    SkillRegistry,
    SkillSource,
)

__version__ = "0.1.0"

__all__ = [
    "LoggingConfig",
    "SkillBodyNotFoundError",
    "SkillConfig",
    "SkillEntry",
    "SkillError",
    "SkillKind",
    "SkillLoadError",
    "SkillMetadata",
    "SkillParseError",
    "SkillRegistry",
    "SkillSource",
    "__version__",
    "setup_logging",
]
