"""Skill discovery, indexing, and lazy body loading.

A skill is a SKILL.md document: YAML frontmatter followed by a markdown body.
The ``SkillRegistry`` indexes skill metadata discovered on disk and bundled
with the package, and materializes bodies on demand.

Quick Start:
    >>> from skillbank.skills import SkillKind, SkillRegistry
    >>> registry = SkillRegistry.new()
    >>> general = registry.get_by_name("general")
    >>> body = registry.load_body(general)

Classes:
    SkillRegistry: Index of skill entries with a body cache.
    SkillEntry: Metadata about one skill (no body).
    SkillMetadata: Structured frontmatter metadata.
    SkillConfig: Discovery configuration.

Enums:
    SkillKind: Skill category (task, evaluator).
    SkillSource: Where a skill was discovered.

Exceptions:
    SkillError: Base exception for all skill-related errors.
    SkillParseError: SKILL.md frontmatter is malformed.
    SkillLoadError: A skill file could not be read.
    SkillBodyNotFoundError: No source could supply a skill body.
"""

from __future__ import annotations

from skillbank.skills.config import (
    DimensionDef,
    SkillConfig,
    SkillEntry,
    SkillKind,
    SkillMetadata,
    SkillSource,
    TriggerDef,
)
from skillbank.skills.eligibility import is_eligible
from skillbank.skills.errors import (
    SkillBodyNotFoundError,
    SkillError,
    SkillLoadError,
    SkillParseError,
)
from skillbank.skills.frontmatter import frontmatter_to_metadata, parse_skill_md
from skillbank.skills.loader import load_all_skills
from skillbank.skills.registry import SkillRegistry

__all__ = [
    "DimensionDef",
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
    "TriggerDef",
    "frontmatter_to_metadata",
    "is_eligible",
    "load_all_skills",
    "parse_skill_md",
]
