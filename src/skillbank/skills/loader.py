"""Skill loading from bundled content and skill directories.

Sources are loaded in precedence order (lowest first):

1. Bundled evaluators
2. Bundled task skills
3. Managed skills (``<data>/skills/managed``)
4. Workspace skills (``.agents/skills``, ``.agents/evaluators``)
5. User global skills (``<data>/skills/user``)
6. Pattern-proposed skills (``<data>/skills/proposed``)

Only metadata is read here; bodies are materialized on demand by
``SkillRegistry.load_body``.
"""

from __future__ import annotations

import logging
from pathlib import Path

from skillbank.skills.bundled import BUNDLED_EVALUATORS, BUNDLED_TASKS
from skillbank.skills.config import SkillConfig, SkillEntry, SkillKind, SkillSource
from skillbank.skills.errors import SkillError
from skillbank.skills.frontmatter import frontmatter_to_metadata, parse_skill_md

logger = logging.getLogger(__name__)

_SKILL_FILE = "SKILL.md"


def _load_bundled(
    table: tuple[tuple[str, str], ...],
    kind: SkillKind,
) -> list[SkillEntry]:
    skills: list[SkillEntry] = []

    for name, content in table:
        try:
            frontmatter, _body = parse_skill_md(content, name=name)
        except SkillError as exc:
            logger.warning("Failed to parse bundled %s '%s': %s", kind.value, name, exc)
            continue

        skills.append(
            SkillEntry(
                name=name,
                kind=kind,
                description=frontmatter.description or f"{name} {kind.value}",
                source=SkillSource.BUNDLED,
                path=None,
                metadata=frontmatter_to_metadata(frontmatter),
                approved=True,
            )
        )

    return skills


def load_bundled_evaluators() -> list[SkillEntry]:
    """Load bundled evaluator skills from the embedded documents."""
    return _load_bundled(BUNDLED_EVALUATORS, SkillKind.EVALUATOR)


def load_bundled_tasks() -> list[SkillEntry]:
    """Load bundled task skills from the embedded documents."""
    return _load_bundled(BUNDLED_TASKS, SkillKind.TASK)


def load_from_directory(path: Path, source: SkillSource) -> list[SkillEntry]:
    """Load skills from a directory whose subdirectories each hold a SKILL.md.

    Subdirectories are visited in sorted order. Files that cannot be read or
    parsed are logged and skipped without aborting the scan.

    Args:
        path: Directory to scan.
        source: Source to assign to every entry found.

    Returns:
        Skill entries with ``path`` pointing at each SKILL.md file. Empty when
        the directory does not exist.
    """
    skills: list[SkillEntry] = []

    if not path.is_dir():
        logger.debug("Skills directory does not exist, skipping: %s", path)
        return skills

    try:
        subdirs = sorted(child for child in path.iterdir() if child.is_dir())
    except PermissionError:
        logger.warning("Permission denied scanning directory: %s", path)
        return skills

    for subdir in subdirs:
        skill_path = subdir / _SKILL_FILE
        if not skill_path.is_file():
            continue

        try:
            content = skill_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Failed to read %s: %s", skill_path, exc)
            continue

        try:
            frontmatter, _body = parse_skill_md(content, name=subdir.name)
        except SkillError as exc:
            logger.warning("Failed to parse SKILL.md at %s: %s", skill_path, exc)
            continue

        skills.append(
            SkillEntry(
                name=frontmatter.name or subdir.name,
                kind=frontmatter.kind or SkillKind.TASK,
                description=frontmatter.description or "",
                source=source,
                path=skill_path,
                metadata=frontmatter_to_metadata(frontmatter),
                approved=source is not SkillSource.PROPOSED,
            )
        )

    return skills


def load_all_skills(config: SkillConfig | None = None) -> list[SkillEntry]:
    """Load all skills from all sources, in precedence order.

    Args:
        config: Discovery configuration. Uses defaults if not provided.

    Returns:
        Every discovered skill entry, bundled skills first.
    """
    config = config or SkillConfig()
    skills: list[SkillEntry] = []

    if config.include_bundled:
        skills.extend(load_bundled_evaluators())
        skills.extend(load_bundled_tasks())

    skills.extend(load_from_directory(config.managed_skills_dir, SkillSource.MANAGED))

    for workspace_dir in config.workspace_dirs:
        skills.extend(load_from_directory(workspace_dir, SkillSource.WORKSPACE))

    skills.extend(load_from_directory(config.user_skills_dir, SkillSource.USER))
    skills.extend(load_from_directory(config.proposed_skills_dir, SkillSource.PROPOSED))

    logger.debug("Loaded %d skills", len(skills))
    return skills
