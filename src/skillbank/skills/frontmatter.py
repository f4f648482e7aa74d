"""YAML frontmatter parser for SKILL.md documents.

A SKILL.md document looks like::

    ---
    name: skill-name
    kind: task | evaluator
    description: ...
    metadata:
      categories: [...]
      dimensions: [...]
    ---
    # Body content (markdown)
"""

from __future__ import annotations

from typing import Any

import yaml
from pydantic import ValidationError

from skillbank.skills.config import RawFrontmatter, SkillMetadata
from skillbank.skills.errors import SkillParseError

_DELIMITER = "---"


def _load_yaml(yaml_str: str, name: str) -> dict[str, Any]:
    try:
        data = yaml.safe_load(yaml_str)
    except yaml.YAMLError as exc:
        detail = str(exc)
        if getattr(exc, "problem_mark", None) is not None:
            mark = exc.problem_mark
            detail = f"YAML syntax error at line {mark.line + 1}, column {mark.column + 1}: {exc.problem}"
        raise SkillParseError(name, detail) from exc

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise SkillParseError(
            name, "Frontmatter must be a YAML mapping, got " + type(data).__name__
        )

    return data


def parse_skill_md(content: str, *, name: str = "<unknown>") -> tuple[RawFrontmatter, str]:
    """Split a SKILL.md document into its frontmatter and body.

    The header runs from the opening ``---`` to the first line that starts
    with ``---`` after it. The body is everything after the closing marker,
    stripped of surrounding whitespace.

    Args:
        content: Raw document text.
        name: Skill name used in error messages.

    Returns:
        Tuple of (frontmatter, body). Body is ``""`` when nothing follows
        the header.

    Raises:
        SkillParseError: If the delimiters are missing, the YAML is invalid,
            or a field has the wrong type.
    """
    if not content.startswith(_DELIMITER):
        raise SkillParseError(name, "SKILL.md must start with --- (YAML frontmatter)")

    after_first = content[len(_DELIMITER) :]
    end_idx = after_first.find("\n" + _DELIMITER)
    if end_idx == -1:
        raise SkillParseError(name, "Missing closing --- for YAML frontmatter")

    yaml_str = after_first[:end_idx]
    body_start = len(_DELIMITER) + end_idx + len(_DELIMITER) + 1
    body = content[body_start:].strip()

    data = _load_yaml(yaml_str, name)
    try:
        frontmatter = RawFrontmatter.model_validate(data)
    except ValidationError as exc:
        raise SkillParseError(name, str(exc)) from exc

    return frontmatter, body


def frontmatter_to_metadata(raw: RawFrontmatter) -> SkillMetadata:
    """Convert raw frontmatter into structured metadata.

    Missing lists become empty and a missing ``schema_version`` becomes 1.
    """
    meta = raw.metadata
    if meta is None:
        return SkillMetadata(schema_version=1)

    def _opt(values: list[str] | None) -> tuple[str, ...] | None:
        return tuple(values) if values is not None else None

    return SkillMetadata(
        categories=tuple(meta.categories or ()),
        dimensions=tuple(meta.dimensions or ()),
        os=_opt(meta.os),
        requires_bins=_opt(meta.requires_bins),
        requires_env=_opt(meta.requires_env),
        trigger=meta.trigger,
        schema_version=meta.schema_version if meta.schema_version is not None else 1,
    )
