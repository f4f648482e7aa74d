"""Skill documents bundled with the package.

The SKILL.md files under ``skillbank/skills/bundled/`` are read once at
import time into immutable ``(name, raw_document)`` tables. They back the
bundled entries produced by the loader and act as the fallback source when a
skill entry has no file path.
"""

from __future__ import annotations

from importlib.resources import files

_BUNDLED_ROOT = files("skillbank.skills").joinpath("bundled")

_EVALUATOR_NAMES = (
    "general",
    "code-review",
    "prose-quality",
    "sql-safety",
    "api-design",
    "test-quality",
)

_TASK_NAMES = ("self-iterate",)


def _read_bundled(group: str, names: tuple[str, ...]) -> tuple[tuple[str, str], ...]:
    return tuple(
        (name, _BUNDLED_ROOT.joinpath(group, name, "SKILL.md").read_text(encoding="utf-8"))
        for name in names
    )


BUNDLED_EVALUATORS: tuple[tuple[str, str], ...] = _read_bundled("evaluators", _EVALUATOR_NAMES)
"""Bundled evaluator documents as ``(name, raw_document)`` pairs."""

BUNDLED_TASKS: tuple[tuple[str, str], ...] = _read_bundled("skills", _TASK_NAMES)
"""Bundled task skill documents as ``(name, raw_document)`` pairs."""

BUNDLED_SKILLS: tuple[tuple[str, str], ...] = BUNDLED_EVALUATORS + BUNDLED_TASKS
"""Every bundled document, evaluators first."""


def find_bundled(name: str) -> str | None:
    """Return the raw bundled document for ``name``, or ``None``.

    Linear scan; the table holds a handful of entries.
    """
    for bundled_name, content in BUNDLED_SKILLS:
        if bundled_name == name:
            return content
    return None
