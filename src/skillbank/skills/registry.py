"""In-memory skill registry with lazy, cached body loading."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable

from skillbank.skills.bundled import find_bundled
from skillbank.skills.config import SkillConfig, SkillEntry, SkillKind
from skillbank.skills.errors import SkillBodyNotFoundError, SkillLoadError
from skillbank.skills.frontmatter import parse_skill_md
from skillbank.skills.loader import load_all_skills
from skillbank.utils import truncate_str

logger = logging.getLogger(__name__)

# Longest body preview written to debug logs, in bytes.
_LOG_PREVIEW_BYTES = 80


class SkillRegistry:
    """Central registry of loaded skills.

    Holds skill entries in discovery order and resolves each skill's body on
    first request. Bodies are resolved from, in order:

    1. the body cache;
    2. the entry's ``path``, when set (read errors propagate);
    3. the bundled fallback documents.

    Whatever step 2 or 3 produces is cached for the lifetime of the registry;
    later changes to the file on disk are not picked up.

    Queries never perform I/O. Cache writes are guarded by a lock so a
    registry may be shared between threads for lookups and body loads;
    ``add()`` is not synchronized.

    Example::

        registry = SkillRegistry.new()
        for entry in registry.get_by_kind(SkillKind.EVALUATOR):
            print(entry.name, registry.load_body(entry)[:40])
    """

    def __init__(self, skills: Iterable[SkillEntry] = ()) -> None:
        """Initialize a registry holding ``skills``.

        Args:
            skills: Initial entries, kept in the given order.
        """
        self._skills: list[SkillEntry] = list(skills)
        self._bodies: dict[str, str] = {}
        self._lock = threading.Lock()

    @classmethod
    def new(
        cls,
        config: SkillConfig | None = None,
        *,
        loader: Callable[[], Iterable[SkillEntry]] | None = None,
    ) -> SkillRegistry:
        """Create a registry by loading skills from all configured sources.

        Args:
            config: Discovery configuration for the default loader.
            loader: Replaces the default loader. Called once, with no
                arguments.

        Returns:
            A registry populated with every discovered skill.

        Raises:
            Exception: Whatever the loader raises, unchanged.
        """
        if loader is None:
            skills = load_all_skills(config)
        else:
            skills = loader()

        registry = cls(skills)
        logger.info(
            "Skill registry loaded %d skills (%d evaluators, %d tasks)",
            len(registry),
            registry.count(SkillKind.EVALUATOR),
            registry.count(SkillKind.TASK),
        )
        return registry

    @classmethod
    def empty(cls) -> SkillRegistry:
        """Create a registry with no skills and an empty cache."""
        return cls()

    def get_by_kind(self, kind: SkillKind) -> list[SkillEntry]:
        """Get all skills of a given kind, in discovery order."""
        return [skill for skill in self._skills if skill.kind == kind]

    def get_by_name(self, name: str) -> SkillEntry | None:
        """Get the first skill named ``name``, or ``None``."""
        for skill in self._skills:
            if skill.name == name:
                return skill
        return None

    def all(self) -> tuple[SkillEntry, ...]:
        """Get all skills, in discovery order."""
        return tuple(self._skills)

    def count(self, kind: SkillKind) -> int:
        """Count skills of a given kind."""
        return sum(1 for skill in self._skills if skill.kind == kind)

    def add(self, skill: SkillEntry) -> None:
        """Append a skill to the registry.

        Used for tests and dynamic additions. Name uniqueness is not checked;
        lookups return the first entry with a given name.
        """
        self._skills.append(skill)

    def load_body(self, skill: SkillEntry) -> str:
        """Load the body (markdown after the frontmatter) of a skill.

        Args:
            skill: Entry whose body to load.

        Returns:
            The body text.

        Raises:
            SkillLoadError: If ``skill.path`` is set and cannot be read or is
                not valid UTF-8.
            SkillParseError: If the document's frontmatter is malformed.
            SkillBodyNotFoundError: If no source has a body for the skill.
        """
        cached = self._bodies.get(skill.name)
        if cached is not None:
            logger.debug("Skill body cache hit: %s", skill.name)
            return cached

        if skill.path is not None:
            try:
                content = skill.path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                raise SkillLoadError(skill.name, skill.path, cause=exc) from exc
            origin = str(skill.path)
        else:
            bundled = find_bundled(skill.name)
            if bundled is None:
                raise SkillBodyNotFoundError(skill.name)
            content = bundled
            origin = "bundled"

        _frontmatter, body = parse_skill_md(content, name=skill.name)

        with self._lock:
            body = self._bodies.setdefault(skill.name, body)

        logger.debug(
            "Loaded skill body for '%s' from %s: %r",
            skill.name,
            origin,
            truncate_str(body, _LOG_PREVIEW_BYTES),
        )
        return body

    def __len__(self) -> int:
        """Return the number of registered skills."""
        return len(self._skills)

    def __repr__(self) -> str:
        """Return a string representation of the registry."""
        names = [skill.name for skill in self._skills]
        return f"SkillRegistry(skills={names})"
