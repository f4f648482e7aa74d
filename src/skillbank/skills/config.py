"""Skill data models, enums, and configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from platformdirs import user_data_path
from pydantic import BaseModel, ConfigDict, Field, model_validator

# Environment variable that relocates every skillbank data directory.
HOME_ENV_VAR = "SKILLBANK_HOME"


class SkillKind(str, Enum):
    """Closed set of skill categories.

    Attributes:
        TASK: Instructions for carrying out a task.
        EVALUATOR: Rubric used to score the output of a task.
    """

    TASK = "task"
    EVALUATOR = "evaluator"


class SkillSource(str, Enum):
    """Where a skill entry was discovered.

    Attributes:
        BUNDLED: Shipped inside the package.
        MANAGED: Installed into the managed skills directory.
        WORKSPACE: Found under the current project's ``.agents/`` directory.
        USER: Found in the user's global skills directory.
        PROPOSED: Proposed from usage patterns; requires explicit approval.
    """

    BUNDLED = "bundled"
    MANAGED = "managed"
    WORKSPACE = "workspace"
    USER = "user"
    PROPOSED = "proposed"


class DimensionDef(BaseModel):
    """Scoring dimension declared by an evaluator skill."""

    model_config = ConfigDict(frozen=True)

    name: str
    weight: float
    description: str = ""


class TriggerDef(BaseModel):
    """Trigger definition for scheduled or event-based skills.

    The YAML key is ``type``; it is exposed as ``trigger_type``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    trigger_type: str = Field(alias="type")
    schedule: Any = None


class RawMetadata(BaseModel):
    """The ``metadata`` block of a SKILL.md frontmatter, as written."""

    model_config = ConfigDict(extra="ignore")

    categories: list[str] | None = None
    dimensions: list[DimensionDef] | None = None
    os: list[str] | None = None
    requires_bins: list[str] | None = None
    requires_env: list[str] | None = None
    trigger: TriggerDef | None = None
    schema_version: int | None = None


class RawFrontmatter(BaseModel):
    """Frontmatter parsed from a SKILL.md file. Unknown keys are ignored."""

    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    kind: SkillKind | None = None
    description: str | None = None
    metadata: RawMetadata | None = None


@dataclass(frozen=True)
class SkillMetadata:
    """Structured metadata derived from a skill's frontmatter.

    Attributes:
        categories: Free-form category tags.
        dimensions: Scoring dimensions (evaluators only).
        os: Operating systems the skill runs on; ``None`` means any.
        requires_bins: Executables that must be on ``PATH``.
        requires_env: Environment variables that must be set.
        trigger: Optional schedule or event trigger.
        schema_version: Frontmatter schema version.
    """

    categories: tuple[str, ...] = ()
    dimensions: tuple[DimensionDef, ...] = ()
    os: tuple[str, ...] | None = None
    requires_bins: tuple[str, ...] | None = None
    requires_env: tuple[str, ...] | None = None
    trigger: TriggerDef | None = None
    schema_version: int = 0


@dataclass(frozen=True)
class SkillEntry:
    """A skill known to the registry, without its body.

    Entries are immutable so they can be handed out by the registry without
    giving callers a way to change its index.

    Attributes:
        name: Unique identifier; lookup and cache key.
        kind: Category used for filtered queries.
        description: Human-readable summary.
        source: Where the entry was discovered.
        path: SKILL.md file holding the full text, or ``None`` for skills
            that only exist as bundled content.
        metadata: Structured frontmatter metadata.
        embedding: Optional vector used for similarity search.
        approved: Whether a proposed skill was explicitly approved.
    """

    name: str
    kind: SkillKind = SkillKind.TASK
    description: str = ""
    source: SkillSource = SkillSource.BUNDLED
    path: Path | None = None
    metadata: SkillMetadata = field(default_factory=SkillMetadata)
    embedding: tuple[float, ...] | None = None
    approved: bool = True

    def is_approved(self) -> bool:
        """Return whether the skill may be used without further approval."""
        return self.approved or self.source is not SkillSource.PROPOSED


def _default_home() -> Path | None:
    value = os.environ.get(HOME_ENV_VAR)
    return Path(value) if value else None


def _default_data_home() -> Path:
    return user_data_path("skillbank", appauthor=False)


class SkillConfig(BaseModel):
    """Configuration for skill discovery.

    When ``home`` is set (from ``SKILLBANK_HOME`` by default) every data
    directory lives under it; otherwise data goes to the per-user data
    directory for the platform (e.g. ``~/.local/share/skillbank`` on Linux).

    Attributes:
        home: Root override for all skill data directories.
        workspace_dirs: Project-relative directories scanned for skills.
        include_bundled: Whether bundled skills are part of discovery.
    """

    home: Path | None = Field(
        default_factory=_default_home,
        description="Root override for all skill data directories",
    )
    workspace_dirs: list[Path] = Field(
        default_factory=lambda: [Path(".agents/skills"), Path(".agents/evaluators")],
        description="Project-relative directories scanned for skills",
    )
    include_bundled: bool = Field(
        default=True,
        description="Include skills bundled with the package",
    )

    @model_validator(mode="after")
    def _expand_home(self) -> SkillConfig:
        """Expand ``~`` in home to the home directory."""
        if self.home is not None:
            self.home = self.home.expanduser()
        return self

    @property
    def data_dir(self) -> Path:
        """Directory holding skillbank data."""
        if self.home is not None:
            return self.home / "data"
        return _default_data_home()

    @property
    def skills_dir(self) -> Path:
        return self.data_dir / "skills"

    @property
    def managed_skills_dir(self) -> Path:
        return self.skills_dir / "managed"

    @property
    def user_skills_dir(self) -> Path:
        return self.skills_dir / "user"

    @property
    def proposed_skills_dir(self) -> Path:
        return self.skills_dir / "proposed"
