"""Skill subsystem exceptions."""

from __future__ import annotations

from pathlib import Path


class SkillError(Exception):
    """Base exception for all skill-related errors.

    All custom exceptions in the skills subsystem inherit from this class,
    allowing callers to catch all skill errors with a single handler.

    Attributes:
        message: Human-readable error message.
    """

    def __init__(self, message: str) -> None:
        """Initialize the error.

        Args:
            message: Human-readable error message.
        """
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        """Return detailed representation for debugging."""
        return f"{type(self).__name__}({self.message!r})"


class SkillParseError(SkillError):
    """Raised when a SKILL.md document has a malformed frontmatter header.

    Attributes:
        name: Skill name (or ``"<unknown>"``) whose document failed to parse.
        detail: Description of the parse error.
    """

    def __init__(self, name: str, detail: str) -> None:
        """Initialize the error.

        Args:
            name: Skill name whose document failed to parse.
            detail: Description of the parse error.
        """
        self.name = name
        self.detail = detail
        super().__init__(f"Failed to parse SKILL.md for '{name}': {detail}")

    def __reduce__(self) -> tuple:
        """Support pickling by returning constructor arguments."""
        return (type(self), (self.name, self.detail))

    def __repr__(self) -> str:
        """Return detailed representation for debugging."""
        return f"{type(self).__name__}(name={self.name!r}, detail={self.detail!r})"


class SkillLoadError(SkillError):
    """Raised on permission denied or disk errors while reading a skill file.

    Attributes:
        name: Skill name that failed to load.
        path: Filesystem path that could not be read.
        cause: Original exception that caused the load failure.
    """

    def __init__(self, name: str, path: str | Path, cause: Exception | None = None) -> None:
        """Initialize the error.

        Args:
            name: Skill name that failed to load.
            path: Filesystem path that could not be read.
            cause: Original exception that caused the load failure.
        """
        self.name = name
        self.path = Path(path)
        self.cause = cause
        cause_str = f" ({cause})" if cause else ""
        super().__init__(f"Failed to load skill '{name}' from {self.path}{cause_str}")

    def __reduce__(self) -> tuple:
        """Support pickling by returning constructor arguments."""
        return (_rebuild_skill_load_error, (self.name, str(self.path), self.cause))

    def __repr__(self) -> str:
        """Return detailed representation for debugging."""
        return (
            f"{type(self).__name__}(name={self.name!r}, "
            f"path={str(self.path)!r}, cause={self.cause!r})"
        )


class SkillBodyNotFoundError(SkillError):
    """Raised when no source can supply the body of a skill.

    Neither the body cache, the skill's file path, nor the bundled fallback
    table had content for the requested name.

    Attributes:
        name: Skill name whose body could not be found.
    """

    def __init__(self, name: str) -> None:
        """Initialize the error.

        Args:
            name: Skill name whose body could not be found.
        """
        self.name = name
        super().__init__(f"Skill body not found for '{name}'")

    def __reduce__(self) -> tuple:
        """Support pickling by returning constructor arguments."""
        return (type(self), (self.name,))

    def __repr__(self) -> str:
        """Return detailed representation for debugging."""
        return f"{type(self).__name__}(name={self.name!r})"


def _rebuild_skill_load_error(
    name: str,
    path: str,
    cause: Exception | None,
) -> SkillLoadError:
    """Rebuild a SkillLoadError from pickled arguments."""
    return SkillLoadError(name, path, cause=cause)
