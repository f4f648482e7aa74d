"""Checks whether a skill can run in the current environment."""

from __future__ import annotations

import os
import shutil
import sys

from skillbank.skills.config import SkillEntry, SkillSource

_PLATFORM_NAMES = {
    "darwin": "macos",
    "win32": "windows",
    "cygwin": "windows",
}


def current_os() -> str:
    """Return the current operating system name as used in skill metadata.

    One of ``linux``, ``macos``, ``windows``, or the raw ``sys.platform``
    value for anything else (e.g. ``freebsd14``).
    """
    if sys.platform.startswith("linux"):
        return "linux"
    return _PLATFORM_NAMES.get(sys.platform, sys.platform)


def is_eligible(skill: SkillEntry) -> bool:
    """Check if a skill can be used in the current environment.

    A skill is ineligible when its ``os`` list excludes this OS, when a
    required binary is not on ``PATH``, when a required environment variable
    is unset, or when it is a pattern-proposed skill that was never approved.
    """
    metadata = skill.metadata

    if metadata.os is not None and current_os() not in metadata.os:
        return False

    if metadata.requires_bins is not None:
        for binary in metadata.requires_bins:
            if shutil.which(binary) is None:
                return False

    if metadata.requires_env is not None:
        for var in metadata.requires_env:
            if var not in os.environ:
                return False

    if skill.source is SkillSource.PROPOSED:
        return skill.is_approved()

    return True
