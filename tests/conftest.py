"""Shared test fixtures and configuration for skillbank tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def skillbank_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolate discovery from the real user and project directories.

    Points ``SKILLBANK_HOME`` at a temporary directory and changes into an
    empty working directory so workspace scans find nothing unless a test
    creates skills there.
    """
    home = tmp_path / "home"
    home.mkdir()
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.setenv("SKILLBANK_HOME", str(home))
    monkeypatch.delenv("XDG_DATA_HOME", raising=False)
    monkeypatch.chdir(workdir)
    return home


@pytest.fixture
def write_skill() -> Callable[..., Path]:
    """Factory fixture that writes ``<root>/<dirname>/SKILL.md``.

    Usage:
        def test_something(tmp_path, write_skill):
            path = write_skill(tmp_path, "my-skill", kind="evaluator", body="Body.")
    """

    def _write(
        root: Path,
        dirname: str,
        *,
        name: str | None = None,
        kind: str | None = None,
        description: str | None = "A test skill",
        body: str = "# Instructions\n\nDo the thing.",
        extra: str = "",
    ) -> Path:
        lines = ["---"]
        if name is not None:
            lines.append(f"name: {name}")
        if kind is not None:
            lines.append(f"kind: {kind}")
        if description is not None:
            lines.append(f"description: {description}")
        if extra:
            lines.append(extra.rstrip("\n"))
        lines.append("---")
        skill_dir = root / dirname
        skill_dir.mkdir(parents=True, exist_ok=True)
        skill_md = skill_dir / "SKILL.md"
        skill_md.write_text("\n".join(lines) + "\n" + body, encoding="utf-8")
        return skill_md

    return _write
