"""Tests for the bundled skill tables."""

from __future__ import annotations

from skillbank.skills.bundled import (
    BUNDLED_EVALUATORS,
    BUNDLED_SKILLS,
    BUNDLED_TASKS,
    find_bundled,
)
from skillbank.skills.frontmatter import parse_skill_md


class TestBundledTables:
    """Tests for the embedded document tables."""

    def test_tables_are_tuples(self) -> None:
        """Test the tables are immutable."""
        assert isinstance(BUNDLED_SKILLS, tuple)
        assert BUNDLED_SKILLS == BUNDLED_EVALUATORS + BUNDLED_TASKS

    def test_names_unique(self) -> None:
        """Test no name appears twice."""
        names = [name for name, _ in BUNDLED_SKILLS]
        assert len(names) == len(set(names))

    def test_every_document_parses(self) -> None:
        """Test each bundled document has a matching name and a substantial body."""
        for name, content in BUNDLED_SKILLS:
            fm, body = parse_skill_md(content, name=name)
            assert fm.name == name
            assert len(body) > 100, name


class TestFindBundled:
    """Tests for find_bundled."""

    def test_found(self) -> None:
        """Test a known name returns the raw document."""
        content = find_bundled("sql-safety")

        assert content is not None
        assert content.startswith("---\nname: sql-safety")

    def test_task_found(self) -> None:
        """Test bundled task documents are searchable too."""
        assert find_bundled("self-iterate") is not None

    def test_missing(self) -> None:
        """Test an unknown name returns None."""
        assert find_bundled("does-not-exist") is None
