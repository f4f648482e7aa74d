#!/usr/bin/env python3
"""Skill registry example.

This example demonstrates:
- Building a registry from bundled and on-disk skills
- Filtering by kind and looking up by name
- Loading a skill body on demand

Set SKILLBANK_HOME to point discovery at a different data directory.
"""

from skillbank import LoggingConfig, SkillKind, SkillRegistry, setup_logging
from skillbank.skills import is_eligible


def main():
    setup_logging(LoggingConfig(level="INFO"))

    registry = SkillRegistry.new()

    print(f"Evaluators ({registry.count(SkillKind.EVALUATOR)}):")
    for entry in registry.get_by_kind(SkillKind.EVALUATOR):
        dims = ", ".join(d.name for d in entry.metadata.dimensions)
        print(f"  - {entry.name}: {entry.description} [{dims}]")

    print(f"\nTasks ({registry.count(SkillKind.TASK)}):")
    for entry in registry.get_by_kind(SkillKind.TASK):
        status = "eligible" if is_eligible(entry) else "not eligible"
        print(f"  - {entry.name} ({entry.source.value}, {status})")

    entry = registry.get_by_name("sql-safety")
    if entry is not None:
        body = registry.load_body(entry)
        print("\nFirst lines of sql-safety:")
        for line in body.splitlines()[:5]:
            print(f"  {line}")


if __name__ == "__main__":
    main()
