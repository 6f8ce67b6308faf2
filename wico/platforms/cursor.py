"""Cursor rule-file generator.

Output structure::

    .cursor/rules/playwright-e2e.mdc
    .cursor/rules/playwright-patterns.mdc
    .cursor/rules/data-strategy.mdc
    .cursor/rules/test-review.mdc
    .cursor/rules/page-object-conventions.mdc
    .cursor/rules/project-conventions.mdc
    .cursor/rules/test-debugging.mdc
    .cursor/rules/test-generation.mdc
    .cursor/rules/test-planning.mdc
    .cursor/rules/playwright-cli.mdc

Every rule except the index is wrapped in frontmatter carrying a description
and the globs it applies to.  The granular Playwright CLI references are
dropped; only that pack's index survives, as ``playwright-cli.mdc``.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from types import MappingProxyType
from typing import NamedTuple

from ..catalog import PACK_PLAYWRIGHT_CLI, SkillEntry, SkillKind
from ..fs import FileSystem, read_asset, write_output
from ..rendering import CURSOR_RULE, EnvelopeRenderer
from .filters import collapse_references

RULES_DIR = ".cursor/rules"
INDEX_ASSET = "indexes/cursor-rules.mdc"
INDEX_RULE = "playwright-e2e"


class RuleMeta(NamedTuple):
    description: str
    globs: str


DEFAULT_GLOBS = "**/*.spec.ts"

RULE_META: MappingProxyType[str, RuleMeta] = MappingProxyType({
    "playwright-patterns": RuleMeta(
        "Playwright API patterns: waitForResponse, toPass, expect.poll, network-first safeguards",
        "**/*.spec.ts,**/*.page.ts",
    ),
    "data-strategy": RuleMeta(
        "Test data strategy: static vs dynamic factories",
        "**/test-data/**,**/*.spec.ts",
    ),
    "test-review": RuleMeta(
        "Test review checklist: assertions, selectors, timing, isolation, POM, readability, reliability",
        "**/*.spec.ts",
    ),
    "page-object-conventions": RuleMeta(
        "Page Object Model conventions: class structure, selectors, component composition",
        "**/*.page.ts,**/components/**",
    ),
    "project-conventions": RuleMeta(
        "Project conventions: MUST/SHOULD/WON'T rules, file organization, CI/CD",
        "**/*.spec.ts,**/*.page.ts,**/fixtures/**",
    ),
    "test-debugging": RuleMeta(
        "Test debugging: failure patterns, root cause classification, decision tree",
        "**/*.spec.ts",
    ),
    "test-generation": RuleMeta(
        "Test generation: templates, import rules, fixture docs, page factory",
        "**/*.spec.ts,**/*.page.ts",
    ),
    "test-planning": RuleMeta(
        "Test planning: exploration workflow, plan template, checklist",
        "**/*.spec.ts",
    ),
    "playwright-cli": RuleMeta(
        "Playwright CLI: browser automation commands for testing and exploration",
        "**/*.spec.ts",
    ),
})


def rule_meta(basename: str) -> RuleMeta:
    """Look up rule metadata, falling back to a generic description."""
    return RULE_META.get(basename) or RuleMeta(f"Playwright skill: {basename}", DEFAULT_GLOBS)


def rule_basename(entry: SkillEntry) -> str:
    """Normalised rule name: the reference index becomes ``playwright-cli``."""
    if entry.kind is SkillKind.REFERENCE:
        return PACK_PLAYWRIGHT_CLI
    return entry.name.removesuffix(".md")


def generate_cursor(
    destination_root: Path,
    entries: Sequence[SkillEntry],
    asset_root: Path,
    fs: FileSystem,
) -> list[str]:
    """Write the index rule plus one ``.mdc`` rule per surviving entry."""
    renderer = EnvelopeRenderer()
    written: list[str] = []

    index_content = read_asset(fs, asset_root, INDEX_ASSET)
    written.append(
        write_output(fs, destination_root, f"{RULES_DIR}/{INDEX_RULE}.mdc", index_content)
    )

    for entry in collapse_references(entries):
        basename = rule_basename(entry)
        meta = rule_meta(basename)
        content = renderer.render(
            CURSOR_RULE,
            {"description": meta.description, "globs": meta.globs, "content": entry.content},
        )
        written.append(
            write_output(fs, destination_root, f"{RULES_DIR}/{basename}.mdc", content)
        )

    return written
