"""Multi-file skill directory layouts (Claude Code and generic agents).

Both platforms write an index document followed by one file per core and
template entry under a ``references`` directory.  The reference pack keeps
its own sub-tree, which starts with its ``SKILL.md`` index.  They differ only
in where things go, so each is a :class:`DirectoryLayout` row driven by
:func:`generate_directory`.

Claude Code::

    .claude/skills/playwright-e2e/SKILL.md
    .claude/skills/playwright-e2e/references/*.md
    .claude/skills/playwright-cli/SKILL.md
    .claude/skills/playwright-cli/references/*.md

Generic::

    .agent-skills/SKILL.md
    .agent-skills/references/*.md
    .agent-skills/references/playwright-cli/SKILL.md
    .agent-skills/references/playwright-cli/references/*.md
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from ..catalog import SkillEntry, SkillKind
from ..fs import FileSystem, read_asset, write_output


@dataclass(frozen=True)
class DirectoryLayout:
    """Destination paths (relative to the project root) for one platform."""

    index_asset: str
    index_path: str
    references_dir: str
    reference_pack_dir: str


CLAUDE_LAYOUT = DirectoryLayout(
    index_asset="indexes/claude-skill.md",
    index_path=".claude/skills/playwright-e2e/SKILL.md",
    references_dir=".claude/skills/playwright-e2e/references",
    reference_pack_dir=".claude/skills/playwright-cli",
)

GENERIC_LAYOUT = DirectoryLayout(
    index_asset="indexes/skill-index.md",
    index_path=".agent-skills/SKILL.md",
    references_dir=".agent-skills/references",
    reference_pack_dir=".agent-skills/references/playwright-cli",
)


def generate_directory(
    layout: DirectoryLayout,
    destination_root: Path,
    entries: Sequence[SkillEntry],
    asset_root: Path,
    fs: FileSystem,
) -> list[str]:
    """Write *entries* following *layout*, overwriting existing files.

    Returns:
        Relative paths written, index first, then core/template entries,
        then the reference pack in catalog order.
    """
    written: list[str] = []

    index_content = read_asset(fs, asset_root, layout.index_asset)
    written.append(write_output(fs, destination_root, layout.index_path, index_content))

    for entry in entries:
        if entry.kind in (SkillKind.CORE, SkillKind.TEMPLATE):
            path = f"{layout.references_dir}/{entry.name}"
            written.append(write_output(fs, destination_root, path, entry.content))

    for entry in entries:
        if entry.kind is SkillKind.REFERENCE:
            path = f"{layout.reference_pack_dir}/{entry.name}"
            written.append(write_output(fs, destination_root, path, entry.content))

    return written


def generate_claude(
    destination_root: Path,
    entries: Sequence[SkillEntry],
    asset_root: Path,
    fs: FileSystem,
) -> list[str]:
    """Claude Code: per-skill directories under ``.claude/skills``."""
    return generate_directory(CLAUDE_LAYOUT, destination_root, entries, asset_root, fs)


def generate_generic(
    destination_root: Path,
    entries: Sequence[SkillEntry],
    asset_root: Path,
    fs: FileSystem,
) -> list[str]:
    """Generic agents: one ``.agent-skills`` tree with the reference pack nested."""
    return generate_directory(GENERIC_LAYOUT, destination_root, entries, asset_root, fs)
