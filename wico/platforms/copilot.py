"""GitHub Copilot generator.

Output structure::

    .github/copilot-instructions.md

Copilot reads a single instructions file.  The block written is the index
document followed by every selected entry (the Playwright CLI pack collapsed
to its index).  An existing file is never replaced: the new block is
appended after a separator, so running twice leaves two copies.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from ..catalog import SkillEntry
from ..fs import FileSystem, read_asset, read_output, write_output
from .filters import collapse_references

INSTRUCTIONS_PATH = ".github/copilot-instructions.md"
INDEX_ASSET = "indexes/copilot-instructions.md"

SEPARATOR = "\n\n---\n\n"
REFERENCES_HEADING = "# Detailed Skill References\n"


def build_instructions_block(index_content: str, entries: Sequence[SkillEntry]) -> str:
    """Consolidate the index and entry contents into one document block."""
    block = index_content
    if entries:
        block += SEPARATOR + REFERENCES_HEADING
        for entry in collapse_references(entries):
            block += SEPARATOR + entry.content
    return block


def generate_copilot(
    destination_root: Path,
    entries: Sequence[SkillEntry],
    asset_root: Path,
    fs: FileSystem,
) -> list[str]:
    """Write (or append to) the consolidated instructions file."""
    block = build_instructions_block(read_asset(fs, asset_root, INDEX_ASSET), entries)

    target = Path(destination_root) / INSTRUCTIONS_PATH
    if fs.exists(target):
        existing = read_output(fs, destination_root, INSTRUCTIONS_PATH)
        block = existing + SEPARATOR + block

    return [write_output(fs, destination_root, INSTRUCTIONS_PATH, block)]
