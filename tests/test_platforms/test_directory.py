"""Tests for the multi-file directory layouts (Claude Code and generic).

Covers:
- Exact path lists and order for a full selection
- Index-only output when no packs are selected
- Reference pack placement (sibling vs nested)
- Overwrite semantics
"""

from __future__ import annotations

from pathlib import Path

import pytest

from wico.catalog import build_catalog, pack_ids
from wico.errors import SkillReadError, SkillWriteError
from wico.platforms.directory import (
    CLAUDE_LAYOUT,
    GENERIC_LAYOUT,
    generate_claude,
    generate_directory,
    generate_generic,
)


pytestmark = pytest.mark.unit

CORE_AND_TEMPLATE_NAMES = [
    "playwright-patterns.md",
    "data-strategy.md",
    "test-review.md",
    "page-object-conventions.md",
    "project-conventions.md",
    "test-debugging.md",
    "test-generation.md",
    "test-planning.md",
]

REFERENCE_NAMES = [
    "SKILL.md",
    "references/request-mocking.md",
    "references/running-code.md",
    "references/session-management.md",
    "references/storage-state.md",
    "references/test-generation.md",
    "references/tracing.md",
    "references/video-recording.md",
]


@pytest.fixture
def all_entries(memory_fs, asset_root: Path, ctx):
    return build_catalog(pack_ids(), ctx, asset_root, memory_fs)


# ---------------------------------------------------------------------------
# Claude Code
# ---------------------------------------------------------------------------


class TestClaude:
    def test_full_selection_paths(self, memory_fs, asset_root, destination, all_entries):
        written = generate_claude(destination, all_entries, asset_root, memory_fs)
        expected = (
            [".claude/skills/playwright-e2e/SKILL.md"]
            + [f".claude/skills/playwright-e2e/references/{n}" for n in CORE_AND_TEMPLATE_NAMES]
            + [f".claude/skills/playwright-cli/{n}" for n in REFERENCE_NAMES]
        )
        assert written == expected
        assert len(written) == 17

    def test_files_written_to_destination(self, memory_fs, asset_root, destination, all_entries):
        written = generate_claude(destination, all_entries, asset_root, memory_fs)
        on_disk = memory_fs.written_under(destination)
        assert sorted(on_disk) == sorted(written)
        assert on_disk[".claude/skills/playwright-e2e/SKILL.md"] == "# indexes/claude-skill.md\n"
        assert (
            on_disk[".claude/skills/playwright-cli/references/tracing.md"]
            == "# playwright-cli/references/tracing.md\n"
        )

    def test_index_only_without_packs(self, memory_fs, asset_root, destination):
        written = generate_claude(destination, [], asset_root, memory_fs)
        assert written == [".claude/skills/playwright-e2e/SKILL.md"]

    def test_no_reference_dir_without_reference_pack(
        self, memory_fs, asset_root, destination, ctx
    ):
        entries = build_catalog(["core"], ctx, asset_root, memory_fs)
        written = generate_claude(destination, entries, asset_root, memory_fs)
        assert not any("playwright-cli" in p for p in written)
        assert len(written) == 4

    def test_overwrites_existing_files(self, memory_fs, asset_root, destination, all_entries):
        target = destination / ".claude/skills/playwright-e2e/SKILL.md"
        memory_fs.files[target] = "stale"
        generate_claude(destination, all_entries, asset_root, memory_fs)
        assert memory_fs.files[target] == "# indexes/claude-skill.md\n"

    def test_rerun_is_stable(self, memory_fs, asset_root, destination, all_entries):
        first = generate_claude(destination, all_entries, asset_root, memory_fs)
        snapshot = memory_fs.written_under(destination)
        second = generate_claude(destination, all_entries, asset_root, memory_fs)
        assert first == second
        assert memory_fs.written_under(destination) == snapshot


# ---------------------------------------------------------------------------
# Generic
# ---------------------------------------------------------------------------


class TestGeneric:
    def test_full_selection_paths(self, memory_fs, asset_root, destination, all_entries):
        written = generate_generic(destination, all_entries, asset_root, memory_fs)
        expected = (
            [".agent-skills/SKILL.md"]
            + [f".agent-skills/references/{n}" for n in CORE_AND_TEMPLATE_NAMES]
            + [f".agent-skills/references/playwright-cli/{n}" for n in REFERENCE_NAMES]
        )
        assert written == expected

    def test_reference_pack_nested_under_references(
        self, memory_fs, asset_root, destination, ctx
    ):
        entries = build_catalog(["playwright-cli"], ctx, asset_root, memory_fs)
        written = generate_generic(destination, entries, asset_root, memory_fs)
        assert written[1] == ".agent-skills/references/playwright-cli/SKILL.md"
        assert written[-1] == ".agent-skills/references/playwright-cli/references/video-recording.md"

    def test_index_content(self, memory_fs, asset_root, destination):
        generate_generic(destination, [], asset_root, memory_fs)
        assert memory_fs.files[destination / ".agent-skills/SKILL.md"] == "# indexes/skill-index.md\n"


# ---------------------------------------------------------------------------
# Shared behaviour
# ---------------------------------------------------------------------------


class TestGenerateDirectory:
    def test_layouts_differ_only_in_paths(self):
        assert CLAUDE_LAYOUT.index_path != GENERIC_LAYOUT.index_path
        assert GENERIC_LAYOUT.reference_pack_dir.startswith(GENERIC_LAYOUT.references_dir)
        assert not CLAUDE_LAYOUT.reference_pack_dir.startswith(CLAUDE_LAYOUT.references_dir)

    def test_missing_index_raises_read_error(self, memory_fs, asset_root, destination):
        del memory_fs.files[asset_root / CLAUDE_LAYOUT.index_asset]
        with pytest.raises(SkillReadError):
            generate_directory(CLAUDE_LAYOUT, destination, [], asset_root, memory_fs)
        assert memory_fs.writes == []

    def test_write_failure_keeps_earlier_files(
        self, memory_fs, asset_root, destination, all_entries
    ):
        blocked = destination / ".claude/skills/playwright-e2e/references/test-review.md"
        memory_fs.fail_writes.add(blocked)
        with pytest.raises(SkillWriteError) as exc_info:
            generate_claude(destination, all_entries, asset_root, memory_fs)
        assert exc_info.value.path == blocked
        # Index and the first two references were written before the failure.
        assert len(memory_fs.writes) == 3
        assert destination / ".claude/skills/playwright-e2e/SKILL.md" in memory_fs.files
