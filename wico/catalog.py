"""Skill catalog: which documents each pack contributes.

Each pack lists its documents explicitly and in a fixed order.  The counts
are part of the contract because :func:`wico.generator.estimate_file_count`
predicts the output of a run from them without reading anything.

Quick usage::

    from wico.catalog import build_catalog

    entries = build_catalog(["core", "templates"], ctx, asset_root, fs)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .config import TemplateContext
from .errors import UnknownSelectionError
from .fs import FileSystem, read_asset
from .template_engine import render_template

logger = logging.getLogger(__name__)


class SkillKind(str, Enum):
    """How an entry is sourced and where platforms place it."""

    CORE = "core"
    TEMPLATE = "template"
    REFERENCE = "reference"


@dataclass(frozen=True)
class SkillEntry:
    """One rendered (or verbatim) skill document.

    ``name`` is the path below the pack directory, e.g.
    ``"playwright-patterns.md"`` or ``"references/tracing.md"``.
    """

    kind: SkillKind
    name: str
    content: str


@dataclass(frozen=True)
class PackDefinition:
    """Static description of a skill pack."""

    pack_id: str
    kind: SkillKind
    source_dir: str
    names: tuple[str, ...]
    label: str
    hint: str

    @property
    def rendered(self) -> bool:
        return self.kind is SkillKind.TEMPLATE


# ---------------------------------------------------------------------------
# Pack table (definition order is output order)
# ---------------------------------------------------------------------------

PACK_CORE = "core"
PACK_PLAYWRIGHT_CLI = "playwright-cli"
PACK_TEMPLATES = "templates"

# Index entry of the reference pack; the one survivor when a platform
# collapses the pack.
REFERENCE_INDEX_NAME = "SKILL.md"

PACKS: tuple[PackDefinition, ...] = (
    PackDefinition(
        pack_id=PACK_CORE,
        kind=SkillKind.CORE,
        source_dir="core",
        names=(
            "playwright-patterns.md",
            "data-strategy.md",
            "test-review.md",
        ),
        label="Core patterns",
        hint="playwright-patterns, data-strategy, test-review",
    ),
    PackDefinition(
        pack_id=PACK_PLAYWRIGHT_CLI,
        kind=SkillKind.REFERENCE,
        source_dir="playwright-cli",
        names=(
            REFERENCE_INDEX_NAME,
            "references/request-mocking.md",
            "references/running-code.md",
            "references/session-management.md",
            "references/storage-state.md",
            "references/test-generation.md",
            "references/tracing.md",
            "references/video-recording.md",
        ),
        label="Playwright CLI reference",
        hint="Browser automation skill",
    ),
    PackDefinition(
        pack_id=PACK_TEMPLATES,
        kind=SkillKind.TEMPLATE,
        source_dir="templates",
        names=(
            "page-object-conventions.md",
            "project-conventions.md",
            "test-debugging.md",
            "test-generation.md",
            "test-planning.md",
        ),
        label="Project templates",
        hint="conventions, POM, debugging, generation, planning",
    ),
)

_PACKS_BY_ID: dict[str, PackDefinition] = {p.pack_id: p for p in PACKS}


def pack_ids() -> list[str]:
    """Return every known pack identifier in catalog order."""
    return [p.pack_id for p in PACKS]


def get_pack(pack_id: str) -> PackDefinition:
    """Look up a pack definition.

    Raises:
        UnknownSelectionError: If *pack_id* is not in the catalog.
    """
    try:
        return _PACKS_BY_ID[pack_id]
    except KeyError:
        raise UnknownSelectionError("pack", pack_id, pack_ids()) from None


def pack_entry_count(pack_id: str) -> int:
    """Number of entries *pack_id* contributes to a catalog."""
    return len(get_pack(pack_id).names)


def validate_packs(packs: Iterable[str]) -> list[str]:
    """Return *packs* as a list, raising on the first unknown identifier."""
    selected = list(packs)
    for pack_id in selected:
        get_pack(pack_id)
    return selected


# ---------------------------------------------------------------------------
# Catalog construction
# ---------------------------------------------------------------------------


def build_catalog(
    packs: Iterable[str],
    ctx: TemplateContext,
    asset_root: Path,
    fs: FileSystem,
) -> list[SkillEntry]:
    """Read (and, for the template pack, render) every selected document.

    Args:
        packs: Selected pack identifiers.  Order and duplicates do not
            matter; output follows catalog definition order.
        ctx: Context used to render template-pack entries.
        asset_root: Directory containing the pack sub-directories.
        fs: File-system capability used for reading.

    Returns:
        The ordered skill entries.

    Raises:
        UnknownSelectionError: If a pack identifier is not in the catalog.
        SkillReadError: If any document cannot be read.  No partial catalog
            is returned.
    """
    selected = set(validate_packs(packs))
    entries: list[SkillEntry] = []

    for pack in PACKS:
        if pack.pack_id not in selected:
            continue
        for name in pack.names:
            raw = read_asset(fs, asset_root, f"{pack.source_dir}/{name}")
            content = render_template(raw, ctx) if pack.rendered else raw
            entries.append(SkillEntry(kind=pack.kind, name=name, content=content))
        logger.debug("Loaded %d entries from pack %s", len(pack.names), pack.pack_id)

    return entries
