"""Skill generation orchestrator.

Takes a platform and pack selection plus ``ProjectSettings`` and writes the
skill files for every selected platform, following the layout each platform
expects.

Quick usage::

    from wico.config import Config, ProjectSettings
    from wico.generator import SkillGenerator

    generator = SkillGenerator(Config(destination=Path("/work/app")))
    result = generator.generate(["claude", "cursor"], ["core"], ProjectSettings())
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from pydantic import BaseModel, Field

from .assets import resolve_asset_root
from .catalog import (
    PACK_PLAYWRIGHT_CLI,
    REFERENCE_INDEX_NAME,
    build_catalog,
    get_pack,
    validate_packs,
)
from .config import Config, ProjectSettings
from .fs import FileSystem, LocalFileSystem
from .platforms import get_platform, validate_platforms
from .template_engine import build_context

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Result model
# ---------------------------------------------------------------------------


class GenerationResult(BaseModel):
    """Outcome of a generation run.

    ``written_paths`` is in platform-selection order, then each generator's
    writing order, and is shown to the user as-is.
    """

    file_count: int = Field(default=0, ge=0)
    written_paths: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# File-count estimate
# ---------------------------------------------------------------------------


def estimate_file_count(platforms: Iterable[str], packs: Iterable[str]) -> int:
    """Predict how many files a run will write, without reading or writing.

    The single-file platform always counts 1.  Every other platform counts
    its index plus each selected pack's entries, where a platform that
    collapses the reference pack counts only that pack's index.

    Raises:
        UnknownSelectionError: For an unknown platform or pack identifier.
    """
    selected_packs = set(validate_packs(packs))
    total = 0

    for platform_id in platforms:
        platform = get_platform(platform_id)
        if platform.single_file:
            total += 1
            continue

        count = 1
        for pack_id in selected_packs:
            pack = get_pack(pack_id)
            if pack_id == PACK_PLAYWRIGHT_CLI and platform.collapses_references:
                count += pack.names.count(REFERENCE_INDEX_NAME)
            else:
                count += len(pack.names)
        total += count

    return total


# ---------------------------------------------------------------------------
# Orchestrator
# ---------------------------------------------------------------------------


class SkillGenerator:
    """Composes catalog construction and the platform generators.

    One instance can serve several runs; nothing is cached between them.
    """

    def __init__(self, config: Config | None = None, fs: FileSystem | None = None) -> None:
        self.config = config or Config()
        self.fs: FileSystem = fs or LocalFileSystem()

    def generate(
        self,
        platforms: Iterable[str],
        packs: Iterable[str],
        settings: ProjectSettings | None = None,
        destination: str | Path | None = None,
    ) -> GenerationResult:
        """Write skill files for every selected platform.

        Args:
            platforms: Platform identifiers, processed in the given order.
            packs: Pack identifiers to include.
            settings: Project details for the template pack.  Defaults are
                used when omitted.
            destination: Project root.  Defaults to ``config.destination``.

        Returns:
            A ``GenerationResult`` listing every written path.

        Raises:
            UnknownSelectionError: For an unknown platform or pack.  Raised
                before anything is read or written.
            AssetResolutionError: If the skill assets cannot be located.
            SkillReadError: If a source document cannot be read.
            SkillWriteError: If a destination file cannot be written.  Files
                written before the failure are left in place.
        """
        selected_platforms = validate_platforms(platforms)
        selected_packs = validate_packs(packs)
        root = Path(destination) if destination is not None else self.config.destination

        asset_root = resolve_asset_root(self.fs, self.config.skills_dir)
        ctx = build_context(settings or ProjectSettings())
        entries = build_catalog(selected_packs, ctx, asset_root, self.fs)
        logger.debug("Catalog holds %d entries for packs %s", len(entries), selected_packs)

        written: list[str] = []
        for platform_id in selected_platforms:
            platform = get_platform(platform_id)
            paths = platform.generate(root, entries, asset_root, self.fs)
            logger.debug("%s: wrote %d file(s)", platform.label, len(paths))
            written.extend(paths)

        return GenerationResult(file_count=len(written), written_paths=written)
