"""Location of the bundled skill documents.

The asset root holds the static documents organised by pack
(``core/``, ``playwright-cli/``, ``templates/``) plus the per-platform index
documents under ``indexes/``.  Documents are always addressed by fixed
relative paths; the directory is never listed.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import AssetResolutionError
from .fs import FileSystem

logger = logging.getLogger(__name__)

_PACKAGE_DIR = Path(__file__).resolve().parent

# Installed wheel: wico/skills.  Source checkout with a top-level skills/ dir.
DEFAULT_CANDIDATES: tuple[Path, ...] = (
    _PACKAGE_DIR / "skills",
    _PACKAGE_DIR.parent / "skills",
)


def asset_candidates(explicit: Path | None = None) -> list[Path]:
    """Return the ordered list of directories checked for skill assets."""
    candidates = list(DEFAULT_CANDIDATES)
    if explicit is not None:
        candidates.insert(0, Path(explicit))
    return candidates


def resolve_asset_root(fs: FileSystem, explicit: Path | None = None) -> Path:
    """Return the first existing candidate asset directory.

    Args:
        fs: File-system capability used for the existence checks.
        explicit: Directory configured by the user (``--skills-dir`` or
            ``WICO_SKILLS_DIR``); checked before the defaults.

    Raises:
        AssetResolutionError: If no candidate exists.  The message lists
            every directory that was checked.
    """
    candidates = asset_candidates(explicit)
    if explicit is not None and not fs.exists(candidates[0]):
        logger.warning(
            "Skills directory %s does not exist; falling back to bundled skills", explicit
        )
    for candidate in candidates:
        if fs.exists(candidate):
            logger.debug("Using skill assets from %s", candidate)
            return candidate
    raise AssetResolutionError(candidates)
