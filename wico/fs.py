"""File-system seam for skill generation.

The catalog, asset resolution and platform generators never touch the disk
directly.  They receive a :class:`FileSystem` and call its three methods, so
the pure layout logic can be driven by an in-memory double in tests.

The helpers below translate ``OSError`` and ``UnicodeDecodeError`` into the
generation error taxonomy at the point of failure.  :func:`read_asset` reads
source documents, :func:`read_output` reads back a generated file before
extending it, and :func:`write_output` writes generated files.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

from .errors import SkillReadError, SkillWriteError

logger = logging.getLogger(__name__)


class FileSystem(Protocol):
    """Minimal read/exists/write capability used by the pipeline."""

    def exists(self, path: Path) -> bool: ...

    def read_text(self, path: Path) -> str: ...

    def write_text(self, path: Path, content: str) -> None: ...


class LocalFileSystem:
    """``FileSystem`` backed by the real disk (UTF-8 text)."""

    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def read_text(self, path: Path) -> str:
        return Path(path).read_text(encoding="utf-8")

    def write_text(self, path: Path, content: str) -> None:
        """Create parent directories, then write *content*."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")


# ---------------------------------------------------------------------------
# Error-translating helpers
# ---------------------------------------------------------------------------


def _read(fs: FileSystem, path: Path, label: str) -> str:
    try:
        return fs.read_text(path)
    except OSError as exc:
        raise SkillReadError(path, exc.strerror or str(exc), label) from exc
    except UnicodeDecodeError as exc:
        raise SkillReadError(path, str(exc), label) from exc


def read_asset(fs: FileSystem, asset_root: Path, relative_path: str) -> str:
    """Read a skill document addressed relative to *asset_root*.

    Raises:
        SkillReadError: If the document is missing, unreadable or not UTF-8.
    """
    return _read(fs, Path(asset_root) / relative_path, "skill document")


def read_output(fs: FileSystem, root: Path, relative_path: str) -> str:
    """Read a previously generated file below *root* so it can be extended.

    Raises:
        SkillReadError: If the file cannot be read back.
    """
    return _read(fs, Path(root) / relative_path, "existing file")


def write_output(fs: FileSystem, root: Path, relative_path: str, content: str) -> str:
    """Write a generated file below *root* and return its POSIX relative path.

    Raises:
        SkillWriteError: If the file or one of its parents cannot be created.
    """
    path = Path(root) / relative_path
    try:
        fs.write_text(path, content)
    except OSError as exc:
        raise SkillWriteError(path, exc.strerror or str(exc)) from exc
    logger.debug("Wrote %s (%d chars)", path, len(content))
    return Path(relative_path).as_posix()
