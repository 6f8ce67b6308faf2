"""Shared pytest fixtures for the wico test suite.

Provides reusable fixtures for:
- An in-memory ``FileSystem`` double and a fully populated asset root
- Project settings and the derived template context
- A generator wired to the in-memory file system
"""

from __future__ import annotations

import errno
from pathlib import Path

import pytest

from wico.catalog import PACKS
from wico.config import Config, ProjectSettings, TemplateContext
from wico.generator import SkillGenerator
from wico.template_engine import build_context


ASSET_ROOT = Path("/assets")
DESTINATION = Path("/work/app")

INDEX_ASSETS = (
    "indexes/claude-skill.md",
    "indexes/cursor-rules.mdc",
    "indexes/copilot-instructions.md",
    "indexes/skill-index.md",
)


# ---------------------------------------------------------------------------
# In-memory file system
# ---------------------------------------------------------------------------


class MemoryFileSystem:
    """Dict-backed ``FileSystem`` double.

    Directories exist implicitly as parents of stored files.  Paths listed in
    ``fail_writes`` raise ``PermissionError`` when written.
    """

    def __init__(self, files: dict[Path, str] | None = None) -> None:
        self.files: dict[Path, str] = dict(files or {})
        self.writes: list[Path] = []
        self.fail_writes: set[Path] = set()

    def exists(self, path: Path) -> bool:
        path = Path(path)
        return path in self.files or any(path in f.parents for f in self.files)

    def read_text(self, path: Path) -> str:
        try:
            return self.files[Path(path)]
        except KeyError:
            raise FileNotFoundError(errno.ENOENT, "No such file or directory", str(path)) from None

    def write_text(self, path: Path, content: str) -> None:
        path = Path(path)
        if path in self.fail_writes:
            raise PermissionError(errno.EACCES, "Permission denied", str(path))
        self.files[path] = content
        self.writes.append(path)

    def written_under(self, root: Path) -> dict[str, str]:
        """Return ``{relative posix path: content}`` for files below *root*."""
        return {
            p.relative_to(root).as_posix(): c
            for p, c in self.files.items()
            if root in p.parents
        }


def asset_text(relative_path: str) -> str:
    """Deterministic stand-in content for a non-template asset."""
    return f"# {relative_path}\n"


TEMPLATE_TEXT = (
    "# {{PROJECT_NAME}} at {{BASE_URL}}\n"
    "{{#if HAS_CUSTOM_FIXTURE}}\n"
    "import from {{FIXTURE_IMPORT_PATH}}\n"
    "{{/if}}\n"
    "{{#if NO_CUSTOM_FIXTURE}}\n"
    "import from @playwright/test\n"
    "{{/if}}\n"
    "<!-- YOUR PROJECT: {{UNSET_KEY}} -->\n"
)


def build_asset_files(root: Path = ASSET_ROOT) -> dict[Path, str]:
    """Every document the catalog and the platforms read, keyed by path."""
    files: dict[Path, str] = {}
    for pack in PACKS:
        for name in pack.names:
            rel = f"{pack.source_dir}/{name}"
            files[root / rel] = TEMPLATE_TEXT if pack.rendered else asset_text(rel)
    for rel in INDEX_ASSETS:
        files[root / rel] = asset_text(rel)
    return files


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def memory_fs() -> MemoryFileSystem:
    """In-memory file system pre-populated with the full asset set."""
    return MemoryFileSystem(build_asset_files())


@pytest.fixture
def asset_root() -> Path:
    return ASSET_ROOT


@pytest.fixture
def destination() -> Path:
    return DESTINATION


@pytest.fixture
def settings() -> ProjectSettings:
    """Project settings with a custom fixture import."""
    return ProjectSettings(
        project_name="shop-e2e",
        base_url="https://shop.test",
        fixture_import_path="../fixtures/test-fixture",
        page_objects_dir="e2e/pages",
        test_dir="e2e/specs",
    )


@pytest.fixture
def ctx(settings: ProjectSettings) -> TemplateContext:
    return build_context(settings)


@pytest.fixture
def generator(memory_fs: MemoryFileSystem, asset_root: Path, destination: Path) -> SkillGenerator:
    """A SkillGenerator reading and writing through ``memory_fs``."""
    config = Config(destination=destination, skills_dir=asset_root)
    return SkillGenerator(config, fs=memory_fs)


@pytest.fixture
def make_memory_fs():
    """Factory for additional ``MemoryFileSystem`` instances."""
    return MemoryFileSystem
