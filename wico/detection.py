"""Detection of an existing Playwright project in the working directory."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

PLAYWRIGHT_CONFIG_NAMES = (
    "playwright.config.ts",
    "playwright.config.js",
    "playwright.config.mts",
)


@dataclass(frozen=True)
class ProjectDetection:
    has_playwright_config: bool
    is_typescript: bool
    cwd: Path


def detect_project(cwd: str | Path | None = None) -> ProjectDetection:
    """Inspect *cwd* (default: the current directory) for Playwright setup.

    A project counts as TypeScript when it has a ``tsconfig.json`` or a
    TypeScript Playwright config.
    """
    root = Path(cwd) if cwd is not None else Path.cwd()
    has_config = any((root / name).exists() for name in PLAYWRIGHT_CONFIG_NAMES)
    is_typescript = (root / "tsconfig.json").exists() or (root / "playwright.config.ts").exists()
    return ProjectDetection(
        has_playwright_config=has_config,
        is_typescript=is_typescript,
        cwd=root,
    )
