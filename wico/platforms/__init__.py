"""Platform generators: lay out the skill catalog for one AI assistant.

Every generator has the same signature::

    generate(destination_root, entries, asset_root, fs) -> list[str]

and returns the paths it wrote, relative to *destination_root*, in writing
order.  Generators keep no state between calls.  They are selected by
identifier through :data:`PLATFORMS`; nothing subclasses anything.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from ..catalog import SkillEntry
from ..errors import UnknownSelectionError
from ..fs import FileSystem
from .copilot import generate_copilot
from .cursor import generate_cursor
from .directory import generate_claude, generate_generic

PlatformGenerator = Callable[[Path, Sequence[SkillEntry], Path, FileSystem], list[str]]


@dataclass(frozen=True)
class Platform:
    """Registry row for one target platform.

    Attributes:
        platform_id: Identifier used on the command line.
        label: Human-readable name shown in prompts.
        hint: Where the files end up, shown next to the label.
        generate: The layout behaviour.
        single_file: Whether the platform always writes exactly one file.
        collapses_references: Whether the reference pack is reduced to its
            index entry.
    """

    platform_id: str
    label: str
    hint: str
    generate: PlatformGenerator
    single_file: bool = False
    collapses_references: bool = False


PLATFORMS: tuple[Platform, ...] = (
    Platform("claude", "Claude Code", ".claude/skills/", generate_claude),
    Platform(
        "cursor", "Cursor", ".cursor/rules/", generate_cursor,
        collapses_references=True,
    ),
    Platform(
        "copilot", "GitHub Copilot", ".github/copilot-instructions.md", generate_copilot,
        single_file=True, collapses_references=True,
    ),
    Platform("generic", "Generic", ".agent-skills/", generate_generic),
)

_PLATFORMS_BY_ID: dict[str, Platform] = {p.platform_id: p for p in PLATFORMS}


def platform_ids() -> list[str]:
    """Return every registered platform identifier in registry order."""
    return [p.platform_id for p in PLATFORMS]


def get_platform(platform_id: str) -> Platform:
    """Look up a platform by identifier.

    Raises:
        UnknownSelectionError: If *platform_id* is not registered.
    """
    try:
        return _PLATFORMS_BY_ID[platform_id]
    except KeyError:
        raise UnknownSelectionError("platform", platform_id, platform_ids()) from None


def get_generator(platform_id: str) -> PlatformGenerator:
    """Return the layout behaviour registered for *platform_id*."""
    return get_platform(platform_id).generate


def validate_platforms(platforms: Iterable[str]) -> list[str]:
    """Return *platforms* as a list, raising on the first unknown identifier."""
    selected = list(platforms)
    for platform_id in selected:
        get_platform(platform_id)
    return selected


__all__ = [
    "PLATFORMS",
    "Platform",
    "PlatformGenerator",
    "generate_claude",
    "generate_copilot",
    "generate_cursor",
    "generate_generic",
    "get_generator",
    "get_platform",
    "platform_ids",
    "validate_platforms",
]
