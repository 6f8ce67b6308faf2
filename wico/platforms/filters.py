"""Entry filters shared by the platforms that collapse the reference pack."""

from __future__ import annotations

from collections.abc import Iterable

from ..catalog import REFERENCE_INDEX_NAME, SkillEntry, SkillKind


def is_reference_detail(entry: SkillEntry) -> bool:
    """Return ``True`` for a granular reference entry (anything but its index)."""
    return entry.kind is SkillKind.REFERENCE and entry.name != REFERENCE_INDEX_NAME


def collapse_references(entries: Iterable[SkillEntry]) -> list[SkillEntry]:
    """Drop granular reference entries, keeping the reference pack's index."""
    return [entry for entry in entries if not is_reference_detail(entry)]
