"""Exception hierarchy for skill generation.

Every failure the generation pipeline can surface derives from
:class:`WicoError`, so the CLI can report them uniformly and exit non-zero.
Nothing here is retried: an error terminates the current run and files that
were already written stay on disk.
"""

from __future__ import annotations

from pathlib import Path


class WicoError(Exception):
    """Base class for all generation failures."""


class AssetResolutionError(WicoError):
    """Raised when no skill asset directory exists among the candidates."""

    def __init__(self, candidates: list[Path]) -> None:
        self.candidates = list(candidates)
        listing = "\n".join(f"  {c}" for c in self.candidates)
        super().__init__(f"Could not find skills directory. Checked:\n{listing}")


class SkillReadError(WicoError):
    """Raised when a named skill document cannot be read as UTF-8 text.

    Also raised for an existing output file that must be extended; *label*
    names which kind of file failed.
    """

    def __init__(self, path: Path, reason: str = "", label: str = "skill document") -> None:
        self.path = Path(path)
        detail = f": {reason}" if reason else ""
        super().__init__(f"Cannot read {label} {self.path}{detail}")


class SkillWriteError(WicoError):
    """Raised when a generated file cannot be written to the destination."""

    def __init__(self, path: Path, reason: str = "") -> None:
        self.path = Path(path)
        detail = f": {reason}" if reason else ""
        super().__init__(f"Cannot write {self.path}{detail}")


class UnknownSelectionError(WicoError, ValueError):
    """Raised for a platform or pack identifier that is not registered."""

    def __init__(self, kind: str, identifier: str, known: list[str]) -> None:
        self.kind = kind
        self.identifier = identifier
        self.known = list(known)
        super().__init__(
            f"Unknown {kind} {identifier!r} (expected one of: {', '.join(self.known)})"
        )
