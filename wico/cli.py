"""wico command line.

Walks the user through project detection, platform and pack selection,
project details for the template pack and a confirmation showing how many
files will be written, then runs the generator.

Usage::

    wico init
    wico init --platform claude --platform cursor --pack core --yes
    python -m wico init --pack templates --project-name shop-e2e
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from rich.markup import escape
from rich.prompt import Confirm, Prompt

from wico import __version__
from wico.catalog import PACK_TEMPLATES, PACKS, validate_packs
from wico.config import Config, ProjectSettings
from wico.detection import detect_project
from wico.errors import UnknownSelectionError, WicoError
from wico.generator import SkillGenerator, estimate_file_count
from wico.platforms import PLATFORMS, validate_platforms
from wico.utils import (
    configure_logging,
    console,
    print_error,
    print_info,
    print_step,
    print_success,
    print_summary_table,
    print_warning,
)


class SetupCancelled(Exception):
    """Raised when the user aborts the interactive flow."""


# ---------------------------------------------------------------------------
# Prompt helpers
# ---------------------------------------------------------------------------


def _parse_selection(answer: str, ids: list[str]) -> list[str] | None:
    """Resolve a comma-separated answer of numbers or identifiers.

    Returns ``None`` when any token is unknown or nothing was chosen.
    """
    chosen: list[str] = []
    for token in (t.strip() for t in answer.split(",")):
        if not token:
            continue
        if token.isdigit() and 1 <= int(token) <= len(ids):
            value = ids[int(token) - 1]
        elif token in ids:
            value = token
        else:
            return None
        if value not in chosen:
            chosen.append(value)
    return chosen or None


def prompt_multiselect(message: str, options: list[tuple[str, str, str]]) -> list[str]:
    """Ask for one or more of *options* (``(id, label, hint)`` triples)."""
    ids = [option_id for option_id, _, _ in options]
    for index, (option_id, label, hint) in enumerate(options, start=1):
        console.print(f"  [cyan]{index}[/cyan]. {label} [dim]({option_id}: {hint})[/dim]")

    while True:
        answer = _ask(Prompt.ask, f"{message} [dim](comma-separated)[/dim]")
        selection = _parse_selection(answer, ids)
        if selection:
            return selection
        print_warning(f"Choose at least one of: {', '.join(ids)}")


def _ask(prompt_fn, message: str, **kwargs):
    try:
        return prompt_fn(message, console=console, **kwargs)
    except (KeyboardInterrupt, EOFError):
        raise SetupCancelled() from None


def prompt_project_settings(args: argparse.Namespace) -> ProjectSettings:
    """Ask for every project field not already supplied on the command line."""
    defaults = ProjectSettings()
    questions = (
        ("project_name", "Project name"),
        ("base_url", "Base URL"),
        ("fixture_import_path", 'Fixture import path (or "none" for @playwright/test)'),
        ("page_objects_dir", "Page objects directory"),
        ("test_dir", "Test directory pattern"),
    )
    values: dict[str, str] = {}
    for field, message in questions:
        given = getattr(args, field)
        if given is not None:
            values[field] = given
        elif args.yes:
            values[field] = getattr(defaults, field)
        else:
            values[field] = _ask(Prompt.ask, message, default=getattr(defaults, field))
    return ProjectSettings(**values)


# ---------------------------------------------------------------------------
# init
# ---------------------------------------------------------------------------


def run_init(args: argparse.Namespace) -> int:
    """Run the ``init`` flow and return the process exit code."""
    config = Config.from_env()
    if args.cwd is not None:
        config.destination = Path(args.cwd)
    if args.skills_dir is not None:
        config.skills_dir = Path(args.skills_dir)

    try:
        # Step 1: Project detection
        print_step(1, "Project Detection")
        detection = detect_project(config.destination)
        if detection.has_playwright_config:
            print_success("Found playwright.config.ts")
        else:
            print_warning("No playwright.config.ts found -- will generate generic setup")
        if detection.is_typescript:
            print_success("TypeScript project detected")
        else:
            print_info("JavaScript project (TypeScript recommended)")

        # Step 2: Agent platform(s)
        print_step(2, "Agent Platform(s)")
        if args.platforms:
            platforms = validate_platforms(args.platforms)
        elif args.yes:
            print_error("--yes requires at least one --platform")
            return 1
        else:
            platforms = prompt_multiselect(
                "Which AI assistant(s) do you use?",
                [(p.platform_id, p.label, p.hint) for p in PLATFORMS],
            )
        console.print(f"  Platforms: {', '.join(platforms)}")

        # Step 3: Skill packs
        print_step(3, "Skill Packs")
        if args.packs:
            packs = validate_packs(args.packs)
        elif args.yes:
            print_error("--yes requires at least one --pack")
            return 1
        else:
            packs = prompt_multiselect(
                "Which skill packs do you want to install?",
                [(p.pack_id, p.label, p.hint) for p in PACKS],
            )
        console.print(f"  Packs: {', '.join(packs)}")

        # Step 4: Project info (only used by the template pack)
        settings = ProjectSettings()
        if PACK_TEMPLATES in packs:
            print_step(4, "Project Info (for templates)")
            settings = prompt_project_settings(args)

        # Step 5: Confirm & generate
        print_step(5, "Confirm & Generate")
        file_count = estimate_file_count(platforms, packs)
        print_summary_table(
            {
                "Destination": str(config.destination),
                "Platforms": ", ".join(platforms),
                "Packs": ", ".join(packs),
                "Project": settings.project_name,
            },
            title="Generation plan",
        )
        summary = f"Will create ~{file_count} files across {len(platforms)} platform(s)."
        if args.yes:
            console.print(summary)
        elif not _ask(Confirm.ask, f"{summary} Proceed?", default=True):
            raise SetupCancelled()
    except SetupCancelled:
        print_warning("Setup cancelled.")
        return 0
    except UnknownSelectionError as exc:
        print_error(escape(str(exc)))
        return 1

    try:
        with console.status("Generating files..."):
            result = SkillGenerator(config).generate(platforms, packs, settings)
    except WicoError as exc:
        print_error("Failed")
        print_error(escape(str(exc)))
        return 1

    print_success(f"Generated {result.file_count} files")
    for path in result.written_paths:
        console.print(f"  [green]+[/green] [dim]{path}[/dim]")
    console.print(
        "Done! Next: customize [cyan]<!-- YOUR PROJECT: ... -->[/cyan] markers",
        markup=True,
        highlight=False,
    )
    return 0


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wico",
        description="wico -- Playwright agent skills for AI coding assistants",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  wico init\n"
            "  wico init --platform claude --pack core --pack templates\n"
            "  wico init --platform copilot --pack core --yes\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("command", help="Command to run (available: init)")
    parser.add_argument(
        "--platform", dest="platforms", action="append", default=[],
        help="Target platform; repeat for several (claude, cursor, copilot, generic)",
    )
    parser.add_argument(
        "--pack", dest="packs", action="append", default=[],
        help="Skill pack; repeat for several (core, playwright-cli, templates)",
    )
    parser.add_argument("--project-name", default=None)
    parser.add_argument("--base-url", default=None)
    parser.add_argument("--fixture-import-path", default=None)
    parser.add_argument("--page-objects-dir", default=None)
    parser.add_argument("--test-dir", default=None)
    parser.add_argument(
        "--cwd", default=None,
        help="Project root to write into (default: current directory)",
    )
    parser.add_argument(
        "--skills-dir", default=None,
        help="Use skill documents from this directory instead of the bundled ones",
    )
    parser.add_argument(
        "--yes", "-y", action="store_true",
        help="Do not prompt: use defaults for anything not given and skip confirmation",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Log every file written")
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``wico`` and ``python -m wico``."""
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    console.print(f"[bold cyan]wico[/bold cyan] -- Playwright Agent Skills [dim]v{__version__}[/dim]")

    if args.command != "init":
        print_error(f"Unknown command: {args.command}")
        print_info("Available commands: init")
        sys.exit(1)

    code = run_init(args)
    if code:
        sys.exit(code)


if __name__ == "__main__":
    main()
