"""Placeholder and conditional rendering for the template skill pack.

Processes skill documents with two mechanisms, in this order:
  1. Conditional blocks:  ``{{#if KEY}} ... {{/if}}``
  2. Placeholder substitution:  ``{{KEY}}``

Conditionals are resolved first because a kept block body may itself contain
placeholders.  A placeholder whose key is unknown is left verbatim so that a
partially templated document stays readable for manual completion, the same
way the ``<!-- YOUR PROJECT: ... -->`` markers are left for humans to edit.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

from .config import ProjectSettings, TemplateContext

# ── Patterns ────────────────────────────────────────────────────────

_CONDITIONAL_RE = re.compile(r"\{\{#if\s+(\w+)\}\}(.*?)\{\{/if\}\}", re.DOTALL)
_PLACEHOLDER_RE = re.compile(r"\{\{(\w+)\}\}")
_BLANK_RUN_RE = re.compile(r"\n{3,}")


# ── Rendering ───────────────────────────────────────────────────────


def render_template(
    template: str,
    ctx: TemplateContext | Mapping[str, str | bool],
) -> str:
    """Render *template* against a flat context.

    Args:
        template: Raw document text.
        ctx: A ``TemplateContext`` or any ``{KEY: value}`` mapping.

    Returns:
        The rendered text.  Each stage is a single pass, so markers produced
        by a substituted value are never re-interpreted.
    """
    values: Mapping[str, str | bool] = (
        ctx.as_dict() if isinstance(ctx, TemplateContext) else ctx
    )

    def _conditional(match: re.Match[str]) -> str:
        return match.group(2) if values.get(match.group(1)) else ""

    def _placeholder(match: re.Match[str]) -> str:
        value = values.get(match.group(1))
        # Missing keys and flags stay as written.
        if value is None or isinstance(value, bool):
            return match.group(0)
        return str(value)

    result = _CONDITIONAL_RE.sub(_conditional, template)
    result = _PLACEHOLDER_RE.sub(_placeholder, result)
    # Removed blocks leave blank-line runs behind; keep at most one empty line.
    return _BLANK_RUN_RE.sub("\n\n", result)


# ── Context ─────────────────────────────────────────────────────────


def has_custom_fixture(fixture_import_path: str) -> bool:
    """Return ``True`` when the project imports ``test`` from its own fixture."""
    return bool(fixture_import_path) and fixture_import_path != "none"


def build_context(settings: ProjectSettings) -> TemplateContext:
    """Derive the template context for one generation run."""
    custom_fixture = has_custom_fixture(settings.fixture_import_path)
    return TemplateContext(
        PROJECT_NAME=settings.project_name,
        BASE_URL=settings.base_url,
        FIXTURE_IMPORT_PATH=settings.fixture_import_path,
        PAGE_OBJECTS_DIR=settings.page_objects_dir,
        TEST_DIR=settings.test_dir,
        HAS_CUSTOM_FIXTURE=custom_fixture,
        NO_CUSTOM_FIXTURE=not custom_fixture,
        PAGE_FACTORY_IMPORT="",
        HAS_PAGE_FACTORY=False,
        NO_PAGE_FACTORY=True,
    )
