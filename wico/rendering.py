"""Jinja2 rendering of platform envelopes.

Skill documents themselves go through :mod:`wico.template_engine`.  The text
a platform wraps *around* a document (the Cursor rule frontmatter) is a small
Jinja2 template kept here, so generators only supply values.
"""

from __future__ import annotations

from typing import Any

from jinja2 import DictLoader, Environment, StrictUndefined


# ---------------------------------------------------------------------------
# Envelope templates
# ---------------------------------------------------------------------------

CURSOR_RULE = "cursor-rule.mdc"

ENVELOPES: dict[str, str] = {
    CURSOR_RULE: (
        "---\n"
        "description: {{ description }}\n"
        'globs: "{{ globs }}"\n'
        "---\n"
        "\n"
        "{{ content }}"
    ),
}


# ---------------------------------------------------------------------------
# EnvelopeRenderer
# ---------------------------------------------------------------------------


class EnvelopeRenderer:
    """Renders the named envelope templates in :data:`ENVELOPES`.

    Autoescaping is off: output is markdown, and document content is passed
    as a value so any ``{{`` it contains is never interpreted.
    """

    def __init__(self, envelopes: dict[str, str] | None = None) -> None:
        self.env = Environment(
            loader=DictLoader(dict(envelopes or ENVELOPES)),
            autoescape=False,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )

    def render(self, envelope: str, context: dict[str, Any]) -> str:
        """Render a named envelope with the provided context."""
        template = self.env.get_template(envelope)
        return template.render(**context)
