"""wico -- Playwright agent skills for AI coding assistants.

Scaffolds skill documents that teach an assistant a project's Playwright
conventions, laid out for Claude Code, Cursor, GitHub Copilot or a generic
agent directory.

Quick usage::

    from wico import ProjectSettings, SkillGenerator

    result = SkillGenerator().generate(["claude"], ["core", "templates"], ProjectSettings())
"""

from wico.config import Config, ProjectSettings, TemplateContext
from wico.generator import GenerationResult, SkillGenerator, estimate_file_count
from wico.template_engine import build_context, render_template

__version__ = "0.1.0"

__all__ = [
    "Config",
    "GenerationResult",
    "ProjectSettings",
    "SkillGenerator",
    "TemplateContext",
    "build_context",
    "estimate_file_count",
    "render_template",
]
