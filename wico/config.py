"""wico configuration.

Typed configuration for a generation run. All settings use Pydantic v2 models
so they are validated at construction time and can be built from CLI flags or
environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ProjectSettings(BaseModel):
    """Project details substituted into the template pack.

    The values are free-form strings. Nothing is validated beyond falling
    back to the defaults below, which match what the interactive flow offers.
    """

    project_name: str = Field(default="my-e2e-suite")
    base_url: str = Field(default="https://staging.example.com")
    fixture_import_path: str = Field(
        default="",
        description='Custom fixture module, or "none"/empty for @playwright/test',
    )
    page_objects_dir: str = Field(default="src/pages")
    test_dir: str = Field(default="src/tests")


class TemplateContext(BaseModel):
    """Flat, immutable rendering environment derived from ``ProjectSettings``.

    Field names are the exact placeholder keys used by the skill templates.
    ``PAGE_FACTORY_IMPORT`` and the two page-factory flags are not derived
    from any setting yet.
    """

    model_config = ConfigDict(frozen=True)

    PROJECT_NAME: str
    BASE_URL: str
    FIXTURE_IMPORT_PATH: str
    PAGE_OBJECTS_DIR: str
    TEST_DIR: str
    PAGE_FACTORY_IMPORT: str = ""
    HAS_CUSTOM_FIXTURE: bool
    NO_CUSTOM_FIXTURE: bool
    HAS_PAGE_FACTORY: bool = False
    NO_PAGE_FACTORY: bool = True

    def as_dict(self) -> dict[str, str | bool]:
        """Return a plain ``{KEY: value}`` mapping for the template engine."""
        return self.model_dump()


class Config(BaseModel):
    """Tool configuration for one ``wico`` invocation.

    Attributes:
        destination: Project root that generated files are written under.
        skills_dir: Explicit skill asset directory. When ``None`` the bundled
            assets (or one of the fallback candidates) are used.
    """

    destination: Path = Field(default_factory=Path.cwd)
    skills_dir: Path | None = Field(default=None)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional): WICO_CWD, WICO_SKILLS_DIR.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("WICO_CWD"):
            kwargs["destination"] = Path(os.environ["WICO_CWD"])
        if os.environ.get("WICO_SKILLS_DIR"):
            kwargs["skills_dir"] = Path(os.environ["WICO_SKILLS_DIR"])
        return cls(**kwargs)
