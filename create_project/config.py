"""create-project configuration.

Typed configuration for the project generator. The template registry, the
copy exclusion list and the setup-script interpreter table all live here as
Pydantic v2 models so they are validated at construction time and can be
serialised to/from JSON without boiler-plate.
"""

from __future__ import annotations

import sys
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Template sources sit next to the ``create_project`` package directory.
_DEFAULT_TEMPLATES_ROOT = Path(__file__).resolve().parent.parent

PROJECT_NAME_PATTERN = r"^[a-z][a-z0-9-]*$"

DEFAULT_EXCLUDED_NAMES: tuple[str, ...] = (
    "node_modules",
    "__pycache__",
    "venv",
    ".git",
    "dist",
    "build",
)


class TemplateEntry(BaseModel):
    """A single entry of the template registry.

    ``source`` and ``setup_script`` are relative paths: the former against the
    templates root, the latter against the freshly copied project directory.
    """

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., min_length=1, description="Identifier used on the command line")
    source: str = Field(..., min_length=1, description="Template tree, relative to the templates root")
    name: str = Field(..., description="Display name")
    setup_script: str = Field(default="", description="Setup script, relative to the new project")
    description: str = Field(default="", description="One-line summary shown in usage")
    next_steps: tuple[str, ...] = Field(
        default=(), description="Instructions printed after the project is created"
    )


def default_templates() -> dict[str, TemplateEntry]:
    """Return the built-in template registry, keyed by template key."""
    entries = [
        TemplateEntry(
            key="backend-node",
            source="Backend_nodejs-Template/Backend_nodejs-Template",
            name="Node.js Backend",
            setup_script="scripts/setup-project.js",
            description="Node.js Backend (Express + TypeScript + Prisma)",
            next_steps=(
                "npm install",
                "Update .env with your configuration",
                "npm run prisma:generate",
                "npm run migrate:up",
                "npm run dev",
            ),
        ),
        TemplateEntry(
            key="backend-python",
            source="Backend_python-Template",
            name="Python Backend",
            setup_script="scripts/setup_project.py",
            description="Python Backend (FastAPI + Uvicorn)",
            next_steps=(
                "python -m venv venv",
                "source venv/bin/activate  # or venv\\Scripts\\activate on Windows",
                "pip install -r requirements.txt",
                "Update .env with your configuration",
                "python -m uvicorn app.main:app --reload",
            ),
        ),
        TemplateEntry(
            key="frontend",
            source="Frontend-Template/Frontend-Template",
            name="React Frontend",
            setup_script="scripts/setup-project.js",
            description="React Frontend (Vite + TypeScript + Redux)",
            next_steps=(
                "npm install",
                "Update env/.dev.env and public/config.js",
                "npm run start:dev",
            ),
        ),
    ]
    return {entry.key: entry for entry in entries}


def default_interpreters() -> dict[str, list[str]]:
    """Map setup-script suffixes to the command prefix that runs them."""
    return {
        ".py": [sys.executable or "python"],
        ".js": ["node"],
    }


class Config(BaseModel):
    """Global create-project configuration.

    Built once by the CLI entry point (optionally from a JSON file) and handed
    to ``ProjectMaterializer``. Instances are frozen; derive variants with
    :meth:`with_templates_root` or ``model_copy(update=...)``.
    """

    model_config = ConfigDict(frozen=True)

    templates_root: Path = Field(default=_DEFAULT_TEMPLATES_ROOT)
    templates: dict[str, TemplateEntry] = Field(default_factory=default_templates)
    excluded_names: list[str] = Field(default_factory=lambda: list(DEFAULT_EXCLUDED_NAMES))
    interpreters: dict[str, list[str]] = Field(default_factory=default_interpreters)
    default_interpreter: list[str] = Field(default=["node"], min_length=1)
    docs_hints: list[str] = Field(
        default=[
            "See TEMPLATE_README.md in project folder",
            "See standards/07-approved-templates.md for full details",
        ]
    )

    @model_validator(mode="after")
    def _check_template_keys(self) -> "Config":
        for key, entry in self.templates.items():
            if key != entry.key:
                raise ValueError(
                    f"Template registered as {key!r} declares key {entry.key!r}"
                )
        return self

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    def with_templates_root(self, templates_root: Path) -> "Config":
        """Return a copy whose template sources resolve against *templates_root*."""
        return self.model_copy(update={"templates_root": Path(templates_root)})

    @property
    def template_keys(self) -> list[str]:
        """Valid template keys in registry order."""
        return list(self.templates)

    def source_path(self, entry: TemplateEntry) -> Path:
        """Absolute location of a template's source tree."""
        return (self.templates_root / entry.source).resolve()

    def interpreter_for(self, script: str | Path) -> list[str]:
        """Return the command prefix for *script*, chosen by its suffix."""
        suffix = Path(script).suffix.lower()
        return list(self.interpreters.get(suffix, self.default_interpreter))

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a configuration previously written by :meth:`save`.

        Relative ``templates_root`` values are resolved against the
        directory containing the file.
        """
        file_path = Path(path)
        config = cls.model_validate_json(file_path.read_text(encoding="utf-8"))
        if not config.templates_root.is_absolute():
            config = config.with_templates_root(
                (file_path.parent / config.templates_root).resolve()
            )
        return config
