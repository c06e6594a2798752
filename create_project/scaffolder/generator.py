"""Project materializer: the copy-and-bootstrap flow.

Runs the linear sequence

    validate name -> resolve template -> check source exists ->
    check destination absent -> copy tree -> maybe run setup

Every check before the copy raises a ``MaterializeError`` subclass (see
``errors``) without touching the filesystem. A copy failure propagates as
``OSError`` and may leave a partial tree. A failing setup script is only a
warning.
"""

from __future__ import annotations

import re
from pathlib import Path

from pydantic import BaseModel, Field
from rich.console import Console

from create_project.config import PROJECT_NAME_PATTERN, Config, TemplateEntry
from create_project.utils import console as default_console
from create_project.utils import print_header, print_info, print_success

from .copier import copy_tree
from .errors import DestinationExistsError, InvalidNameError, SourceNotFoundError
from .registry import resolve_template
from .setup_runner import SetupResult, run_setup

_NAME_RE = re.compile(PROJECT_NAME_PATTERN)


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def validate_name(name: str) -> str:
    """Return *name* unchanged if it is a valid project name.

    Valid names start with a lowercase ASCII letter followed by lowercase
    letters, digits or hyphens.

    Raises:
        InvalidNameError: For anything else, including the empty string.
    """
    if not _NAME_RE.fullmatch(name):
        raise InvalidNameError(name)
    return name


# ---------------------------------------------------------------------------
# Result model
# ---------------------------------------------------------------------------


class MaterializeResult(BaseModel):
    """Summary of a successful materialization."""

    template: TemplateEntry
    project_name: str
    destination: Path = Field(..., description="Absolute path of the new project")
    files_copied: int = Field(default=0, ge=0)
    setup: SetupResult = Field(default_factory=SetupResult)


# ---------------------------------------------------------------------------
# Materializer
# ---------------------------------------------------------------------------


class ProjectMaterializer:
    """Creates a new project directory from a registered template.

    Attributes:
        config: Registry, exclusion list and interpreter table.
        console: Where progress messages are written.
    """

    def __init__(self, config: Config | None = None, console: Console | None = None) -> None:
        self.config = config or Config()
        self.console = console or default_console

    def resolve_destination(self, project_name: str, destination: str | Path = ".") -> Path:
        """Absolute path of ``destination/project_name``."""
        return (Path(destination) / project_name).resolve()

    def prepare(
        self, template_key: str, project_name: str, destination: str | Path = "."
    ) -> tuple[TemplateEntry, Path, Path]:
        """Run every pre-copy check.

        Returns:
            ``(entry, source_path, dest_path)``.

        Raises:
            InvalidNameError, UnknownTemplateError, SourceNotFoundError,
            DestinationExistsError.
        """
        validate_name(project_name)
        entry = resolve_template(template_key, self.config.templates)

        source_path = self.config.source_path(entry)
        if not source_path.is_dir():
            raise SourceNotFoundError(source_path)

        dest_path = self.resolve_destination(project_name, destination)
        if dest_path.exists():
            raise DestinationExistsError(dest_path)

        return entry, source_path, dest_path

    def materialize(
        self,
        template_key: str,
        project_name: str,
        destination: str | Path = ".",
        run_setup_script: bool = True,
    ) -> MaterializeResult:
        """Copy the template into ``destination/project_name`` and bootstrap it."""
        entry, source_path, dest_path = self.prepare(template_key, project_name, destination)

        print_header(f"Creating {entry.name} project: {project_name}", out=self.console)
        print_info(f"  Copying template from {entry.source}...", out=self.console)
        files_copied = copy_tree(source_path, dest_path, self.config.excluded_names)
        print_success(f"  Template copied to {dest_path}", out=self.console)

        setup = SetupResult(script=entry.setup_script)
        if run_setup_script:
            setup = run_setup(
                dest_path,
                entry.setup_script,
                project_name,
                config=self.config,
                console=self.console,
            )

        return MaterializeResult(
            template=entry,
            project_name=project_name,
            destination=dest_path,
            files_copied=files_copied,
            setup=setup,
        )
