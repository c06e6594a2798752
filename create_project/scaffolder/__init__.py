"""create-project scaffolder -- materializes projects from template trees.

Takes a template key and a project name, copies the registered template
tree into ``destination/project-name`` (skipping build and dependency
directories) and runs the template's setup script, if it ships one.

Quick usage::

    from create_project.scaffolder import ProjectMaterializer

    materializer = ProjectMaterializer()
    result = materializer.materialize("frontend", "my-app", "./projects")
"""

from create_project.scaffolder.copier import copy_tree
from create_project.scaffolder.errors import (
    DestinationExistsError,
    InvalidNameError,
    MaterializeError,
    SourceNotFoundError,
    UnknownTemplateError,
)
from create_project.scaffolder.generator import MaterializeResult, ProjectMaterializer, validate_name
from create_project.scaffolder.registry import resolve_template
from create_project.scaffolder.setup_runner import SetupResult, SetupStatus, run_setup

__all__ = [
    "DestinationExistsError",
    "InvalidNameError",
    "MaterializeError",
    "MaterializeResult",
    "ProjectMaterializer",
    "SetupResult",
    "SetupStatus",
    "SourceNotFoundError",
    "UnknownTemplateError",
    "copy_tree",
    "resolve_template",
    "run_setup",
    "validate_name",
]
