"""Errors raised before a project is copied.

All of them mean "nothing was written"; the CLI maps every one to exit
code 1. Copy failures are plain ``OSError`` and setup-script failures are
reported through ``SetupResult`` instead of being raised.
"""

from __future__ import annotations

from pathlib import Path


class MaterializeError(Exception):
    """Base class for validation failures raised before anything is copied."""


class InvalidNameError(MaterializeError):
    """Raised when a project name does not match ``PROJECT_NAME_PATTERN``."""

    guidance = (
        "Start with a lowercase letter",
        "Contain only lowercase letters, numbers, and hyphens",
    )
    example = "my-awesome-project"

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Invalid project name: {name!r}")


class UnknownTemplateError(MaterializeError):
    """Raised when a template key is not in the registry."""

    def __init__(self, key: str, available: list[str]) -> None:
        self.key = key
        self.available = available
        super().__init__(f"Unknown template type: {key}")


class SourceNotFoundError(MaterializeError):
    """Raised when a template's source tree is missing on disk."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Template source not found: {path}")


class DestinationExistsError(MaterializeError):
    """Raised when the target project directory already exists."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Destination already exists: {path}")
