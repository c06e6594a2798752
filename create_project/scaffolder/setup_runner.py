"""Post-copy setup script execution.

A template may ship a bootstrap script (renaming, config substitution, ...)
that runs once inside the freshly copied project. The interpreter is picked
from a suffix table held in ``Config``; the child inherits this process's
standard streams so interactive prompts work. Failures never abort project
creation: they are reported as a warning and recorded on the returned
``SetupResult``.
"""

from __future__ import annotations

import subprocess
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field
from rich.console import Console

from create_project.config import Config
from create_project.utils import print_info, print_warning, working_directory


class SetupStatus(str, Enum):
    """Outcome of the setup stage."""

    SKIPPED = "skipped"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class SetupResult(BaseModel):
    """What happened when the setup script was (or was not) run."""

    status: SetupStatus = Field(default=SetupStatus.SKIPPED)
    script: str = Field(default="", description="Script path relative to the project")
    command: list[str] = Field(default_factory=list, description="Command that was executed")
    returncode: int | None = Field(default=None, description="Child exit status, if it ran")
    error: str = Field(default="", description="Failure detail for warnings")

    @property
    def failed(self) -> bool:
        return self.status is SetupStatus.FAILED


def build_setup_command(script_rel_path: str, project_name: str, config: Config) -> list[str]:
    """Return the argv used to run *script_rel_path* for *project_name*."""
    return [*config.interpreter_for(script_rel_path), script_rel_path, project_name]


def run_setup(
    dest_path: str | Path,
    script_rel_path: str,
    project_name: str,
    config: Config | None = None,
    console: Console | None = None,
) -> SetupResult:
    """Run the template's setup script inside *dest_path*, if it exists.

    The working directory is switched to *dest_path* for the duration of the
    call and restored afterwards whatever the outcome. The script receives
    *project_name* as its only argument.

    Returns:
        A ``SetupResult``. A missing script yields ``SKIPPED``; a non-zero
        exit, any other subprocess error or an interpreter that cannot be
        launched yields ``FAILED``. Non-subprocess exceptions propagate.
    """
    config = config or Config()
    if not script_rel_path:
        return SetupResult()

    script_path = Path(dest_path) / script_rel_path
    if not script_path.is_file():
        return SetupResult(script=script_rel_path)

    command = build_setup_command(script_rel_path, project_name, config)
    print_info("  Running setup script...", out=console)

    try:
        with working_directory(dest_path):
            completed = subprocess.run(command, check=True)
    except subprocess.CalledProcessError as exc:
        print_warning(
            "Setup script encountered issues (may need manual configuration)",
            out=console,
        )
        return SetupResult(
            status=SetupStatus.FAILED,
            script=script_rel_path,
            command=command,
            returncode=exc.returncode,
            error=f"Setup script exited with status {exc.returncode}",
        )
    except subprocess.SubprocessError as exc:
        print_warning(f"Setup script failed: {exc}", out=console)
        return SetupResult(
            status=SetupStatus.FAILED,
            script=script_rel_path,
            command=command,
            error=str(exc) or type(exc).__name__,
        )
    except OSError as exc:
        print_warning(
            f"Setup script could not be started ({command[0]}): {exc}",
            out=console,
        )
        return SetupResult(
            status=SetupStatus.FAILED,
            script=script_rel_path,
            command=command,
            error=str(exc),
        )

    return SetupResult(
        status=SetupStatus.SUCCEEDED,
        script=script_rel_path,
        command=command,
        returncode=completed.returncode,
    )
