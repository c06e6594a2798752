"""Shared helpers for create-project.

Rich-based console output, a working-directory context manager for the
setup-script stage and a path formatter for the closing banner.
"""

from __future__ import annotations

import os
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.rule import Rule
from rich.table import Table

console = Console()


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


@contextmanager
def working_directory(path: str | Path) -> Iterator[Path]:
    """Temporarily change the process working directory to *path*.

    The previous working directory is restored on exit, including when the
    body raises.
    """
    previous = os.getcwd()
    os.chdir(path)
    try:
        yield Path(path)
    finally:
        os.chdir(previous)


def display_path(path: str | Path, fallback: str = "") -> str:
    """Return *path* relative to the current directory for display.

    Falls back to *fallback* (or the absolute path) when the two live on
    different drives or the relative form is empty.
    """
    try:
        relative = os.path.relpath(path)
    except ValueError:
        return fallback or str(path)
    if relative == ".":
        return fallback or str(path)
    return relative


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_header(title: str, color: str = "blue", out: Console | None = None) -> None:
    """Print a full-width rule with *title*."""
    out = out or console
    out.print()
    out.print(Rule(f"[bold {color}]{escape(title)}[/bold {color}]", style=color))


def print_templates_table(
    templates: Mapping[str, str],
    title: str = "Available templates",
    out: Console | None = None,
) -> None:
    """Print a two-column table of template key -> description."""
    out = out or console
    table = Table(title=title, show_header=True, header_style="bold yellow")
    table.add_column("Template", style="green", no_wrap=True)
    table.add_column("Description")

    for key, description in templates.items():
        table.add_row(key, description)

    out.print(table)


def print_success(message: str, out: Console | None = None) -> None:
    """Print a green success message."""
    (out or console).print(f"[bold green]{escape(message)}[/bold green]", soft_wrap=True)


def print_error(message: str, out: Console | None = None) -> None:
    """Print a red error message."""
    (out or console).print(f"[bold red]{escape(message)}[/bold red]", soft_wrap=True)


def print_warning(message: str, out: Console | None = None) -> None:
    """Print a yellow warning message."""
    (out or console).print(f"[bold yellow]{escape(message)}[/bold yellow]", soft_wrap=True)


def print_info(message: str, out: Console | None = None) -> None:
    """Print a cyan progress message."""
    (out or console).print(f"[cyan]{escape(message)}[/cyan]", soft_wrap=True)
