"""create-project command line.

Creates a new project from one of the approved templates::

    create-project <template-type> <project-name> [destination]

Usage::

    python -m create_project.cli backend-node my-api
    python -m create_project.cli frontend my-app ./projects
    python -m create_project.cli backend-python ml-service ../other-folder
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import NoReturn

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from create_project.config import Config
from create_project.scaffolder import (
    InvalidNameError,
    MaterializeError,
    MaterializeResult,
    ProjectMaterializer,
    UnknownTemplateError,
)
from create_project.utils import (
    console,
    display_path,
    print_error,
    print_header,
    print_success,
    print_templates_table,
    print_warning,
)

PROG = "create-project"

EXAMPLES = (
    f"{PROG} backend-node my-api",
    f"{PROG} frontend my-app ./projects",
    f"{PROG} backend-python ml-service ../other-folder",
)


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


class _ArgumentParser(argparse.ArgumentParser):
    """``ArgumentParser`` that reports usage errors with exit code 1."""

    def error(self, message: str) -> NoReturn:
        print_error(f"Error: {message}")
        console.print(escape(self.format_usage().rstrip()), soft_wrap=True)
        sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog=PROG, add_help=False)
    parser.add_argument("template", nargs="?", help="Template type")
    parser.add_argument("project_name", nargs="?", help="Name of the new project")
    parser.add_argument(
        "destination",
        nargs="?",
        default=".",
        help="Parent directory for the project (default: current directory)",
    )
    parser.add_argument("-h", "--help", action="store_true", help="Show this help and exit")
    parser.add_argument(
        "--templates-root",
        default=None,
        help="Directory that template sources are resolved against",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a JSON configuration file",
    )
    parser.add_argument(
        "--skip-setup",
        action="store_true",
        help="Do not run the template's setup script",
    )
    return parser


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------


def print_help(config: Config, out: Console | None = None) -> None:
    """Print usage, the template list and examples."""
    out = out or console
    print_header("Project Generator", color="cyan", out=out)
    out.print("\n[yellow]Usage:[/yellow]")
    out.print(f"  {PROG} <template-type> <project-name> [destination]\n", markup=False)
    print_templates_table(
        {key: entry.description or entry.name for key, entry in config.templates.items()},
        out=out,
    )
    out.print("\n[yellow]Options:[/yellow]")
    out.print("  --templates-root PATH  Directory that template sources are resolved against")
    out.print("  --config PATH          Load configuration from a JSON file")
    out.print("  --skip-setup           Do not run the template's setup script")
    out.print("\n[yellow]Examples:[/yellow]")
    for example in EXAMPLES:
        out.print(f"  {example}", markup=False)
    if config.docs_hints:
        out.print("\n[yellow]Documentation:[/yellow]")
        out.print(f"  {escape(config.docs_hints[-1])}", soft_wrap=True)
    out.print()


def print_next_steps(result: MaterializeResult, config: Config, out: Console | None = None) -> None:
    """Print the closing banner: location, next steps and documentation."""
    out = out or console
    print_header("Done", out=out)
    print_success(f'Project "{result.project_name}" created successfully!', out=out)
    out.print(f"\n[cyan]Location:[/cyan] {escape(str(result.destination))}", soft_wrap=True)

    steps = [f"cd {display_path(result.destination, fallback=result.project_name)}"]
    steps.extend(result.template.next_steps)
    out.print("\n[yellow]Next steps:[/yellow]")
    for number, step in enumerate(steps, start=1):
        out.print(f"  {number}. {escape(step)}", soft_wrap=True)

    if config.docs_hints:
        out.print("\n[yellow]Documentation:[/yellow]")
        for hint in config.docs_hints:
            out.print(f"  - {escape(hint)}", soft_wrap=True)
    out.print()


def _report_error(exc: MaterializeError, config: Config) -> None:
    if isinstance(exc, InvalidNameError):
        print_error("Project name must:")
        for rule in exc.guidance:
            print_error(f"   - {rule}")
        print_warning(f"   - Example: {exc.example}")
    elif isinstance(exc, UnknownTemplateError):
        print_error(str(exc))
        print_warning("\nAvailable templates:")
        for key in exc.available:
            print_success(f"  - {key}: {config.templates[key].name}")
    else:
        print_error(str(exc))


def _load_config(args: argparse.Namespace) -> Config:
    try:
        config = Config.load(Path(args.config)) if args.config else Config()
    except (OSError, ValidationError) as exc:
        print_error(f"Error: could not load configuration {args.config}: {exc}")
        sys.exit(1)
    if args.templates_root:
        config = config.with_templates_root(Path(args.templates_root).resolve())
    return config


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``create-project``.

    Exits with status 1 on any validation, lookup or pre-existence failure.
    A copy failure propagates as ``OSError``.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    config = _load_config(args)

    if args.help or args.template is None:
        print_help(config)
        return

    if args.project_name is None:
        print_error("Missing arguments")
        print_help(config)
        sys.exit(1)

    materializer = ProjectMaterializer(config, console=console)
    try:
        result = materializer.materialize(
            args.template,
            args.project_name,
            args.destination,
            run_setup_script=not args.skip_setup,
        )
    except MaterializeError as exc:
        _report_error(exc, config)
        sys.exit(1)

    print_next_steps(result, config)


if __name__ == "__main__":
    main()
