"""Shared pytest fixtures for the create-project test suite.

Provides reusable fixtures for:
- A templates root laid out like the real one, with excluded directories
- A ``Config`` pointing at that root
- A Rich console that writes to memory
"""

from __future__ import annotations

import io
import textwrap
from pathlib import Path

import pytest
from rich.console import Console

from create_project.config import Config


# ---------------------------------------------------------------------------
# Template trees
# ---------------------------------------------------------------------------

PYTHON_SETUP_SCRIPT = textwrap.dedent(
    """\
    import os
    import sys
    from pathlib import Path

    Path("setup-ran.txt").write_text(
        sys.argv[1] + "\\n" + os.getcwd() + "\\n", encoding="utf-8"
    )
    """
)


def write_files(root: Path, files: dict[str, str | bytes]) -> Path:
    """Create *files* (relative path -> content) under *root*."""
    for rel_path, content in files.items():
        path = root / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
    return root


FRONTEND_FILES: dict[str, str | bytes] = {
    "package.json": '{"name": "frontend-template"}\n',
    "src/index.ts": "export const answer = 42;\n",
    "src/components/App.tsx": "export function App() { return null; }\n",
    "public/logo.png": b"\x89PNG\r\n\x1a\n\x00\x00binary",
    "node_modules/react/index.js": "module.exports = {};\n",
    "node_modules/react/package.json": "{}\n",
    ".git/HEAD": "ref: refs/heads/main\n",
    "dist/bundle.js": "// built\n",
    "src/build/output.js": "// nested build dir\n",
}

BACKEND_PYTHON_FILES: dict[str, str | bytes] = {
    "requirements.txt": "fastapi\nuvicorn\n",
    "app/main.py": "app = None\n",
    "app/__pycache__/main.cpython-312.pyc": b"\x00\x01\x02",
    "venv/bin/python": "#!/bin/sh\n",
    "scripts/setup_project.py": PYTHON_SETUP_SCRIPT,
}

BACKEND_NODE_FILES: dict[str, str | bytes] = {
    "package.json": '{"name": "backend-template"}\n',
    "src/server.ts": "export {};\n",
    "prisma/schema.prisma": "// schema\n",
}


@pytest.fixture
def templates_root(tmp_path: Path) -> Path:
    """A templates root holding all three registered template sources."""
    root = tmp_path / "templates"
    write_files(root / "Frontend-Template" / "Frontend-Template", FRONTEND_FILES)
    write_files(root / "Backend_python-Template", BACKEND_PYTHON_FILES)
    write_files(root / "Backend_nodejs-Template" / "Backend_nodejs-Template", BACKEND_NODE_FILES)
    return root


@pytest.fixture
def config(templates_root: Path) -> Config:
    """Default registry resolved against the temporary templates root."""
    return Config(templates_root=templates_root)


@pytest.fixture
def out_dir(tmp_path: Path) -> Path:
    """Empty destination directory."""
    path = tmp_path / "out"
    path.mkdir()
    return path


# ---------------------------------------------------------------------------
# Console
# ---------------------------------------------------------------------------


@pytest.fixture
def memory_console() -> Console:
    """Rich console writing to an in-memory buffer (read via ``.file.getvalue()``)."""
    return Console(file=io.StringIO(), width=200, color_system=None)


def tree_files(root: Path) -> dict[str, bytes]:
    """Map every file under *root* (relative POSIX path) to its bytes."""
    return {
        path.relative_to(root).as_posix(): path.read_bytes()
        for path in sorted(root.rglob("*"))
        if path.is_file()
    }


@pytest.fixture
def make_tree():
    """Factory fixture: ``make_tree(root, {rel_path: content})``."""
    return write_files


@pytest.fixture
def read_tree():
    """Factory fixture: ``read_tree(root) -> {rel_path: bytes}``."""
    return tree_files
