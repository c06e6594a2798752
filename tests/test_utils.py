"""Unit tests for utility functions (create_project.utils).

Tests cover:
- working_directory (switch, restore, restore after an exception)
- display_path
- Rich output helpers, including markup escaping
"""

from __future__ import annotations

import io
import os
from pathlib import Path

import pytest
from rich.console import Console

from create_project.utils import (
    display_path,
    print_error,
    print_header,
    print_info,
    print_success,
    print_templates_table,
    print_warning,
    working_directory,
)


# ---------------------------------------------------------------------------
# working_directory
# ---------------------------------------------------------------------------


class TestWorkingDirectory:
    @pytest.mark.unit
    def test_switches_and_restores(self, tmp_path: Path):
        before = os.getcwd()
        with working_directory(tmp_path) as path:
            assert Path(os.getcwd()).resolve() == tmp_path.resolve()
            assert path == tmp_path
        assert os.getcwd() == before

    @pytest.mark.unit
    def test_restores_after_exception(self, tmp_path: Path):
        before = os.getcwd()
        with pytest.raises(RuntimeError):
            with working_directory(tmp_path):
                raise RuntimeError("boom")
        assert os.getcwd() == before

    @pytest.mark.unit
    def test_missing_directory_raises_without_moving(self, tmp_path: Path):
        before = os.getcwd()
        with pytest.raises(FileNotFoundError):
            with working_directory(tmp_path / "missing"):
                pass
        assert os.getcwd() == before


# ---------------------------------------------------------------------------
# display_path
# ---------------------------------------------------------------------------


class TestDisplayPath:
    @pytest.mark.unit
    def test_relative_to_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.chdir(tmp_path)
        assert display_path(tmp_path / "out" / "my-app") == os.path.join("out", "my-app")

    @pytest.mark.unit
    def test_cwd_itself_uses_fallback(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.chdir(tmp_path)
        assert display_path(tmp_path, fallback="my-app") == "my-app"

    @pytest.mark.unit
    def test_parent_directory(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        work = tmp_path / "work"
        work.mkdir()
        monkeypatch.chdir(work)
        assert display_path(tmp_path / "sibling") == os.path.join("..", "sibling")


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


class TestRichOutputHelpers:
    @pytest.mark.unit
    def test_print_helpers_write_to_given_console(self, memory_console):
        print_success("created", out=memory_console)
        print_error("failed", out=memory_console)
        print_warning("careful", out=memory_console)
        print_info("copying", out=memory_console)
        output = memory_console.file.getvalue()
        for word in ("created", "failed", "careful", "copying"):
            assert word in output

    @pytest.mark.unit
    def test_brackets_are_not_treated_as_markup(self, memory_console):
        print_info("copying [destination]/[bold]x", out=memory_console)
        assert "[destination]/[bold]x" in memory_console.file.getvalue()

    @pytest.mark.unit
    def test_long_messages_are_not_wrapped(self):
        narrow = Console(file=io.StringIO(), width=40, color_system=None)
        path = "/tmp/" + "x" * 80 + "/my-app"
        print_success(f"  Template copied to {path}", out=narrow)
        print_info(f"  cd {path}", out=narrow)
        lines = narrow.file.getvalue().splitlines()
        assert lines == [f"  Template copied to {path}", f"  cd {path}"]

    @pytest.mark.unit
    def test_print_header(self, memory_console):
        print_header("Creating React Frontend project: my-app", out=memory_console)
        assert "Creating React Frontend project: my-app" in memory_console.file.getvalue()

    @pytest.mark.unit
    def test_print_templates_table(self, memory_console):
        print_templates_table(
            {"frontend": "React Frontend", "backend-node": "Node.js Backend"},
            out=memory_console,
        )
        output = memory_console.file.getvalue()
        assert "Available templates" in output
        assert "frontend" in output
        assert "Node.js Backend" in output

    @pytest.mark.unit
    def test_default_console(self, capsys: pytest.CaptureFixture[str]):
        print_success("All done")
        assert "All done" in capsys.readouterr().out
