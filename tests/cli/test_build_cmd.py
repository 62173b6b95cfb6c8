"""Tests for ``projectdeck build``, ``clean`` and ``edit-makefile``.

Real builds use a ``build.sh`` script so only ``bash`` is required.
"""

from __future__ import annotations

from pathlib import Path

import click
import pytest
from click.testing import CliRunner

from projectdeck.cli.main import cli

from tests.workspace.helpers import make_project, write_file


class TestBuild:
    """Planning and running builds."""

    def test_dry_run_makefile(
        self, runner: CliRunner, registry_file: Path, tmp_path: Path,
        register,
    ) -> None:
        root = make_project(tmp_path, markers=("Makefile",))
        register("proj", root)
        result = runner.invoke(
            cli, ["--registry-file", str(registry_file), "build", "proj", "--dry-run"]
        )
        assert result.exit_code == 0
        assert "1. make" in result.output
        assert not (root / "build").exists()

    def test_dry_run_cmake_shows_configure(
        self, runner: CliRunner, registry_file: Path, tmp_path: Path,
        register,
    ) -> None:
        root = make_project(tmp_path, markers=("CMakeLists.txt",))
        register("proj", root)
        result = runner.invoke(
            cli,
            ["--registry-file", str(registry_file), "build", "proj",
             "--dry-run", "--generator", "Ninja"],
        )
        assert result.exit_code == 0
        assert "cmake .. -G Ninja" in result.output

    def test_script_build_runs(
        self, runner: CliRunner, registry_file: Path, project_root: Path,
        register,
    ) -> None:
        write_file(project_root / "build.sh", b"echo built > marker.txt\n")
        register("proj", project_root)
        result = runner.invoke(cli, ["--registry-file", str(registry_file), "build", "proj"])
        assert result.exit_code == 0
        assert (project_root / "marker.txt").read_text().strip() == "built"

    def test_failing_step_exit_code(
        self, runner: CliRunner, registry_file: Path, project_root: Path,
        register,
    ) -> None:
        write_file(project_root / "build.sh", b"exit 3\n")
        register("proj", project_root)
        result = runner.invoke(cli, ["--registry-file", str(registry_file), "build", "proj"])
        assert result.exit_code == 3

    def test_unknown_workspace(self, runner: CliRunner, registry_file: Path) -> None:
        result = runner.invoke(cli, ["--registry-file", str(registry_file), "build", "ghost"])
        assert result.exit_code == 2


class TestClean:
    """Removing the default build directory."""

    def test_clean_with_yes(
        self, runner: CliRunner, registry_file: Path, project_root: Path,
        register,
    ) -> None:
        write_file(project_root / "build" / "main.o", b"\x00")
        register("proj", project_root)
        result = runner.invoke(
            cli, ["--registry-file", str(registry_file), "clean", "proj", "--yes"]
        )
        assert result.exit_code == 0
        assert not (project_root / "build").exists()

    def test_clean_declined(
        self, runner: CliRunner, registry_file: Path, project_root: Path,
        register,
    ) -> None:
        (project_root / "build").mkdir()
        register("proj", project_root)
        result = runner.invoke(
            cli, ["--registry-file", str(registry_file), "clean", "proj"], input="n\n"
        )
        assert result.exit_code != 0
        assert (project_root / "build").exists()

    def test_clean_symlinked_build_directory(
        self, runner: CliRunner, registry_file: Path, project_root: Path, tmp_path: Path,
        register,
    ) -> None:
        real = tmp_path / "out-of-tree"
        real.mkdir()
        (project_root / "build").symlink_to(real, target_is_directory=True)
        register("proj", project_root)
        result = runner.invoke(
            cli, ["--registry-file", str(registry_file), "clean", "proj", "--yes"]
        )
        assert result.exit_code == 0
        assert not (project_root / "build").is_symlink()
        assert real.is_dir()


class TestEditMakefile:
    """Opening the Makefile in an editor."""

    def test_opens_root_makefile(
        self, runner: CliRunner, registry_file: Path, tmp_path: Path, register,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        opened: list[tuple[str, str | None]] = []
        monkeypatch.setattr(
            click, "edit", lambda filename=None, editor=None, **kw: opened.append((filename, editor))
        )
        root = make_project(tmp_path, markers=("Makefile",))
        register("proj", root)
        result = runner.invoke(
            cli,
            ["--registry-file", str(registry_file), "edit-makefile", "proj", "--editor", "vi"],
        )
        assert result.exit_code == 0
        assert opened == [(str(root / "Makefile"), "vi")]

    def test_generated_makefile_in_build_directory(
        self, runner: CliRunner, registry_file: Path, project_root: Path, register,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        opened: list[str] = []
        monkeypatch.setattr(
            click, "edit", lambda filename=None, editor=None, **kw: opened.append(filename)
        )
        write_file(project_root / "build" / "Makefile", b"all:\n")
        register("proj", project_root)
        result = runner.invoke(
            cli, ["--registry-file", str(registry_file), "edit-makefile", "proj"]
        )
        assert result.exit_code == 0
        assert opened == [str(project_root / "build" / "Makefile")]

    def test_no_makefile(
        self, runner: CliRunner, registry_file: Path, project_root: Path, register,
    ) -> None:
        register("proj", project_root)
        result = runner.invoke(
            cli, ["--registry-file", str(registry_file), "edit-makefile", "proj"]
        )
        assert result.exit_code == 1
        assert "No Makefile found" in result.output
