"""Tests for starting workspace executables.

Console programs are shell scripts described directly, so no compiled
binary is needed. GUI launches are recorded instead of spawned.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from projectdeck.exceptions import CommandError
from projectdeck.workspace import (
    ExecutableDescriptor,
    Workspace,
    launch_environment,
    launch_executable,
)
from projectdeck.workspace import launcher as launcher_module

from tests.workspace.helpers import write_executable


def _descriptor(path: Path, root: Path, gui: bool = False) -> ExecutableDescriptor:
    return ExecutableDescriptor(
        name=path.name,
        absolute_path=path,
        relative_path=path.relative_to(root),
        is_graphical=gui,
    )


class TestLaunchEnvironment:
    """PATH handling."""

    def test_build_directory_appended(self, project_root: Path) -> None:
        (project_root / "bin").mkdir()
        env = launch_environment(Workspace(project_root), {"PATH": "/usr/bin", "HOME": "/h"})
        assert env["PATH"] == f"/usr/bin{os.pathsep}{project_root / 'bin'}"
        assert env["HOME"] == "/h"

    def test_missing_path_variable(self, project_root: Path) -> None:
        env = launch_environment(Workspace(project_root), {})
        assert env["PATH"] == str(project_root / "build")

    def test_base_not_modified(self, project_root: Path) -> None:
        base = {"PATH": "/usr/bin"}
        launch_environment(Workspace(project_root), base)
        assert base == {"PATH": "/usr/bin"}


class TestLaunchExecutable:
    """Foreground console runs and background GUI starts."""

    def test_console_exit_code(self, project_root: Path) -> None:
        script = write_executable(project_root / "build" / "tool", b"#!/bin/sh\nexit 4\n")
        rc = launch_executable(Workspace(project_root), _descriptor(script, project_root))
        assert rc == 4

    def test_console_runs_from_root_with_path(self, project_root: Path) -> None:
        script = write_executable(
            project_root / "build" / "tool",
            b'#!/bin/sh\necho "$PATH" > path.txt\n',
        )
        rc = launch_executable(Workspace(project_root), _descriptor(script, project_root))
        assert rc == 0
        recorded = (project_root / "path.txt").read_text().strip()
        assert recorded.endswith(os.pathsep + str(project_root / "build"))

    def test_gui_started_detached(
        self, project_root: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        started: list[tuple[list[str], dict]] = []

        def fake_popen(argv: list[str], **kwargs: object) -> None:
            started.append((argv, kwargs))

        monkeypatch.setattr(launcher_module.subprocess, "Popen", fake_popen)
        exe = project_root / "build" / "viewer"
        rc = launch_executable(
            Workspace(project_root), _descriptor(exe, project_root, gui=True)
        )
        assert rc is None
        argv, kwargs = started[0]
        assert argv == [str(exe)]
        assert kwargs["cwd"] == str(project_root)
        assert kwargs["start_new_session"] is True

    def test_missing_program_raises(self, project_root: Path) -> None:
        exe = project_root / "build" / "gone"
        with pytest.raises(CommandError):
            launch_executable(Workspace(project_root), _descriptor(exe, project_root))
