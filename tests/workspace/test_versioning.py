"""Tests for version tag reading, incrementing and tagging."""

from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from projectdeck.workspace import (
    VersionPart,
    Workspace,
    create_version_tag,
    current_version,
    increment_version,
)


class ScriptedWorkspace(Workspace):
    """Workspace that answers shell commands from canned streams."""

    def __init__(self, output: str, errors: str = "", returncode: int = 0) -> None:
        super().__init__("/ws")
        self.output = output
        self.errors = errors
        self.returncode = returncode
        self.commands: list[str] = []

    def run_process(
        self, cmd: str, cwd: str | Path | None = None
    ) -> subprocess.CompletedProcess[str]:
        self.commands.append(cmd)
        return subprocess.CompletedProcess(cmd, self.returncode, self.output, self.errors)


class TestCurrentVersion:
    """Reading the latest tag."""

    @pytest.mark.parametrize(
        ("output", "expected"),
        [
            ("v1.2.3\n", "1.2.3"),
            ("2.0.0\n", "2.0.0"),
            ("", "0.0.0"),
            ("fatal: No names found, cannot describe anything.\n", "0.0.0"),
            ("  v0.9.1  \n", "0.9.1"),
        ],
    )
    def test_parse(self, output: str, expected: str) -> None:
        assert current_version(ScriptedWorkspace(output)) == expected

    def test_stderr_warning_ignored(self) -> None:
        ws = ScriptedWorkspace(
            "v1.2.3\n",
            errors="warning: tag 'v1.2.3' is externally known as 'v1.2.2'\n",
        )
        assert current_version(ws) == "1.2.3"

    def test_command(self) -> None:
        ws = ScriptedWorkspace("v1.0.0\n")
        current_version(ws)
        assert ws.commands == ["git describe --tags --abbrev=0"]


class TestIncrementVersion:
    """Semantic version bumps."""

    @pytest.mark.parametrize(
        ("version", "part", "expected"),
        [
            ("1.2.3", VersionPart.PATCH, "1.2.4"),
            ("1.2.3", VersionPart.MINOR, "1.3.0"),
            ("1.2.3", VersionPart.MAJOR, "2.0.0"),
            ("0.0.0", VersionPart.PATCH, "0.0.1"),
            ("1.x.3", VersionPart.MINOR, "1.1.0"),
            ("1.2", VersionPart.PATCH, "1.0.0"),
            ("1.2.3.4", VersionPart.MAJOR, "1.0.0"),
            ("release", VersionPart.PATCH, "1.0.0"),
        ],
    )
    def test_increment(self, version: str, part: VersionPart, expected: str) -> None:
        assert increment_version(version, part) == expected


class TestCreateVersionTag:
    """Annotated tag creation."""

    def test_command_and_success(self) -> None:
        ws = ScriptedWorkspace("")
        assert create_version_tag(ws, "1.2.4") is True
        assert ws.commands == ["git tag -a v1.2.4 -m 'Version 1.2.4'"]

    def test_failure(self) -> None:
        ws = ScriptedWorkspace(
            "", errors="fatal: tag 'v1.2.4' already exists\n", returncode=128
        )
        assert create_version_tag(ws, "1.2.4") is False

    def test_nonzero_exit_is_failure(self) -> None:
        assert create_version_tag(ScriptedWorkspace("", returncode=1), "1.2.4") is False
