"""Shared fixtures for projectdeck tests."""

import pathlib

import pytest


@pytest.fixture
def project_root(tmp_path: pathlib.Path) -> pathlib.Path:
    """Create an empty workspace root directory named ``proj``."""
    root = tmp_path / "proj"
    root.mkdir()
    return root


@pytest.fixture
def registry_file(tmp_path: pathlib.Path) -> pathlib.Path:
    """Path for a registry file that does not exist yet."""
    return tmp_path / "config" / "workspaces.txt"
