"""Shared fixtures for CLI tests.

Provides a Click runner and a helper that registers a workspace in the
per-test registry file before a command is invoked.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner

from projectdeck.registry import WorkspaceRegistry


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CliRunner for invoking commands."""
    return CliRunner()


@pytest.fixture
def register(registry_file: Path) -> Callable[[str, Path], None]:
    """Return a function that adds ``name -> root`` to the test registry."""
    def _register(name: str, root: Path) -> None:
        WorkspaceRegistry(registry_file).add(name, str(root))
    return _register
