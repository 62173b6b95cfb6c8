"""Assemble a ``WorkspaceReport`` for display.

Combines build-system metadata, executable discovery, a few git queries
and project-structure checks into one summary object. Git queries run only
when the workspace root has a ``.git`` entry.
"""

from __future__ import annotations

import logging

from projectdeck.exceptions import CommandError
from projectdeck.workspace.executables import select_main_executable
from projectdeck.workspace.models import WorkspaceReport
from projectdeck.workspace.workspace import Workspace

logger = logging.getLogger(__name__)


def _git_output(workspace: Workspace, cmd: str) -> str | None:
    """Run a git query; None when it fails or reports a fatal error."""
    try:
        result = workspace.run_command(cmd)
    except CommandError:
        logger.debug("git query failed: %s", cmd, exc_info=True)
        return None
    if "fatal" in result:
        return None
    return result


def _documentation_source(workspace: Workspace) -> str | None:
    if (workspace.root / "docs").exists():
        return "docs/ directory"
    if (workspace.root / "README.md").exists():
        return "README.md"
    return None


def describe_workspace(workspace: Workspace) -> WorkspaceReport:
    """Collect everything worth showing about a workspace.

    Args:
        workspace: The workspace to summarise.

    Returns:
        A populated ``WorkspaceReport``. Missing data (no git, no
        executables) is left at the dataclass defaults.
    """
    executables = workspace.find_executables()
    report = WorkspaceReport(
        path=workspace.get_path(),
        exists=workspace.exists(),
        build_system=workspace.build_system_display_name(),
        build_directory=workspace.effective_build_directory(),
        build_command=workspace.preferred_build_command(),
        build_scripts=workspace.list_build_scripts(),
        executables=executables,
        main_executable=select_main_executable(executables, workspace.name),
        has_github_actions=(workspace.root / ".github" / "workflows").exists(),
        has_scripts_dir=(workspace.root / "scripts").exists(),
        documentation=_documentation_source(workspace),
    )

    if not (workspace.root / ".git").exists():
        return report

    remotes = _git_output(workspace, "git remote -v")
    if remotes and remotes.strip():
        report.git_remote = remotes.splitlines()[0].strip()

    tag = _git_output(workspace, "git describe --tags --abbrev=0")
    if tag and tag.strip():
        report.latest_tag = tag.strip()

    status = _git_output(workspace, "git status --porcelain")
    if status:
        report.changed_files = sum(1 for line in status.splitlines() if line.strip())

    return report
