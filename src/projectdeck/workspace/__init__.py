"""Workspace inspection: build-system detection and executable discovery.

Public API::

    from projectdeck.workspace import Workspace

    ws = Workspace("/home/me/src/myapp")
    print(ws.build_system_display_name(), ws.effective_build_directory())
    for exe in ws.find_executables():
        print(exe.relative_path, "[GUI]" if exe.is_graphical else "")
"""

from __future__ import annotations

from projectdeck.workspace.build_plan import find_makefile, plan_build
from projectdeck.workspace.launcher import launch_environment, launch_executable
from projectdeck.workspace.models import (
    BuildPlan,
    BuildSystemKind,
    ExecutableDescriptor,
    WorkspaceReport,
)
from projectdeck.workspace.report import describe_workspace
from projectdeck.workspace.versioning import (
    VersionPart,
    create_version_tag,
    current_version,
    increment_version,
)
from projectdeck.workspace.vcs import CommitOutcome, commit_changes
from projectdeck.workspace.workspace import Workspace

__all__ = [
    "BuildPlan",
    "BuildSystemKind",
    "CommitOutcome",
    "ExecutableDescriptor",
    "VersionPart",
    "Workspace",
    "WorkspaceReport",
    "commit_changes",
    "create_version_tag",
    "current_version",
    "describe_workspace",
    "find_makefile",
    "increment_version",
    "launch_environment",
    "launch_executable",
    "plan_build",
]
