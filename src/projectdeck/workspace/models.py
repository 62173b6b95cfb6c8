"""Data models for the workspace module.

Contains the value types produced by workspace inspection: the detected
build system kind, discovered executable descriptors, derived build plans
and the aggregate workspace report.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class BuildSystemKind(Enum):
    """Build tooling detected at a workspace root.

    The member value is the fixed display name shown to users.
    """

    NONE = "None"
    CMAKE = "CMake"
    MAKEFILE = "Makefile"
    NINJA = "Ninja"
    AUTOTOOLS = "AutoTools"
    SCRIPT = "Build Script"

    @property
    def display_name(self) -> str:
        """Return the human-readable name for this build system."""
        return self.value


@dataclass(frozen=True)
class ExecutableDescriptor:
    """A candidate runnable artifact found inside a workspace.

    Attributes:
        name: File base name.
        absolute_path: Absolute path to the file.
        relative_path: Path relative to the workspace root.
        is_graphical: Best-effort guess that this is a GUI program.
    """

    name: str
    absolute_path: Path
    relative_path: Path
    is_graphical: bool = False


@dataclass(frozen=True)
class BuildPlan:
    """Ordered build steps derived for a workspace.

    Attributes:
        kind: The build system the plan was derived for.
        working_directory: Directory every step runs in.
        steps: Argument vectors, executed in order.
        command: The preferred build command string.
    """

    kind: BuildSystemKind
    working_directory: Path
    steps: tuple[tuple[str, ...], ...]
    command: str

    def describe(self) -> list[str]:
        """Return each step rendered as a shell-like string."""
        return [" ".join(step) for step in self.steps]


@dataclass
class WorkspaceReport:
    """Summary of one workspace: build metadata, artifacts, git and layout.

    Attributes:
        path: Workspace root as registered.
        exists: Whether the root exists on disk.
        build_system: Display name of the detected build system.
        build_directory: Effective build directory.
        build_command: Preferred build command.
        build_scripts: Build scripts found at the root.
        executables: Discovered executables, in discovery order.
        main_executable: The selected main executable, if any.
        git_remote: First line of ``git remote -v``, if any.
        latest_tag: Most recent tag reachable from HEAD, if any.
        changed_files: Number of entries in ``git status --porcelain``.
        has_github_actions: ``.github/workflows`` exists.
        has_scripts_dir: ``scripts`` exists.
        documentation: ``"docs/ directory"``, ``"README.md"`` or None.
    """

    path: str
    exists: bool
    build_system: str
    build_directory: Path
    build_command: str
    build_scripts: list[str] = field(default_factory=list)
    executables: list[ExecutableDescriptor] = field(default_factory=list)
    main_executable: ExecutableDescriptor | None = None
    git_remote: str | None = None
    latest_tag: str | None = None
    changed_files: int = 0
    has_github_actions: bool = False
    has_scripts_dir: bool = False
    documentation: str | None = None
