"""Derive the concrete steps that build a workspace.

A ``BuildPlan`` says where to run and which argument vectors to execute,
without executing anything. CMake projects get a configure step while
the build directory has no ``CMakeCache.txt``; build scripts run from the
workspace root; every other build system runs its preferred command in
the effective build directory.
"""

from __future__ import annotations

import os
from pathlib import Path

from projectdeck.workspace.models import BuildPlan, BuildSystemKind
from projectdeck.workspace.workspace import Workspace

DEFAULT_GENERATOR = "Unix Makefiles"
NINJA_GENERATOR = "Ninja"
CMAKE_CACHE_FILE = "CMakeCache.txt"

MAKEFILE_NAMES: tuple[str, ...] = ("Makefile", "makefile", "GNUmakefile")


def _cmake_steps(build_dir: Path, generator: str, jobs: int | None) -> list[tuple[str, ...]]:
    steps: list[tuple[str, ...]] = []
    if not (build_dir / CMAKE_CACHE_FILE).exists():
        steps.append(("cmake", "..", "-G", generator))

    build_step = ["cmake", "--build", ".", "--parallel"]
    if generator != NINJA_GENERATOR:
        build_step.append(str(jobs or os.cpu_count() or 1))
    steps.append(tuple(build_step))
    return steps


def plan_build(
    workspace: Workspace,
    generator: str = DEFAULT_GENERATOR,
    jobs: int | None = None,
) -> BuildPlan:
    """Work out how to build ``workspace``.

    Args:
        workspace: The workspace to build.
        generator: CMake generator used when a configure step is needed.
        jobs: Parallel job count for non-Ninja CMake builds. Defaults to
            the CPU count.

    Returns:
        A ``BuildPlan``. Never raises for missing directories; the caller
        creates the working directory before running the steps.
    """
    kind = workspace.detect_build_system()
    command = workspace.preferred_build_command()
    build_dir = workspace.effective_build_directory()

    if kind is BuildSystemKind.CMAKE:
        steps = _cmake_steps(build_dir, generator, jobs)
        working_directory = build_dir
    elif kind is BuildSystemKind.SCRIPT:
        steps = [tuple(command.split())]
        working_directory = workspace.root
    else:
        steps = [tuple(command.split())]
        working_directory = build_dir

    return BuildPlan(
        kind=kind,
        working_directory=working_directory,
        steps=tuple(steps),
        command=command,
    )


def find_makefile(workspace: Workspace) -> Path | None:
    """Locate the Makefile at the root, else in the effective build directory."""
    for base in (workspace.root, workspace.effective_build_directory()):
        for name in MAKEFILE_NAMES:
            candidate = base / name
            if candidate.is_file():
                return candidate
    return None
