"""Build-system detection and build-directory resolution.

Every check here looks only at the top level of a workspace root.

Detection Order (first match wins):
    1. ``CMakeLists.txt``                          -> CMake
    2. ``Makefile`` / ``makefile``                 -> Makefile
    3. ``build.ninja``                             -> Ninja
    4. ``configure`` / ``configure.ac`` / ``Makefile.am`` -> AutoTools
    5. ``build.sh`` / ``build.py`` / ``build.js``  -> Build Script
    6. nothing                                     -> None

The functions are pure with respect to the filesystem state at call
time; memoization lives on ``Workspace``.
"""

from __future__ import annotations

from pathlib import Path

from projectdeck.workspace.models import BuildSystemKind

# Marker files per build system, checked in priority order.
BUILD_SYSTEM_MARKERS: tuple[tuple[BuildSystemKind, tuple[str, ...]], ...] = (
    (BuildSystemKind.CMAKE, ("CMakeLists.txt",)),
    (BuildSystemKind.MAKEFILE, ("Makefile", "makefile")),
    (BuildSystemKind.NINJA, ("build.ninja",)),
    (BuildSystemKind.AUTOTOOLS, ("configure", "configure.ac", "Makefile.am")),
    (BuildSystemKind.SCRIPT, ("build.sh", "build.py", "build.js")),
)

BUILD_SCRIPT_NAMES: tuple[str, ...] = (
    "build.sh",
    "build.py",
    "build.js",
    "build.bat",
    "compile.sh",
    "make.sh",
    "install.sh",
)

BUILD_DIRECTORY_NAMES: tuple[str, ...] = (
    "build",
    "Build",
    "BUILD",
    "_build",
    "cmake-build",
    "cmake-build-debug",
    "cmake-build-release",
    "out",
    "bin",
    "target",
    "dist",
)

DEFAULT_BUILD_DIRECTORY = "build"

_FIXED_COMMANDS: dict[BuildSystemKind, str] = {
    BuildSystemKind.CMAKE: "cmake --build .",
    BuildSystemKind.MAKEFILE: "make",
    BuildSystemKind.NINJA: "ninja",
    BuildSystemKind.AUTOTOOLS: "make",
    BuildSystemKind.NONE: "make",
}

_FALLBACK_COMMAND = "make"


def _exists(path: Path) -> bool:
    try:
        return path.exists()
    except (PermissionError, OSError):
        return False


def _is_dir(path: Path) -> bool:
    try:
        return path.is_dir()
    except (PermissionError, OSError):
        return False


def detect_build_system(root: Path) -> BuildSystemKind:
    """Classify the build tooling of a workspace root.

    Args:
        root: Workspace root directory.

    Returns:
        The first matching ``BuildSystemKind``; ``NONE`` when no marker
        is present. Never raises.
    """
    for kind, markers in BUILD_SYSTEM_MARKERS:
        if any(_exists(root / marker) for marker in markers):
            return kind
    return BuildSystemKind.NONE


def list_build_scripts(root: Path) -> list[str]:
    """Return the known build script names present at the root, in fixed order."""
    return [name for name in BUILD_SCRIPT_NAMES if _exists(root / name)]


def effective_build_directory(root: Path) -> Path:
    """Resolve the directory that holds build output.

    Returns the first candidate from ``BUILD_DIRECTORY_NAMES`` that exists
    and is a directory. Falls back to ``root/build`` whether or not it
    exists.
    """
    for name in BUILD_DIRECTORY_NAMES:
        candidate = root / name
        if _is_dir(candidate):
            return candidate
    return root / DEFAULT_BUILD_DIRECTORY


def script_command(script: str) -> str:
    """Return the command that runs a build script by its extension."""
    if script.endswith(".sh"):
        return f"bash {script}"
    if script.endswith(".py"):
        return f"python {script}"
    return f"./{script}"


def preferred_build_command(kind: BuildSystemKind, scripts: list[str]) -> str:
    """Map a build system kind to the command that builds it.

    Args:
        kind: Detected build system.
        scripts: Build scripts found at the root; only the first is used,
            and only for ``SCRIPT`` workspaces.
    """
    if kind is BuildSystemKind.SCRIPT:
        if scripts:
            return script_command(scripts[0])
        return _FALLBACK_COMMAND
    return _FIXED_COMMANDS.get(kind, _FALLBACK_COMMAND)
