"""Executable discovery and classification for workspaces.

Finds build artifacts that can be run, classifies each as GUI or console
with a name heuristic, and picks the most likely "main" program.

Discovery Algorithm:
    1. Search roots: the effective build directory, then ``bin``, ``out``,
       ``target``, ``Release`` and ``Debug`` under the workspace root.
    2. Walk each existing root to a depth of 3, pruning cache and
       metadata directories (``CMakeFiles``, ``.git``, ``node_modules``...).
    3. Keep regular files that pass every rule in ``EXECUTABLE_RULES``.
    4. If no root produced anything, scan the workspace root one level deep.

Classification Rules:
    The executable predicate is a chain of independent guards over a
    ``FileProbe``. Each rule can be tested on its own; a file is
    executable only when all of them hold. Name and extension comparisons
    are case-sensitive.
"""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from pathlib import Path

from projectdeck.workspace.models import ExecutableDescriptor

logger = logging.getLogger(__name__)

SEARCH_SUBDIRECTORIES: tuple[str, ...] = ("bin", "out", "target", "Release", "Debug")

MAX_SEARCH_DEPTH = 3

# Subtrees never descended into while walking a search root.
PRUNED_DIRECTORY_NAMES: frozenset[str] = frozenset({
    "CMakeFiles", ".git", "node_modules", "__pycache__",
    ".cache", "tmp", "temp", "obj", "libs",
})

# A file whose immediate parent has one of these names is never executable.
CACHE_DIRECTORY_NAMES: frozenset[str] = frozenset({
    "CMakeFiles", ".git", "node_modules", "__pycache__",
    ".cache", "tmp", "temp",
})

SCRIPT_EXTENSIONS: frozenset[str] = frozenset({
    ".sh", ".py", ".js", ".pl", ".rb", ".lua",
    ".txt", ".md", ".json", ".xml", ".yml", ".yaml",
})

# System and toolchain programs that sometimes get copied into projects.
TOOL_NAMES: frozenset[str] = frozenset({
    "make", "cmake", "ninja", "gcc", "g++", "clang", "clang++",
    "git", "svn", "tar", "zip", "unzip", "wget", "curl",
    "ls", "cp", "mv", "rm", "mkdir", "cat", "grep", "sed", "awk",
    "python", "python3", "node", "npm", "yarn",
    "configure", "config", "install", "setup",
})

GUI_NAME_INDICATORS: tuple[str, ...] = (
    "gui", "window", "qt", "gtk", "ui", "editor", "viewer", "browser",
)

MAIN_NAME_CANDIDATES: tuple[str, ...] = ("main", "app", "application", "run", "start")

MIN_BINARY_SIZE = 1024
ELF_MAGIC = b"\x7fELF"
SHEBANG = b"#!"
SOURCE_LINE_PREFIXES: tuple[str, ...] = ("#!/", "<?", "//", "/*")
SOURCE_LINE_MARKER = "#include"

_EXECUTE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


@dataclass(frozen=True)
class FileProbe:
    """Filesystem facts about one candidate file.

    Attributes:
        path: Path to the file.
        status: ``os.stat`` result (symlinks followed).
    """

    path: Path
    status: os.stat_result

    @classmethod
    def from_path(cls, path: Path) -> FileProbe | None:
        """Stat a path; returns None when it does not exist or cannot be read."""
        try:
            return cls(path=path, status=path.stat())
        except (PermissionError, OSError):
            return None

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def suffix(self) -> str:
        return self.path.suffix

    @property
    def parent_name(self) -> str:
        return self.path.parent.name

    def read_first_line(self) -> bytes:
        """Read the file up to and including its first newline."""
        with open(self.path, "rb") as fh:
            return fh.readline()


def is_executable_regular_file(probe: FileProbe) -> bool:
    """Regular file with at least one execute permission bit."""
    mode = probe.status.st_mode
    return stat.S_ISREG(mode) and bool(mode & _EXECUTE_BITS)


def has_non_script_extension(probe: FileProbe) -> bool:
    """Extension is not a script, text or documentation type."""
    return probe.suffix not in SCRIPT_EXTENSIONS


def is_not_known_tool(probe: FileProbe) -> bool:
    """Name is not a common system or toolchain program."""
    return probe.name not in TOOL_NAMES


def is_outside_cache_directory(probe: FileProbe) -> bool:
    """Immediate parent is not a cache or metadata directory."""
    return probe.parent_name not in CACHE_DIRECTORY_NAMES


def looks_like_built_binary(probe: FileProbe) -> bool:
    """Content check applied only to files without an extension.

    Small files are rejected. ELF binaries are accepted outright, shebang
    scripts rejected, and anything whose first line reads like source
    code is rejected. Everything else is accepted.
    """
    if probe.suffix:
        return True
    if probe.status.st_size < MIN_BINARY_SIZE:
        return False
    try:
        head = probe.read_first_line()
    except (PermissionError, OSError):
        logger.debug("Cannot read %s", probe.path)
        return False

    if head[:4] == ELF_MAGIC:
        return True
    if head.startswith(SHEBANG):
        return False

    first_line = head.rstrip(b"\r\n").decode("utf-8", errors="replace")
    if first_line.startswith(SOURCE_LINE_PREFIXES) or SOURCE_LINE_MARKER in first_line:
        return False
    return True


EXECUTABLE_RULES: tuple[Callable[[FileProbe], bool], ...] = (
    is_executable_regular_file,
    has_non_script_extension,
    is_not_known_tool,
    is_outside_cache_directory,
    looks_like_built_binary,
)


def is_executable_file(path: Path) -> bool:
    """Return True when every rule in ``EXECUTABLE_RULES`` accepts ``path``."""
    probe = FileProbe.from_path(path)
    if probe is None:
        return False
    return all(rule(probe) for rule in EXECUTABLE_RULES)


def is_likely_graphical(name: str) -> bool:
    """Guess from the file name whether a program opens a window."""
    lowered = name.lower()
    return any(indicator in lowered for indicator in GUI_NAME_INDICATORS)


def describe_executable(path: Path, root: Path) -> ExecutableDescriptor:
    """Build the descriptor for an executable found under ``root``."""
    return ExecutableDescriptor(
        name=path.name,
        absolute_path=Path(os.path.abspath(path)),
        relative_path=Path(os.path.relpath(path, root)),
        is_graphical=is_likely_graphical(path.name),
    )


def walk_files(search_root: Path, max_depth: int = MAX_SEARCH_DEPTH) -> Iterator[Path]:
    """Yield regular files under ``search_root`` up to ``max_depth``.

    Direct children of ``search_root`` are depth 0. Directories named in
    ``PRUNED_DIRECTORY_NAMES`` are not entered, and directory symlinks are
    not followed. Unreadable directories are skipped.
    """
    worklist: list[tuple[Path, int]] = [(search_root, 0)]
    while worklist:
        directory, depth = worklist.pop()
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda e: e.name)
        except (PermissionError, OSError):
            logger.debug("Skipping unreadable directory: %s", directory)
            continue

        subdirs: list[Path] = []
        for entry in entries:
            try:
                if entry.is_dir(follow_symlinks=False):
                    if entry.name not in PRUNED_DIRECTORY_NAMES and depth < max_depth:
                        subdirs.append(Path(entry.path))
                    continue
                if entry.is_file():
                    yield Path(entry.path)
            except OSError:
                continue

        for subdir in reversed(subdirs):
            worklist.append((subdir, depth + 1))


def _scan_search_root(search_root: Path, root: Path) -> list[ExecutableDescriptor]:
    found: list[ExecutableDescriptor] = []
    try:
        for path in walk_files(search_root):
            if is_executable_file(path):
                found.append(describe_executable(path, root))
    except (PermissionError, OSError):
        logger.warning("Failed to scan %s", search_root, exc_info=True)
        return []
    return found


def _scan_top_level(root: Path) -> list[ExecutableDescriptor]:
    found: list[ExecutableDescriptor] = []
    try:
        with os.scandir(root) as it:
            entries = sorted(it, key=lambda e: e.name)
    except (PermissionError, OSError):
        logger.debug("Cannot list workspace root: %s", root)
        return found
    for entry in entries:
        try:
            if not entry.is_file():
                continue
        except OSError:
            continue
        path = Path(entry.path)
        if is_executable_file(path):
            found.append(describe_executable(path, root))
    return found


def search_roots(root: Path, build_directory: Path) -> list[Path]:
    """Return the directories searched for executables, without duplicates."""
    candidates = [build_directory] + [root / name for name in SEARCH_SUBDIRECTORIES]
    return list(dict.fromkeys(candidates))


def find_executables(root: Path, build_directory: Path) -> list[ExecutableDescriptor]:
    """Discover runnable artifacts in a workspace.

    Args:
        root: Workspace root directory.
        build_directory: Effective build directory of the workspace.

    Returns:
        Descriptors in traversal order. Empty when nothing qualifies.
        Never raises for filesystem errors.
    """
    executables: list[ExecutableDescriptor] = []
    for search_root in search_roots(root, build_directory):
        try:
            if not search_root.is_dir():
                continue
        except (PermissionError, OSError):
            continue
        executables.extend(_scan_search_root(search_root, root))

    if not executables:
        executables = _scan_top_level(root)
    return executables


def select_main_executable(
    executables: list[ExecutableDescriptor],
    project_name: str,
) -> ExecutableDescriptor | None:
    """Pick the executable most likely to be the project's main program.

    Preference: a name containing the project name, then a name containing
    one of ``MAIN_NAME_CANDIDATES`` (in that order), then the first one.
    """
    if not executables:
        return None

    project = project_name.lower()
    for exe in executables:
        if project in exe.name.lower():
            return exe

    for candidate in MAIN_NAME_CANDIDATES:
        for exe in executables:
            if candidate in exe.name.lower():
                return exe

    return executables[0]
