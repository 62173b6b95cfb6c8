"""The ``Workspace`` entity: one registered project directory.

A workspace answers questions about its directory (which build system,
where build output lands, which files are runnable) and offers thin
dispatches that shell out to git and build tools.

Two build-directory notions coexist and are kept apart:

- ``build_directory`` is fixed at construction as ``root/build`` and is
  what ``configure_build``, ``build`` and ``clean`` operate on.
- ``effective_build_directory()`` scans for an existing output directory
  and is what inspection and executable discovery use.
"""

from __future__ import annotations

import logging
import os
import shlex
import shutil
import subprocess
import threading
from pathlib import Path

from projectdeck.exceptions import CommandError
from projectdeck.workspace import build_system, executables
from projectdeck.workspace.models import BuildSystemKind, ExecutableDescriptor

logger = logging.getLogger(__name__)

GIT_INIT_MARKER = "Initialized empty Git repository"


class Workspace:
    """A local project directory plus its derived build metadata.

    The build system is detected on first request and cached for the
    lifetime of the object, even if marker files change afterwards.

    Usage::

        ws = Workspace("/home/me/src/myapp")
        ws.build_system_display_name()     # "CMake"
        ws.preferred_build_command()       # "cmake --build ."
        main = ws.find_main_executable()
    """

    def __init__(self, path: str | Path) -> None:
        self._path = str(path)
        self._root = Path(path)
        self._build_directory = self._root / build_system.DEFAULT_BUILD_DIRECTORY
        self._cached_kind: BuildSystemKind | None = None
        self._cache_lock = threading.Lock()

    def __repr__(self) -> str:
        return f"Workspace({self._path!r})"

    # -- Identity -----------------------------------------------------------

    def get_path(self) -> str:
        """Return the root path exactly as the workspace was created with."""
        return self._path

    @property
    def root(self) -> Path:
        return self._root

    @property
    def name(self) -> str:
        """Base name of the root directory."""
        return self._root.name

    @property
    def build_directory(self) -> Path:
        """Default build directory (``root/build``) used by build/clean."""
        return self._build_directory

    def exists(self) -> bool:
        try:
            return self._root.exists()
        except (PermissionError, OSError):
            return False

    # -- Build system -------------------------------------------------------

    def detect_build_system(self) -> BuildSystemKind:
        """Return the build system, detecting it on the first call only."""
        with self._cache_lock:
            if self._cached_kind is None:
                self._cached_kind = build_system.detect_build_system(self._root)
                logger.debug(
                    "Detected %s for %s", self._cached_kind.display_name, self._path,
                )
            return self._cached_kind

    def build_system_display_name(self) -> str:
        return self.detect_build_system().display_name

    def list_build_scripts(self) -> list[str]:
        """Return build scripts present at the root, in fixed candidate order."""
        return build_system.list_build_scripts(self._root)

    def effective_build_directory(self) -> Path:
        """Return the existing build output directory, or ``root/build``."""
        return build_system.effective_build_directory(self._root)

    def preferred_build_command(self) -> str:
        kind = self.detect_build_system()
        scripts = self.list_build_scripts() if kind is BuildSystemKind.SCRIPT else []
        return build_system.preferred_build_command(kind, scripts)

    # -- Executables --------------------------------------------------------

    def find_executables(self) -> list[ExecutableDescriptor]:
        """Discover runnable artifacts. Recomputed on every call."""
        return executables.find_executables(self._root, self.effective_build_directory())

    def find_main_executable(self) -> ExecutableDescriptor | None:
        """Return the most likely main program, or None if there is none."""
        return executables.select_main_executable(self.find_executables(), self.name)

    # -- Process dispatch ---------------------------------------------------

    def run_process(
        self, cmd: str, cwd: str | Path | None = None
    ) -> subprocess.CompletedProcess[str]:
        """Run ``cmd`` through the shell, capturing stdout and stderr apart.

        Args:
            cmd: Shell command line.
            cwd: Working directory; defaults to the workspace root.

        Raises:
            CommandError: If the process cannot be started.
        """
        workdir = Path(cwd) if cwd is not None else self._root
        logger.debug("Running %r in %s", cmd, workdir)
        try:
            completed = subprocess.run(
                cmd,
                shell=True,
                cwd=str(workdir),
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                errors="replace",
            )
        except OSError as exc:
            raise CommandError(f"Cannot run {cmd!r} in {workdir}: {exc}") from exc
        if completed.stderr:
            logger.debug("%r stderr: %s", cmd, completed.stderr.rstrip())
        return completed

    def run_command(self, cmd: str, cwd: str | Path | None = None) -> str:
        """Run ``cmd`` through the shell and return its standard output.

        Standard error is not part of the result.

        Raises:
            CommandError: If the process cannot be started.
        """
        return self.run_process(cmd, cwd).stdout

    def git_init(self) -> bool:
        return GIT_INIT_MARKER in self.run_command("git init")

    def git_add(self) -> bool:
        self.run_command("git add .")
        return True

    def git_commit(self, message: str) -> bool:
        self.run_command(f"git commit -m {shlex.quote(message)}")
        return True

    def git_push(self, branch: str) -> bool:
        """Push ``branch`` and all tags to ``origin``.

        False when git exits non-zero or reports ``fatal`` or ``error``.
        """
        completed = self.run_process(f"git push origin {shlex.quote(branch)} --tags")
        output = completed.stdout + completed.stderr
        return (
            completed.returncode == 0
            and "fatal" not in output
            and "error" not in output
        )

    def configure_build(self) -> bool:
        """Create the default build directory and run ``cmake ..`` inside it."""
        os.makedirs(self._build_directory, exist_ok=True)
        self.run_command("cmake ..", cwd=self._build_directory)
        return True

    def build(self) -> bool:
        if not self._build_directory.exists():
            self.configure_build()
        self.run_command("make", cwd=self._build_directory)
        return True

    def clean(self) -> bool:
        """Remove the default build directory.

        A symlink or regular file at that path is unlinked; only a real
        directory is removed recursively. Returns False when removal fails.
        """
        target = self._build_directory
        try:
            if target.is_symlink() or target.is_file():
                target.unlink()
            elif target.is_dir():
                shutil.rmtree(target)
        except OSError:
            logger.warning("Failed to clean %s", target, exc_info=True)
            return False
        return True
