"""Start a workspace's executables.

GUI programs are started detached so the caller returns immediately;
console programs run in the foreground and their exit code is reported.
Both run from the workspace root with the effective build directory
appended to ``PATH``.
"""

from __future__ import annotations

import logging
import os
import subprocess
from collections.abc import Mapping

from projectdeck.exceptions import CommandError
from projectdeck.workspace.models import ExecutableDescriptor
from projectdeck.workspace.workspace import Workspace

logger = logging.getLogger(__name__)


def launch_environment(
    workspace: Workspace,
    base: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Return ``base`` (default ``os.environ``) with the build directory on ``PATH``."""
    env = dict(os.environ if base is None else base)
    build_dir = str(workspace.effective_build_directory())
    current = env.get("PATH")
    env["PATH"] = f"{current}{os.pathsep}{build_dir}" if current else build_dir
    return env


def launch_executable(
    workspace: Workspace,
    executable: ExecutableDescriptor,
) -> int | None:
    """Start ``executable`` from the workspace root.

    Returns:
        The exit code of a console program, or None for a GUI program
        that was started in the background.

    Raises:
        CommandError: If the program cannot be started.
    """
    argv = [str(executable.absolute_path)]
    env = launch_environment(workspace)
    cwd = str(workspace.root)
    logger.debug("Launching %s (gui=%s) in %s", argv[0], executable.is_graphical, cwd)

    try:
        if executable.is_graphical:
            subprocess.Popen(
                argv,
                cwd=cwd,
                env=env,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
            return None
        return subprocess.run(argv, cwd=cwd, env=env).returncode
    except OSError as exc:
        raise CommandError(f"Cannot start {argv[0]}: {exc}") from exc
