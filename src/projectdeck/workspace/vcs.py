"""Commit helpers layered on the workspace git dispatches."""

from __future__ import annotations

import logging
import shlex
from enum import Enum

from projectdeck.workspace.workspace import Workspace

logger = logging.getLogger(__name__)

NOTHING_TO_COMMIT_MARKER = "nothing to commit"


class CommitOutcome(Enum):
    """Result of staging and committing every change in a workspace."""

    COMMITTED = "committed"
    NOTHING_TO_COMMIT = "nothing to commit"
    FAILED = "failed"


def commit_changes(workspace: Workspace, message: str) -> tuple[CommitOutcome, str]:
    """Run ``git add .`` then ``git commit -m <message>``.

    Returns:
        The outcome and git's combined output, for display on failure.
    """
    workspace.git_add()
    completed = workspace.run_process(f"git commit -m {shlex.quote(message)}")
    output = completed.stdout + completed.stderr

    if NOTHING_TO_COMMIT_MARKER in output:
        return CommitOutcome.NOTHING_TO_COMMIT, output
    if completed.returncode != 0 or "fatal" in output:
        logger.debug("git commit failed in %s: %s", workspace.get_path(), output.strip())
        return CommitOutcome.FAILED, output
    return CommitOutcome.COMMITTED, output
