"""``projectdeck commit`` — Commit every change in a workspace.

Stages all changes with ``git add .`` and commits them. With ``--push``
the branch and all tags are pushed to ``origin`` after a successful
commit.

Usage::

    projectdeck commit myapp -m "Fix window resize"
    projectdeck commit myapp -m "Release" --push main

Exit Codes:
    0 — Committed (and pushed), or nothing to commit.
    1 — Commit or push failed, or git could not be run.
    2 — Unknown workspace name.
"""

from __future__ import annotations

import sys

import click

from projectdeck.cli.workspace_cmd import require_workspace
from projectdeck.exceptions import CommandError
from projectdeck.workspace import CommitOutcome, commit_changes


@click.command("commit")
@click.argument("name")
@click.option("--message", "-m", required=True, help="Commit message.")
@click.option("--push", "branch", default=None, metavar="BRANCH",
              help="Push BRANCH and tags to origin after committing.")
@click.pass_context
def commit_command(ctx: click.Context, name: str, message: str, branch: str | None) -> None:
    """Stage and commit all changes in workspace NAME."""
    workspace = require_workspace(ctx, name)
    try:
        outcome, output = commit_changes(workspace, message)
        if outcome is CommitOutcome.NOTHING_TO_COMMIT:
            click.echo("No changes to commit.")
            return
        if outcome is CommitOutcome.FAILED:
            click.echo(f"Error: commit failed.\n{output.strip()}", err=True)
            sys.exit(1)
        click.echo("Committed changes.")

        if branch is None:
            return
        if not workspace.git_push(branch):
            click.echo(f"Error: failed to push {branch} to origin.", err=True)
            sys.exit(1)
    except CommandError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(f"Pushed {branch} with tags to origin.")
