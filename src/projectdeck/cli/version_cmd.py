"""``projectdeck version|bump`` — Read and tag semantic versions.

The current version is the most recent git tag (``v`` prefix stripped,
``0.0.0`` when there is none). ``bump`` creates the next annotated
``v<major>.<minor>.<patch>`` tag.

Usage::

    projectdeck version myapp
    projectdeck bump myapp minor
    projectdeck bump myapp patch --dry-run

Exit Codes:
    0 — Success.
    1 — Tag creation failed or git could not be run.
    2 — Unknown workspace name.
"""

from __future__ import annotations

import sys

import click

from projectdeck.cli.workspace_cmd import require_workspace
from projectdeck.exceptions import CommandError
from projectdeck.workspace import (
    VersionPart,
    create_version_tag,
    current_version,
    increment_version,
)


@click.command("version")
@click.argument("name")
@click.pass_context
def version_command(ctx: click.Context, name: str) -> None:
    """Print the current version of workspace NAME."""
    workspace = require_workspace(ctx, name)
    try:
        click.echo(current_version(workspace))
    except CommandError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)


@click.command("bump")
@click.argument("name")
@click.argument("part", type=click.Choice([p.value for p in VersionPart]))
@click.option("--dry-run", is_flag=True, help="Show the new version without tagging.")
@click.pass_context
def bump_command(ctx: click.Context, name: str, part: str, dry_run: bool) -> None:
    """Tag workspace NAME with the next PART version (major, minor, patch)."""
    workspace = require_workspace(ctx, name)
    try:
        current = current_version(workspace)
        new = increment_version(current, VersionPart(part))
        click.echo(f"{current} -> {new}")
        if dry_run:
            return
        ok = create_version_tag(workspace, new)
    except CommandError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if not ok:
        click.echo("Error: failed to create version tag.", err=True)
        sys.exit(1)
    click.echo(f"Tagged v{new}")
