"""``projectdeck add|remove|list`` — Manage the workspace registry.

Usage::

    projectdeck add myapp ~/src/myapp
    projectdeck list
    projectdeck list --format json
    projectdeck remove myapp

Exit Codes:
    0 — Success (removing an unknown name is not an error).
    1 — The registry file could not be read or written.
"""

from __future__ import annotations

import json
import logging
import os
import sys
from pathlib import Path

import click

from projectdeck.exceptions import RegistryError
from projectdeck.registry import WorkspaceRegistry
from projectdeck.workspace import Workspace

logger = logging.getLogger(__name__)


def open_registry(ctx: click.Context) -> WorkspaceRegistry:
    """Load the registry named by the global ``--registry-file`` option."""
    registry_file: Path = ctx.obj["registry_file"]
    try:
        return WorkspaceRegistry(registry_file)
    except RegistryError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)


def require_workspace(ctx: click.Context, name: str) -> Workspace:
    """Look up a workspace by name, exiting with code 2 when unknown."""
    workspace = open_registry(ctx).get(name)
    if workspace is None:
        click.echo(f"Error: no workspace named '{name}'.", err=True)
        sys.exit(2)
    return workspace


@click.command("add")
@click.argument("name")
@click.argument("path", type=click.Path(file_okay=False))
@click.pass_context
def add_command(ctx: click.Context, name: str, path: str) -> None:
    """Register PATH under NAME, replacing any existing entry."""
    registry = open_registry(ctx)
    absolute = os.path.abspath(os.path.expanduser(path))
    if not os.path.isdir(absolute):
        click.echo(f"Warning: {absolute} does not exist yet.", err=True)
    try:
        workspace = registry.add(name, absolute)
    except RegistryError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(f"Added workspace '{name}': {workspace.get_path()}")


@click.command("remove")
@click.argument("name")
@click.pass_context
def remove_command(ctx: click.Context, name: str) -> None:
    """Unregister NAME. The project directory itself is left untouched."""
    registry = open_registry(ctx)
    known = name in registry
    try:
        registry.remove(name)
    except RegistryError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    if known:
        click.echo(f"Removed workspace '{name}'.")
    else:
        click.echo(f"No workspace named '{name}'; nothing removed.")


@click.command("list")
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
@click.pass_context
def list_command(ctx: click.Context, output_format: str) -> None:
    """List registered workspaces."""
    registry = open_registry(ctx)
    if output_format == "json":
        data = [{"name": name, "path": ws.get_path()} for name, ws in registry.items()]
        click.echo(json.dumps(data, indent=2))
        return

    from projectdeck.cli.output import print_workspace_list
    print_workspace_list(registry.items())
