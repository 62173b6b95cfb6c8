"""``projectdeck run`` — Start a workspace's main executable.

GUI programs (by name heuristic) are started in the background; console
programs run in the foreground and their exit code becomes the exit code
of this command. The effective build directory is appended to ``PATH``.

Usage::

    projectdeck run myapp
    projectdeck run myapp --executable helper
    projectdeck run myapp --dry-run

Exit Codes:
    0 — GUI program started, console program succeeded, or ``--dry-run``.
    1 — No executable found, or it could not be started.
    2 — Unknown workspace name.
    N — Exit code of the console program.
"""

from __future__ import annotations

import sys

import click

from projectdeck.cli.output import console
from projectdeck.cli.workspace_cmd import require_workspace
from projectdeck.exceptions import CommandError
from projectdeck.workspace import launch_executable
from projectdeck.workspace.executables import select_main_executable


@click.command("run")
@click.argument("name")
@click.option("--executable", "-e", "exe_name", default=None,
              help="Run the executable with this file name instead of the main one.")
@click.option("--dry-run", is_flag=True, help="Show what would run without starting it.")
@click.pass_context
def run_command(ctx: click.Context, name: str, exe_name: str | None, dry_run: bool) -> None:
    """Run the main executable of workspace NAME."""
    workspace = require_workspace(ctx, name)
    executables = workspace.find_executables()
    if not executables:
        click.echo(
            "No executables found. Make sure the project has been built.", err=True
        )
        sys.exit(1)

    if exe_name is None:
        target = select_main_executable(executables, workspace.name)
    else:
        target = next((e for e in executables if e.name == exe_name), None)
        if target is None:
            click.echo(f"Error: no executable named '{exe_name}'.", err=True)
            sys.exit(1)

    kind = "GUI Application" if target.is_graphical else "Console Application"
    console.print(f"[bold]Executable:[/bold] {target.name}", highlight=False)
    console.print(f"[bold]Path:[/bold] {target.absolute_path}", highlight=False)
    console.print(f"[bold]Working Directory:[/bold] {workspace.root}", highlight=False)
    console.print(f"[bold]Type:[/bold] {kind}", highlight=False)

    if dry_run:
        return

    try:
        rc = launch_executable(workspace, target)
    except CommandError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if rc is None:
        console.print(f"[bold green]Started {target.name}.[/bold green]")
        return
    console.print(f"Application finished with exit code {rc}.")
    sys.exit(rc)
