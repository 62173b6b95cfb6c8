"""``projectdeck build|clean|edit-makefile`` — Build, clean or edit a workspace.

``build`` derives a build plan from the detected build system and runs
each step in order, streaming tool output to the terminal. CMake
projects are configured first when the build directory has no
``CMakeCache.txt``.

Usage::

    projectdeck build myapp
    projectdeck build myapp --generator Ninja
    projectdeck build myapp --dry-run
    projectdeck clean myapp --yes
    projectdeck edit-makefile myapp

Exit Codes:
    0 — Build (or clean) succeeded, or ``--dry-run``.
    1 — Clean failed, or no Makefile to edit.
    2 — Unknown workspace name.
    N — Return code of the first failing build step.
"""

from __future__ import annotations

import logging
import subprocess
import sys

import click

from projectdeck.cli.output import console, print_build_plan
from projectdeck.cli.workspace_cmd import require_workspace
from projectdeck.workspace import BuildPlan, find_makefile, plan_build
from projectdeck.workspace.build_plan import DEFAULT_GENERATOR, NINJA_GENERATOR

logger = logging.getLogger(__name__)


def run_plan(plan: BuildPlan) -> int:
    """Execute every step of ``plan``; return the first non-zero code or 0."""
    plan.working_directory.mkdir(parents=True, exist_ok=True)
    for step in plan.steps:
        console.print(f"[bold]Executing:[/bold] {' '.join(step)}", highlight=False)
        try:
            completed = subprocess.run(list(step), cwd=str(plan.working_directory))
        except OSError as exc:
            logger.warning("Cannot start %s: %s", step[0], exc)
            click.echo(f"Error: cannot start '{step[0]}': {exc}", err=True)
            return 127
        if completed.returncode != 0:
            return completed.returncode
    return 0


@click.command("build")
@click.argument("name")
@click.option(
    "--generator",
    type=click.Choice([DEFAULT_GENERATOR, NINJA_GENERATOR]),
    default=DEFAULT_GENERATOR,
    help="CMake generator for the configure step.",
)
@click.option("--jobs", "-j", type=click.IntRange(min=1), default=None,
              help="Parallel jobs for CMake builds (default: CPU count).")
@click.option("--dry-run", is_flag=True, help="Print the plan without running it.")
@click.pass_context
def build_command(
    ctx: click.Context,
    name: str,
    generator: str,
    jobs: int | None,
    dry_run: bool,
) -> None:
    """Build workspace NAME with its detected build system."""
    workspace = require_workspace(ctx, name)
    plan = plan_build(workspace, generator=generator, jobs=jobs)
    print_build_plan(name, plan)

    if dry_run:
        return

    rc = run_plan(plan)
    if rc == 0:
        console.print("[bold green]Build completed successfully.[/bold green]")
    else:
        console.print(f"[bold red]Build failed with exit code {rc}.[/bold red]")
    sys.exit(rc)


@click.command("clean")
@click.argument("name")
@click.confirmation_option(prompt="Remove the build directory?")
@click.pass_context
def clean_command(ctx: click.Context, name: str) -> None:
    """Remove the default build directory of workspace NAME."""
    workspace = require_workspace(ctx, name)
    if not workspace.clean():
        click.echo(f"Error: failed to clean {workspace.build_directory}.", err=True)
        sys.exit(1)
    click.echo(f"Cleaned {workspace.build_directory}")


@click.command("edit-makefile")
@click.argument("name")
@click.option("--editor", default=None, help="Editor command (default: $VISUAL or $EDITOR).")
@click.pass_context
def edit_makefile_command(ctx: click.Context, name: str, editor: str | None) -> None:
    """Open the Makefile of workspace NAME in an editor.

    The workspace root is searched first, then the build directory for a
    generated Makefile.
    """
    workspace = require_workspace(ctx, name)
    makefile = find_makefile(workspace)
    if makefile is None:
        click.echo("No Makefile found in the workspace.", err=True)
        sys.exit(1)

    click.echo(f"Editing {makefile}")
    try:
        click.edit(filename=str(makefile), editor=editor)
    except click.ClickException as exc:
        click.echo(f"Error: {exc.format_message()}", err=True)
        sys.exit(1)
