"""projectdeck CLI — Manage local project workspaces and their builds.

Entry point for the ``projectdeck`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    add           — Register a project directory under a name.
    remove        — Unregister a workspace.
    list          — List registered workspaces.
    info          — Show build system, executables, git and layout details.
    executables   — List runnable artifacts (or the main one).
    build         — Build with the detected build system.
    clean         — Remove the default build directory.
    edit-makefile — Open the workspace Makefile in an editor.
    run           — Start the main executable.
    commit        — Stage and commit all changes, optionally pushing.
    version       — Show the current tagged version.
    bump          — Create the next major/minor/patch version tag.

Usage::

    projectdeck add myapp ~/src/myapp
    projectdeck info myapp
    projectdeck executables myapp --main
    projectdeck build myapp --dry-run
    projectdeck bump myapp patch
    PROJECTDECK_REGISTRY=~/.projectdeck/workspaces.txt projectdeck list
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from projectdeck import __version__
from projectdeck.cli.build_cmd import build_command, clean_command, edit_makefile_command
from projectdeck.cli.git_cmd import commit_command
from projectdeck.cli.inspect_cmd import executables_command, info_command
from projectdeck.cli.run_cmd import run_command
from projectdeck.cli.version_cmd import bump_command, version_command
from projectdeck.cli.workspace_cmd import add_command, list_command, remove_command
from projectdeck.registry import DEFAULT_REGISTRY_FILE

REGISTRY_ENVVAR = "PROJECTDECK_REGISTRY"


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--registry-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_REGISTRY_FILE,
    envvar=REGISTRY_ENVVAR,
    show_default=True,
    help=f"Workspace registry file (env: {REGISTRY_ENVVAR}).",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, registry_file: Path, verbose: bool) -> None:
    """projectdeck: Workspace registry, build detection and artifact discovery.

    Register local project directories, detect how they build, find the
    programs they produce, and drive builds and version tags.
    """
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.WARNING,
    )
    if verbose:
        logging.getLogger("projectdeck").setLevel(logging.DEBUG)

    ctx.ensure_object(dict)
    ctx.obj["registry_file"] = Path(registry_file).expanduser()


# Register all subcommands
cli.add_command(add_command)
cli.add_command(remove_command)
cli.add_command(list_command)
cli.add_command(info_command)
cli.add_command(executables_command)
cli.add_command(build_command)
cli.add_command(clean_command)
cli.add_command(edit_makefile_command)
cli.add_command(run_command)
cli.add_command(commit_command)
cli.add_command(version_command)
cli.add_command(bump_command)
