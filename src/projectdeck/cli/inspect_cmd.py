"""``projectdeck info|executables`` — Inspect a registered workspace.

``info`` prints the full report: build system, build directory, build
command, executables, git state and project layout. ``executables``
prints only the discovered runnable artifacts.

Exit Codes:
    0 — Success.
    1 — ``executables`` found nothing (or ``--main`` found no main program).
    2 — Unknown workspace name.
"""

from __future__ import annotations

import json
import sys

import click

from projectdeck.cli.output import (
    executable_to_dict,
    print_executables,
    print_report,
    report_to_dict,
)
from projectdeck.cli.workspace_cmd import require_workspace
from projectdeck.workspace import describe_workspace
from projectdeck.workspace.executables import select_main_executable


@click.command("info")
@click.argument("name")
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
@click.pass_context
def info_command(ctx: click.Context, name: str, output_format: str) -> None:
    """Show build, executable and git information for workspace NAME."""
    workspace = require_workspace(ctx, name)
    report = describe_workspace(workspace)

    if output_format == "json":
        data = report_to_dict(report)
        data["name"] = name
        click.echo(json.dumps(data, indent=2))
    else:
        print_report(name, report)


@click.command("executables")
@click.argument("name")
@click.option("--main", "main_only", is_flag=True, help="Print only the main executable.")
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
@click.pass_context
def executables_command(
    ctx: click.Context,
    name: str,
    main_only: bool,
    output_format: str,
) -> None:
    """List runnable artifacts found in workspace NAME."""
    workspace = require_workspace(ctx, name)
    executables = workspace.find_executables()
    main = select_main_executable(executables, workspace.name)

    if main_only:
        if main is None:
            click.echo("No main executable found.", err=True)
            sys.exit(1)
        if output_format == "json":
            click.echo(json.dumps(executable_to_dict(main), indent=2))
        else:
            click.echo(str(main.absolute_path))
        return

    if output_format == "json":
        click.echo(json.dumps({
            "executables": [executable_to_dict(e) for e in executables],
            "main": main.name if main else None,
        }, indent=2))
    else:
        print_executables(executables, main)

    sys.exit(0 if executables else 1)
