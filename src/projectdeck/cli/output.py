"""Rich output formatting helpers for the projectdeck CLI.

Provides consistent terminal rendering for the workspace list, workspace
reports, executable listings and build plans, plus JSON conversions used
by ``--format json``.

Style Mapping:
    GUI executables = magenta, main executable = bold green,
    missing paths = red, build system = cyan
"""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from projectdeck.workspace import BuildPlan, ExecutableDescriptor, Workspace, WorkspaceReport

console = Console()


def executable_to_dict(exe: ExecutableDescriptor) -> dict[str, Any]:
    return {
        "name": exe.name,
        "path": str(exe.absolute_path),
        "relative_path": str(exe.relative_path),
        "gui": exe.is_graphical,
    }


def report_to_dict(report: WorkspaceReport) -> dict[str, Any]:
    """Convert a workspace report to a JSON-serializable dict."""
    return {
        "path": report.path,
        "exists": report.exists,
        "build_system": report.build_system,
        "build_directory": str(report.build_directory),
        "build_command": report.build_command,
        "build_scripts": report.build_scripts,
        "executables": [executable_to_dict(e) for e in report.executables],
        "main_executable": (
            report.main_executable.name if report.main_executable else None
        ),
        "git": {
            "remote": report.git_remote,
            "latest_tag": report.latest_tag,
            "changed_files": report.changed_files,
        },
        "structure": {
            "github_actions": report.has_github_actions,
            "scripts_dir": report.has_scripts_dir,
            "documentation": report.documentation,
        },
    }


def print_workspace_list(entries: list[tuple[str, Workspace]]) -> None:
    """Print registered workspaces as a table."""
    if not entries:
        console.print("[dim]No workspaces registered.[/dim]")
        return

    table = Table(title="Workspaces", show_header=True, header_style="bold")
    table.add_column("Name", style="bold")
    table.add_column("Path")
    table.add_column("Build System", style="cyan")

    for name, ws in entries:
        if ws.exists():
            path = Text(ws.get_path())
            kind = ws.build_system_display_name()
        else:
            path = Text(ws.get_path(), style="red")
            kind = "-"
        table.add_row(name, path, kind)

    console.print(table)


def _executables_table(
    executables: list[ExecutableDescriptor],
    main: ExecutableDescriptor | None,
) -> Table:
    table = Table(title="Executables", show_header=True, header_style="bold")
    table.add_column("Name", style="bold")
    table.add_column("Location", style="dim")
    table.add_column("Type", justify="center")
    for exe in executables:
        name = Text(exe.name, style="bold green") if exe == main else Text(exe.name)
        kind = Text("GUI", style="magenta") if exe.is_graphical else Text("Console")
        table.add_row(name, str(exe.relative_path), kind)
    return table


def print_executables(
    executables: list[ExecutableDescriptor],
    main: ExecutableDescriptor | None,
) -> None:
    """Print discovered executables, highlighting the main one."""
    if not executables:
        console.print("[dim]No executables found.[/dim]")
        return
    console.print(_executables_table(executables, main))
    if main is not None:
        console.print(f"Main: [bold green]{main.name}[/bold green]")


def print_report(name: str, report: WorkspaceReport) -> None:
    """Print a full workspace report."""
    header = Text.assemble(
        ("Workspace: ", "bold"), (name, ""),
        ("  Path: ", "bold"), (report.path, "" if report.exists else "red"),
    )
    console.print(Panel(header, title="Workspace"))

    console.print("[bold]Build System[/bold]")
    console.print(f"  Type:            [cyan]{report.build_system}[/cyan]")
    console.print(f"  Build Directory: {report.build_directory}")
    console.print(f"  Build Command:   {report.build_command}")
    if report.build_scripts:
        console.print(f"  Build Scripts:   {', '.join(report.build_scripts)}")

    print_executables(report.executables, report.main_executable)

    console.print("[bold]Git[/bold]")
    console.print(f"  Remote:     {report.git_remote or 'Not a git repository'}")
    console.print(f"  Latest Tag: {report.latest_tag or 'None'}")
    if report.changed_files:
        console.print(f"  Status:     {report.changed_files} changed file(s)")
    else:
        console.print("  Status:     Clean working tree")

    console.print("[bold]Project Structure[/bold]")
    console.print(
        f"  GitHub Actions:    {'Available' if report.has_github_actions else 'None'}"
    )
    console.print(
        f"  Scripts Directory: {'Available' if report.has_scripts_dir else 'None'}"
    )
    console.print(f"  Documentation:     {report.documentation or 'None'}")


def print_build_plan(name: str, plan: BuildPlan) -> None:
    """Print the build system, working directory and steps of a plan."""
    console.print(
        Panel(
            Text.assemble(("Workspace: ", "bold"), (name, ""),
                          ("  Build System: ", "bold"), (plan.kind.display_name, "cyan")),
            title="Build Plan",
        )
    )
    console.print(f"  Working Directory: {plan.working_directory}")
    for idx, step in enumerate(plan.describe(), start=1):
        console.print(f"  {idx}. {step}", markup=False, highlight=False)
