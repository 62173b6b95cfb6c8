"""Persistent name-to-workspace registry.

Public API::

    from projectdeck.registry import WorkspaceRegistry

    registry = WorkspaceRegistry("workspaces.txt")
    registry.add("myapp", "/home/me/src/myapp")
    print(registry.list_workspaces())
"""

from __future__ import annotations

from projectdeck.registry.manager import (
    DEFAULT_REGISTRY_FILE,
    WorkspaceRegistry,
    parse_record,
)

__all__ = [
    "DEFAULT_REGISTRY_FILE",
    "WorkspaceRegistry",
    "parse_record",
]
