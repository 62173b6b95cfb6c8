"""Semantic version helpers backed by annotated git tags.

Versions are read from the most recent tag (``v1.2.3`` or ``1.2.3``) and
new versions are published as ``v<major>.<minor>.<patch>`` tags.
"""

from __future__ import annotations

import shlex
from enum import Enum

from projectdeck.workspace.workspace import Workspace

INITIAL_VERSION = "0.0.0"
RESET_VERSION = "1.0.0"


class VersionPart(Enum):
    """Which component of a ``major.minor.patch`` version to bump."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"


def _to_int(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        return 0


def current_version(workspace: Workspace) -> str:
    """Return the latest tag without a leading ``v``, or ``"0.0.0"``."""
    result = workspace.run_command("git describe --tags --abbrev=0")
    if not result or "fatal" in result:
        return INITIAL_VERSION
    version = result.strip()
    if version.startswith("v"):
        version = version[1:]
    return version or INITIAL_VERSION


def increment_version(version: str, part: VersionPart) -> str:
    """Bump one component of a three-part version.

    Anything that does not split into exactly three dot-separated parts
    becomes ``"1.0.0"``. Non-numeric parts count as zero.
    """
    parts = version.split(".")
    if len(parts) != 3:
        return RESET_VERSION

    major, minor, patch = (_to_int(p) for p in parts)
    if part is VersionPart.MAJOR:
        major, minor, patch = major + 1, 0, 0
    elif part is VersionPart.MINOR:
        minor, patch = minor + 1, 0
    else:
        patch += 1
    return f"{major}.{minor}.{patch}"


def create_version_tag(workspace: Workspace, version: str) -> bool:
    """Create the annotated tag ``v<version>``."""
    tag = f"v{version}"
    message = f"Version {version}"
    completed = workspace.run_process(
        f"git tag -a {shlex.quote(tag)} -m {shlex.quote(message)}"
    )
    return completed.returncode == 0 and "fatal" not in completed.stderr
