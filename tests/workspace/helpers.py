"""Shared test helpers for building fake workspaces on disk.

Each helper writes a minimal file with the permission bits and leading
bytes that the executable classifier looks at. Used by the workspace,
CLI and property tests.
"""

from __future__ import annotations

from pathlib import Path

ELF_MAGIC = b"\x7fELF"


def write_file(path: Path, content: bytes = b"", mode: int = 0o644) -> Path:
    """Write ``content`` to ``path`` (creating parents) and chmod it."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content)
    path.chmod(mode)
    return path


def write_elf(path: Path, size: int = 2000) -> Path:
    """Create an executable file that starts with the ELF magic number."""
    return write_file(path, ELF_MAGIC + b"\x00" * (size - len(ELF_MAGIC)), 0o755)


def write_executable(path: Path, content: bytes) -> Path:
    """Create a file with mode 0755 and the given content."""
    return write_file(path, content, 0o755)


def padded(first_line: bytes, size: int = 2000) -> bytes:
    """Return ``first_line`` followed by a newline and padding to ``size``."""
    body = first_line + b"\n"
    return body + b"x" * max(0, size - len(body))


def make_project(base: Path, name: str = "proj", markers: tuple[str, ...] = ()) -> Path:
    """Create a workspace root named ``name`` containing empty marker files."""
    root = base / name
    root.mkdir(parents=True, exist_ok=True)
    for marker in markers:
        write_file(root / marker, b"")
    return root
