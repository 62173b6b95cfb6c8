"""Named workspace registry with flat-file persistence.

The registry maps user-chosen names to ``Workspace`` objects and mirrors
that mapping to a plain text file, one ``name:path`` record per line.

File Format:
    - No header, no escaping, no checksum.
    - The first colon separates name from path; the path keeps any later
      colons.
    - Lines without a colon are ignored on load.
    - Every save rewrites the whole file.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from projectdeck.exceptions import RegistryError
from projectdeck.workspace import Workspace

logger = logging.getLogger(__name__)

DEFAULT_REGISTRY_FILE = Path("workspaces.txt")
RECORD_SEPARATOR = ":"


def parse_record(line: str) -> tuple[str, str] | None:
    """Split one ``name:path`` line; None when it has no separator."""
    name, sep, path = line.partition(RECORD_SEPARATOR)
    if not sep:
        return None
    return name, path


class WorkspaceRegistry:
    """Collection of named workspaces persisted to a text file.

    ``add`` and ``remove`` save immediately. Re-adding an existing name
    replaces the previous workspace.

    Example::

        registry = WorkspaceRegistry(Path("~/.projectdeck/workspaces.txt").expanduser())
        registry.add("myapp", "/home/me/src/myapp")
        ws = registry.get("myapp")
    """

    def __init__(
        self,
        config_file: str | Path = DEFAULT_REGISTRY_FILE,
        autoload: bool = True,
    ) -> None:
        self._config_file = Path(config_file)
        self._workspaces: dict[str, Workspace] = {}
        if autoload:
            self.load()

    @property
    def config_file(self) -> Path:
        return self._config_file

    # -- Collection ---------------------------------------------------------

    def add(self, name: str, path: str | Path) -> Workspace:
        """Register ``path`` under ``name`` (replacing any entry) and save.

        Returns:
            The newly created ``Workspace``.
        """
        workspace = Workspace(path)
        self._workspaces[name] = workspace
        self.save()
        return workspace

    def remove(self, name: str) -> None:
        """Drop ``name`` if registered and save. Unknown names are ignored."""
        self._workspaces.pop(name, None)
        self.save()

    def get(self, name: str) -> Workspace | None:
        return self._workspaces.get(name)

    def list_workspaces(self) -> list[str]:
        """Return ``"name: path"`` strings in mapping order."""
        return [f"{name}: {ws.get_path()}" for name, ws in self._workspaces.items()]

    def items(self) -> list[tuple[str, Workspace]]:
        return list(self._workspaces.items())

    def __contains__(self, name: object) -> bool:
        return name in self._workspaces

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._workspaces))

    def __len__(self) -> int:
        return len(self._workspaces)

    # -- Persistence --------------------------------------------------------

    def load(self) -> None:
        """Merge records from the registry file into this registry.

        A missing file loads nothing. Malformed lines are skipped.

        Raises:
            RegistryError: If the file exists but cannot be read.
        """
        try:
            text = self._config_file.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("No registry file at %s", self._config_file)
            return
        except (PermissionError, OSError, UnicodeDecodeError) as exc:
            raise RegistryError(
                f"Cannot read registry file {self._config_file}: {exc}"
            ) from exc

        for lineno, raw in enumerate(text.split("\n"), start=1):
            line = raw.removesuffix("\r")
            if not line:
                continue
            record = parse_record(line)
            if record is None:
                logger.debug("Skipping malformed line %d in %s", lineno, self._config_file)
                continue
            name, path = record
            self._workspaces[name] = Workspace(path)

    def save(self) -> None:
        """Overwrite the registry file with the current entries.

        Raises:
            RegistryError: If the file cannot be written.
        """
        content = "".join(
            f"{name}{RECORD_SEPARATOR}{ws.get_path()}\n"
            for name, ws in self._workspaces.items()
        )
        try:
            if self._config_file.parent != Path():
                self._config_file.parent.mkdir(parents=True, exist_ok=True)
            self._config_file.write_text(content, encoding="utf-8")
        except (PermissionError, OSError) as exc:
            raise RegistryError(
                f"Cannot write registry file {self._config_file}: {exc}"
            ) from exc
