"""projectdeck exception hierarchy.

All public exceptions inherit from ProjectDeckError, giving callers a single
base class to catch when they want to handle any projectdeck-specific failure
without swallowing unrelated errors.

Expected absences (no build system, no executables, unknown workspace name)
are never signalled with exceptions; they come back as ``None`` or empty
values.
"""


class ProjectDeckError(Exception):
    """Base exception for all projectdeck errors."""


class RegistryError(ProjectDeckError):
    """Raised when the workspace registry file cannot be read or written.

    A missing registry file is not an error; it loads as an empty
    registry. Permission problems and other I/O failures are.
    """


class CommandError(ProjectDeckError):
    """Raised when an external command cannot be spawned.

    A command that runs and exits non-zero is not an error at this level;
    callers inspect its output or return code.
    """
