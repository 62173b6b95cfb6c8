"""projectdeck: Workspace registry and build inspection for local projects."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"
