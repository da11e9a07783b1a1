"""
Application context — where the host application keeps its resources.

The resources root is where a packaged application ships its bundled
duffle binaries (``dufflebin/<os>/duffle``). It is set ONCE at startup
by whichever entry point launches the app:

    - CLI:    main.py  → context.set_resources_path(root)
    - Tests:  conftest → context.set_resources_path(tmp_path)

Design notes:
    - Module-level singleton (not a class).
    - get_resources_path() returns None when unset (running outside a
      packaged context); the binary resolver then skips the bundled
      fallback.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


_resources_path: Optional[Path] = None


def set_resources_path(root: Optional[Path]) -> None:
    """Register the resources root for the current process."""
    global _resources_path
    _resources_path = root


def get_resources_path() -> Optional[Path]:
    """Return the current resources root, or None if not set."""
    return _resources_path
