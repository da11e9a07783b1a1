"""
Duffle binary resolution — find a runnable duffle, once per process.

Lookup order:
    1. ``duffle version`` on the search path (user-installed)
    2. ``<resources>/dufflebin/<os>/duffle version`` (bundled with the app)
    3. give up → None

The first outcome, success or failure, is cached for the lifetime of
the process. There is no invalidation: if the binary disappears later,
invocations fail at exec time instead.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Callable

from dufflectl.adapters.base import Shell, ShellError
from dufflectl.core.context import get_resources_path
from dufflectl.core.models.binary import BinaryInfo, Platform

logger = logging.getLogger(__name__)

DUFFLE = "duffle"

_BUNDLED_PATHS: dict[Platform, str] = {
    Platform.WINDOWS: "dufflebin/win32/duffle.exe",
    Platform.LINUX: "dufflebin/linux/duffle",
    Platform.MACOS: "dufflebin/darwin/duffle",
}


def bundled_resource_path(platform: Platform) -> str | None:
    """Relative path of the bundled binary for ``platform`` (None if unsupported)."""
    return _BUNDLED_PATHS.get(platform)


def _probe(shell: Shell, binary: str) -> BinaryInfo | None:
    """Run ``<binary> version``; return BinaryInfo on exit 0."""
    try:
        r = shell.exec([binary, "version"])
    except ShellError as e:
        logger.debug("Probe %s failed to start: %s", binary, e)
        return None

    if r.exit_code != 0:
        logger.debug("Probe %s exited %d: %s", binary, r.exit_code, r.stderr.strip())
        return None

    return BinaryInfo(path=binary, version=r.stdout.strip())


def _find_duffle_binary(
    shell: Shell,
    resources_path: Path | None,
) -> BinaryInfo | None:
    """Uncached lookup. See module docstring for the order."""
    # Use the user's installed duffle if they have one
    info = _probe(shell, DUFFLE)
    if info:
        logger.info("Using system duffle %s", info.version)
        return info

    # Look for an embedded duffle binary
    relative = bundled_resource_path(shell.platform())
    if not relative:
        logger.debug("No bundled duffle for platform %s", shell.platform().value)
        return None
    if resources_path is None:
        logger.debug("No resources path; skipping bundled duffle")
        return None

    info = _probe(shell, str(resources_path / relative))
    if info:
        logger.info("Using bundled duffle %s at %s", info.version, info.path)
        return info

    # Give up
    return None


class BinaryResolver:
    """Resolve the duffle binary at most once.

    The first call runs the lookup under a lock, so concurrent first
    callers spawn a single probe sequence; everyone else waits and
    reads the cached outcome.

    Args:
        resources: Callable returning the resources root, read at
            resolution time (default: the process-wide context).
    """

    def __init__(self, resources: Callable[[], Path | None] = get_resources_path):
        self._resources = resources
        self._lock = threading.Lock()
        self._resolved = False
        self._binary: BinaryInfo | None = None

    @property
    def resolved(self) -> bool:
        """Whether a lookup has completed."""
        return self._resolved

    def resolve(self, shell: Shell) -> BinaryInfo | None:
        """Return the cached BinaryInfo, running the lookup on first use."""
        if self._resolved:
            return self._binary

        with self._lock:
            if not self._resolved:
                self._binary = _find_duffle_binary(shell, self._resources())
                self._resolved = True
                if self._binary is None:
                    logger.info("duffle not found on PATH or in the resources bundle")
        return self._binary

    def reset(self) -> None:
        """Forget the cached outcome. Tests only."""
        with self._lock:
            self._resolved = False
            self._binary = None


_resolver = BinaryResolver()


def find_duffle_binary(shell: Shell) -> BinaryInfo | None:
    """Process-wide cached lookup of the duffle binary."""
    return _resolver.resolve(shell)


def reset_binary_cache() -> None:
    """Clear the process-wide cache so the next call re-resolves."""
    _resolver.reset()
