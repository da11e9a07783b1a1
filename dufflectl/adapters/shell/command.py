"""
Subprocess shell — run commands on the host and capture their output.

This is the SINGLE PLACE where ``subprocess.run`` is called. Commands
are passed as argument lists, never through ``/bin/sh``, so parameter
values cannot be reinterpreted as extra tokens.
"""

from __future__ import annotations

import logging
import os
import subprocess
import time
from pathlib import Path

from dufflectl.adapters.base import Shell, ShellError, ShellResult
from dufflectl.core.models.binary import Platform

logger = logging.getLogger(__name__)


class SubprocessShell(Shell):
    """Execute commands with ``subprocess.run`` and capture output.

    Args:
        timeout: Seconds before the process is killed (None = wait forever).
    """

    def __init__(self, timeout: int | None = None):
        self._timeout = timeout

    @property
    def timeout(self) -> int | None:
        return self._timeout

    def exec(
        self,
        argv: list[str],
        *,
        env: dict[str, str] | None = None,
        cwd: str | None = None,
    ) -> ShellResult:
        if not argv:
            raise ShellError("Empty command")

        full_env = None
        if env:
            full_env = os.environ.copy()
            full_env.update(env)

        logger.debug("Executing: %s (cwd=%s)", argv, cwd)
        start = time.monotonic()

        try:
            result = subprocess.run(
                argv,
                capture_output=True,
                encoding="utf-8",
                errors="replace",
                timeout=self._timeout,
                env=full_env,
                cwd=cwd,
            )
        except subprocess.TimeoutExpired as e:
            raise ShellError(f"Command timed out after {self._timeout}s") from e
        except (OSError, ValueError) as e:
            # ValueError: a token holds a NUL byte
            raise ShellError(f"Cannot run {argv[0]}: {e}") from e

        elapsed_ms = int((time.monotonic() - start) * 1000)
        logger.debug("Exit %d after %dms: %s", result.returncode, elapsed_ms, argv[0])

        return ShellResult(
            exit_code=result.returncode,
            stdout=result.stdout or "",
            stderr=result.stderr or "",
        )

    def platform(self) -> Platform:
        return Platform.current()

    def home(self) -> Path:
        return Path.home()
