"""
Shell base — the protocol contract between dufflectl and processes.

The duffle services only talk to the outside world through this
protocol, never by calling ``subprocess`` directly. This keeps the
binary resolver and the invocation layer testable with an in-memory
shell (see ``dufflectl.adapters.mock``).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from pydantic import BaseModel

from dufflectl.core.models.binary import Platform


class ShellError(Exception):
    """Raised when a command could not be run at all.

    Missing executable, permission denied, timeout. A process that
    starts and exits non-zero is NOT a ShellError; that outcome is
    reported through ``ShellResult.exit_code``.
    """


class ShellResult(BaseModel):
    """Raw outcome of a finished process."""

    exit_code: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


class Shell(ABC):
    """Abstract process-execution collaborator.

    To create a new shell:
        1. Subclass Shell
        2. Implement exec, platform, home
    """

    @abstractmethod
    def exec(
        self,
        argv: list[str],
        *,
        env: dict[str, str] | None = None,
        cwd: str | None = None,
    ) -> ShellResult:
        """Run ``argv`` without an intermediate shell and wait for it.

        Args:
            argv: Discrete argument tokens; ``argv[0]`` is the executable.
            env: Environment overrides merged over the current environment.
            cwd: Working directory override.

        Raises:
            ShellError: The process could not be started or did not finish.
        """

    @abstractmethod
    def platform(self) -> Platform:
        """The host platform."""

    @abstractmethod
    def home(self) -> Path:
        """The current user's home directory."""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}>"
