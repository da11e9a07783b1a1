"""
Mock shell — test double for every process the services spawn.

Used by the test suite (and by anyone embedding dufflectl) to simulate
duffle without touching the host. Configurable to return success,
failure, or start errors per command prefix.
"""

from __future__ import annotations

from pathlib import Path

from dufflectl.adapters.base import Shell, ShellError, ShellResult
from dufflectl.core.models.binary import Platform


class MockShell(Shell):
    """In-memory shell for testing.

    By default, every command exits 0 with empty output. Responses are
    matched on the longest configured argv prefix.
    """

    def __init__(
        self,
        platform: Platform = Platform.LINUX,
        home: Path | str = "/home/tester",
        default: ShellResult | None = None,
    ):
        self._platform = platform
        self._home = Path(home)
        self._default = default or ShellResult(exit_code=0)
        self._responses: dict[tuple[str, ...], ShellResult | ShellError] = {}
        self._call_log: list[dict] = []

    @property
    def call_log(self) -> list[dict]:
        """Every ``{"argv", "env", "cwd"}`` this mock has received."""
        return self._call_log

    @property
    def call_count(self) -> int:
        """Number of times exec has been called."""
        return len(self._call_log)

    @property
    def commands(self) -> list[list[str]]:
        """The argv of each call, in order."""
        return [c["argv"] for c in self._call_log]

    def set_response(
        self,
        prefix: list[str],
        exit_code: int = 0,
        stdout: str = "",
        stderr: str = "",
    ) -> None:
        """Configure the result for commands starting with ``prefix``."""
        self._responses[tuple(prefix)] = ShellResult(
            exit_code=exit_code, stdout=stdout, stderr=stderr,
        )

    def set_start_failure(self, prefix: list[str], error: str = "Mock start failure") -> None:
        """Configure commands starting with ``prefix`` to fail to launch."""
        self._responses[tuple(prefix)] = ShellError(error)

    def exec(
        self,
        argv: list[str],
        *,
        env: dict[str, str] | None = None,
        cwd: str | None = None,
    ) -> ShellResult:
        self._call_log.append({"argv": list(argv), "env": env, "cwd": cwd})

        match: ShellResult | ShellError | None = None
        best = -1
        for prefix, response in self._responses.items():
            if len(prefix) > best and tuple(argv[: len(prefix)]) == prefix:
                match, best = response, len(prefix)

        if isinstance(match, ShellError):
            raise match
        return match if match is not None else self._default

    def platform(self) -> Platform:
        return self._platform

    def home(self) -> Path:
        return self._home

    def reset(self) -> None:
        """Clear call log and configured responses."""
        self._call_log.clear()
        self._responses.clear()
