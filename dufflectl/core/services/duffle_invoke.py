"""
Duffle invocation — the single choke point for running duffle.

Every operation in ``duffle_ops`` goes through ``invoke``:
    resolve binary → build argv → exec → parse stdout → Result

Never raises for a missing binary, a process that cannot start, or a
non-zero exit. All three come back as ``Result.failure``.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from dufflectl.adapters.base import Shell, ShellError
from dufflectl.core.models.result import Result
from dufflectl.core.observability.logging_config import TRANSCRIPT_LOGGER
from dufflectl.core.services.duffle_args import render_command
from dufflectl.core.services.duffle_binary import find_duffle_binary

logger = logging.getLogger(__name__)
transcript = logging.getLogger(TRANSCRIPT_LOGGER)

NOT_FOUND_MESSAGE = (
    "Can't find Duffle on this machine. "
    "Install it on your system PATH and restart the installer."
)


class OutputShape(str, Enum):
    """What a successful duffle run's stdout turns into."""

    NONE = "none"       # discard stdout; success only
    LINES = "lines"     # trimmed, non-empty lines


def parse_lines(stdout: str) -> list[str]:
    """Split on newlines, trim each line, drop empty lines."""
    return [line.strip() for line in stdout.split("\n") if line.strip()]


def parse_output(stdout: str, shape: OutputShape) -> Any:
    """Apply the parser for ``shape``."""
    if shape is OutputShape.LINES:
        return parse_lines(stdout)
    return None


def invoke(
    shell: Shell,
    command: str,
    args: list[str] | None = None,
    shape: OutputShape = OutputShape.NONE,
    *,
    env: dict[str, str] | None = None,
    cwd: str | None = None,
) -> Result:
    """Run ``duffle <command> <args>`` and parse its output.

    Args:
        shell: Process-execution collaborator.
        command: Operation keyword, possibly multi-word (``"credentials list"``).
        args: Pre-built argument tokens.
        shape: How to turn stdout into the result value.
        env: Environment overrides for the duffle process.
        cwd: Working directory for the duffle process.
    """
    binary = find_duffle_binary(shell)
    if binary is None:
        return Result.failure(NOT_FOUND_MESSAGE)

    argv = [binary.path, *command.split(), *(args or [])]
    rendered = render_command(argv)
    transcript.info("$ %s", rendered)

    try:
        r = shell.exec(argv, env=env, cwd=cwd)
    except ShellError as e:
        logger.error("duffle %s could not run: %s", command, e)
        return Result.failure(f"Unable to run duffle {command}: {e}", command=rendered)

    if r.exit_code != 0:
        detail = r.stderr.strip() or r.stdout.strip()
        logger.warning("duffle %s exited %d", command, r.exit_code)
        errors = [f"duffle {command} failed (exit {r.exit_code})"]
        if detail:
            errors.append(detail)
        return Result.failure(*errors, command=rendered)

    transcript.info("%s", r.stdout)
    return Result.success(parse_output(r.stdout, shape), command=rendered)
