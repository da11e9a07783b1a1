"""
Duffle argument builders — structured parameters to argument tokens.

Commands are built as lists of discrete tokens and handed to the shell
adapter without going through ``/bin/sh``. Nothing here quotes for
execution; ``render_command`` quotes for display only.
"""

from __future__ import annotations

import shlex
from typing import Iterable, Mapping


def params_args(parameters: Mapping[str, str] | None) -> list[str]:
    """``--set key=value`` tokens for every non-empty value, in mapping order."""
    args: list[str] = []
    for key, value in (parameters or {}).items():
        if not value:
            continue
        args.extend(["--set", f"{key}={value}"])
    return args


def credential_args(credential_set: str | None) -> list[str]:
    """``-c <name>`` when a credential set is given, else nothing."""
    if credential_set:
        return ["-c", credential_set]
    return []


def file_args(paths: Iterable[str]) -> list[str]:
    """One token per file path, in order."""
    return [str(p) for p in paths]


def render_command(argv: Iterable[str]) -> str:
    """POSIX-quoted display string; ``shlex.split`` gives ``argv`` back."""
    return shlex.join([str(a) for a in argv])
