"""Duffle operations — list, install, upgrade, uninstall, push, credentials.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping

from dufflectl.adapters.base import Shell
from dufflectl.core.models.result import Result
from dufflectl.core.services.duffle_args import (
    credential_args,
    file_args,
    params_args,
)
from dufflectl.core.services.duffle_invoke import OutputShape, invoke

# Repository listing has no duffle command behind it yet.
_KNOWN_REPOS = ["hub.cnlabs.io"]


def home(shell: Shell) -> Path:
    """duffle's home directory: $DUFFLE_HOME, else ``~/.duffle``."""
    override = os.environ.get("DUFFLE_HOME")
    if override:
        return Path(override)
    return shell.home() / ".duffle"


# ── Observe ─────────────────────────────────────────────────────


def list_bundles(shell: Shell) -> Result:
    """Installed bundle claims.

    Returns:
        Result with value ``["claim-a", "claim-b", ...]``
    """
    return invoke(shell, "list", shape=OutputShape.LINES)


def list_repos(shell: Shell) -> Result:
    """Known bundle repositories (fixed list, nothing is run)."""
    return Result.success(list(_KNOWN_REPOS))


def list_credential_sets(shell: Shell) -> Result:
    """Credential set names known to duffle."""
    return invoke(shell, "credentials list", shape=OutputShape.LINES)


# ── Act ─────────────────────────────────────────────────────────


def upgrade(shell: Shell, bundle_name: str) -> Result:
    return invoke(shell, "upgrade", [bundle_name])


def uninstall(shell: Shell, bundle_name: str) -> Result:
    return invoke(shell, "uninstall", [bundle_name])


def push_file(shell: Shell, file_path: str, repo: str) -> Result:
    """Push a local bundle file to ``repo``."""
    return invoke(shell, "push", ["-f", str(file_path), "--repo", repo])


def install_file(
    shell: Shell,
    bundle_file_path: str,
    name: str,
    params: Mapping[str, str] | None = None,
    credential_set: str | None = None,
) -> Result:
    """Install the bundle in a local file as claim ``name``."""
    args = [name, "-f", str(bundle_file_path)]
    args += params_args(params)
    args += credential_args(credential_set)
    return invoke(shell, "install", args)


def install_bundle(
    shell: Shell,
    bundle_name: str,
    name: str,
    params: Mapping[str, str] | None = None,
    credential_set: str | None = None,
) -> Result:
    """Install a bundle by reference (``repo/bundle:tag``) as claim ``name``."""
    args = [name, bundle_name]
    args += params_args(params)
    args += credential_args(credential_set)
    return invoke(shell, "install", args)


# ── Credentials ─────────────────────────────────────────────────


def add_credential_sets(shell: Shell, files: list[str]) -> Result:
    return invoke(shell, "credential add", file_args(files))


def delete_credential_set(shell: Shell, credential_set_name: str) -> Result:
    return invoke(shell, "credential remove", [credential_set_name])


def generate_credentials_for_file(shell: Shell, bundle_file_path: str, name: str) -> Result:
    """Generate credential set ``name`` for the bundle in a local file."""
    return invoke(shell, "credentials generate", [name, "-f", str(bundle_file_path)])


def generate_credentials_for_bundle(shell: Shell, bundle_name: str, name: str) -> Result:
    """Generate credential set ``name`` for a bundle reference."""
    return invoke(shell, "credentials generate", [name, bundle_name])
