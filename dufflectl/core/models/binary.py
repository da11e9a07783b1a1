"""
Binary models — where the duffle executable lives and what it reports.
"""

from __future__ import annotations

import sys
from enum import Enum

from pydantic import BaseModel, ConfigDict


class Platform(str, Enum):
    """Host operating systems that ship a bundled duffle binary."""

    WINDOWS = "windows"
    LINUX = "linux"
    MACOS = "macos"
    UNSUPPORTED = "unsupported"

    @classmethod
    def current(cls, sys_platform: str | None = None) -> Platform:
        """Map ``sys.platform`` onto a Platform."""
        name = sys_platform if sys_platform is not None else sys.platform
        if name.startswith("win"):
            return cls.WINDOWS
        if name.startswith("linux"):
            return cls.LINUX
        if name == "darwin":
            return cls.MACOS
        return cls.UNSUPPORTED


class BinaryInfo(BaseModel):
    """A discovered, runnable copy of duffle."""

    model_config = ConfigDict(frozen=True)

    path: str       # bare "duffle" when found on PATH
    version: str
