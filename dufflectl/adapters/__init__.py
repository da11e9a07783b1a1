"""
Process-execution adapters.

    from dufflectl.adapters import Shell, ShellError, SubprocessShell
"""

from dufflectl.adapters.base import Shell, ShellError, ShellResult
from dufflectl.adapters.mock import MockShell
from dufflectl.adapters.shell.command import SubprocessShell

__all__ = [
    "MockShell",
    "Shell",
    "ShellError",
    "ShellResult",
    "SubprocessShell",
]
