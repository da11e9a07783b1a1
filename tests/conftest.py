"""
Shared test fixtures and configuration.
"""

import logging
from pathlib import Path

import pytest

from dufflectl.adapters.mock import MockShell
from dufflectl.core.context import set_resources_path
from dufflectl.core.models.binary import Platform
from dufflectl.core.services.duffle_binary import reset_binary_cache


@pytest.fixture(autouse=True)
def _fresh_process_state(monkeypatch: pytest.MonkeyPatch):
    """Every test starts as a new process: no cached binary, no resources root."""
    reset_binary_cache()
    set_resources_path(None)
    for var in ("DUFFLE_HOME", "DUFFLECTL_RESOURCES_PATH", "DUFFLECTL_TIMEOUT",
                "DUFFLECTL_LOG_LEVEL", "DUFFLECTL_LOG_FILE", "DUFFLECTL_LOG_FILE_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    yield
    reset_binary_cache()
    set_resources_path(None)


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """setup_logging() rewires the root logger; put it back afterwards."""
    root = logging.getLogger()
    level = root.level
    yield
    for h in root.handlers[:]:
        if type(h) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(h)
            h.close()
    root.setLevel(level)


@pytest.fixture
def shell() -> MockShell:
    """A shell where nothing is configured (every command exits 0, no output)."""
    return MockShell(platform=Platform.LINUX)


@pytest.fixture
def duffle_shell() -> MockShell:
    """A shell with duffle v0.1.0 on the search path."""
    sh = MockShell(platform=Platform.LINUX)
    sh.set_response(["duffle", "version"], stdout="v0.1.0\n")
    return sh


@pytest.fixture
def missing_duffle_shell() -> MockShell:
    """A shell where no duffle binary can be started."""
    sh = MockShell(platform=Platform.LINUX)
    sh.set_start_failure(["duffle"], "No such file or directory: 'duffle'")
    return sh


@pytest.fixture
def resources_root(tmp_path: Path) -> Path:
    """A registered resources root."""
    root = tmp_path / "resources"
    root.mkdir()
    set_resources_path(root)
    return root
