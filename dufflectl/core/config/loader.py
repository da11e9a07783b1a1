"""
Configuration loader — reads dufflectl.yml and the environment.

Settings are resolved in precedence order:
    DUFFLECTL_* env vars  >  dufflectl.yml  >  defaults

The YAML file is optional. It is validated against a Pydantic schema
and returned as a typed ``Settings`` object.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping

import yaml
from pydantic import BaseModel, ValidationError, field_validator

logger = logging.getLogger(__name__)

# Default config filename
CONFIG_FILE = "dufflectl.yml"

ENV_PREFIX = "DUFFLECTL_"


class ConfigError(Exception):
    """Raised when dufflectl configuration is invalid."""


class Settings(BaseModel):
    """Runtime settings for dufflectl."""

    resources_path: str | None = None   # packaged-app resources root
    timeout: int | None = None          # seconds per duffle process
    log_level: str = "WARNING"
    log_file: str | None = None
    log_file_level: str | None = None

    @field_validator("timeout")
    @classmethod
    def _positive_timeout(cls, v: int | None) -> int | None:
        if v is not None and v <= 0:
            raise ValueError("timeout must be a positive number of seconds")
        return v

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return v.upper()


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for dufflectl.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to dufflectl.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def _read_file(path: Path) -> dict:
    """Parse a config file into a plain mapping."""
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    # The YAML may wrap everything under a "dufflectl" key or be flat
    section = data.get("dufflectl", data)
    if not isinstance(section, dict):
        raise ConfigError(f"Expected 'dufflectl' to be a mapping in {path}")
    return dict(section)


def _env_overrides(environ: Mapping[str, str]) -> dict:
    """Collect DUFFLECTL_* variables that map onto Settings fields."""
    overrides: dict = {}
    for field in Settings.model_fields:
        value = environ.get(ENV_PREFIX + field.upper())
        if value:
            overrides[field] = value
    return overrides


def load_settings(
    path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """Load and validate dufflectl settings.

    Args:
        path: Explicit path to dufflectl.yml. If None, searches upward;
            a missing file is not an error.
        environ: Environment mapping (default: ``os.environ``).

    Returns:
        Validated Settings model.

    Raises:
        ConfigError: If an explicit file is missing, or any source is invalid.
    """
    if environ is None:
        environ = os.environ

    data: dict = {}
    if path is not None:
        if not path.is_file():
            raise ConfigError(f"Config file not found: {path}")
    else:
        path = find_config_file()

    if path is not None:
        logger.debug("Loading settings from %s", path)
        data = _read_file(path)

    data.update(_env_overrides(environ))

    try:
        settings = Settings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid dufflectl configuration: {e}") from e

    logger.debug("Settings: %s", settings.model_dump())
    return settings
