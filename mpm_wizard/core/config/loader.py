"""
Configuration loader — reads mpm-wizard.yml into a WizardConfig.

The file is optional. Without one, every prompt falls back to the
platform defaults. With one, its values become the defaults offered
at each prompt (the user can still type something else).
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, ValidationError, field_validator

from mpm_wizard.core.data.catalog import DEFAULT_RELEASE, RELEASE_INDEX
from mpm_wizard.core.errors import ConfigError

logger = logging.getLogger(__name__)

# Default config filename
CONFIG_FILE = "mpm-wizard.yml"

# Env var pointing at an explicit config file
CONFIG_ENV_VAR = "MPMW_CONFIG"


class WizardConfig(BaseModel):
    """User-tunable defaults for the wizard prompts."""

    default_release: str = DEFAULT_RELEASE
    download_dir: str | None = None
    install_dir: str | None = None     # may contain {release}
    pause_on_exit: bool = False
    log_level: str | None = None
    log_file: str | None = None

    @field_validator("default_release")
    @classmethod
    def _known_release(cls, value: str) -> str:
        for release in RELEASE_INDEX:
            if release.lower() == value.strip().lower():
                return release
        raise ValueError(f"unknown release {value!r}")


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for mpm-wizard.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to mpm-wizard.yml, or None if not found.
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


def load_config(path: Path | None = None) -> WizardConfig:
    """Load and validate the wizard configuration.

    Args:
        path: Explicit path to the config file. If None, ``MPMW_CONFIG``
            is consulted, then the working directory and its parents.

    Returns:
        Validated WizardConfig (defaults when no file exists).

    Raises:
        ConfigError: If an explicit file is missing, or any file is invalid.
    """
    if path is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        path = Path(env_path) if env_path else find_config_file()
        if path is None:
            logger.debug("No %s found, using defaults", CONFIG_FILE)
            return WizardConfig()

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading wizard config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return WizardConfig()

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        config = WizardConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid wizard configuration in {path}: {e}") from e

    logger.info("Loaded wizard config from %s", path)
    return config
