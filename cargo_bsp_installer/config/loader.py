"""Configuration loader for installer settings."""

import os
from pathlib import Path
from typing import Any

import yaml
from loguru import logger
from pydantic import ValidationError

from cargo_bsp_installer.models.settings import InstallerSettings

# Find the config file
CONFIG_PATH = Path(__file__).parent / "settings.yaml"

CONFIG_ENV_VAR = "CARGO_BSP_INSTALL_CONFIG"
LOG_LEVEL_ENV_VAR = "CARGO_BSP_LOG_LEVEL"


class InstallerConfigLoader:
    """Load installer settings from YAML, with an optional user override file."""

    def __init__(self, config_path: Path = CONFIG_PATH, override_path: Path | None = None) -> None:
        self.config_path = config_path
        if override_path is None and os.environ.get(CONFIG_ENV_VAR):
            override_path = Path(os.environ[CONFIG_ENV_VAR]).expanduser()
        self.override_path = override_path
        self._config: dict[str, Any] = self._get_default_config()
        self._load_config()

    def _read_yaml(self, path: Path) -> dict[str, Any] | None:
        """Read one YAML file with environment variable substitution."""
        if not path.exists():
            logger.warning(f"Config file not found: {path}, using defaults")
            return None

        try:
            with path.open() as f:
                content = f.read()

            # Expand environment variables
            content = os.path.expandvars(content)

            config = yaml.safe_load(content)
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Error loading config file {path}: {e}, using defaults")
            return None

        if not isinstance(config, dict):
            logger.warning(f"Invalid or empty configuration file: {path}, using defaults")
            return None

        logger.debug(f"Loaded configuration from {path}")
        return config

    def _load_config(self) -> None:
        """Merge the packaged file and the override file over the defaults."""
        for path in (self.config_path, self.override_path):
            if path is None:
                continue
            config = self._read_yaml(path)
            if config is not None:
                self._config = self._merge_with_defaults(config, self._config)

        level = os.environ.get(LOG_LEVEL_ENV_VAR)
        if level and isinstance(self._config.get("logging"), dict):
            self._config["logging"]["level"] = level

    def _get_default_config(self) -> dict[str, Any]:
        """Get default configuration values."""
        return {
            "discovery": {
                "directory": ".bsp",
                "filename": "cargo-bsp.json",
                "name": "cargo-bsp",
                "version": "0.1.0",
                "bsp_version": "2.1.0",
                "languages": ["rust"],
            },
            "build": {
                "toolchain": "cargo",
                "profile": "release",
                "binary": "server",
                "verify_artifact": False,
            },
            "logging": {
                "level": "WARNING",
            },
        }

    def _merge_with_defaults(self, config: dict[str, Any], defaults: dict[str, Any]) -> dict[str, Any]:
        """Merge loaded config with defaults to ensure all keys exist."""

        def merge_dicts(default: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
            """Recursively merge dictionaries."""
            result = default.copy()
            for key, value in override.items():
                if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                    result[key] = merge_dicts(result[key], value)
                else:
                    result[key] = value
            return result

        return merge_dicts(defaults, config)

    def get_settings(self) -> InstallerSettings:
        """Validate the merged configuration.

        Raises:
            ValueError: If a configured value has the wrong shape
        """
        try:
            return InstallerSettings.model_validate(self._config)
        except ValidationError as e:
            logger.error(f"Invalid installer configuration: {e}")
            raise ValueError(f"Invalid installer configuration: {e}") from e


def load_settings() -> InstallerSettings:
    """Load settings from the packaged file and the environment."""
    return InstallerConfigLoader().get_settings()
