#!/usr/bin/env python3
# ======================================================================
#  Config Service - Configuration file loading and caching
#  - Loads the YAML config file through the Config API contract
#  - Caches the decoded patch
#  - Provides reload() for runtime changes
# ======================================================================

from __future__ import annotations

import logging
import os
from typing import Any

import yaml

from meridian.components.config.config_apply_comp import apply_config
from meridian.helpers.dto.config_dto import Config, ConfigSnapshot
from meridian.helpers.exceptions import ConfigFileError, PayloadDecodeError
from meridian.interfaces.api.codec import decode_payload
from meridian.interfaces.api.types.config_types import Config as ConfigPayload

CONFIG_PATH_ENV = "MERIDIAN_CONFIG_PATH"
SYSTEM_CONFIG_PATH = "/etc/meridian/config.yaml"


class ConfigService:
    """
    Service for loading and caching the server configuration file.

    The file uses the same shape as the config API payload, so every section
    is optional and absent sections leave that subsystem untouched.
    """

    def __init__(self, config_path: str | None = None) -> None:
        """Initialize ConfigService with empty cache."""
        self._config_path = config_path
        self._config: Config | None = None
        self._logger = logging.getLogger(__name__)

    def get_config(self, force_reload: bool = False) -> Config:
        """
        Get the decoded config patch.

        Args:
            force_reload: If True, bypass cache and re-read the file

        Returns:
            Config DTO; empty when no config file exists

        Raises:
            ConfigFileError: The file exists but is not valid YAML or not a valid config
        """
        if self._config is None or force_reload:
            self._config = self._load()
        return self._config

    def reload(self) -> Config:
        """Force reload configuration from disk."""
        self._logger.info("Reloading configuration file")
        return self.get_config(force_reload=True)

    def apply_to(self, snapshot: ConfigSnapshot) -> ConfigSnapshot:
        """Apply the loaded config onto a snapshot, returning a new one."""
        return apply_config(snapshot, self.get_config())

    def resolve_path(self) -> str | None:
        """
        Find the config file to load:
          1) Path passed to the constructor
          2) $MERIDIAN_CONFIG_PATH
          3) /etc/meridian/config.yaml
          4) ./config/config.yaml

        Returns the first existing path, or None.
        """
        candidates = [
            self._config_path,
            os.getenv(CONFIG_PATH_ENV),
            SYSTEM_CONFIG_PATH,
            os.path.join(os.getcwd(), "config", "config.yaml"),
        ]
        for path in candidates:
            if path and os.path.isfile(path):
                return path
        return None

    # ----------------------------------------------------------------------
    # Private loading logic
    # ----------------------------------------------------------------------

    def _load(self) -> Config:
        path = self.resolve_path()
        if path is None:
            self._logger.warning("No config file found; starting with an empty config")
            return Config()

        raw = self._load_yaml(path)
        try:
            payload = decode_payload(ConfigPayload, raw)
        except PayloadDecodeError as e:
            self._logger.exception(f"Config file {path} does not match the config schema")
            raise ConfigFileError(f"Invalid config file {path}: {len(e.errors)} error(s)") from e

        self._logger.info(f"Loaded config from {path}")
        return payload.to_dto()

    def _load_yaml(self, path: str) -> dict[str, Any]:
        """
        Load a YAML mapping; an empty file yields {}.
        """
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            self._logger.exception(f"Failed to read config file {path}")
            raise ConfigFileError(f"Cannot read config file {path}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            self._logger.error(f"Config file {path} must contain a mapping, got {type(data).__name__}")
            raise ConfigFileError(f"Config file {path} must contain a mapping")
        return data
