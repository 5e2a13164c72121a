"""Unified configuration management for the application."""
from __future__ import annotations

import json
import os
import threading
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError as PydanticValidationError

from solid_showcase._package import ENV_PREFIX
from solid_showcase.config.schemas import AppConfig
from solid_showcase.config.utils.env_expansion import expand_config_env_vars
from solid_showcase.domain.base.exceptions import ConfigurationError
from solid_showcase.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)

CONFIG_FILE_ENV = f"{ENV_PREFIX}CONFIG"

# Environment variable suffix -> dotted configuration path
ENV_OVERRIDES = {
    "LOG_LEVEL": "logging.level",
    "LOG_FORMAT": "logging.format",
    "DATA_SOURCE": "demo.data_source",
    "DEFAULT_VARIANT": "demo.default_variant",
    "ENVIRONMENT": "environment",
}


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _set_path(data: Dict[str, Any], dotted_path: str, value: Any) -> None:
    *parents, leaf = dotted_path.split(".")
    node = data
    for part in parents:
        node = node.setdefault(part, {})
    node[leaf] = value


class ConfigurationManager:
    """
    Configuration manager serving as the single source of truth.

    Sources, lowest precedence first:
    - schema defaults
    - the configuration file (JSON, or YAML for .yml/.yaml)
    - SOLID_SHOWCASE_* environment variables

    Loading is lazy and happens once, guarded by a lock.
    """

    def __init__(self, config_file: Optional[str] = None):
        self._config_file = config_file or os.environ.get(CONFIG_FILE_ENV)
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None

    @property
    def config_file(self) -> Optional[str]:
        return self._config_file

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def _load_app_config(self) -> AppConfig:
        raw: Dict[str, Any] = {}
        if self._config_file:
            raw = _deep_merge(raw, self._load_file(self._config_file))
        raw = _deep_merge(raw, self._load_env_overrides())
        raw = expand_config_env_vars(raw)

        try:
            config = AppConfig.model_validate(raw)
        except PydanticValidationError as e:
            fields = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
            raise ConfigurationError(f"Invalid configuration: {e}", missing_fields=fields) from e

        logger.debug(
            "Configuration loaded",
            config_file=self._config_file,
            environment=config.environment,
        )
        return config

    def _load_file(self, config_file: str) -> Dict[str, Any]:
        path = Path(config_file)
        if not path.is_file():
            raise ConfigurationError(f"Configuration file not found: {config_file}")

        try:
            with path.open("r", encoding="utf-8") as f:
                if path.suffix.lower() in (".yml", ".yaml"):
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to read configuration file {config_file}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {config_file} must contain a mapping")
        logger.debug(f"Loaded configuration file {config_file}")
        return data

    def _load_env_overrides(self) -> Dict[str, Any]:
        overrides: Dict[str, Any] = {}
        for suffix, dotted_path in ENV_OVERRIDES.items():
            value = os.environ.get(f"{ENV_PREFIX}{suffix}")
            if value:
                _set_path(overrides, dotted_path, value)
        return overrides


_config_manager: Optional[ConfigurationManager] = None
# The config_file argument the current manager was built with
_config_manager_key: Optional[str] = None
_config_manager_lock = threading.Lock()


def get_config_manager(config_file: Optional[str] = None) -> ConfigurationManager:
    """
    Get the process-wide configuration manager.

    The current manager is reused only when it was built with the same
    config_file argument; any other argument replaces it.
    """
    global _config_manager, _config_manager_key
    with _config_manager_lock:
        if _config_manager is None or config_file != _config_manager_key:
            _config_manager = ConfigurationManager(config_file)
            _config_manager_key = config_file
        return _config_manager


def reset_config_manager() -> None:
    """Reset the process-wide configuration manager."""
    global _config_manager, _config_manager_key
    with _config_manager_lock:
        _config_manager = None
        _config_manager_key = None
