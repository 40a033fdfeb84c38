"""Unified configuration management for the application."""
from __future__ import annotations
import json
import logging
import os
import threading
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError as PydanticValidationError

from mediacache.config.schemas import (
    AccessConfig,
    AppConfig,
    CacheConfig,
    LoggingConfig,
    OutputConfig,
)
from mediacache.domain.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "MEDIACACHE_"

# Environment variable -> nested configuration path
ENV_OVERRIDES = {
    "LOG_LEVEL": ("logging", "level"),
    "LOG_DESTINATION": ("logging", "destination"),
    "LOG_FILE": ("logging", "file_path"),
    "RESTRICTED_PREFIX": ("access", "restricted_prefix"),
    "ADMIN_PRINCIPAL": ("access", "admin_principal"),
    "CONSTRUCTION_DELAY_MS": ("cache", "construction_delay_ms"),
    "PAYLOAD_DIGEST_LENGTH": ("cache", "payload_digest_length"),
    "OUTPUT_SINK": ("output", "sink"),
}


class ConfigurationManager:
    """
    Configuration manager that serves as the single source of truth.

    Sources, lowest priority first:
    - schema defaults
    - an optional JSON or YAML configuration file
    - ``MEDIACACHE_*`` environment variables

    String values of the form ``${VAR}`` or ``${VAR:default}`` are expanded
    from the environment. The validated configuration is built lazily on
    first access.
    """

    def __init__(self, config_file: Optional[str] = None, environ: Optional[Dict[str, str]] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._environ = environ
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None

    @property
    def environ(self) -> Dict[str, str]:
        return os.environ if self._environ is None else self._environ

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    @property
    def logging(self) -> LoggingConfig:
        return self.app_config.logging

    @property
    def access(self) -> AccessConfig:
        return self.app_config.access

    @property
    def cache(self) -> CacheConfig:
        return self.app_config.cache

    @property
    def output(self) -> OutputConfig:
        return self.app_config.output

    def reload(self) -> AppConfig:
        """Drop the cached configuration and load it again."""
        with self._lock:
            self._app_config = None
        return self.app_config

    def _load_app_config(self) -> AppConfig:
        """Load application configuration from sources."""
        config_data: Dict[str, Any] = {}
        if self._config_file:
            config_data = self._load_config_file(self._config_file)

        config_data = self._interpolate_values(config_data)
        self._apply_env_overrides(config_data)

        try:
            app_config = AppConfig.model_validate(config_data)
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

        logger.debug("Configuration loaded from %s", self._config_file or "defaults")
        return app_config

    def _load_config_file(self, config_path: str) -> Dict[str, Any]:
        """Load configuration from a JSON or YAML file."""
        path = Path(config_path)
        if not path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with open(path, "r") as f:
                if path.suffix.lower() in (".yml", ".yaml"):
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to load configuration: {str(e)}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file {config_path} must contain a mapping, got {type(data).__name__}"
            )
        return data

    def _apply_env_overrides(self, config: Dict[str, Any]) -> None:
        """Apply ``MEDIACACHE_*`` environment overrides in place."""
        for suffix, path in ENV_OVERRIDES.items():
            env_var = f"{ENV_PREFIX}{suffix}"
            if env_var in self.environ:
                self._set_nested_value(config, path, self.environ[env_var])

    def _set_nested_value(self, config: Dict[str, Any], path: tuple, value: Any) -> None:
        """Set a nested configuration value."""
        current = config
        for key in path[:-1]:
            current = current.setdefault(key, {})
        current[path[-1]] = value

    def _interpolate_values(self, config: Any) -> Any:
        """Interpolate variables in configuration values."""
        if isinstance(config, str):
            if config.startswith("${") and config.endswith("}"):
                var_name = config[2:-1]
                if ":" in var_name:
                    var_name, default = var_name.split(":", 1)
                    return self.environ.get(var_name, default)
                return self.environ.get(var_name, config)
            return config
        elif isinstance(config, dict):
            return {k: self._interpolate_values(v) for k, v in config.items()}
        elif isinstance(config, list):
            return [self._interpolate_values(v) for v in config]
        return config
