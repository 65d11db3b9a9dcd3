"""Unified configuration management for the fleet factory."""
from __future__ import annotations

import json
import logging
import os
import threading
from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import ValidationError

from fleet_factory.config.schemas import AppConfig, LoggingConfig, RegistryConfig
from fleet_factory.domain.base.exceptions import ConfigurationError

T = TypeVar("T")
logger = logging.getLogger(__name__)

ENV_PREFIX = "FLEET_FACTORY_"

# Environment variable suffix -> (section, field)
ENV_OVERRIDES = {
    "LOG_LEVEL": ("logging", "level"),
    "LOG_DESTINATION": ("logging", "destination"),
    "LOG_FORMAT": ("logging", "format"),
    "LOG_FILE": ("logging", "file_path"),
    "CASE_SENSITIVE": ("registry", "case_sensitive"),
    "ALLOW_OVERRIDE": ("registry", "allow_override"),
}


class ConfigurationManager:
    """
    Configuration manager that serves as the single source of truth.

    Configuration is assembled lazily from:
    - Schema defaults
    - An optional JSON configuration file
    - Environment variable overrides (``FLEET_FACTORY_*``)

    The result is validated against ``AppConfig``; any failure is reported
    as ``ConfigurationError``.
    """

    def __init__(self, config_file: Optional[str] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def get_typed(self, config_type: Type[T]) -> T:
        """Get a configuration section by its schema type."""
        type_mapping = {
            LoggingConfig: "logging",
            RegistryConfig: "registry",
            AppConfig: None,
        }
        if config_type not in type_mapping:
            raise ValueError(f"Unknown configuration type: {config_type.__name__}")

        attr_name = type_mapping[config_type]
        if attr_name is None:
            return self.app_config
        return getattr(self.app_config, attr_name)

    def reload(self) -> None:
        """Reload configuration from sources."""
        with self._lock:
            self._app_config = None
        logger.debug("Configuration marked for reload")

    def _load_app_config(self) -> AppConfig:
        """Load application configuration from sources."""
        config_data: Dict[str, Any] = {}
        if self._config_file:
            config_data = self._load_from_file(self._config_file)

        config_data = self._apply_environment_overrides(config_data)

        try:
            return AppConfig.from_dict(config_data)
        except ValidationError as e:
            invalid_fields = [".".join(str(loc) for loc in err["loc"]) for err in e.errors()]
            raise ConfigurationError(
                f"Invalid configuration: {e}", missing_fields=invalid_fields
            ) from e

    def _load_from_file(self, config_file: str) -> Dict[str, Any]:
        """Load configuration data from a JSON file."""
        if not os.path.exists(config_file):
            raise ConfigurationError(f"Configuration file not found: {config_file}")

        try:
            with open(config_file, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(
                f"Failed to read configuration file {config_file}: {e}"
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file {config_file} must contain a JSON object"
            )

        logger.debug("Loaded configuration from %s", config_file)
        return data

    def _apply_environment_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Overlay FLEET_FACTORY_* environment variables onto configuration data."""
        result = {key: (dict(value) if isinstance(value, dict) else value)
                  for key, value in config_data.items()}

        for suffix, (section, field) in ENV_OVERRIDES.items():
            value = os.environ.get(f"{ENV_PREFIX}{suffix}")
            if value is None:
                continue
            section_data = result.get(section)
            if not isinstance(section_data, dict):
                section_data = {}
            section_data[field] = value
            result[section] = section_data
            logger.debug("Applied environment override %s%s", ENV_PREFIX, suffix)

        return result
