"""Configuration package with clean public API."""

from .manager import ConfigurationManager
from .schemas import (
    AppConfig,
    LogDestination,
    LogFormat,
    LoggingConfig,
    LogLevel,
    RegistryConfig,
)

__all__ = [
    # Main configuration
    "AppConfig",

    # Specific configurations
    "LoggingConfig",
    "RegistryConfig",
    "LogDestination",
    "LogFormat",
    "LogLevel",

    # Configuration management
    "ConfigurationManager",
]
