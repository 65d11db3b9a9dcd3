"""Configuration schemas."""

from .app_schema import AppConfig
from .logging_schema import LogDestination, LogFormat, LoggingConfig, LogLevel
from .registry_schema import RegistryConfig

__all__ = [
    "AppConfig",
    "LogDestination",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "RegistryConfig",
]
