"""Main application configuration schema."""
from typing import Any, Dict

from pydantic import BaseModel, Field

from .logging_schema import LoggingConfig
from .registry_schema import RegistryConfig


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    registry: RegistryConfig = Field(default_factory=lambda: RegistryConfig())

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        """Build and validate configuration from a plain dictionary."""
        return cls.model_validate(data)
