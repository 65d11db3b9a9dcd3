"""Fleet Factory - registry-based object factory for the vehicle fleet."""

from ._package import __version__
from .config import AppConfig, ConfigurationManager, LoggingConfig, RegistryConfig
from .domain.base.exceptions import (
    ConfigurationError,
    DuplicateRegistrationError,
    FleetFactoryError,
    InvalidKeyError,
    InvalidProducerError,
    InvalidProductError,
    RegistryError,
    UnknownTypeError,
)
from .domain.vehicle import Car, Truck, Vehicle
from .infrastructure.logging import get_logger, setup_logging
from .infrastructure.registry import Registration, TypeRegistry, create_vehicle_registry

__all__ = [
    "__version__",
    # Registry
    "Registration",
    "TypeRegistry",
    "create_vehicle_registry",
    # Vehicles
    "Vehicle",
    "Car",
    "Truck",
    # Exceptions
    "FleetFactoryError",
    "RegistryError",
    "UnknownTypeError",
    "DuplicateRegistrationError",
    "InvalidKeyError",
    "InvalidProducerError",
    "InvalidProductError",
    "ConfigurationError",
    # Configuration and logging
    "AppConfig",
    "ConfigurationManager",
    "LoggingConfig",
    "RegistryConfig",
    "get_logger",
    "setup_logging",
]
