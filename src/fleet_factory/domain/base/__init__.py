"""Base domain layer - shared exceptions."""

from .exceptions import (
    ConfigurationError,
    DuplicateRegistrationError,
    FleetFactoryError,
    InvalidKeyError,
    InvalidProducerError,
    InvalidProductError,
    RegistryError,
    UnknownTypeError,
)

__all__ = [
    "ConfigurationError",
    "DuplicateRegistrationError",
    "FleetFactoryError",
    "InvalidKeyError",
    "InvalidProducerError",
    "InvalidProductError",
    "RegistryError",
    "UnknownTypeError",
]
