"""Exception hierarchy for the fleet factory."""
from typing import Any, Iterable, List, Optional


class FleetFactoryError(Exception):
    """Base exception for all fleet factory errors."""
    pass


class RegistryError(FleetFactoryError):
    """Raised when a type registry is misused."""
    pass


class UnknownTypeError(RegistryError, KeyError):
    """Raised when a product is requested for a key that is not registered."""

    def __init__(self, key: Any, available_types: Optional[Iterable[str]] = None):
        self.key = key
        self.available_types = sorted(available_types or [])
        self.message = (
            f"Type '{key}' is not registered. "
            f"Available types: {self.available_types}"
        )
        super().__init__(self.message)

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.message


class DuplicateRegistrationError(RegistryError):
    """Raised when a key is registered twice and overriding is disabled."""

    def __init__(self, key: str):
        super().__init__(f"Type '{key}' is already registered")
        self.key = key


class InvalidKeyError(RegistryError):
    """Raised when a registration key is empty or not a string."""

    def __init__(self, key: Any):
        super().__init__(f"Registry keys must be non-empty strings, got {key!r}")
        self.key = key


class InvalidProducerError(RegistryError):
    """Raised when the producer for a key is not callable."""

    def __init__(self, key: str, producer: Any):
        super().__init__(
            f"Producer for type '{key}' must be callable, "
            f"got {type(producer).__name__}"
        )
        self.key = key
        self.producer = producer


class InvalidProductError(RegistryError):
    """Raised when a producer yields an object outside the registry's product type."""

    def __init__(self, key: str, expected_type: type, actual_type: type):
        super().__init__(
            f"Producer for type '{key}' returned {actual_type.__name__}, "
            f"expected an instance of {expected_type.__name__}"
        )
        self.key = key
        self.expected_type = expected_type
        self.actual_type = actual_type


class ConfigurationError(FleetFactoryError):
    """Raised when there's an issue with configuration."""

    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []
