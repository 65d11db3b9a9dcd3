"""Type Registry - Registry pattern for keyed product factories.

A registry maps a string key to a producer, a zero-argument callable that
builds a new product. Callers ask for products by key and never name the
concrete classes, so new product types are added by registration alone.
"""
import threading
from datetime import datetime, timezone
from typing import Callable, Dict, Generic, List, Optional, Type, TypeVar

from fleet_factory.config.manager import ConfigurationManager
from fleet_factory.config.schemas import RegistryConfig
from fleet_factory.domain.base.exceptions import (
    DuplicateRegistrationError,
    InvalidKeyError,
    InvalidProducerError,
    InvalidProductError,
    UnknownTypeError,
)
from fleet_factory.infrastructure.logging.logger import get_logger

T = TypeVar("T")

Producer = Callable[[], T]


class Registration(Generic[T]):
    """Container for a single registry entry."""

    def __init__(self, type_name: str, producer: Producer):
        """
        Initialize registration.

        Args:
            type_name: Key the producer is registered under
            producer: Zero-argument callable building a new product
        """
        self.type_name = type_name
        self.producer = producer
        self.registered_at = datetime.now(timezone.utc)

    def __repr__(self) -> str:
        return f"Registration(type='{self.type_name}')"


class TypeRegistry(Generic[T]):
    """
    Registry of producers keyed by type name.

    Every ``create`` call invokes the registered producer and returns what
    it builds; the registry keeps no reference to the products, so it is a
    factory and never a cache.

    When ``product_type`` is given, each product is checked against it and
    a producer yielding anything else raises ``InvalidProductError``.

    Thread-safe: mutations and lookups hold the registry lock, producers
    run outside it.
    """

    def __init__(self,
                 product_type: Optional[Type[T]] = None,
                 config: Optional[RegistryConfig] = None):
        """
        Initialize type registry.

        Args:
            product_type: Capability interface every product must satisfy
            config: Registry behaviour; when omitted the ConfigurationManager
                section is used, including FLEET_FACTORY_* overrides
        """
        self.product_type = product_type
        if config is None:
            config = ConfigurationManager().get_typed(RegistryConfig)
        self.config = config
        self._registrations: Dict[str, Registration[T]] = {}
        self._registry_lock = threading.RLock()
        self.logger = get_logger(__name__)

    def register(self, type_name: str, producer: Producer) -> None:
        """
        Register a producer under a type name.

        The last registration for a key wins unless overriding is disabled
        in the registry configuration.

        Args:
            type_name: Key for the product type (e.g. 'car', 'truck')
            producer: Zero-argument callable building a new product

        Raises:
            InvalidKeyError: If the key is not a non-empty string
            InvalidProducerError: If the producer is not callable
            DuplicateRegistrationError: If the key exists and overriding is disabled
        """
        key = self._normalize_key(type_name)
        if not callable(producer):
            raise InvalidProducerError(key, producer)

        with self._registry_lock:
            replaced = key in self._registrations
            if replaced and not self.config.allow_override:
                raise DuplicateRegistrationError(key)

            registration = Registration(key, producer)
            self._registrations[key] = registration

        if replaced:
            self.logger.warning("Replaced registered type", type_name=key)
        else:
            self.logger.debug("Registered type", type_name=key)

    def create(self, type_name: str) -> T:
        """
        Create a new product for the given type name.

        Args:
            type_name: Key of the product type to create

        Returns:
            A freshly built product

        Raises:
            UnknownTypeError: If no producer is registered under the key
            InvalidProductError: If the producer yields an object outside
                the registry's product type
        """
        registration = self._get_registration(type_name)

        try:
            product = registration.producer()
        except Exception as e:
            self.logger.error(
                "Producer failed",
                type_name=registration.type_name,
                error=str(e),
            )
            raise

        if self.product_type is not None and not isinstance(product, self.product_type):
            self.logger.error(
                "Producer returned invalid product",
                type_name=registration.type_name,
                product_type=type(product).__name__,
            )
            raise InvalidProductError(registration.type_name, self.product_type, type(product))

        self.logger.debug("Created product", type_name=registration.type_name)
        return product

    def unregister(self, type_name: str) -> bool:
        """
        Remove a type from the registry.

        Returns:
            True if the type was registered, False otherwise
        """
        key = self._lookup_key(type_name)
        if key is None:
            return False
        with self._registry_lock:
            removed = self._registrations.pop(key, None) is not None

        if removed:
            self.logger.debug("Unregistered type", type_name=key)
        return removed

    def is_registered(self, type_name: str) -> bool:
        """Check if a type is registered."""
        key = self._lookup_key(type_name)
        if key is None:
            return False
        with self._registry_lock:
            return key in self._registrations

    def get_registered_types(self) -> List[str]:
        """Get sorted list of registered type names."""
        with self._registry_lock:
            return sorted(self._registrations.keys())

    def clear_registrations(self) -> None:
        """Clear all registrations."""
        with self._registry_lock:
            self._registrations.clear()
        self.logger.debug("Cleared all registrations")

    def __contains__(self, type_name: object) -> bool:
        return self.is_registered(type_name)

    def __len__(self) -> int:
        with self._registry_lock:
            return len(self._registrations)

    def __repr__(self) -> str:
        product = self.product_type.__name__ if self.product_type else "Any"
        return f"TypeRegistry[{product}](types={self.get_registered_types()})"

    def _get_registration(self, type_name: str) -> Registration[T]:
        """
        Get registration for the given type.

        Raises:
            UnknownTypeError: If the type is not registered
        """
        key = self._lookup_key(type_name)
        with self._registry_lock:
            registration = self._registrations.get(key) if key is not None else None
            if registration is not None:
                return registration
            available_types = list(self._registrations.keys())

        unknown = key if key is not None else type_name
        self.logger.warning(
            "Unknown type requested",
            type_name=unknown,
            available_types=sorted(available_types),
        )
        raise UnknownTypeError(unknown, available_types)

    def _normalize_key(self, type_name: str) -> str:
        """Validate a key and apply the configured case handling."""
        if not isinstance(type_name, str) or not type_name.strip():
            raise InvalidKeyError(type_name)
        if self.config.case_sensitive:
            return type_name
        return type_name.strip().lower()

    def _lookup_key(self, type_name) -> Optional[str]:
        """
        Apply case handling without validating; lookups never reject a key.

        Returns None for non-string keys, which are never registered.
        """
        if not isinstance(type_name, str):
            return None
        if self.config.case_sensitive:
            return type_name
        return type_name.strip().lower()
