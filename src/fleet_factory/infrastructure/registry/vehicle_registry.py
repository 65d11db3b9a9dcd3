"""Vehicle Registry - preloaded type registry for the vehicle fleet."""
from typing import Optional

from fleet_factory.config.schemas import RegistryConfig
from fleet_factory.domain.vehicle import Car, Truck, Vehicle
from fleet_factory.infrastructure.registry.type_registry import TypeRegistry

DEFAULT_VEHICLE_TYPES = {
    "car": Car,
    "truck": Truck,
}


def create_vehicle_registry(config: Optional[RegistryConfig] = None) -> TypeRegistry[Vehicle]:
    """
    Build a vehicle registry with the default fleet registered.

    Each call returns an independent registry; callers own it and pass it
    to whatever needs to build vehicles.

    Args:
        config: Registry behaviour; when omitted the ConfigurationManager
            section is used, including FLEET_FACTORY_* overrides

    Returns:
        Registry restricted to ``Vehicle`` products with 'car' and 'truck'
    """
    registry: TypeRegistry[Vehicle] = TypeRegistry(product_type=Vehicle, config=config)
    for type_name, vehicle_class in DEFAULT_VEHICLE_TYPES.items():
        registry.register(type_name, vehicle_class)
    return registry
