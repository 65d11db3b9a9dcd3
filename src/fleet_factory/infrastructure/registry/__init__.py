"""Infrastructure registry patterns."""

from .type_registry import Registration, TypeRegistry
from .vehicle_registry import create_vehicle_registry

__all__ = [
    'Registration',
    'TypeRegistry',
    'create_vehicle_registry'
]
