"""Vehicle domain."""

from .vehicle import Car, Truck, Vehicle

__all__ = ["Car", "Truck", "Vehicle"]
