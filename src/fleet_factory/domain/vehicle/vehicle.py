"""Vehicle capability interface and concrete vehicles."""
from abc import ABC, abstractmethod


class Vehicle(ABC):
    """
    Capability interface shared by every vehicle in the fleet.

    Concrete vehicles carry a name supplied at construction and describe
    what they do.
    """

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def describe(self) -> str:
        """Return a one-sentence description of the vehicle."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}')"


class Car(Vehicle):
    """A passenger car."""

    def __init__(self, name: str = "voiture"):
        super().__init__(name)

    def describe(self) -> str:
        return "La voiture roule sur la route."


class Truck(Vehicle):
    """A goods truck."""

    def __init__(self, name: str = "camion"):
        super().__init__(name)

    def describe(self) -> str:
        return "Le camion transporte la marchandise sur l'autoroute."
