"""Open/Closed Principle - mileage of different vehicles."""
from abc import ABC, abstractmethod

from solid_showcase.domain.base.exceptions import ValidationError
from solid_showcase.domain.base.ports import OutputPort


class LegacyMileageCalculator:
    """Calculator that must be edited for every new vehicle type."""

    def get_mileage(self, vehicle_type: str) -> str:
        if vehicle_type == "Car":
            return "10"
        elif vehicle_type == "Bike":
            return "50"
        raise ValidationError(f"Unknown vehicle type '{vehicle_type}'")


class Vehicle(ABC):
    """A vehicle that knows its own mileage."""

    @abstractmethod
    def get_mileage(self) -> str:
        pass


class Car(Vehicle):
    def get_mileage(self) -> str:
        return "10"


class Bike(Vehicle):
    def get_mileage(self) -> str:
        return "50"


class MileageCalculator:
    """Calculator closed for modification, open to any Vehicle."""

    def __init__(self, output: OutputPort):
        self._output = output

    def print_mileage(self, vehicle: Vehicle) -> None:
        self._output.write_line(vehicle.get_mileage())
