"""Tests for the OCP vehicle mileage types."""
import pytest

from solid_showcase.domain.base.exceptions import ValidationError
from solid_showcase.domain.principles.ocp import Bike, Car, LegacyMileageCalculator, MileageCalculator, Vehicle


class TestMileageCalculator:
    def test_bike_mileage(self, recording_output):
        MileageCalculator(recording_output).print_mileage(Bike())
        assert recording_output.lines == ["50"]

    def test_car_mileage(self, recording_output):
        MileageCalculator(recording_output).print_mileage(Car())
        assert recording_output.lines == ["10"]

    def test_new_vehicle_needs_no_calculator_change(self, recording_output):
        class Truck(Vehicle):
            def get_mileage(self) -> str:
                return "5"

        MileageCalculator(recording_output).print_mileage(Truck())
        assert recording_output.lines == ["5"]

    def test_vehicle_is_abstract(self):
        with pytest.raises(TypeError):
            Vehicle()


class TestLegacyMileageCalculator:
    @pytest.mark.parametrize("vehicle_type,expected", [("Car", "10"), ("Bike", "50")])
    def test_known_vehicles(self, vehicle_type, expected):
        assert LegacyMileageCalculator().get_mileage(vehicle_type) == expected

    def test_unknown_vehicle_raises(self):
        with pytest.raises(ValidationError, match="Truck"):
            LegacyMileageCalculator().get_mileage("Truck")
