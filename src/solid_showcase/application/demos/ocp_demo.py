"""OCP demo entry point."""
from solid_showcase.domain.base.ports import DemoPort, OutputPort
from solid_showcase.domain.base.value_objects import Principle
from solid_showcase.domain.principles.ocp import Bike, LegacyMileageCalculator, MileageCalculator


class OcpDemo(DemoPort):
    principle = Principle.OCP
    title = "Vehicle mileage calculator"
    summary = (
        "The legacy calculator branches on the vehicle name and must change for "
        "every new vehicle. The refactored one asks any Vehicle for its mileage."
    )

    def run_violation(self, output: OutputPort) -> None:
        output.write_line(LegacyMileageCalculator().get_mileage("Bike"))

    def run_refactored(self, output: OutputPort) -> None:
        MileageCalculator(output).print_mileage(Bike())
