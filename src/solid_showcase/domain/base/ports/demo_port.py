"""Domain port for a single principle demo."""
from abc import ABC, abstractmethod

from solid_showcase.domain.base.exceptions import ValidationError
from solid_showcase.domain.base.value_objects import Principle, Variant

from .output_port import OutputPort


class DemoPort(ABC):
    """
    A runnable demo for one principle.

    Each demo has a violation side and a refactored side. Both write their
    result through an OutputPort and never print directly.
    """

    principle: Principle
    title: str
    summary: str

    @abstractmethod
    def run_violation(self, output: OutputPort) -> None:
        """Run the side that breaks the principle."""

    @abstractmethod
    def run_refactored(self, output: OutputPort) -> None:
        """Run the side that follows the principle."""

    def run(self, variant: Variant, output: OutputPort) -> None:
        """Run a single concrete variant."""
        if variant is Variant.BAD:
            self.run_violation(output)
        elif variant is Variant.GOOD:
            self.run_refactored(output)
        else:
            raise ValidationError(
                f"Variant '{variant.value}' must be expanded before running",
                {"principle": self.principle.value},
            )
