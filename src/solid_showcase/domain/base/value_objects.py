"""Value objects shared by the demos."""
from enum import Enum
from typing import List

from .exceptions import DemoNotFoundError, ValidationError


class Principle(str, Enum):
    """The five SOLID principles."""

    SRP = "srp"
    OCP = "ocp"
    LSP = "lsp"
    ISP = "isp"
    DIP = "dip"

    @property
    def full_name(self) -> str:
        return _FULL_NAMES[self]

    @classmethod
    def from_string(cls, value: str) -> "Principle":
        """
        Parse a principle key in any case.

        Raises:
            DemoNotFoundError: If the value names no principle
        """
        try:
            return cls(value.strip().lower())
        except ValueError as e:
            raise DemoNotFoundError(value, [p.value for p in cls]) from e


_FULL_NAMES = {
    Principle.SRP: "Single Responsibility Principle",
    Principle.OCP: "Open/Closed Principle",
    Principle.LSP: "Liskov Substitution Principle",
    Principle.ISP: "Interface Segregation Principle",
    Principle.DIP: "Dependency Inversion Principle",
}


class Variant(str, Enum):
    """Which side of a demo to run."""

    BAD = "bad"
    GOOD = "good"
    BOTH = "both"

    def expand(self) -> List["Variant"]:
        """Expand BOTH into the concrete variants, violation first."""
        if self is Variant.BOTH:
            return [Variant.BAD, Variant.GOOD]
        return [self]

    @classmethod
    def from_string(cls, value: str) -> "Variant":
        try:
            return cls(value.strip().lower())
        except ValueError as e:
            raise ValidationError(
                f"Unknown variant '{value}'", {"allowed": [v.value for v in cls]}
            ) from e
