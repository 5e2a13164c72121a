"""Domain base - exceptions, value objects and ports shared by every demo."""

from .exceptions import (
    ConfigurationError,
    DemoNotFoundError,
    DomainException,
    ValidationError,
)
from .value_objects import Principle, Variant

__all__ = [
    "DomainException",
    "ValidationError",
    "ConfigurationError",
    "DemoNotFoundError",
    "Principle",
    "Variant",
]
