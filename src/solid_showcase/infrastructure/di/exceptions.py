"""Dependency injection exceptions."""
from typing import Any, List, Optional, Type


def _type_name(cls: Any) -> str:
    return cls.__name__ if hasattr(cls, '__name__') else str(cls)


class DependencyResolutionError(Exception):
    """Base exception for dependency resolution failures."""

    def __init__(self,
                 dependency_type: Any,
                 message: str,
                 parent_type: Optional[Type] = None,
                 parameter_name: Optional[str] = None,
                 cause: Optional[Exception] = None):
        self.dependency_type = dependency_type
        self.parent_type = parent_type
        self.parameter_name = parameter_name
        self.cause = cause
        if parent_type is not None:
            location = f" (required by {_type_name(parent_type)}"
            location += f" parameter '{parameter_name}')" if parameter_name else ")"
            message = f"{message}{location}"
        super().__init__(message)


class UnregisteredDependencyError(DependencyResolutionError):
    """Raised when a dependency is neither registered nor constructible."""

    def __init__(self, dependency_type: Any, parent_type: Optional[Type] = None,
                 parameter_name: Optional[str] = None):
        super().__init__(
            dependency_type,
            f"Dependency {_type_name(dependency_type)} is not registered",
            parent_type,
            parameter_name,
        )


class UntypedParameterError(DependencyResolutionError):
    """Raised when a constructor parameter has no type annotation."""

    def __init__(self, dependency_type: Type, parameter_name: str):
        super().__init__(
            dependency_type,
            f"Cannot resolve untyped parameter '{parameter_name}' of {_type_name(dependency_type)}",
            parameter_name=parameter_name,
        )


class CircularDependencyError(DependencyResolutionError):
    """Raised when resolving a type requires that same type again."""

    def __init__(self, chain: List[Any]):
        self.chain = chain
        path = " -> ".join(_type_name(c) for c in chain)
        super().__init__(chain[-1], f"Circular dependency detected: {path}")


class InstantiationError(DependencyResolutionError):
    """Raised when a constructor fails with resolved dependencies."""

    def __init__(self, dependency_type: Type, message: str, cause: Optional[Exception] = None):
        super().__init__(dependency_type, message, cause=cause)


class FactoryError(DependencyResolutionError):
    """Raised when a registered factory function fails."""

    def __init__(self, dependency_type: Any, message: str, cause: Optional[Exception] = None):
        super().__init__(dependency_type, message, cause=cause)
