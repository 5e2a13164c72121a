"""
Dependency Injection Container implementation.

Resolves services from pre-registered instances, singletons and factories,
and auto-wires constructors from their type annotations.
"""
import inspect
import threading
import time
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, List, Optional, Type, TypeVar, cast, get_type_hints

from solid_showcase.domain.base.ports import ContainerPort
from solid_showcase.infrastructure.di.exceptions import (
    CircularDependencyError,
    DependencyResolutionError,
    FactoryError,
    InstantiationError,
    UnregisteredDependencyError,
    UntypedParameterError,
)
from solid_showcase.infrastructure.logging.logger import get_logger

T = TypeVar('T')
logger = get_logger(__name__)


@contextmanager
def timed_operation(operation_name: str) -> Iterator[None]:
    """Context manager to time and log an operation."""
    start_time = time.time()
    try:
        yield
    finally:
        elapsed_time = time.time() - start_time
        logger.debug(f"{operation_name} completed in {elapsed_time:.4f}s")


def _type_name(cls: Any) -> str:
    return cls.__name__ if hasattr(cls, '__name__') else str(cls)


class DIContainer(ContainerPort):
    """
    Dependency injection container.

    Resolution order for ``get``:
    1. pre-registered instances
    2. singletons (a class, a factory or an instance; created once)
    3. factories (called on every ``get``)
    4. direct construction of a concrete class, resolving its constructor
       parameters from their annotations
    """

    def __init__(self):
        self._instances: Dict[Type, Any] = {}
        self._singletons: Dict[Type, Any] = {}
        self._singleton_factories: Dict[Type, Callable[..., Any]] = {}
        self._factories: Dict[Type, Callable[..., Any]] = {}
        # Resolution chain of the factory currently running, if any
        self._factory_chain: List[Type] = []
        self._lock = threading.RLock()

    def is_registered(self, cls: Type) -> bool:
        """
        Check if a type is registered with the container.

        Args:
            cls: Class type to check

        Returns:
            True if the type is registered, False otherwise
        """
        return (
            cls in self._instances or
            cls in self._singletons or
            cls in self._singleton_factories or
            cls in self._factories
        )

    def has(self, service_type: Type[T]) -> bool:
        return self.is_registered(service_type)

    def register_singleton(self, cls: Type[T], instance_or_factory: Any = None) -> None:
        """
        Register a singleton type.

        Args:
            cls: Class type to register
            instance_or_factory: Optional implementation class, pre-created
                instance, or factory function taking the container
        """
        with self._lock:
            self._singleton_factories.pop(cls, None)
            self._singletons.pop(cls, None)
            if instance_or_factory is None:
                self._singletons[cls] = cls
                logger.debug(f"Registered singleton type {_type_name(cls)}")
            elif callable(instance_or_factory) and not isinstance(instance_or_factory, type):
                self._singleton_factories[cls] = instance_or_factory
                logger.debug(f"Registered singleton factory for {_type_name(cls)}")
            else:
                # Either an implementation class or a pre-created instance
                self._singletons[cls] = instance_or_factory
                logger.debug(f"Registered singleton for {_type_name(cls)}")

    def register_factory(self, cls: Type[T], factory: Callable[..., T]) -> None:
        """
        Register a factory function for a type.

        Args:
            cls: Class type to register
            factory: Factory function taking the container and returning an instance
        """
        with self._lock:
            self._factories[cls] = factory
        logger.debug(f"Registered factory for {_type_name(cls)}")

    def register_instance(self, cls: Type[T], instance: T) -> None:
        """
        Register a specific instance for a type.

        Args:
            cls: Class type to register
            instance: Instance to use
        """
        with self._lock:
            self._instances[cls] = instance
        logger.debug(f"Registered instance for {_type_name(cls)}")

    def get(self, cls: Type[T], parent_type: Optional[Type] = None,
            parameter_name: Optional[str] = None,
            dependency_chain: Optional[List[Type]] = None) -> T:
        """
        Get an instance of the specified type.

        Args:
            cls: Class type to get
            parent_type: Optional parent type that requires this dependency
            parameter_name: Optional parameter name in the parent type
            dependency_chain: Types currently being resolved, for cycle detection

        Returns:
            Instance of the requested type

        Raises:
            DependencyResolutionError: If the dependency cannot be resolved
        """
        class_name = _type_name(cls)
        with self._lock, timed_operation(f"Resolve {class_name}"):
            chain = list(dependency_chain if dependency_chain is not None else self._factory_chain)
            if cls in chain:
                raise CircularDependencyError(chain + [cls])
            chain.append(cls)

            if cls in self._instances:
                return cast(T, self._instances[cls])

            if cls in self._singleton_factories:
                instance = self._call_factory(cls, self._singleton_factories[cls], chain)
                self._singletons[cls] = instance
                del self._singleton_factories[cls]
                return cast(T, instance)

            if cls in self._singletons:
                registered = self._singletons[cls]
                if isinstance(registered, type):
                    logger.debug(f"Creating singleton instance for {class_name}")
                    instance = self._create_instance(registered, chain)
                    self._singletons[cls] = instance
                    return cast(T, instance)
                return cast(T, registered)

            if cls in self._factories:
                return cast(T, self._call_factory(cls, self._factories[cls], chain))

            if not isinstance(cls, type) or inspect.isabstract(cls):
                raise UnregisteredDependencyError(cls, parent_type, parameter_name)

            logger.debug(f"No registration found for {class_name}, attempting direct creation")
            return self._create_instance(cls, chain)

    def _call_factory(self, cls: Type, factory: Callable[..., Any], chain: List[Type]) -> Any:
        # Lookups made by the factory extend this chain
        previous_chain = self._factory_chain
        self._factory_chain = chain
        try:
            instance = factory(self)
        except DependencyResolutionError:
            raise
        except Exception as e:
            logger.error(f"Factory failed to create instance of {_type_name(cls)}: {str(e)}")
            raise FactoryError(cls, f"Factory function failed: {str(e)}", e) from e
        finally:
            self._factory_chain = previous_chain
        logger.debug(f"Factory successfully created instance of {_type_name(cls)}")
        return instance

    def _create_instance(self, cls: Type[T], dependency_chain: List[Type]) -> T:
        """
        Create an instance of the specified type with dependencies.

        Args:
            cls: Class type to create
            dependency_chain: Types currently being resolved

        Returns:
            Created instance

        Raises:
            DependencyResolutionError: If dependencies cannot be resolved
        """
        class_name = _type_name(cls)
        try:
            signature = inspect.signature(cls.__init__)
            hints = get_type_hints(cls.__init__)
        except (ValueError, TypeError, NameError) as e:
            raise InstantiationError(cls, f"Failed to inspect constructor: {str(e)}", cause=e) from e

        kwargs: Dict[str, Any] = {}
        for name, param in list(signature.parameters.items())[1:]:
            if param.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
                continue
            annotation = hints.get(name, inspect.Parameter.empty)
            has_default = param.default is not inspect.Parameter.empty

            if annotation is inspect.Parameter.empty:
                if has_default:
                    continue
                raise UntypedParameterError(cls, name)

            if has_default and not self.is_registered(annotation):
                continue

            kwargs[name] = self.get(annotation, cls, name, dependency_chain)

        try:
            instance = cls(**kwargs)
        except Exception as e:
            logger.error(f"Failed to instantiate {class_name} with resolved dependencies: {str(e)}")
            raise InstantiationError(
                cls, f"Failed to instantiate with resolved dependencies: {str(e)}", cause=e
            ) from e
        logger.debug(f"Successfully created instance of {class_name}")
        return instance

    def clear(self) -> None:
        """Clear all registrations."""
        with self._lock:
            self._instances.clear()
            self._singletons.clear()
            self._singleton_factories.clear()
            self._factories.clear()
        logger.debug("Cleared all registrations")


_container: Optional[DIContainer] = None
_container_lock = threading.Lock()


def get_container() -> DIContainer:
    """Get the global container instance."""
    global _container
    if _container is None:
        with _container_lock:
            if _container is None:
                _container = DIContainer()
    return _container


def reset_container() -> None:
    """Reset the global container instance."""
    global _container
    if _container:
        _container.clear()
    _container = None
