"""Demo Registry - Registry pattern for principle demo factories.

New demos are added by registering a factory, without touching the code that
lists or runs them.
"""

import threading
from typing import Callable, Dict, List, Optional

from solid_showcase.domain.base.exceptions import ConfigurationError
from solid_showcase.domain.base.ports import DemoPort
from solid_showcase.domain.base.value_objects import Principle
from solid_showcase.infrastructure.logging.logger import get_logger


class UnsupportedDemoError(Exception):
    """Exception raised when a principle with no registered demo is requested."""
    pass


class DemoRegistration:
    """Container for demo registration information."""

    def __init__(self, principle: Principle, demo_factory: Callable[[], DemoPort]):
        self.principle = principle
        self.demo_factory = demo_factory

    def __repr__(self) -> str:
        return f"DemoRegistration(principle='{self.principle.value}')"


class DemoRegistry:
    """
    Registry for principle demo factories.

    Registration order is preserved and used when listing or running all
    demos. Thread-safe singleton implementation.
    """

    _instance: Optional['DemoRegistry'] = None
    _lock = threading.Lock()

    def __new__(cls) -> 'DemoRegistry':
        """Ensure singleton instance."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if hasattr(self, '_initialized'):
            return

        self._registrations: Dict[Principle, DemoRegistration] = {}
        self._registry_lock = threading.Lock()
        self.logger = get_logger(__name__)
        self._initialized = True

        self.logger.debug("Demo registry initialized")

    def register_demo(self, principle: Principle, demo_factory: Callable[[], DemoPort]) -> None:
        """
        Register a demo factory for a principle.

        Args:
            principle: Principle the demo illustrates
            demo_factory: Zero-argument callable returning a DemoPort

        Raises:
            ConfigurationError: If the principle is already registered
        """
        with self._registry_lock:
            if principle in self._registrations:
                raise ConfigurationError(f"Demo for '{principle.value}' is already registered")

            registration = DemoRegistration(principle, demo_factory)
            self._registrations[principle] = registration

            self.logger.debug(f"Registered demo: {registration}")

    def create_demo(self, principle: Principle) -> DemoPort:
        """
        Create the demo registered for a principle.

        Raises:
            UnsupportedDemoError: If no demo is registered for the principle
            ConfigurationError: If the factory fails
        """
        registration = self._get_registration(principle)

        try:
            demo = registration.demo_factory()
        except Exception as e:
            error_msg = f"Failed to create demo for '{principle.value}': {str(e)}"
            self.logger.error(error_msg)
            raise ConfigurationError(error_msg) from e

        self.logger.debug(f"Created demo for principle: {principle.value}")
        return demo

    def get_registered_principles(self) -> List[Principle]:
        """Get registered principles in registration order."""
        with self._registry_lock:
            return list(self._registrations.keys())

    def is_demo_registered(self, principle: Principle) -> bool:
        with self._registry_lock:
            return principle in self._registrations

    def clear_registrations(self) -> None:
        """
        Clear all demo registrations.

        This method is primarily for testing purposes.
        """
        with self._registry_lock:
            self._registrations.clear()
            self.logger.debug("Cleared all demo registrations")

    def _get_registration(self, principle: Principle) -> DemoRegistration:
        with self._registry_lock:
            if principle not in self._registrations:
                available = [p.value for p in self._registrations]
                raise UnsupportedDemoError(
                    f"Demo for '{principle.value}' is not registered. "
                    f"Available demos: {available}"
                )
            return self._registrations[principle]


# Global registry instance
_demo_registry: Optional[DemoRegistry] = None


def get_demo_registry() -> DemoRegistry:
    """
    Get the global demo registry instance.

    Returns:
        Demo registry singleton instance
    """
    global _demo_registry
    if _demo_registry is None:
        _demo_registry = DemoRegistry()
    return _demo_registry


def reset_demo_registry() -> None:
    """
    Reset the global demo registry instance.

    This function is primarily for testing purposes.
    """
    global _demo_registry
    if _demo_registry is not None:
        _demo_registry.clear_registrations()
    _demo_registry = None
