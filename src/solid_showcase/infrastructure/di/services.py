"""Service registrations for the DI container."""
from functools import partial

from solid_showcase.application.demos import DEMO_CLASSES, DipDemo
from solid_showcase.application.service import DemoApplicationService
from solid_showcase.config.schemas import AppConfig
from solid_showcase.domain.base.ports import OutputPort
from solid_showcase.domain.base.value_objects import Principle
from solid_showcase.infrastructure.adapters.output_adapters import ConsoleOutputAdapter
from solid_showcase.infrastructure.di.container import DIContainer
from solid_showcase.infrastructure.logging.logger import get_logger
from solid_showcase.infrastructure.registry.demo_registry import DemoRegistry, get_demo_registry

logger = get_logger(__name__)


def register_demos(registry: DemoRegistry, config: AppConfig) -> None:
    """Register the demos enabled in configuration, in configured order."""
    registry.clear_registrations()
    for principle in config.demo.enabled_principles:
        if principle is Principle.DIP:
            factory = partial(DipDemo, data_source=config.demo.data_source)
        else:
            factory = DEMO_CLASSES[principle]
        registry.register_demo(principle, factory)


def register_all_services(container: DIContainer, config: AppConfig) -> DIContainer:
    """
    Register all application services.

    Args:
        container: Container to populate
        config: Loaded application configuration

    Returns:
        The same container, for chaining
    """
    container.register_instance(AppConfig, config)
    container.register_singleton(OutputPort, ConsoleOutputAdapter)

    registry = get_demo_registry()
    register_demos(registry, config)
    container.register_instance(DemoRegistry, registry)

    container.register_singleton(
        DemoApplicationService,
        lambda c: DemoApplicationService(c.get(DemoRegistry), config.demo.default_variant),
    )

    logger.debug(
        "Registered services",
        demos=[p.value for p in registry.get_registered_principles()],
    )
    return container
