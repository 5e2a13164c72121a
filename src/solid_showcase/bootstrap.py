"""Application bootstrap - DI-based architecture."""

from __future__ import annotations

from typing import Optional

from solid_showcase.application.service import DemoApplicationService
from solid_showcase.config.manager import ConfigurationManager, get_config_manager
from solid_showcase.config.schemas import AppConfig
from solid_showcase.domain.base.ports import OutputPort
from solid_showcase.infrastructure.di.container import DIContainer, get_container
from solid_showcase.infrastructure.di.services import register_all_services
from solid_showcase.infrastructure.logging.logger import get_logger, setup_logging


class Application:
    """DI-based application context with lazy initialization."""

    def __init__(self, config_path: Optional[str] = None, log_level: Optional[str] = None) -> None:
        self.config_path = config_path
        self.log_level = log_level
        self._initialized = False
        self._container: Optional[DIContainer] = None
        self._config_manager: Optional[ConfigurationManager] = None
        self.logger = get_logger(__name__)

    @property
    def config(self) -> AppConfig:
        if self._config_manager is None:
            self._config_manager = get_config_manager(self.config_path)
        return self._config_manager.app_config

    def initialize(self) -> "Application":
        """Load configuration, set up logging and register services."""
        if self._initialized:
            return self

        app_config = self.config
        logging_config = app_config.logging
        if self.log_level:
            logging_config = logging_config.model_copy(update={"level": self.log_level.upper()})
        setup_logging(logging_config)

        self._container = get_container()
        register_all_services(self._container, app_config)

        self._initialized = True
        self.logger.info(
            "Application initialized",
            environment=app_config.environment,
            config_file=self.config_path,
        )
        return self

    def _ensure_initialized(self) -> DIContainer:
        if not self._initialized:
            self.initialize()
        return self._container

    @property
    def demo_service(self) -> DemoApplicationService:
        return self._ensure_initialized().get(DemoApplicationService)

    @property
    def output(self) -> OutputPort:
        return self._ensure_initialized().get(OutputPort)


def create_application(config_path: Optional[str] = None, log_level: Optional[str] = None) -> Application:
    """Create and initialize the application."""
    return Application(config_path, log_level).initialize()
