"""Configuration schemas package."""

from .app_schema import AppConfig, validate_config
from .demo_schema import DemoConfig
from .logging_schema import LoggingConfig

__all__ = ["AppConfig", "validate_config", "DemoConfig", "LoggingConfig"]
