"""Configuration package with clean public API."""

from .manager import ConfigurationManager, get_config_manager, reset_config_manager
from .schemas import AppConfig, DemoConfig, LoggingConfig, validate_config

__all__ = [
    'AppConfig',
    'DemoConfig',
    'LoggingConfig',
    'validate_config',
    'ConfigurationManager',
    'get_config_manager',
    'reset_config_manager',
]
