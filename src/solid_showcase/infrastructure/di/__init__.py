"""Dependency Injection package.

register_all_services lives in .services and must be imported from there;
the DIP demo imports the container, so re-exporting it here would cycle.
"""
from .container import (
    DIContainer,
    get_container,
    reset_container
)

__all__ = [
    'DIContainer',
    'get_container',
    'reset_container',
]
