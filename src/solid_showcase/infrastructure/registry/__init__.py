"""Infrastructure registry patterns."""

from .demo_registry import DemoRegistry, UnsupportedDemoError, get_demo_registry, reset_demo_registry

__all__ = [
    'DemoRegistry',
    'UnsupportedDemoError',
    'get_demo_registry',
    'reset_demo_registry',
]
