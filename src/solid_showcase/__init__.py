"""SOLID Showcase - Root Package.

This package presents paired "violation" and "refactored" examples for the
five SOLID object-oriented design principles, with a small harness to list
and run them.

Key Components:
    - domain: Principle types, demo value types and ports
    - application: Demo entry points and the demo application service
    - infrastructure: Output adapters, demo registry, DI container, logging
    - config: Configuration schema and management
    - cli: Command-line interface

Usage:
    >>> solid-showcase list
    >>> solid-showcase run srp
    >>> solid-showcase run all --variant both
"""

from ._package import PACKAGE_NAME, __version__

__package_name__ = PACKAGE_NAME

__all__ = ["PACKAGE_NAME", "__version__"]
