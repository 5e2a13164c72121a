"""Package metadata and naming constants."""

PACKAGE_NAME = "solid-showcase"
__version__ = "1.0.0"
DESCRIPTION = "Paired violation/refactored examples of the SOLID design principles"

# Derived values
PACKAGE_NAME_PYTHON = PACKAGE_NAME.replace("-", "_")
ENV_PREFIX = PACKAGE_NAME_PYTHON.upper() + "_"
