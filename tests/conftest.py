"""Shared pytest fixtures."""
import pytest

from solid_showcase._package import ENV_PREFIX
from solid_showcase.config.manager import ENV_OVERRIDES, reset_config_manager
from solid_showcase.infrastructure.adapters.output_adapters import RecordingOutputAdapter
from solid_showcase.infrastructure.di.container import reset_container
from solid_showcase.infrastructure.logging.logger import reset_logging
from solid_showcase.infrastructure.registry.demo_registry import reset_demo_registry


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Isolate every test from SOLID_SHOWCASE_* variables and global singletons."""
    monkeypatch.delenv(f"{ENV_PREFIX}CONFIG", raising=False)
    for suffix in ENV_OVERRIDES:
        monkeypatch.delenv(f"{ENV_PREFIX}{suffix}", raising=False)

    reset_demo_registry()
    reset_container()
    reset_config_manager()
    yield
    reset_demo_registry()
    reset_container()
    reset_config_manager()
    reset_logging()


@pytest.fixture
def recording_output():
    return RecordingOutputAdapter()
