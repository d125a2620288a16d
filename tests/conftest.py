"""Shared pytest configuration and fixtures for params_deserializer tests."""

import os

import pytest

from params_deserializer.core.config import ConfigSchema

pytest_plugins = ["tests.fixtures.deserializers"]


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests (fast, no external deps)")
    config.addinivalue_line("markers", "integration: marks tests as integration tests")


def pytest_collection_modifyitems(config, items):
    """Add markers to tests based on their location."""
    for item in items:
        path = str(item.fspath)
        if "tests/api/" in path:
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def clean_config_environment():
    """Run every test without configuration leaking in from the shell or .env."""
    names = list(ConfigSchema.all_specs())
    original_env = {name: os.environ.pop(name, None) for name in names}
    try:
        yield
    finally:
        for name, value in original_env.items():
            if value is None:
                os.environ.pop(name, None)
            else:
                os.environ[name] = value
