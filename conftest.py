"""
Global pytest configuration and fixtures.
Keeps the configuration singleton isolated between tests.
"""

import pytest


@pytest.fixture(scope="function", autouse=True)
def reset_global_config():
    """Reset the global configuration before and after each test."""
    from mockli.config_factory import reset_config

    reset_config()
    yield
    reset_config()


@pytest.fixture(scope="function")
def strict_config():
    """Load a configuration with strict merging enabled."""
    from mockli.config_factory import load_config_from_dict

    return load_config_from_dict({'strict_merge': True, 'environment': 'testing'})
