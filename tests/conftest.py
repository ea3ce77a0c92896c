"""
Test configuration and fixtures for the openapi-builders project.

This file is the root pytest configuration file that sets up pytest
markers and imports fixtures from the fixtures modules to make them
available to all tests.
"""

# Import fixtures from the fixtures modules to make them available to all tests
from tests.fixtures.base import (
    base_test_env,
    cli_runner,
    isolated_app_state,
    mock_env_vars,
    temp_dir,
)
from tests.fixtures.documents import (
    contact,
    info_v3_0,
    info_v3_1,
    license_v3_1,
    widget_schema,
)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: mark a test as a unit test")
    config.addinivalue_line("markers", "integration: mark a test as an integration test")
    config.addinivalue_line("markers", "acceptance: mark a test as an acceptance test")
