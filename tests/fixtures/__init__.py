"""
Fixtures package for the openapi-builders test suite.

This package provides reusable fixtures and sample documents to standardize
the approach to testing throughout the project.
"""

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
