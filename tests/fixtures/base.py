"""
Copyright (c) 2025 Eric C. Mumford (@heymumford)
This file is part of openapi-builders, licensed under the MIT License.
See LICENSE file for details.
"""

"""
Base fixtures for the openapi-builders test suite.

This module provides foundational fixtures that can be used across all test
types (unit, integration, acceptance) to ensure consistent setup and teardown.
"""

import logging
import os
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest
from typer.testing import CliRunner

from openapi_builders.core.config import reset_app_config
from openapi_builders.core.logging import LIBRARY_LOGGER


@pytest.fixture
def base_test_env() -> dict[str, str]:
    """
    Provide a standardized set of environment variables for testing.

    Returns
    -------
        Dictionary of environment variables

    """
    return {
        "OPENAPI_BUILDERS_LOG_LEVEL": "DEBUG",
        "OPENAPI_BUILDERS_LOG_USE_RICH": "false",
        "OPENAPI_BUILDERS_OUTPUT_FORMAT": "json",
        "OPENAPI_BUILDERS_JSON_INDENT": "4",
        "OPENAPI_BUILDERS_EXTENSION_PREFIX": "x-acme-",
    }


@pytest.fixture
def mock_env_vars(base_test_env: dict[str, str]) -> Generator[dict[str, str], None, None]:
    """
    Set and restore environment variables for tests.

    The global configuration is reset on both sides so that it is re-read
    from the patched environment.

    Args:
    ----
        base_test_env: The base testing environment variables

    Yields:
    ------
        The applied environment variables

    """
    original_environ = os.environ.copy()
    os.environ.update(base_test_env)
    reset_app_config()

    yield base_test_env

    os.environ.clear()
    os.environ.update(original_environ)
    reset_app_config()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Create a temporary directory for test files.

    The directory is removed after the test completes.

    Yields
    ------
        Path to the temporary directory

    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_app_state() -> Generator[None, None, None]:
    """
    Isolate the global configuration and the library logger between tests.

    The CLI configures both as a side effect, which would otherwise leak
    into later tests.
    """
    reset_app_config()
    logger_class = logging.getLoggerClass()
    library_logger = logging.getLogger(LIBRARY_LOGGER)
    handlers = list(library_logger.handlers)
    level = library_logger.level
    propagate = library_logger.propagate

    yield

    for handler in list(library_logger.handlers):
        if handler not in handlers:
            library_logger.removeHandler(handler)
            handler.close()
    library_logger.setLevel(level)
    library_logger.propagate = propagate
    logging.setLoggerClass(logger_class)
    reset_app_config()
