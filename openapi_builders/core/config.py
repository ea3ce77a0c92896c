"""
Copyright (c) 2025 Eric C. Mumford (@heymumford)
This file is part of openapi-builders, licensed under the MIT License.
See LICENSE file for details.
"""

"""
Configuration management for openapi-builders.

This module provides a central location for all configuration settings. It
handles environment variables, default values, and validation of the settings
used by the builders, the serializer and the command line front end.
"""

import logging
import os
from typing import Any, ClassVar, Literal, Never

from pydantic import BaseModel, Field, field_validator

# Configure logging
logger = logging.getLogger(__name__)


class BaseConfig(BaseModel):
    """Base configuration class with common functionality."""

    # Class variable to store environment variable prefixes
    ENV_PREFIX: ClassVar[str] = "OPENAPI_BUILDERS_"

    @classmethod
    def from_env(cls, **overrides) -> Never:
        """
        Create a configuration instance from environment variables.

        Args:
        ----
            **overrides: Key-value pairs that override environment variables

        Returns:
        -------
            An instance of the configuration class

        """
        raise NotImplementedError("Subclasses must implement from_env method")

    @classmethod
    def get_env_var(cls, key: str, default: Any = None) -> Any:
        """
        Get an environment variable with the class prefix.

        Args:
        ----
            key: Key name without prefix
            default: Default value if environment variable is not found

        Returns:
        -------
            The environment variable value or default

        """
        env_key = f"{cls.ENV_PREFIX}{key.upper()}"
        return os.environ.get(env_key, default)

    @classmethod
    def get_env_flag(cls, key: str, default: bool) -> bool:
        """Read a true/false environment variable."""
        return str(cls.get_env_var(key, str(default))).lower() == "true"


class LoggingConfig(BaseConfig):
    """Configuration for logging settings."""

    level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    format: str | None = Field(
        default=None,
        description="Logging format string (None for the handler default)",
    )
    date_format: str = Field(
        default="[%X]",
        description="Date format for logging timestamps",
    )
    use_rich: bool = Field(
        default=True,
        description="Whether to use rich for logging formatting",
    )
    log_file: str | None = Field(
        default=None,
        description="Path to the log file (None for console-only logging)",
    )
    json_format: bool = Field(
        default=False,
        description="Whether to use JSON format for logs",
    )

    @field_validator("level")
    @classmethod
    def validate_level(cls, value):
        """Validate that the log level is valid."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        value = value.upper()
        if value not in valid_levels:
            logger.warning(f"Invalid log level '{value}', defaulting to INFO")
            return "INFO"
        return value

    @classmethod
    def from_env(cls, **overrides) -> "LoggingConfig":
        """Create a logging configuration from environment variables."""
        config = {
            "level": cls.get_env_var("LOG_LEVEL", "INFO"),
            "format": cls.get_env_var("LOG_FORMAT", None),
            "date_format": cls.get_env_var("LOG_DATE_FORMAT", "[%X]"),
            "use_rich": cls.get_env_flag("LOG_USE_RICH", True),
            "log_file": cls.get_env_var("LOG_FILE", None),
            "json_format": cls.get_env_flag("LOG_JSON", False),
        }

        # Override with any directly provided values
        config.update(overrides)

        return cls(**config)

    def get_log_level_int(self) -> int:
        """Get the numeric logging level."""
        return getattr(logging, self.level)

    def configure_logging(self, debug: bool = False) -> None:
        """
        Configure logging based on the settings.

        Args:
        ----
            debug: Whether to force debug mode

        """
        from openapi_builders.core.logging import configure_logging as configure_contextual_logging

        configure_contextual_logging(
            level=logging.DEBUG if debug else self.get_log_level_int(),
            log_file=self.log_file,
            json_format=self.json_format,
            include_timestamp=True,
            use_rich=self.use_rich,
            debug=debug,
            log_format=self.format,
            date_format=self.date_format,
        )


class BuilderConfig(BaseConfig):
    """Configuration for the node builders."""

    enforce_extension_prefix: bool = Field(
        default=True,
        description="Reject specification extensions whose name lacks the prefix",
    )
    extension_prefix: str = Field(
        default="x-",
        description="Reserved prefix for specification extension names",
    )

    @field_validator("extension_prefix")
    @classmethod
    def validate_extension_prefix(cls, value):
        """The prefix must not be empty."""
        if not value:
            raise ValueError("extension_prefix must not be empty")
        return value

    @classmethod
    def from_env(cls, **overrides) -> "BuilderConfig":
        """Create a builder configuration from environment variables."""
        config = {
            "enforce_extension_prefix": cls.get_env_flag("ENFORCE_EXTENSION_PREFIX", True),
            "extension_prefix": cls.get_env_var("EXTENSION_PREFIX", "x-"),
        }
        config.update(overrides)
        return cls(**config)


class OutputConfig(BaseConfig):
    """Configuration for document serialization."""

    format: Literal["yaml", "json"] = Field(
        default="yaml",
        description="Default output format",
    )
    json_indent: int = Field(
        default=2,
        description="Indentation used for JSON output",
        ge=0,
    )
    yaml_width: int = Field(
        default=120,
        description="Preferred line width for YAML output",
        gt=0,
    )
    sort_keys: bool = Field(
        default=False,
        description="Sort mapping keys instead of keeping insertion order",
    )

    @field_validator("format", mode="before")
    @classmethod
    def normalize_format(cls, value):
        """Accept the format name in any case."""
        return value.lower() if isinstance(value, str) else value

    @classmethod
    def from_env(cls, **overrides) -> "OutputConfig":
        """Create an output configuration from environment variables."""
        config = {
            "format": cls.get_env_var("OUTPUT_FORMAT", "yaml"),
            "json_indent": int(cls.get_env_var("JSON_INDENT", "2")),
            "yaml_width": int(cls.get_env_var("YAML_WIDTH", "120")),
            "sort_keys": cls.get_env_flag("SORT_KEYS", False),
        }
        config.update(overrides)
        return cls(**config)


class AppConfig(BaseConfig):
    """Main application configuration that aggregates all other configurations."""

    logging: LoggingConfig = Field(
        default_factory=LoggingConfig,
        description="Logging configuration",
    )
    builder: BuilderConfig = Field(
        default_factory=BuilderConfig,
        description="Builder configuration",
    )
    output: OutputConfig = Field(
        default_factory=OutputConfig,
        description="Serialization configuration",
    )
    debug: bool = Field(
        default=False,
        description="Debug mode flag",
    )

    @classmethod
    def from_env(cls, **overrides) -> "AppConfig":
        """Create an application configuration from environment variables."""
        config = {
            "logging": LoggingConfig.from_env(),
            "builder": BuilderConfig.from_env(),
            "output": OutputConfig.from_env(),
            "debug": cls.get_env_flag("DEBUG", False),
        }

        nested = {"logging": LoggingConfig, "builder": BuilderConfig, "output": OutputConfig}
        for key, value in overrides.items():
            if key in nested and isinstance(value, dict):
                # For nested configs, accept either raw dict or instantiated objects
                config[key] = nested[key](**value)
            else:
                config[key] = value

        return cls(**config)

    def configure_logging(self) -> None:
        """Configure logging based on the settings."""
        self.logging.configure_logging(debug=self.debug)


# Global app configuration
_app_config = None


def get_app_config() -> AppConfig:
    """
    Get the global application configuration.

    Returns
    -------
        The application configuration instance

    """
    global _app_config
    if _app_config is None:
        _app_config = AppConfig.from_env()
    return _app_config


def init_app_config(config: AppConfig | None = None, **kwargs) -> AppConfig:
    """
    Initialize the global application configuration.

    Args:
    ----
        config: An existing AppConfig instance
        **kwargs: Key-value pairs for creating a new AppConfig

    Returns:
    -------
        The application configuration instance

    """
    global _app_config
    _app_config = config if config is not None else AppConfig.from_env(**kwargs)
    return _app_config


def reset_app_config() -> None:
    """Forget the global configuration so the next access re-reads the environment."""
    global _app_config
    _app_config = None
