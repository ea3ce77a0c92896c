"""
Copyright (c) 2025 Eric C. Mumford (@heymumford)
This file is part of openapi-builders, licensed under the MIT License.
See LICENSE file for details.
"""

"""Logging infrastructure with contextual data.

This module provides structured logging for the library and the command line
front end: a logger class that accepts context data, JSON and Rich formatters,
and an operation timer.
"""

import json
import logging
import os
import sys
import time
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

LIBRARY_LOGGER = "openapi_builders"


class StructuredLogger(logging.Logger):
    """
    Logger that supports structured logging with context data.
    """

    def _log(
        self,
        level: int,
        msg: Any,
        args: tuple,
        exc_info: bool | tuple | None = None,
        extra: dict[str, Any] | None = None,
        stack_info: bool = False,
        stacklevel: int = 1,
        **kwargs: Any,
    ) -> None:
        """
        Log a message with the specified level and optional context.

        Args:
        ----
            level: The log level (DEBUG, INFO, etc.)
            msg: The message to log
            args: Arguments for string formatting
            exc_info: Exception info for traceback
            extra: Extra attributes to add to the LogRecord
            stack_info: Whether to include stack info
            stacklevel: Stack level used to find the caller
            **kwargs: Additional keyword arguments, which may include 'context'

        """
        context = kwargs.pop("context", None)

        if extra is None:
            extra = {}

        # Stored as context_data so it cannot collide with LogRecord attributes
        if context:
            extra["context_data"] = context

        # Skip this method and the public level method to reach the caller
        super()._log(level, msg, args, exc_info, extra, stack_info, stacklevel + 2)

    def debug(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        if self.isEnabledFor(logging.DEBUG):
            self._log(logging.DEBUG, msg, args, **kwargs)

    def info(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        if self.isEnabledFor(logging.INFO):
            self._log(logging.INFO, msg, args, **kwargs)

    def warning(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        if self.isEnabledFor(logging.WARNING):
            self._log(logging.WARNING, msg, args, **kwargs)

    def error(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        if self.isEnabledFor(logging.ERROR):
            self._log(logging.ERROR, msg, args, **kwargs)

    def critical(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        if self.isEnabledFor(logging.CRITICAL):
            self._log(logging.CRITICAL, msg, args, **kwargs)

    def log(self, level: int, msg: Any, *args: Any, **kwargs: Any) -> None:
        if self.isEnabledFor(level):
            self._log(level, msg, args, **kwargs)


class JSONFormatter(logging.Formatter):
    """
    Formatter that outputs log records as JSON.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now().isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if getattr(record, "context_data", None):
            log_data["context"] = record.context_data

        if record.exc_info:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "traceback": self.formatException(record.exc_info),
            }

        return json.dumps(log_data, default=str)


class RichContextFormatter(logging.Formatter):
    """
    Formatter for Rich console output with context data.
    """

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)

        context = getattr(record, "context_data", None)
        if context:
            context_str = " ".join(f"[{k}={v}]" for k, v in context.items())
            message = f"{message} {context_str}"

        return message


@contextmanager
def log_operation(
    logger: logging.Logger,
    operation_name: str,
    level: int = logging.INFO,
    context: dict[str, Any] | None = None,
) -> Iterator[dict[str, Any]]:
    """
    Context manager for logging operations with timing and context tracking.

    Args:
    ----
        logger: The logger instance to use
        operation_name: Name of the operation being performed
        level: Log level to use
        context: Additional context data to include in the logs

    Yields:
    ------
        The context dictionary, which the block may extend

    Raises:
    ------
        Exception: Re-raises any exception that occurs within the context

    """
    start_time = time.time()
    context = dict(context or {})
    context["operation_id"] = str(uuid.uuid4())[:8]

    _log_with_context(logger, level, f"Starting {operation_name}", context)

    try:
        yield context
    except Exception as e:
        duration = time.time() - start_time
        error_context = {
            **context,
            "error_type": type(e).__name__,
            "error": str(e),
            "duration": f"{duration:.2f}s",
        }
        _log_with_context(logger, logging.ERROR, f"Failed {operation_name} after {duration:.2f}s", error_context)
        raise

    duration = time.time() - start_time
    _log_with_context(logger, level, f"Completed {operation_name} in {duration:.2f}s", context)


def _log_with_context(logger: logging.Logger, level: int, message: str, context: dict[str, Any]) -> None:
    if isinstance(logger, StructuredLogger):
        logger.log(level, message, context=context)
    else:
        logger.log(level, message, extra={"context_data": context})


def _plain_formatter(
    include_timestamp: bool, log_format: str | None = None, date_format: str | None = None
) -> logging.Formatter:
    if log_format:
        return logging.Formatter(log_format, date_format)
    format_str = (
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
        if include_timestamp
        else "[%(levelname)s] %(name)s: %(message)s"
    )
    return logging.Formatter(format_str, date_format)


def configure_logging(
    level: int | str = logging.INFO,
    log_file: str | None = None,
    json_format: bool = False,
    include_timestamp: bool = True,
    use_rich: bool = True,
    debug: bool = False,
    log_format: str | None = None,
    date_format: str | None = None,
) -> None:
    """
    Configure logging for the openapi_builders logger hierarchy.

    Args:
    ----
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL or integer)
        log_file: Optional path to log file
        json_format: Whether to use JSON format for logs
        include_timestamp: Whether to include timestamps in logs
        use_rich: Whether to use Rich for console output
        debug: Whether to force debug mode
        log_format: Format string for console and file messages
        date_format: strftime format for timestamps

    """
    if isinstance(level, str):
        level = getattr(logging, level.upper())

    if debug:
        level = logging.DEBUG

    logging.setLoggerClass(StructuredLogger)

    handlers: list[logging.Handler] = []

    if json_format:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(JSONFormatter())
        handlers.append(console_handler)
    elif use_rich:
        # Documents go to stdout, so console logging stays on stderr
        rich_handler = RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            markup=False,
            show_time=include_timestamp,
            log_time_format=date_format or "[%X]",
        )
        rich_handler.setFormatter(RichContextFormatter(log_format or "%(message)s"))
        handlers.append(rich_handler)
    else:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(_plain_formatter(include_timestamp, log_format, date_format))
        handlers.append(console_handler)

    if log_file:
        os.makedirs(os.path.dirname(os.path.abspath(log_file)), exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(
            JSONFormatter() if json_format else _plain_formatter(include_timestamp, log_format, date_format)
        )
        handlers.append(file_handler)

    logger = logging.getLogger(LIBRARY_LOGGER)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    for handler in handlers:
        logger.addHandler(handler)

    logger.debug(f"Logging configured with level {logging.getLevelName(level)}")


def get_logger(name: str) -> StructuredLogger:
    """
    Get a logger with the standard configuration.

    Args:
    ----
        name: Name of the logger, typically __name__

    Returns:
    -------
        A structured logger instance

    """
    manager = logging.Logger.manager
    existing = manager.loggerDict.get(name)
    if isinstance(existing, StructuredLogger):
        return existing
    previous = logging.getLoggerClass()
    logging.setLoggerClass(StructuredLogger)
    try:
        if isinstance(existing, logging.Logger):
            # Created earlier as a plain logger: swap in a structured one
            del manager.loggerDict[name]
        return logging.getLogger(name)
    finally:
        logging.setLoggerClass(previous)
