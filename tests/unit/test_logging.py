"""
Copyright (c) 2025 Eric C. Mumford (@heymumford)
This file is part of openapi-builders, licensed under the MIT License.
See LICENSE file for details.
"""

"""
Test suite for the contextual logging module.
"""

import json
import logging
import sys
from unittest.mock import MagicMock

import pytest
from rich.logging import RichHandler

from openapi_builders.core.logging import (
    LIBRARY_LOGGER,
    JSONFormatter,
    RichContextFormatter,
    StructuredLogger,
    configure_logging,
    get_logger,
    log_operation,
)


def _record(message="Built document", context=None, exc_info=None):
    record = logging.LogRecord(
        name="openapi_builders.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg=message,
        args=(),
        exc_info=exc_info,
    )
    if context is not None:
        record.context_data = context
    return record


@pytest.mark.unit
class TestStructuredLogger:
    def test_get_logger_returns_structured_logger(self):
        """Test that get_logger always hands out a StructuredLogger."""
        logger = get_logger("openapi_builders.test.structured")

        assert isinstance(logger, StructuredLogger)
        assert get_logger("openapi_builders.test.structured") is logger

    def test_get_logger_replaces_plain_logger(self):
        """Test that a logger created earlier as a plain logger is upgraded."""
        logging.setLoggerClass(logging.Logger)
        plain = logging.getLogger("openapi_builders.test.plain")
        assert not isinstance(plain, StructuredLogger)

        assert isinstance(get_logger("openapi_builders.test.plain"), StructuredLogger)

    def test_context_is_attached(self, caplog):
        """Test that the context keyword ends up on the record."""
        logger = get_logger("openapi_builders.test.context")
        caplog.set_level(logging.DEBUG, logger="openapi_builders.test.context")

        logger.info("Rendered document", context={"paths": 3})

        record = caplog.records[-1]
        assert record.getMessage() == "Rendered document"
        assert record.context_data == {"paths": 3}

    def test_records_name_the_caller(self, caplog):
        """Test that records report the calling function, not the logger class."""
        logger = get_logger("openapi_builders.test.caller")
        caplog.set_level(logging.DEBUG, logger="openapi_builders.test.caller")

        def render_step():
            logger.debug("Rendering")
            logger.log(logging.INFO, "Rendered", context={"paths": 1})

        render_step()

        for record in caplog.records[-2:]:
            assert record.funcName == "render_step"
            assert record.filename == "test_logging.py"

    def test_json_formatter_reports_caller(self, temp_dir):
        """Test the module and function written by the JSON formatter."""
        log_file = temp_dir / "caller.log"
        configure_logging(level=logging.INFO, log_file=str(log_file), json_format=True)

        get_logger("openapi_builders.test.json_caller").info("Wrote document")
        for handler in logging.getLogger(LIBRARY_LOGGER).handlers:
            handler.flush()

        data = json.loads(log_file.read_text(encoding="utf-8").strip().splitlines()[-1])
        assert data["module"] == "test_logging"
        assert data["function"] == "test_json_formatter_reports_caller"


@pytest.mark.unit
class TestFormatters:
    def test_json_formatter(self):
        """Test JSON rendering of a record with context."""
        data = json.loads(JSONFormatter().format(_record(context={"paths": 2})))

        assert data["level"] == "INFO"
        assert data["logger"] == "openapi_builders.test"
        assert data["message"] == "Built document"
        assert data["context"] == {"paths": 2}
        assert "exception" not in data

    def test_json_formatter_exception(self):
        """Test that exceptions are included in JSON output."""
        try:
            raise ValueError("bad path")
        except ValueError:
            data = json.loads(JSONFormatter().format(_record(exc_info=sys.exc_info())))

        assert data["exception"]["type"] == "ValueError"
        assert data["exception"]["message"] == "bad path"

    def test_rich_context_formatter(self):
        """Test that context pairs are appended to the message."""
        message = RichContextFormatter("%(message)s").format(_record(context={"paths": 2, "format": "yaml"}))

        assert message == "Built document [paths=2] [format=yaml]"


@pytest.mark.unit
class TestLogOperation:
    def test_success(self):
        """Test start and completion messages."""
        logger = MagicMock(spec=logging.Logger)

        with log_operation(logger, "render", context={"target": "app:doc"}) as context:
            context["bytes"] = 10

        messages = [call.args[1] for call in logger.log.call_args_list]
        assert messages[0] == "Starting render"
        assert messages[1].startswith("Completed render in ")
        final_context = logger.log.call_args_list[1].kwargs["extra"]["context_data"]
        assert final_context["target"] == "app:doc"
        assert final_context["bytes"] == 10
        assert len(final_context["operation_id"]) == 8

    def test_failure_is_logged_and_reraised(self):
        """Test that failures are logged at ERROR and propagate."""
        logger = MagicMock(spec=logging.Logger)

        with pytest.raises(KeyError):
            with log_operation(logger, "render"):
                raise KeyError("info")

        level, message = logger.log.call_args_list[-1].args[:2]
        context = logger.log.call_args_list[-1].kwargs["extra"]["context_data"]
        assert level == logging.ERROR
        assert message.startswith("Failed render after ")
        assert context["error_type"] == "KeyError"

    def test_structured_logger_uses_context_keyword(self, caplog):
        """Test the StructuredLogger path of log_operation."""
        logger = get_logger("openapi_builders.test.operation")
        caplog.set_level(logging.DEBUG, logger="openapi_builders.test.operation")

        with log_operation(logger, "summary", level=logging.DEBUG, context={"target": "app:doc"}):
            pass

        assert caplog.records[0].context_data["target"] == "app:doc"
        assert caplog.records[0].levelno == logging.DEBUG


@pytest.mark.unit
class TestConfigureLogging:
    def test_rich_handler_on_stderr(self):
        """Test the default console handler."""
        configure_logging(level="WARNING")

        logger = logging.getLogger(LIBRARY_LOGGER)
        assert logger.level == logging.WARNING
        assert logger.propagate is False
        assert len(logger.handlers) == 1
        handler = logger.handlers[0]
        assert isinstance(handler, RichHandler)
        assert handler.console.stderr is True

    def test_json_and_file_handlers(self, temp_dir):
        """Test JSON console output plus a log file."""
        log_file = temp_dir / "logs" / "openapi.log"
        configure_logging(level=logging.INFO, log_file=str(log_file), json_format=True)

        logger = logging.getLogger(LIBRARY_LOGGER)
        assert len(logger.handlers) == 2
        assert all(isinstance(handler.formatter, JSONFormatter) for handler in logger.handlers)

        get_logger("openapi_builders.test.file").info("Wrote document", context={"path": "openapi.yaml"})
        for handler in logger.handlers:
            handler.flush()

        line = log_file.read_text(encoding="utf-8").strip().splitlines()[-1]
        assert json.loads(line)["context"] == {"path": "openapi.yaml"}

    def test_debug_overrides_level(self):
        """Test that debug forces DEBUG."""
        configure_logging(level="ERROR", use_rich=False, debug=True)

        assert logging.getLogger(LIBRARY_LOGGER).level == logging.DEBUG

    def test_custom_formats(self, temp_dir):
        """Test that configured message and date formats reach the handlers."""
        log_file = temp_dir / "plain.log"
        configure_logging(
            use_rich=False, log_file=str(log_file), log_format="%(levelname)s|%(message)s", date_format="%H:%M"
        )

        for handler in logging.getLogger(LIBRARY_LOGGER).handlers:
            assert handler.formatter._fmt == "%(levelname)s|%(message)s"
            assert handler.formatter.datefmt == "%H:%M"

        get_logger("openapi_builders.test.plain_format").warning("Slow render")
        for handler in logging.getLogger(LIBRARY_LOGGER).handlers:
            handler.flush()
        assert log_file.read_text(encoding="utf-8").strip().splitlines()[-1] == "WARNING|Slow render"

    def test_rich_format(self):
        """Test the message format of the Rich handler."""
        configure_logging(log_format="%(name)s: %(message)s")

        handler = logging.getLogger(LIBRARY_LOGGER).handlers[0]
        assert isinstance(handler.formatter, RichContextFormatter)
        assert handler.formatter._fmt == "%(name)s: %(message)s"

    def test_reconfiguring_replaces_handlers(self):
        """Test that handlers do not pile up."""
        configure_logging(use_rich=False)
        configure_logging(use_rich=False)

        assert len(logging.getLogger(LIBRARY_LOGGER).handlers) == 1
