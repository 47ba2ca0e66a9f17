"""Unit tests for logging configuration module.

Tests verify that the logging configuration functions work correctly with different
scenarios including various log levels, formats, and file logging options.
"""

import logging
from unittest.mock import patch

import pytest

from restservice.core.logging_config import (
    DETAILED_FORMAT,
    JSON_FORMAT,
    LOG_FILE_NAME,
    MODULE_LOG_LEVELS,
    SIMPLE_FORMAT,
    get_logger,
    resolve_level,
    setup_logging,
)
from restservice.server.core.config import Settings


def _console_handler():
    root_logger = logging.getLogger()
    return next(
        (
            h
            for h in root_logger.handlers
            if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
        ),
        None,
    )


def _file_handler():
    return next((h for h in logging.getLogger().handlers if isinstance(h, logging.FileHandler)), None)


@pytest.fixture(autouse=True)
def _restore_logging():
    yield
    setup_logging(log_level="INFO", log_format="detailed", enable_file=False, log_file_dir="logs")


class TestSetupLoggingLogLevels:
    """Test setup_logging with different log levels."""

    @pytest.mark.parametrize(
        "log_level,expected_level",
        [
            ("DEBUG", logging.DEBUG),
            ("INFO", logging.INFO),
            ("WARNING", logging.WARNING),
            ("ERROR", logging.ERROR),
            ("CRITICAL", logging.CRITICAL),
            ("debug", logging.DEBUG),  # Test lowercase
            ("info", logging.INFO),
        ],
    )
    def test_setup_logging_with_different_levels(self, log_level, expected_level):
        setup_logging(log_level=log_level, enable_file=False)

        console_handler = _console_handler()
        assert console_handler is not None
        assert console_handler.level == expected_level

    def test_setup_logging_default_level_comes_from_settings(self):
        with patch(
            "restservice.core.logging_config._default_settings",
            return_value=Settings(log_level="WARNING"),
        ):
            setup_logging(enable_file=False)

        assert _console_handler().level == logging.WARNING

    def test_setup_logging_reads_environment_when_called(self, monkeypatch):
        monkeypatch.setenv("RESTSERVICE_LOG_LEVEL", "ERROR")

        setup_logging(enable_file=False)

        assert _console_handler().level == logging.ERROR

    def test_setup_logging_rejects_unknown_level(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            setup_logging(log_level="LOUD", enable_file=False)

    def test_resolve_level(self):
        assert resolve_level("error") == logging.ERROR


class TestSetupLoggingFormats:
    """Test setup_logging with different log formats."""

    @pytest.mark.parametrize(
        "log_format,expected_format",
        [
            ("simple", SIMPLE_FORMAT),
            ("detailed", DETAILED_FORMAT),
            ("json", JSON_FORMAT),
            ("unknown", DETAILED_FORMAT),
        ],
    )
    def test_setup_logging_with_different_formats(self, log_format, expected_format):
        setup_logging(log_format=log_format, enable_file=False)

        assert _console_handler().formatter._fmt == expected_format

    def test_setup_logging_format_with_timestamp(self):
        setup_logging(log_format="detailed", enable_file=False)

        assert _console_handler().formatter.datefmt == "%Y-%m-%d %H:%M:%S"


class TestSetupLoggingFileHandling:
    """Test setup_logging file logging functionality."""

    def test_setup_logging_with_file_enabled(self, tmp_path):
        log_dir = tmp_path / "new_logs"

        setup_logging(log_level="ERROR", enable_file=True, log_file_dir=str(log_dir))

        file_handler = _file_handler()
        assert file_handler is not None
        # File handler should always be DEBUG
        assert file_handler.level == logging.DEBUG
        assert (log_dir / LOG_FILE_NAME).exists()

    def test_setup_logging_with_file_disabled(self):
        setup_logging(enable_file=False)

        assert _file_handler() is None

    def test_file_handler_is_replaced_on_reconfigure(self, tmp_path):
        setup_logging(enable_file=True, log_file_dir=str(tmp_path))
        first = _file_handler()

        setup_logging(enable_file=True, log_file_dir=str(tmp_path))

        handlers = [h for h in logging.getLogger().handlers if isinstance(h, logging.FileHandler)]
        assert len(handlers) == 1
        assert handlers[0] is not first


class TestSetupLoggingHandlerManagement:
    """Test setup_logging handler management."""

    def test_setup_logging_removes_existing_handlers(self):
        setup_logging(enable_file=False)
        setup_logging(enable_file=False)

        assert len(logging.getLogger().handlers) == 1

    def test_setup_logging_root_logger_level_is_debug(self):
        setup_logging(log_level="WARNING", enable_file=False)

        # Root logger should be DEBUG to capture all, filtering happens at handler level
        assert logging.getLogger().level == logging.DEBUG


class TestSetupLoggingModuleSpecificLevels:
    """Test module-specific log level configuration."""

    @pytest.mark.parametrize(
        "module_name,expected_level",
        [
            ("restservice.server", logging.INFO),
            ("restservice.server.api", logging.DEBUG),
            ("restservice.core", logging.INFO),
            ("uvicorn", logging.INFO),
            ("uvicorn.access", logging.INFO),
            ("httpx", logging.WARNING),
            ("asyncio", logging.WARNING),
        ],
    )
    def test_module_specific_log_levels(self, module_name, expected_level):
        setup_logging(log_level="INFO", enable_file=False)

        assert logging.getLogger(module_name).level == expected_level

    def test_all_module_log_levels_configured(self):
        setup_logging(log_level="INFO", enable_file=False)

        for module_name, expected_level_str in MODULE_LOG_LEVELS.items():
            expected_level = getattr(logging, expected_level_str)
            assert logging.getLogger(module_name).level == expected_level

    def test_debug_level_lowers_project_loggers(self):
        setup_logging(log_level="DEBUG", enable_file=False)

        assert logging.getLogger("restservice.server").level == logging.DEBUG
        assert logging.getLogger("restservice.server.runtime").level == logging.DEBUG
        # Third-party noise stays reduced
        assert logging.getLogger("httpx").level == logging.WARNING


class TestGetLogger:
    """Test get_logger function."""

    def test_get_logger_returns_logger_instance(self):
        logger = get_logger("test_module")

        assert isinstance(logger, logging.Logger)
        assert logger.name == "test_module"

    def test_get_logger_same_name_returns_same_instance(self):
        assert get_logger("same_module") is get_logger("same_module")
