"""
Logging Configuration Module.

This module provides centralized logging configuration for the REST service.
It sets up console (and optionally file) logging with per-module levels so the
application and the uvicorn server write through the same handlers.

Features:
- Configurable log level and format (simple, detailed, json)
- Console and file logging
- Module-specific log levels, including uvicorn's loggers
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FILE_NAME = "restservice.log"

# Define log formats
SIMPLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"

DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(funcName)s() - %(message)s"

JSON_FORMAT = (
    '{"timestamp": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", '
    '"module": "%(filename)s", "function": "%(funcName)s", "line": %(lineno)d, '
    '"message": "%(message)s"}'
)

FORMATS = {
    "simple": SIMPLE_FORMAT,
    "detailed": DETAILED_FORMAT,
    "json": JSON_FORMAT,
}

# Module-specific log levels
MODULE_LOG_LEVELS = {
    "restservice.server": "INFO",
    "restservice.server.runtime": "INFO",
    "restservice.server.api": "DEBUG",
    "restservice.core": "INFO",
    # Third-party libraries (reduce noise)
    "asyncio": "WARNING",
    "httpx": "WARNING",
    "uvicorn": "INFO",
    "uvicorn.error": "INFO",
    "uvicorn.access": "INFO",
}


def _default_settings():
    from restservice.server.core.config import Settings

    return Settings()


def resolve_level(log_level: str) -> int:
    """
    Translate a level name into its numeric value.

    Raises:
        ValueError: If the name is not a standard logging level.
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level!r}")
    return level


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    enable_file: Optional[bool] = None,
    log_file_dir: Optional[str] = None,
) -> None:
    """
    Configure logging for the application.

    Values left as ``None`` are read from a fresh ``Settings()``, that is from
    the environment and ``.env``.

    Args:
        log_level: Override default log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Override default format (simple, detailed, json)
        enable_file: Whether to enable file logging
        log_file_dir: Directory for the log file when file logging is enabled
    """
    if log_level is None or log_format is None or enable_file is None or log_file_dir is None:
        defaults = _default_settings()
        log_level = log_level or defaults.log_level
        log_format = log_format or defaults.log_format
        enable_file = defaults.enable_file_logging if enable_file is None else enable_file
        log_file_dir = log_file_dir or defaults.log_file_dir

    level = log_level.upper()
    numeric_level = resolve_level(level)
    format_str = FORMATS.get(log_format, DETAILED_FORMAT)

    formatter = logging.Formatter(format_str, datefmt="%Y-%m-%d %H:%M:%S")

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Capture all levels, filter at handler level

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        if isinstance(handler, logging.FileHandler):
            handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if enable_file:
        log_dir = Path(log_file_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_dir / LOG_FILE_NAME)
        file_handler.setLevel(logging.DEBUG)  # Always log DEBUG to file
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    for module_name, module_level in MODULE_LOG_LEVELS.items():
        logging.getLogger(module_name).setLevel(module_level)

    # A DEBUG request should reach the handlers even for modules pinned to INFO
    if numeric_level < logging.INFO:
        for module_name in MODULE_LOG_LEVELS:
            if module_name.startswith("restservice"):
                logging.getLogger(module_name).setLevel(numeric_level)

    root_logger.info(f"Logging configured: level={level}, format={log_format}, file_logging={bool(enable_file)}")


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: The module name (typically __name__)

    Returns:
        A configured logger instance
    """
    return logging.getLogger(name)
