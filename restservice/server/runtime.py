"""
Application Runtime.

Turns a process launch into a served application:

1. ``--key=value`` command-line arguments are parsed into properties.
2. Properties are bound onto ``Settings`` field names (``server.port`` ->
   ``server_port``), overriding environment variables and ``.env``.
3. Logging is configured from the resulting settings.
4. A fresh FastAPI application is built and handed to uvicorn, whose
   ``Server.run`` blocks until the process is told to stop.

The runtime keeps no state between launches: every ``prepare`` builds new
settings and a new application.
"""

import os
import platform
import time
import typing
from dataclasses import dataclass, field
from typing import Any, Sequence

import uvicorn
from fastapi import FastAPI

from restservice import __version__
from restservice.core.logging_config import get_logger, setup_logging

from .core.config import Settings
from .main import create_app

logger = get_logger(__name__)

# Dotted property names that do not map onto a field name mechanically
PROPERTY_ALIASES = {
    "server.address": "server_host",
    "logging.level": "log_level",
    "logging.level.root": "log_level",
    "logging.format": "log_format",
    "logging.file.path": "log_file_dir",
    "spring.application.name": "application_name",
    "application.name": "application_name",
}

DEBUG_FLAGS = ("debug", "trace")

_TRUTHY = ("", "true", "1", "yes", "on")


@dataclass(frozen=True)
class CommandLineArguments:
    """Process arguments split into ``--key=value`` properties and the rest."""

    properties: dict[str, str] = field(default_factory=dict)
    non_option_args: list[str] = field(default_factory=list)
    source: tuple[str, ...] = ()


@dataclass(frozen=True)
class RuntimeContext:
    """Everything prepared for one launch of an application."""

    application: type
    arguments: CommandLineArguments
    settings: Settings
    app: FastAPI


def parse_arguments(args: Sequence[str]) -> CommandLineArguments:
    """
    Split process arguments into properties and non-option arguments.

    ``--name=value`` becomes property ``name`` with ``value`` (split on the first
    ``=``), ``--name`` alone becomes ``"true"``. Anything else, including a bare
    ``--``, is kept as a non-option argument. Later properties win.

    Raises:
        ValueError: If an option has an empty name (``--=value``).
    """
    properties: dict[str, str] = {}
    non_option_args: list[str] = []

    for arg in args:
        if arg.startswith("--") and arg != "--":
            name, sep, value = arg[2:].partition("=")
            if not name:
                raise ValueError(f"Invalid argument syntax: {arg}")
            properties[name] = value if sep else "true"
        else:
            non_option_args.append(arg)

    return CommandLineArguments(properties=properties, non_option_args=non_option_args, source=tuple(args))


def _field_name(key: str) -> str:
    normalized = key.lower()
    if normalized in PROPERTY_ALIASES:
        return PROPERTY_ALIASES[normalized]
    return normalized.replace("-", "_").replace(".", "_")


def bind_properties(properties: dict[str, str]) -> dict[str, Any]:
    """
    Map command-line properties onto ``Settings`` field names.

    Keys are matched loosely: case-insensitive, with ``.`` and ``-`` read as
    ``_``. List fields accept comma separated values. Unknown keys are ignored.

    Returns:
        Keyword arguments for ``Settings``.
    """
    fields = Settings.model_fields
    overrides: dict[str, Any] = {}

    for key, value in properties.items():
        if key.lower() in DEBUG_FLAGS:
            if value.lower() in _TRUTHY:
                overrides["log_level"] = "DEBUG"
            continue

        name = _field_name(key)
        if name not in fields:
            logger.debug(f"Ignoring unknown property '{key}'")
            continue

        if typing.get_origin(fields[name].annotation) is list:
            overrides[name] = [item.strip() for item in value.split(",") if item.strip()]
        else:
            overrides[name] = value

    return overrides


class ApplicationRuntime:
    """
    Runtime context keyed to an application marker class.

    Args:
        primary_source: The class that names the application. Its ``name``
            attribute (or class name) is used in log lines.
    """

    def __init__(self, primary_source: type):
        self.primary_source = primary_source

    @property
    def name(self) -> str:
        return getattr(self.primary_source, "name", self.primary_source.__name__)

    def prepare(self, args: Sequence[str]) -> RuntimeContext:
        """
        Build settings, logging and the ASGI application for one launch.

        Raises:
            ValueError: On malformed arguments or an unknown log level.
            pydantic.ValidationError: When a bound value is invalid.
        """
        launched_at = time.perf_counter()

        arguments = parse_arguments(args)
        settings = Settings(**bind_properties(arguments.properties))
        setup_logging(
            log_level=settings.log_level,
            log_format=settings.log_format,
            enable_file=settings.enable_file_logging,
            log_file_dir=settings.log_file_dir,
        )

        app = create_app(settings)
        app.state.launched_at = launched_at
        app.state.arguments = arguments

        return RuntimeContext(application=self.primary_source, arguments=arguments, settings=settings, app=app)

    def create_server(self, context: RuntimeContext) -> uvicorn.Server:
        settings = context.settings
        config = uvicorn.Config(
            context.app,
            host=settings.server_host,
            port=settings.server_port,
            log_config=None,
            access_log=settings.server_access_log,
            proxy_headers=settings.server_proxy_headers,
            timeout_graceful_shutdown=settings.shutdown_timeout,
            lifespan="on",
        )
        return uvicorn.Server(config)

    def run(self, args: Sequence[str]) -> int:
        """
        Prepare the application and serve it until shutdown.

        Blocks the calling thread. Port binding failures are reported by
        uvicorn, which exits the process with status 1.

        Returns:
            0 after a clean shutdown, 1 if the server never started.
        """
        context = self.prepare(args)
        logger.info(
            f"Starting {self.name} v{__version__} using Python {platform.python_version()} with PID {os.getpid()}"
        )
        if context.arguments.non_option_args:
            logger.debug(f"Non-option arguments: {context.arguments.non_option_args}")

        settings = context.settings
        server = self.create_server(context)
        logger.info(f"Serving {settings.application_name} on {settings.server_host}:{settings.server_port}")
        server.run()

        if not server.started:
            logger.error(f"Application run failed: {self.name} did not start")
            return 1

        logger.info(f"{self.name} stopped")
        return 0
