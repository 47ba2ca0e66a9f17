"""
Monitoring and Tracing Configuration Module.

This module provides integration with Pydantic Logfire for tracing the REST
service's HTTP traffic, including:
- FastAPI endpoint tracing
- Request latency events emitted by the request middleware

Logfire stays off unless ``LOGFIRE_ENABLED`` is set and a token is present.
When it is off, request events are written to the standard logger at DEBUG.
"""

import logging

import logfire
from fastapi import FastAPI
from logfire import SamplingOptions

from restservice import __version__
from restservice.server.core.config import LogfireConfig

logger = logging.getLogger(__name__)

_active = False


def initialize_logfire(app: FastAPI | None, config: LogfireConfig) -> bool:
    """
    Initialize Pydantic Logfire for monitoring and tracing.

    Args:
        app: FastAPI application instance for endpoint instrumentation (optional).
        config: Logfire settings taken from the environment.

    Returns:
        True when Logfire was configured and is receiving events.
    """
    global _active
    _active = False

    if not config.enabled:
        logger.info("Logfire monitoring is disabled. Set LOGFIRE_ENABLED=true to enable.")
        return False

    if not config.token:
        logger.warning(
            "Logfire is enabled but LOGFIRE_TOKEN is not set. "
            "Monitoring will not work. Set LOGFIRE_TOKEN to enable Logfire."
        )
        return False

    try:
        logfire.configure(
            token=config.token,
            service_name=config.service_name,
            service_version=__version__,
            environment=config.environment,
            sampling=SamplingOptions(head=config.sample_rate),
        )
        if app is not None:
            logfire.instrument_fastapi(app=app)
            logger.info("Logfire: FastAPI instrumentation enabled")
    except Exception as e:
        logger.error(f"Failed to initialize Logfire: {e}", exc_info=True)
        return False

    _active = True
    logger.info(f"Logfire monitoring initialized: environment={config.environment}, service={config.service_name}")
    return True


def is_logfire_active() -> bool:
    return _active


def log_api_request(method: str, path: str, status_code: int, duration_ms: float) -> None:
    """
    Log an API request with performance metrics.

    Args:
        method: HTTP method
        path: Request path
        status_code: HTTP status code
        duration_ms: Request duration in milliseconds
    """
    if not _active:
        logger.debug(f"API request completed: {method} {path} -> {status_code} in {duration_ms:.2f}ms")
        return

    try:
        logfire.info(
            "API request completed",
            method=method,
            path=path,
            status_code=status_code,
            duration_ms=duration_ms,
        )
    except Exception:
        logger.debug(f"Could not log API request to Logfire: {method} {path}")
