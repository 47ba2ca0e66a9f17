"""
Main Application Entry Point.

This module builds the FastAPI application, configures middleware (CORS,
request monitoring), registers the exception handlers and includes the
operational routers. Importing it has no side effects: serve the application
directly with ``uvicorn restservice.server.main:create_app --factory``, or
through the runtime, which passes settings built from the command line.
"""

import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from restservice import __version__
from restservice.core.logging_config import get_logger
from restservice.core.monitoring import initialize_logfire

from .api.v1 import health
from .core import constant
from .core.config import Settings
from .exception_handlers import setup_exception_handlers
from .middleware import LogfireMiddleware

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    Logs startup and shutdown. When the runtime recorded a launch time on
    ``app.state.launched_at``, the startup line reports how long the launch took.
    """
    name = app.title
    logger.info(f"Starting up {name} server...")

    launched_at = getattr(app.state, "launched_at", None)
    if launched_at is not None:
        logger.info(f"Started {name} in {time.perf_counter() - launched_at:.3f} seconds")
    else:
        logger.info(f"Started {name}")

    yield

    logger.info(f"Shutting down {name} server...")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build a configured FastAPI application.

    Args:
        settings: Settings to build the application from. Loaded from the
            environment and ``.env`` when omitted.

    Returns:
        A new FastAPI instance. Nothing is shared between two calls.
    """
    if settings is None:
        settings = Settings()

    app = FastAPI(
        title=settings.application_name,
        description="REST service. Exposes operational endpoints only.",
        version=__version__,
        openapi_url=f"{constant.API_V1_STR}/openapi.json",
        docs_url=f"{constant.API_V1_STR}/docs",
        redoc_url=f"{constant.API_V1_STR}/redoc",
        lifespan=lifespan,
    )
    app.state.settings = settings

    cors = settings.cors
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors.origins,
        allow_credentials=cors.allow_credentials,
        allow_methods=cors.allow_methods,
        allow_headers=cors.allow_headers,
    )
    app.add_middleware(LogfireMiddleware)

    setup_exception_handlers(app)

    app.include_router(health.router, tags=["health"])

    initialize_logfire(app, settings.logfire)
    return app
