"""
Global Exception Handlers for the FastAPI Application.

Every error leaves the server with the same JSON shape::

    {"timestamp": "...", "status": 404, "error": "Not Found", "path": "/missing"}

Unhandled exceptions additionally carry an ``error_id`` that is written to the
log together with the full request context and traceback, so a client can
reference the failure when reporting it.
"""

import traceback
from datetime import datetime, timezone
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from restservice.core.logging_config import get_logger

logger = get_logger(__name__)


def _reason(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Unknown"


def error_body(request: Request, status_code: int, **extra) -> dict:
    """Build the common error payload for ``request``."""
    body = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "status": status_code,
        "error": _reason(status_code),
        "path": request.url.path,
    }
    body.update(extra)
    return body


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """
    Render HTTP errors raised by routing or by endpoints.

    Covers unknown paths (404) and unsupported methods (405) as well as any
    ``HTTPException`` raised explicitly. Headers attached to the exception
    (e.g. ``Allow`` on a 405) are preserved.
    """
    message = f"HTTP {exc.status_code} for {request.method} {request.url.path}"
    if exc.status_code >= 500:
        logger.error(message)
    else:
        logger.debug(message)

    extra = {}
    if exc.detail and exc.detail != _reason(exc.status_code):
        extra["detail"] = exc.detail

    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(request, exc.status_code, **extra),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render request validation failures as 400 Bad Request."""
    logger.debug(f"Validation failed for {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content=error_body(request, 400, detail=jsonable_encoder(exc.errors())),
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Global exception handler to log detailed error information.

    This handler is called for any unhandled exception in the application.
    It logs the full error context and returns a JSON response with an error ID
    that clients can use to reference the error when reporting issues.

    Args:
        request: The HTTP request that caused the exception
        exc: The exception that was raised

    Returns:
        JSONResponse with error details and error ID
    """
    # Generate unique error ID for tracking
    error_id = id(exc)

    logger.error(
        f"Unhandled exception [{error_id}] in {request.method} {request.url.path}: {str(exc)}",
        exc_info=True,
        extra={
            "error_id": error_id,
            "method": request.method,
            "path": request.url.path,
            "query_params": dict(request.query_params),
            "client": request.client.host if request.client else "unknown",
            "error_type": type(exc).__name__,
            "traceback": traceback.format_exc(),
        },
    )

    return JSONResponse(
        status_code=500,
        content=error_body(
            request,
            500,
            detail="Internal server error",
            error_id=error_id,
            error_type=type(exc).__name__,
        ),
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI application.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
    logger.debug("Exception handlers registered successfully")
