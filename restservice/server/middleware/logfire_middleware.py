"""
Logfire Middleware for FastAPI.

This middleware provides request timing and monitoring for every request
served by the REST service, including:
- Request/response logging
- Performance metrics (``X-Process-Time`` header)
- Slow request detection
- Error tracking
"""

import time
from typing import Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from restservice.core.logging_config import get_logger
from restservice.core.monitoring import log_api_request
from restservice.server.core.constant import SLOW_REQUEST_THRESHOLD_MS

logger = get_logger(__name__)


class LogfireMiddleware(BaseHTTPMiddleware):
    """Middleware for tracing API requests with Logfire."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """
        Process the request and log metrics.

        Args:
            request: The incoming HTTP request
            call_next: The next middleware/handler

        Returns:
            The HTTP response
        """
        start_time = time.perf_counter()

        method = request.method
        path = request.url.path

        request.state.start_time = start_time

        try:
            response = await call_next(request)
        except Exception as e:
            duration_ms = (time.perf_counter() - start_time) * 1000

            logger.error(
                f"API request failed: {method} {path}",
                exc_info=True,
                extra={
                    "method": method,
                    "path": path,
                    "duration_ms": duration_ms,
                    "error": str(e),
                },
            )
            log_api_request(method=method, path=path, status_code=500, duration_ms=duration_ms)
            raise

        duration_ms = (time.perf_counter() - start_time) * 1000

        log_api_request(
            method=method,
            path=path,
            status_code=response.status_code,
            duration_ms=duration_ms,
        )

        response.headers["X-Process-Time"] = str(duration_ms)

        if duration_ms > SLOW_REQUEST_THRESHOLD_MS:
            logger.warning(
                f"Slow API request: {method} {path} took {duration_ms:.2f}ms",
                extra={
                    "method": method,
                    "path": path,
                    "duration_ms": duration_ms,
                    "status_code": response.status_code,
                },
            )

        return response
