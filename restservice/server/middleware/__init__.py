"""
Middleware modules for the REST service.

This package contains custom middleware for request timing and monitoring.
"""

from .logfire_middleware import LogfireMiddleware

__all__ = ["LogfireMiddleware"]
