"""
REST Service Server Package.

This package contains the web server implementation for the REST service.
It includes the bootstrap entry point, the runtime that serves the ASGI
application, and the application itself.

Subpackages:
    api: FastAPI route definitions (operational endpoints only).
    core: Configuration and constants.
    exception_handlers: Default JSON error bodies.
    middleware: Request timing and monitoring.
"""
