"""
Exception handlers for the REST service.

This package contains the JSON error handlers and a setup function to register
them with the FastAPI application.
"""

from .global_handler import setup_exception_handlers

__all__ = ["setup_exception_handlers"]
