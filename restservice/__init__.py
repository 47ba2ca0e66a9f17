"""REST Service.

This package contains a minimal web service whose only job is to start an
HTTP server process and idle.

High-level architecture
-----------------------

- ``restservice.server.application``: the bootstrap entry point. It declares
  the application identity (``RestServiceApplication``) and hands the process
  arguments, untouched, to the runtime.
- ``restservice.server.runtime``: turns the arguments and environment into a
  ``Settings`` object, configures logging, builds the FastAPI application and
  serves it with uvicorn.
- ``restservice.server.main``: the FastAPI application factory.
- ``restservice.core``: logging and monitoring shared by the server modules.

Typical workflow
----------------

1. ``python -m restservice --server.port=9000``
2. ``main`` forwards ``["--server.port=9000"]`` to the runtime.
3. The runtime binds ``server.port`` onto ``Settings.server_port`` and starts
   uvicorn, which blocks until the process is asked to stop.
"""

__version__ = "0.1.0"
