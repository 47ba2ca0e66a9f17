"""
REST service bootstrap.

Declares the application identity and starts the runtime with the process
arguments. Nothing here interprets the arguments or handles errors; both are
the runtime's business.
"""

import sys
from typing import Optional, Sequence

from .runtime import ApplicationRuntime


class RestServiceApplication:
    """Marker naming the REST service application."""

    name = "RestServiceApplication"


def run(primary_source: type, args: Sequence[str]) -> int:
    return ApplicationRuntime(primary_source).run(args)


def main(argv: Optional[Sequence[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    return run(RestServiceApplication, argv)
