"""
Shared infrastructure for the REST service.

Modules:
    logging_config: Central logging configuration.
    monitoring: Logfire monitoring integration.
"""
