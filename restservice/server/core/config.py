"""
Configuration Settings.

This module defines the application configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading. Values passed to ``Settings(...)`` by field name
(as the runtime does with command-line properties) take precedence over both.
"""

import logging
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# =====================================================================
# Grouped Configuration Models
# =====================================================================


class CORSConfig(BaseModel):
    """CORS configuration."""

    origins: list[str] = Field(default=["*"], alias="CORS_ORIGINS", description="Allowed CORS origins (use * for all)")
    allow_credentials: bool = Field(
        default=True, alias="CORS_ALLOW_CREDENTIALS", description="Allow credentials in CORS requests"
    )
    allow_methods: list[str] = Field(
        default=["*"], alias="CORS_ALLOW_METHODS", description="Allowed HTTP methods (use * for all)"
    )
    allow_headers: list[str] = Field(
        default=["*"], alias="CORS_ALLOW_HEADERS", description="Allowed HTTP headers (use * for all)"
    )

    model_config = {"populate_by_name": True}


class LogfireConfig(BaseModel):
    """Pydantic Logfire monitoring configuration."""

    enabled: bool = Field(default=False, alias="LOGFIRE_ENABLED", description="Turn Logfire monitoring on")
    token: Optional[str] = Field(default=None, alias="LOGFIRE_TOKEN", description="Logfire write token")
    service_name: str = Field(
        default="restservice", alias="LOGFIRE_SERVICE_NAME", description="Service name reported to Logfire"
    )
    environment: str = Field(
        default="development", alias="LOGFIRE_ENVIRONMENT", description="Deployment environment label"
    )
    sample_rate: float = Field(
        default=1.0, ge=0.0, le=1.0, alias="LOGFIRE_SAMPLE_RATE", description="Head sampling rate for traces"
    )

    model_config = {"populate_by_name": True}


# =====================================================================
# Main Settings Class
# =====================================================================


class Settings(BaseSettings):
    """
    Application settings model.

    All properties are automatically bound from environment variables and .env file.
    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
        populate_by_name=True,
    )

    # =====================================================================
    # Application / Server Configuration
    # =====================================================================
    application_name: str = Field(
        default="rest-service",
        description="Name reported in logs, the OpenAPI title and the version endpoint",
        alias="RESTSERVICE_APPLICATION_NAME",
    )
    server_host: str = Field(
        default="0.0.0.0",
        description="Host address the HTTP server binds to",
        alias="RESTSERVICE_SERVER_HOST",
    )
    server_port: int = Field(
        default=8080,
        ge=1,
        le=65535,
        description="Port number the HTTP server listens on",
        alias="RESTSERVICE_SERVER_PORT",
    )
    server_access_log: bool = Field(
        default=True,
        description="Emit one uvicorn access log line per request",
        alias="RESTSERVICE_SERVER_ACCESS_LOG",
    )
    server_proxy_headers: bool = Field(
        default=True,
        description="Trust X-Forwarded-For / X-Forwarded-Proto headers",
        alias="RESTSERVICE_SERVER_PROXY_HEADERS",
    )
    shutdown_timeout: int = Field(
        default=30,
        ge=0,
        description="Seconds to wait for in-flight requests on graceful shutdown",
        alias="RESTSERVICE_SHUTDOWN_TIMEOUT",
    )

    # =====================================================================
    # Logging Configuration
    # =====================================================================
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="RESTSERVICE_LOG_LEVEL",
    )
    log_format: Literal["simple", "detailed", "json"] = Field(
        default="detailed",
        description="Log line format",
        alias="RESTSERVICE_LOG_FORMAT",
    )
    log_file_dir: str = Field(
        default="logs",
        description="Directory for restservice.log when file logging is enabled",
        alias="RESTSERVICE_LOG_FILE_DIR",
    )
    enable_file_logging: bool = Field(
        default=False,
        description="Also write logs to a file",
        alias="RESTSERVICE_ENABLE_FILE_LOGGING",
    )

    # =====================================================================
    # CORS Configuration
    # =====================================================================
    cors_origins: list[str] = Field(default=["*"], alias="CORS_ORIGINS")
    cors_allow_credentials: bool = Field(default=True, alias="CORS_ALLOW_CREDENTIALS")
    cors_allow_methods: list[str] = Field(default=["*"], alias="CORS_ALLOW_METHODS")
    cors_allow_headers: list[str] = Field(default=["*"], alias="CORS_ALLOW_HEADERS")

    # =====================================================================
    # Logfire Configuration
    # =====================================================================
    logfire_enabled: bool = Field(default=False, alias="LOGFIRE_ENABLED")
    logfire_token: Optional[str] = Field(default=None, alias="LOGFIRE_TOKEN")
    logfire_service_name: str = Field(default="restservice", alias="LOGFIRE_SERVICE_NAME")
    logfire_environment: str = Field(default="development", alias="LOGFIRE_ENVIRONMENT")
    logfire_sample_rate: float = Field(default=1.0, ge=0.0, le=1.0, alias="LOGFIRE_SAMPLE_RATE")

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    # =====================================================================
    # Computed Properties (Grouped Configurations)
    # =====================================================================

    @property
    def cors(self) -> CORSConfig:
        """Get CORS configuration."""
        return CORSConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def logfire(self) -> LogfireConfig:
        """Get Logfire monitoring configuration."""
        return LogfireConfig.model_validate(self.model_dump(by_alias=True))
