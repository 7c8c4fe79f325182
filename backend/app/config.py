"""
JSON Validator Backend — Application Configuration
===================================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by main.py, the routes, and the JSON service.
When:  Loaded once at module import time.

Environment variables (case-insensitive):
    HOST, PORT, WORKERS      Listener configuration
    LOG_LEVEL                Logging verbosity
    CORS_ORIGINS             Comma-separated allowed origins
    DEFAULT_INDENT           Indent width for /api/format
    SERVICE_NAME             Identifier reported by /health
"""

import os
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


def _available_cpus() -> int:
    """Number of processing units available, 1 when it cannot be determined."""
    return os.cpu_count() or 1


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults suitable for running the service directly.
    Attributes are grouped by concern.
    """

    # ── Server ────────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0", description="Interface to bind")
    port: int = Field(default=8080, ge=1, le=65535)

    # What: Number of uvicorn worker processes
    # Must be at least 1; anything else aborts startup
    workers: int = Field(default_factory=_available_cpus)

    @field_validator("workers")
    @classmethod
    def validate_workers(cls, v: int) -> int:
        """Rejects worker counts that cannot start a listener."""
        if v < 1:
            raise ValueError(f"Invalid workers '{v}'. Must be at least 1")
        return v

    # ── Logging ───────────────────────────────────────────────────────────
    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── CORS ──────────────────────────────────────────────────────────────
    # Format: comma-separated origins, "*" allows any
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── JSON Formatting ───────────────────────────────────────────────────
    # What: Indent width used by /api/format when the request has no indent_size
    default_indent: int = Field(default=2, ge=0, le=16)

    # ── Identity ──────────────────────────────────────────────────────────
    service_name: str = Field(default="json-validator")

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # PORT and port both work
        "extra": "ignore",
    }


# Singleton instance, imported throughout the application
settings = Settings()
