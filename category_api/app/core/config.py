"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields.  An
environment variable that is set but empty is treated the same as an
unset one, so ``PORT=`` still falls back to port 8080.
"""

import os
from dataclasses import dataclass, field
from typing import Optional


def _env(name: str, default: str) -> str:
    """Return the value of ``name`` or ``default`` when unset or empty."""
    return os.getenv(name) or default


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: _env("PROJECT_NAME", "Category API"))
    api_version: str = field(default_factory=lambda: _env("API_VERSION", "1.0.0"))
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))
    # Optional file that receives a copy of every log record.
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE") or None)

    # Address and TCP port the server binds to.  ``PORT`` is the variable
    # most hosting platforms inject, so it is the one to override.
    host: str = field(default_factory=lambda: _env("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(_env("PORT", "8080")))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module; tests construct their
# own ``Settings()`` instead.
settings = Settings()
