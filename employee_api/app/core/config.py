"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables, so no settings library is needed.  Defaults
are provided for all fields and match a local development setup
(the service listens on ``127.0.0.1:8085``).
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Employee API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  Console logging is always enabled.
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    host: str = os.getenv("HOST", "127.0.0.1")
    port: int = int(os.getenv("PORT", "8085"))

    # Prefix under which the employee routes are mounted.  Empty by
    # default so that paths are ``/employee`` and ``/employees``; set
    # e.g. ``API_PREFIX=/api/v1`` to version them.
    api_prefix: str = os.getenv("API_PREFIX", "")

    # Seconds an idle keep‑alive connection is held open by uvicorn.
    timeout_keep_alive: int = int(os.getenv("TIMEOUT_KEEP_ALIVE", "15"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must therefore be set before this module is imported.
settings = Settings()
