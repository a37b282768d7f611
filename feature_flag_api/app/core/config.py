"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields and
reproduce the stock behaviour of the service (port 3000, all CORS
origins allowed), so nothing needs to be set for local use.
"""

import os
from dataclasses import dataclass
from typing import List


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Feature Flag Service")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    description: str = os.getenv("API_DESCRIPTION", "A simple feature flag service")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path to a log file.  Empty means console only.
    log_file: str = os.getenv("LOG_FILE", "")

    # Bind address used by ``run.py``.  ``--host`` and ``--port`` on the
    # command line take precedence.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # URL advertised in the ``servers`` section of the OpenAPI document.
    public_url: str = os.getenv("PUBLIC_URL", "http://localhost:3000")

    # Comma-separated list of allowed CORS origins, ``*`` for any.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    @property
    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before this module is imported.
settings = Settings()
