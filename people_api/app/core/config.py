"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables so that no ``pydantic_settings`` dependency is
required.  Defaults are provided for all fields.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "People Management API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Prefix under which the versioned routers are mounted.  The people
    # resource is then reachable at ``<api_prefix>/people``.
    api_prefix: str = os.getenv("API_PREFIX", "/api")

    # Pagination bounds for list endpoints.  ``max_page_size`` is the
    # inclusive upper limit accepted for the ``pageSize`` query parameter.
    default_page_size: int = int(os.getenv("DEFAULT_PAGE_SIZE", "10"))
    max_page_size: int = int(os.getenv("MAX_PAGE_SIZE", "100"))

    # When enabled the in-memory store is populated with the fixed seed
    # set on startup.
    seed_data: bool = os.getenv("SEED_DATA", "true").lower() in {"1", "true", "yes"}

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
