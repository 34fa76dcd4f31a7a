"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no environment at all; in a deployment the hosting
platform usually only sets ``PORT``.
"""

import os
from dataclasses import dataclass
from typing import List


DEFAULT_ALLOWED_ORIGINS = (
    "https://react-firebase-plant-nursery.vercel.app,"
    "http://localhost:5173"
)


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Nursery Directory API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Listen address.  ``PORT`` is the variable set by most hosting
    # platforms, hence no project prefix.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "5000"))

    # Comma‑separated list of browser origins allowed to call the API.
    # Requests without an Origin header are always accepted.
    allowed_origins: str = os.getenv("ALLOWED_ORIGINS", DEFAULT_ALLOWED_ORIGINS)

    # Upper bound for inbound request bodies, in bytes.
    max_body_bytes: int = int(os.getenv("MAX_BODY_BYTES", str(10 * 1024 * 1024)))

    # Path to the SQLite file holding the document collections.  A
    # relative path is resolved against the project root by ``db``.
    database_url: str = os.getenv("DATABASE_URL", "nursery_directory.db")

    @property
    def allowed_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before importing this module.
settings = Settings()
