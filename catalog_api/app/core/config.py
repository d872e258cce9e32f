"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no configuration at all.  In a deployment you
should override these via environment variables (port, allowed CORS
origin, public base URL for images and the location of the data
file).
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Apparel Catalog API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8080"))

    # Comma-separated list of origins allowed by CORS.  ``*`` allows any.
    cors_origin: str = os.getenv("CORS_ORIGIN", "*")

    # Public base URL used to turn stored image paths into absolute
    # URLs.  When empty, the scheme and host of the inbound request
    # are used instead.
    base_url: str = os.getenv("BASE_URL", "")

    # Path to the JSON file holding the catalog.  Relative paths are
    # resolved against the project root by ``storage.get_data_path``.
    data_file: str = os.getenv("DATA_FILE", "data/items.json")

    # Directory served under ``/images``.
    images_dir: str = os.getenv("IMAGES_DIR", "static/images")

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origin.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before importing this module.
settings = Settings()
