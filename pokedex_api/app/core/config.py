"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables, so no settings library is needed.  Defaults are
provided for all fields; override them via environment variables or a
``.env`` file loaded by your process manager.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Pokedex API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When empty, logs only go to the console.
    log_file: str = os.getenv("LOG_FILE", "")

    # Path of the JSON seed dataset.  If a relative path is provided, it
    # is resolved relative to the project root by the ``data`` module.
    data_path: str = os.getenv("DATA_PATH", "data/pokedex.json")

    # Largest edit distance accepted for a "did you mean" suggestion when
    # a name search returns nothing.
    fuzzy_max_distance: int = int(os.getenv("FUZZY_MAX_DISTANCE", "3"))

    # All routes are mounted under this prefix, e.g. ``/api/pokemon``.
    api_prefix: str = os.getenv("API_PREFIX", "/api")

    host: str = os.getenv("HOST", "127.0.0.1")
    port: int = int(os.getenv("PORT") or os.getenv("NODE_PORT") or "3000")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
