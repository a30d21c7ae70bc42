"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API can start without any configuration; in a deployment override them
via environment variables (or a ``.env`` file loaded by the process
manager).
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Student Records API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a log file.  Console logging is always enabled.
    log_file: str = os.getenv("LOG_FILE", "")

    # Which record store backs the API: ``sqlite`` keeps documents in a
    # SQLite file, ``memory`` keeps them in process (lost on restart).
    store_backend: str = os.getenv("STORE_BACKEND", "sqlite")

    # Path of the SQLite database file.  A relative path is resolved
    # relative to the package root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "students.db")

    # Insert the demo student at startup unless it is already stored.
    seed_data: bool = _env_flag("SEED_DATA", "true")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before importing this module.
settings = Settings()
