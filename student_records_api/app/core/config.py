"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Values from a ``.env`` file in the working
directory are loaded first (existing environment variables win), so
a local deployment only needs that file.  Defaults are provided for
all fields.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Student Records API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    app_env: str = os.getenv("APP_ENV", "development")
    app_host: str = os.getenv("APP_HOST", "localhost")
    app_port: int = int(os.getenv("APP_PORT", "3000"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # IANA zone used to decide what "today" is when validating birth
    # dates and computing ages.  Records are stored as plain calendar
    # dates, so this only matters around midnight.
    timezone: str = os.getenv("APP_TIMEZONE", "Europe/Paris")

    # When false the store starts empty instead of with the five demo
    # students.
    seed_students: bool = _env_flag("SEED_STUDENTS", "true")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
