"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
mock backend runs out of the box: reservations persist in an SQLite
file across restarts and calls get the same simulated latency as the
browser mock it replaces.  The ``memory`` backend is opt‑in.  Tests
override the backend and latency by constructing their own ``Settings``.
"""

import os
from dataclasses import dataclass


def _env_float(name: str, default: str) -> float:
    return float(os.getenv(name, default))


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Venue Booking API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str | None = os.getenv("LOG_FILE") or None
    # logging.Formatter record and timestamp layouts
    log_format: str = os.getenv(
        "LOG_FORMAT", "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )
    log_date_format: str = os.getenv("LOG_DATE_FORMAT", "%Y-%m-%d %H:%M:%S")

    # Persistence substrate for the dataset blob.  One of ``sqlite``
    # (default), ``file`` (a JSON document) or ``memory`` (lost on
    # exit).  ``storage_path`` is the file used by the first two;
    # relative paths are resolved by the ``db`` module against the
    # package root.
    storage_backend: str = os.getenv("STORAGE_BACKEND", "sqlite")
    storage_path: str = os.getenv("STORAGE_PATH", "venue_booking.db")
    storage_key: str = os.getenv("STORAGE_KEY", "venueBookingData")

    # Simulated network latency in seconds.
    read_delay: float = _env_float("READ_DELAY", "0.3")
    write_delay: float = _env_float("WRITE_DELAY", "0.5")

    host: str = os.getenv("API_HOST", "0.0.0.0")
    port: int = int(os.getenv("API_PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class definition time, environment variables should
# be set before importing this module.
settings = Settings()
