"""Entry point for the Venue Booking API.

This script serves the FastAPI application with uvicorn.  It is
intended to be executed from the project root, for example under
Docker, where you only specify a single Python file to run.

Host, port, storage backend, latency and log level are read from
environment variables (see ``venue_booking_api/app/core/config.py``).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from venue_booking_api.app.core.config import settings
from venue_booking_api.app.main import app


async def run_api() -> None:
    """Start the API using Uvicorn on ``settings.host``/``settings.port``."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


async def main() -> None:
    logging.getLogger(__name__).info(
        "Starting %s on %s:%s (storage: %s)",
        settings.project_name, settings.host, settings.port, settings.storage_backend,
    )
    await run_api()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
