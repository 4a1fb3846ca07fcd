"""
Main entrypoint for the Venue Booking API.

This module assembles the FastAPI application, sets up logging and
includes the API router.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time as
``app`` so it can be served with uvicorn or another ASGI server, e.g.::

    uvicorn venue_booking_api.app.main:app --reload

Building the app does not touch storage.  Unless a ready-made
``BookingStore`` is passed in, the store is built from settings in the
startup event, so importing this module never creates or migrates a
database file.  Tests call ``create_app`` with their own ``Settings`` or
a zero-latency store.
"""

from typing import Optional

from fastapi import FastAPI

from .api.router import router as api_router
from .core.config import Settings, settings
from .core.logging_config import setup_logging
from .services.booking_store import BookingStore, create_booking_store


def create_app(
    app_settings: Optional[Settings] = None,
    store: Optional[BookingStore] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the module-level ``settings``.
    store : Optional[BookingStore]
        Store to serve.  If omitted, one is built from the settings when
        the application starts.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    setup_logging(
        app_settings.log_level,
        app_settings.log_file,
        fmt=app_settings.log_format,
        datefmt=app_settings.log_date_format,
    )

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        debug=app_settings.debug,
    )
    app.state.booking_store = store

    app.include_router(api_router, prefix="/api")

    @app.on_event("startup")
    async def startup_event() -> None:
        if app.state.booking_store is None:
            app.state.booking_store = create_booking_store(app_settings)
        # Seeds the dataset on first start; existing data is kept.
        await app.state.booking_store.initialize()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
