"""
Application package initializer.

The project is organised into a few small pieces: ``core`` holds
configuration, logging and the persistence substrate, ``schemas`` the
pydantic models, ``services`` the booking store and ``api`` the HTTP
routes that expose it.  The ASGI application lives in ``main`` and is
only built when that module is imported.
"""
