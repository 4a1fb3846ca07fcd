"""
API package containing the HTTP routes.

``router`` in ``router.py`` includes every endpoint module of the
``endpoints`` subpackage; ``deps`` holds the dependencies and response
helpers they share.
"""
