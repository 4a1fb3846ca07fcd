"""
Top-level API router.

This router aggregates the domain routers under one prefix.  The paths
mirror the endpoints the reservation UI was written against
(``/api/facilities``, ``/api/reserve``...), so the router is mounted
under ``/api`` by ``create_app``.
"""

from fastapi import APIRouter

from .endpoints import catalog, reservations

router = APIRouter()

router.include_router(catalog.router, tags=["catalog"])
router.include_router(reservations.router, tags=["reservations"])
