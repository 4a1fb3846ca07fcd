"""
Endpoint subpackage.

Each module in this package defines an APIRouter for one area of the
booking API (catalog lookups and reservations).  The routers are
aggregated in ``router.py`` and then included in the main application.
"""
