"""API routers for the REST API."""

from seatplanner.web.routers.export import router as export_router
from seatplanner.web.routers.layout import router as layout_router
from seatplanner.web.routers.validate import router as validate_router

__all__ = [
    "export_router",
    "layout_router",
    "validate_router",
]
