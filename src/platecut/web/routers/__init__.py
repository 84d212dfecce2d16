"""API routers for the REST API."""

from platecut.web.routers.calculate import router as calculate_router
from platecut.web.routers.export import router as export_router
from platecut.web.routers.validate import router as validate_router

__all__ = [
    "calculate_router",
    "export_router",
    "validate_router",
]
