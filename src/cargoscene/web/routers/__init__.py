"""API routers for the REST API."""

from cargoscene.web.routers.export import router as export_router
from cargoscene.web.routers.layout import router as layout_router
from cargoscene.web.routers.validate import router as validate_router

__all__ = [
    "export_router",
    "layout_router",
    "validate_router",
]
