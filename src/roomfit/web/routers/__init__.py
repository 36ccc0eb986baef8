"""API routers for the REST API."""

from roomfit.web.routers.catalog import router as catalog_router
from roomfit.web.routers.evaluate import router as evaluate_router
from roomfit.web.routers.modes import router as modes_router
from roomfit.web.routers.validate import router as validate_router

__all__ = [
    "catalog_router",
    "evaluate_router",
    "modes_router",
    "validate_router",
]
