"""FastAPI application factory."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from roomfit import __version__
from roomfit.web.exceptions import register_exception_handlers
from roomfit.web.routers import (
    catalog_router,
    evaluate_router,
    modes_router,
    validate_router,
)

API_PREFIX = "/api/v1"


def create_app() -> FastAPI:
    """Build the Roomfit API with every router mounted under ``/api/v1``."""
    app = FastAPI(
        title="Roomfit API",
        description="Check whether a piece of furniture fits a room or a camera view",
        version=__version__,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    for router in (catalog_router, modes_router, evaluate_router, validate_router):
        app.include_router(router, prefix=API_PREFIX)

    @app.get("/health", tags=["health"])
    async def health_check() -> dict[str, str]:
        return {"status": "healthy"}

    return app


app = create_app()
