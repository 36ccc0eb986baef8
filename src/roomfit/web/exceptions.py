"""Error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from roomfit.application.catalog import CatalogItemNotFoundError
from roomfit.application.config import ConfigError
from roomfit.application.modes import UnknownModeError


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Invalid scenario",
                "error_type": exc.error_type,
                "details": exc.details,
            },
        )

    @app.exception_handler(CatalogItemNotFoundError)
    async def item_not_found_handler(
        request: Request, exc: CatalogItemNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={
                "error": f"Catalog item not found: {exc.item_id}",
                "error_type": "not_found",
                "details": None,
            },
        )

    @app.exception_handler(UnknownModeError)
    async def unknown_mode_handler(
        request: Request, exc: UnknownModeError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={
                "error": str(exc),
                "error_type": "unknown_mode",
                "details": {"mode": exc.name},
            },
        )
