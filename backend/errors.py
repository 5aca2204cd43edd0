"""Custom exceptions and centralized FastAPI error handlers."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Base exception with HTTP status code."""

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.status_code = status_code


class GenerationError(CatalogError):
    """The catalog source failed to produce a snapshot."""

    title = "Error retrieving product list"

    def __init__(self, message: str):
        super().__init__(message, status_code=500)


def register_error_handlers(app: FastAPI) -> None:
    """Register centralized exception handlers on the FastAPI app."""

    @app.exception_handler(GenerationError)
    async def handle_generation_error(_request: Request, exc: GenerationError):
        logger.error("Catalog generation failed: %s", exc, exc_info=exc)
        return JSONResponse(
            {"error": exc.title, "detail": str(exc)},
            status_code=exc.status_code,
        )

    @app.exception_handler(CatalogError)
    async def handle_catalog_error(_request: Request, exc: CatalogError):
        return JSONResponse({"error": str(exc)}, status_code=exc.status_code)

    @app.exception_handler(ValueError)
    async def handle_value_error(_request: Request, exc: ValueError):
        return JSONResponse({"error": str(exc)}, status_code=400)

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception):
        logger.exception("Unhandled error: %s", exc)
        return JSONResponse(
            {"error": "Internal server error"},
            status_code=500,
        )
