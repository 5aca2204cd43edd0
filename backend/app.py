"""FastAPI application entry point for the product catalog API."""

import logging
import sys

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.httpsredirect import HTTPSRedirectMiddleware

from config import settings
from errors import register_error_handlers
from services.cache import TTLCache
from services.catalog import new_product_cache

# Structured logging: JSON for production, human-readable for local
if settings.is_production:
    logging.basicConfig(
        level=logging.INFO,
        format='{"time":"%(asctime)s","level":"%(levelname)s","logger":"%(name)s","message":"%(message)s"}',
        stream=sys.stdout,
    )
else:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

logger = logging.getLogger(__name__)


def create_app(product_cache: TTLCache | None = None) -> FastAPI:
    # OpenAPI docs only outside production
    docs_enabled = not settings.is_production
    app = FastAPI(
        title="Product Catalog API",
        version="1.0.0",
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
    )
    app.state.product_cache = product_cache if product_cache is not None else new_product_cache()

    if settings.https_redirect:
        app.add_middleware(HTTPSRedirectMiddleware)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Security headers
    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        response: Response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        if settings.is_production:
            response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
        return response

    # Centralized error handlers
    register_error_handlers(app)

    from routes.health import router as health_router
    from routes.products import router as products_router
    from routes.weather import router as weather_router

    app.include_router(health_router)
    app.include_router(products_router)
    app.include_router(weather_router)

    @app.on_event("startup")
    async def _validate_config() -> None:
        problems = settings.validate()
        if problems:
            logger.warning("Configuration problems: %s", "; ".join(problems))

    return app


app = create_app()
