"""Store admin API main application module.

This module initializes the FastAPI application and configures
core middleware, routers, exception handlers and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from storeadmin.api.catalog import router as catalog_router
from storeadmin.api.dashboard import router as dashboard_router
from storeadmin.api.errors import (
    domain_error_handler,
    error_response,
    request_validation_handler,
)
from storeadmin.api.health import router as health_router
from storeadmin.api.middleware import setup_middleware
from storeadmin.api.products import router as products_router
from storeadmin.api.stores import router as stores_router
from storeadmin.domain.exceptions import DomainError
from storeadmin.infrastructure.config import settings
from storeadmin.infrastructure.database import engine
from storeadmin.infrastructure.logging import configure_logging

configure_logging(settings)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events.

    Args:
        app: The FastAPI application instance.

    Yields:
        None after startup, cleanup happens after yield.
    """
    # Startup
    logger.info(
        "Starting store admin API",
        version=settings.api_version,
        debug=settings.debug,
        lenient_variant_updates=settings.lenient_variant_updates,
        catalog_cache_ttl_seconds=settings.catalog_cache_ttl_seconds,
    )

    yield

    # Shutdown
    logger.info("Shutting down store admin API")
    await engine.dispose()


app = FastAPI(
    title="Storefront Admin API",
    description="Multi-tenant catalog and product administration backend",
    version=settings.api_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware (must be added before custom middleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Setup custom middleware (request ID, caller identity, error handling)
setup_middleware(app)

# Include routers
app.include_router(health_router, tags=["Health"])
app.include_router(catalog_router)
app.include_router(stores_router)
app.include_router(products_router)
app.include_router(dashboard_router)


# ============================================================================
# Custom Exception Handlers
# ============================================================================


app.add_exception_handler(DomainError, domain_error_handler)
app.add_exception_handler(RequestValidationError, request_validation_handler)


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Handle HTTP exceptions with consistent format."""
    detail = exc.detail
    if isinstance(detail, dict):
        error_code = detail.get("error_code", "ERROR")
        message = detail.get("message", str(detail))
        details = detail.get("details", [])
    else:
        error_code = "ERROR"
        message = str(detail)
        details = []

    return error_response(request, exc.status_code, error_code, message, details)
