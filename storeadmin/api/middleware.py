"""API middleware for the store admin API.

Provides:
- Request ID correlation
- Caller identity extraction
- Error handling
"""

import time
from typing import Callable
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request, Response, status
from starlette.middleware.base import BaseHTTPMiddleware

from storeadmin.api.errors import error_response
from storeadmin.infrastructure.config import settings

logger = structlog.get_logger()


# ============================================================================
# Request ID Middleware
# ============================================================================


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Middleware to add request ID for correlation.

    Generates or extracts a request ID and adds it to:
    - Request state for access in handlers
    - Response headers for client correlation
    - Log context for tracing
    """

    HEADER_NAME = "X-Request-ID"

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        """Process request with correlation ID.

        Args:
            request: Incoming request.
            call_next: Next middleware/handler.

        Returns:
            Response with request ID header.
        """
        request_id = request.headers.get(self.HEADER_NAME) or str(uuid4())
        request.state.request_id = request_id
        structlog.contextvars.bind_contextvars(request_id=request_id)

        start_time = time.perf_counter()
        response = None

        try:
            response = await call_next(request)
        finally:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.info(
                "Request completed",
                method=request.method,
                path=request.url.path,
                status_code=getattr(response, "status_code", 500),
                duration_ms=round(duration_ms, 2),
            )
            structlog.contextvars.unbind_contextvars("request_id")

        response.headers[self.HEADER_NAME] = request_id
        return response


# ============================================================================
# Caller Identity Middleware
# ============================================================================


# Paths that don't require a caller identity
PUBLIC_PATHS = {
    "/health",
    "/ready",
    "/docs",
    "/redoc",
    "/openapi.json",
    "/catalog",
    "/categories",
    "/sku/preview",
}


def is_public_path(path: str) -> bool:
    """Whether a path is served without a caller identity."""
    path = path.rstrip("/") or "/"
    return path in PUBLIC_PATHS or path.startswith("/docs") or path.startswith("/redoc")


class CallerIdentityMiddleware(BaseHTTPMiddleware):
    """Middleware that reads the caller identity set by the identity provider.

    The upstream gateway authenticates the user and forwards their id in
    ``settings.caller_id_header``. Store-scoped paths are rejected with
    401 when it is missing; ownership is checked by the services.
    """

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        """Attach the caller id to the request, or reject with 401.

        Args:
            request: Incoming request.
            call_next: Next middleware/handler.

        Returns:
            Response or 401 error.
        """
        caller_id = (request.headers.get(settings.caller_id_header) or "").strip()
        request.state.caller_id = caller_id or None

        if caller_id or is_public_path(request.url.path):
            if caller_id:
                structlog.contextvars.bind_contextvars(caller_id=caller_id)
            try:
                return await call_next(request)
            finally:
                structlog.contextvars.unbind_contextvars("caller_id")

        logger.warning(
            "Missing caller identity",
            path=request.url.path,
            method=request.method,
        )
        return error_response(
            request,
            status.HTTP_401_UNAUTHORIZED,
            "UNAUTHENTICATED",
            f"Missing {settings.caller_id_header} header",
        )


# ============================================================================
# Error Handling Middleware
# ============================================================================


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Middleware for consistent error handling.

    Catches unhandled exceptions and returns standardized error responses.
    """

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        """Handle errors uniformly.

        Args:
            request: Incoming request.
            call_next: Next middleware/handler.

        Returns:
            Response or error response.
        """
        try:
            return await call_next(request)
        except Exception as e:
            logger.exception(
                "Unhandled exception",
                path=request.url.path,
                method=request.method,
                error=str(e),
            )
            return error_response(
                request,
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "INTERNAL_ERROR",
                "An internal error occurred",
            )


# ============================================================================
# Middleware Setup
# ============================================================================


def setup_middleware(app: FastAPI) -> None:
    """Configure all middleware for the application.

    Middleware is added in reverse order (last added = first executed).

    Args:
        app: FastAPI application instance.
    """
    # Error handling (innermost - wraps the routers)
    app.add_middleware(ErrorHandlerMiddleware)

    # Caller identity (401 bodies already carry the request id)
    app.add_middleware(CallerIdentityMiddleware)

    # Request ID correlation (outermost - times and logs every request)
    app.add_middleware(RequestIdMiddleware)
