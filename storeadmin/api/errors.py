"""Mapping of domain errors to HTTP error responses.

Every error body has the shape
``{error_code, message, details: [{field, message}], request_id}``.
"""

from typing import Any

import structlog
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from storeadmin.domain.exceptions import (
    DomainError,
    InvalidBrandCategoryLinkError,
    InvalidOptionSetError,
    NotFoundError,
    OptionValueMismatchError,
    OwnershipError,
    PersistenceError,
    ValidationError,
    VariantOptionKeyInvalidError,
)

logger = structlog.get_logger()

# Most specific class first
STATUS_BY_ERROR: tuple[tuple[type[DomainError], int], ...] = (
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (InvalidOptionSetError, status.HTTP_400_BAD_REQUEST),
    (OptionValueMismatchError, status.HTTP_400_BAD_REQUEST),
    (InvalidBrandCategoryLinkError, status.HTTP_400_BAD_REQUEST),
    (OwnershipError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (PersistenceError, status.HTTP_500_INTERNAL_SERVER_ERROR),
    (VariantOptionKeyInvalidError, status.HTTP_500_INTERNAL_SERVER_ERROR),
)


def status_for(exc: DomainError) -> int:
    """HTTP status code for a domain error."""
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_details(exc: DomainError) -> list[dict[str, Any]]:
    """Field-level details telling the caller what to fix."""
    if isinstance(exc, ValidationError):
        return [{"field": exc.field, "message": exc.message}]
    if isinstance(exc, InvalidOptionSetError):
        return [
            {
                "field": "variants",
                "message": f"Option {option_id} is not valid for subcategory {exc.subcategory_id}",
            }
            for option_id in exc.invalid_ids
        ]
    if isinstance(exc, OptionValueMismatchError):
        return [
            {
                "field": f"variants[{exc.variant_index}].{exc.option_id}",
                "message": exc.message,
            }
        ]
    if isinstance(exc, InvalidBrandCategoryLinkError):
        return [{"field": "brand_id", "message": exc.message}]
    return []


def error_response(
    request: Request,
    status_code: int,
    error_code: str,
    message: str,
    details: list[dict[str, Any]] | None = None,
) -> JSONResponse:
    """Build an error response carrying the request id."""
    return JSONResponse(
        status_code=status_code,
        content={
            "error_code": error_code,
            "message": message,
            "details": details or [],
            "request_id": getattr(request.state, "request_id", None),
        },
    )


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Handle domain errors with consistent format."""
    status_code = status_for(exc)

    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        # Cause was logged where the error was raised; keep the body opaque
        logger.error(
            "Request failed",
            path=request.url.path,
            method=request.method,
            error_code=exc.error_code,
            error=exc.message,
        )
        if not isinstance(exc, PersistenceError):
            return error_response(
                request, status_code, "INTERNAL_ERROR", "An internal error occurred"
            )
        return error_response(request, status_code, exc.error_code, exc.message)

    logger.info(
        "Request rejected",
        path=request.url.path,
        method=request.method,
        error_code=exc.error_code,
        status_code=status_code,
    )
    return error_response(request, status_code, exc.error_code, exc.message, error_details(exc))


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle malformed request bodies as 400 validation errors."""
    details = [
        {
            "field": ".".join(str(part) for part in error["loc"] if part != "body"),
            "message": error["msg"],
        }
        for error in exc.errors()
    ]
    logger.info(
        "Request rejected",
        path=request.url.path,
        method=request.method,
        error_code="VALIDATION_ERROR",
        status_code=status.HTTP_400_BAD_REQUEST,
    )
    return error_response(
        request,
        status.HTTP_400_BAD_REQUEST,
        "VALIDATION_ERROR",
        "Request validation failed",
        details,
    )
