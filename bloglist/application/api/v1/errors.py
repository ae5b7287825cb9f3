"""Centralized error transformation for API routes.

Maps bloglist errors (domain and infrastructure) to HTTPException responses.
"""

from typing import Any

from fastapi import HTTPException

from bloglist.domain.shared.error import (
    BloglistError,
    ConflictError,
    DomainError,
    InfrastructureError,
    NotFoundError,
    ValidationError,
)

DOMAIN_ERROR_STATUS_MAP: dict[type[DomainError], int] = {
    NotFoundError: 404,
    ValidationError: 400,
    ConflictError: 409,
}


def error_body(message: str, code: str, **extra: Any) -> dict[str, Any]:
    """Build the JSON body shared by every error response."""
    return {"error": message, "code": code, **extra}


def map_bloglist_error(error: BloglistError) -> HTTPException:
    """Map a bloglist error to an HTTPException.

    Args:
        error: The bloglist error to map.

    Returns:
        HTTPException with appropriate status code and detail.
    """
    detail = error_body(error.message, error.code)

    if isinstance(error, InfrastructureError):
        # Infrastructure errors → 503 Service Unavailable
        return HTTPException(status_code=503, detail=detail)

    if isinstance(error, DomainError):
        status_code = DOMAIN_ERROR_STATUS_MAP.get(type(error), 400)
        if isinstance(error, ValidationError) and error.field is not None:
            detail["field"] = error.field
        return HTTPException(status_code=status_code, detail=detail)

    # Fallback for unknown BloglistError subclasses
    return HTTPException(status_code=500, detail=detail)
